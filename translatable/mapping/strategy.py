from enum import Enum

from translatable.entity.translation import AbstractPersonalTranslation


class TranslationStrategy(str, Enum):
    PERSONAL = "personal"
    GENERIC = "generic"


class TranslationStrategySelector:
    """Resolves and caches the storage strategy of each translation class."""

    def __init__(self) -> None:
        self._strategies: dict[type, TranslationStrategy] = {}

    def register(self, translation_class: type, strategy: TranslationStrategy) -> None:
        self._strategies[translation_class] = TranslationStrategy(strategy)

    def resolve(self, translation_class: type) -> TranslationStrategy:
        strategy = self._strategies.get(translation_class)
        if strategy is None:
            if issubclass(translation_class, AbstractPersonalTranslation):
                strategy = TranslationStrategy.PERSONAL
            else:
                strategy = TranslationStrategy.GENERIC
            self._strategies[translation_class] = strategy
        return strategy

    def is_personal(self, translation_class: type) -> bool:
        return self.resolve(translation_class) is TranslationStrategy.PERSONAL

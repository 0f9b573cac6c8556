from __future__ import annotations

from typing import Any, Optional

from sqlalchemy.orm import Session

from translatable.adapter.finder import TranslationFinder
from translatable.adapter.loader import TranslationLoader
from translatable.adapter.purger import TranslationPurger
from translatable.adapter.writer import _MISSING, TranslationWriter
from translatable.config import Settings, settings as default_settings
from translatable.mapping.foreign_key import ForeignKeyCoercer
from translatable.mapping.identity_cache import (
    IdentityCache,
    NullIdentityCache,
    SessionIdentityCache,
)
from translatable.mapping.strategy import TranslationStrategySelector
from translatable.models.translated_field import TranslatedFieldModel


class TranslatableORMAdapter:
    """Translatable behaviour on top of a SQLAlchemy session.

    Lifecycle hooks call this adapter to read, persist and clean up the
    translations of an owner; it never commits or rolls back the session.
    """

    def __init__(
        self,
        session: Session,
        *,
        settings: Optional[Settings] = None,
        identity_cache: Optional[IdentityCache] = None,
        selector: Optional[TranslationStrategySelector] = None,
        coercer: Optional[ForeignKeyCoercer] = None,
    ) -> None:
        self.session = session
        self.settings = settings or default_settings
        self.selector = selector or TranslationStrategySelector()
        self.coercer = coercer or ForeignKeyCoercer()
        if identity_cache is None:
            if self.settings.identity_map_lookup:
                identity_cache = SessionIdentityCache(session)
            else:
                identity_cache = NullIdentityCache()

        self.finder = TranslationFinder(session, self.selector, self.coercer, identity_cache)
        self.loader = TranslationLoader(session, self.selector, self.coercer)
        self.writer = TranslationWriter(session, self.selector, self.coercer)
        self.purger = TranslationPurger(session, self.selector, self.coercer)

    def uses_personal_translation(self, translation_class: type) -> bool:
        return self.selector.is_personal(translation_class)

    def get_default_translation_class(self) -> type:
        return self.settings.default_translation_class

    def load_translations(
        self,
        obj: Any,
        translation_class: type,
        locale: str,
        object_class: Optional[str] = None,
    ) -> list[TranslatedFieldModel]:
        return self.loader.load_all(obj, translation_class, locale, object_class)

    def find_translation(
        self,
        wrapped: Any,
        locale: str,
        field: str,
        translation_class: type,
        object_class: Optional[str] = None,
    ) -> Optional[Any]:
        return self.finder.find(wrapped, locale, field, translation_class, object_class)

    def remove_associated_translations(
        self,
        wrapped: Any,
        translation_class: type,
        object_class: Optional[str] = None,
    ) -> int:
        return self.purger.purge(wrapped, translation_class, object_class)

    def insert_translation_record(self, translation: Any) -> None:
        self.writer.insert(translation)

    def get_translation_value(self, obj: Any, field: str, value: Any = _MISSING) -> Any:
        return self.writer.read_value(obj, field, value)

    def set_translation_value(self, obj: Any, field: str, value: Any) -> None:
        self.writer.write_value(obj, field, value)

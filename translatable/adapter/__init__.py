from translatable.adapter.finder import TranslationFinder
from translatable.adapter.loader import TranslationLoader
from translatable.adapter.orm import TranslatableORMAdapter
from translatable.adapter.purger import TranslationPurger
from translatable.adapter.writer import TranslationWriter

__all__ = [
    "TranslatableORMAdapter",
    "TranslationFinder",
    "TranslationLoader",
    "TranslationPurger",
    "TranslationWriter",
]

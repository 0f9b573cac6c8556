from translatable.adapter.orm import TranslatableORMAdapter
from translatable.exceptions import TranslatableError, TranslationWriteError
from translatable.mapping.strategy import TranslationStrategy

__all__ = [
    "TranslatableError",
    "TranslatableORMAdapter",
    "TranslationStrategy",
    "TranslationWriteError",
]

__version__ = "0.1.0"

from translatable.entity.base import Base
from translatable.entity.translation import (
    AbstractPersonalTranslation,
    AbstractTranslation,
    Translation,
)

__all__ = [
    "AbstractPersonalTranslation",
    "AbstractTranslation",
    "Base",
    "Translation",
]

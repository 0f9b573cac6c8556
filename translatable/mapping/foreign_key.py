import math
import re
from typing import Any

from sqlalchemy import Integer, inspect
from sqlalchemy.types import TypeDecorator, TypeEngine

FOREIGN_KEY_ATTRIBUTE = "foreign_key"
_LEADING_INTEGER = re.compile(r"\s*[+-]?\d+")


def _is_integer_type(type_: TypeEngine) -> bool:
    if isinstance(type_, TypeDecorator):
        type_ = type_.impl
    # SmallInteger and BigInteger both derive from Integer.
    return isinstance(type_, Integer)


def _to_int(key: Any) -> int:
    """Leading integer of ``key``; 0 when there is none. Never raises."""
    if isinstance(key, int):
        return int(key)
    if isinstance(key, float):
        return int(key) if math.isfinite(key) else 0
    match = _LEADING_INTEGER.match(str(key))
    return int(match.group()) if match else 0


class ForeignKeyCoercer:
    """Casts owner identifiers to the type of a translation's foreign key.

    Drivers may hand identifiers back as strings while the column round-trips
    integers, so comparisons against stored keys need an explicit cast.
    """

    def __init__(self, attribute: str = FOREIGN_KEY_ATTRIBUTE) -> None:
        self.attribute = attribute
        self._integer_keys: dict[type, bool] = {}

    def uses_integer_key(self, translation_class: type) -> bool:
        integer = self._integer_keys.get(translation_class)
        if integer is None:
            column = inspect(translation_class).columns[self.attribute]
            integer = _is_integer_type(column.type)
            self._integer_keys[translation_class] = integer
        return integer

    def coerce(self, key: Any, translation_class: type) -> Any:
        if key is None:
            return None
        if self.uses_integer_key(translation_class):
            return _to_int(key)
        return str(key)

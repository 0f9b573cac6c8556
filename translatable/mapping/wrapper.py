from __future__ import annotations

from typing import Any

from sqlalchemy import inspect
from sqlalchemy.orm import Mapper, Session


def class_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


class EntityWrapper:
    """Uniform access to a mapped instance and its mapper."""

    def __init__(self, obj: Any, session: Session) -> None:
        self.object = obj
        self.session = session
        self.metadata: Mapper = inspect(type(obj))

    @classmethod
    def wrap(cls, obj: Any, session: Session) -> EntityWrapper:
        if isinstance(obj, EntityWrapper):
            return obj
        return cls(obj, session)

    @property
    def class_name(self) -> str:
        return class_name(self.metadata.class_)

    def get_object(self) -> Any:
        return self.object

    def get_property_value(self, name: str) -> Any:
        return getattr(self.object, name)

    def set_property_value(self, name: str, value: Any) -> None:
        setattr(self.object, name, value)

    def get_identifier(self, single: bool = True) -> Any:
        values = self.metadata.primary_key_from_instance(self.object)
        if all(value is None for value in values):
            return None
        if len(values) == 1:
            return values[0]
        if single:
            return " ".join(str(value) for value in values)
        return tuple(values)

    def has_valid_identifier(self) -> bool:
        return self.get_identifier() is not None

from __future__ import annotations

from typing import Any, Iterable, Iterator, Protocol

from sqlalchemy import inspect
from sqlalchemy.orm import Session


class IdentityCache(Protocol):
    def candidates(self, cls: type) -> Iterable[Any]:
        """Loaded instances whose exact type is ``cls``."""


class NullIdentityCache:
    def candidates(self, cls: type) -> Iterable[Any]:
        return ()


class SessionIdentityCache:
    """Reads the persistent and pending instances held by a session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def candidates(self, cls: type) -> Iterator[Any]:
        for obj in self.session.identity_map.values():
            if type(obj) is cls:
                yield obj
        for obj in self.session.new:
            if type(obj) is cls:
                yield obj


def is_placeholder(obj: Any, *attributes: str) -> bool:
    """True when reading ``attributes`` from ``obj`` would emit a load."""
    state = inspect(obj)
    if state.expired:
        return True
    return bool(state.unloaded.intersection(attributes))

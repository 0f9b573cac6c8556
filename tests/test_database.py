from __future__ import annotations

import pytest

from translatable.database import build_engine, get_session


class _FakeSession:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def commit(self) -> None:
        self.calls.append("commit")

    def rollback(self) -> None:
        self.calls.append("rollback")

    def close(self) -> None:
        self.calls.append("close")


def test_get_session_commits_and_closes() -> None:
    session = _FakeSession()
    with get_session(lambda: session) as active:
        assert active is session
    assert session.calls == ["commit", "close"]


def test_get_session_rolls_back_on_error() -> None:
    session = _FakeSession()
    with pytest.raises(ValueError):
        with get_session(lambda: session):
            raise ValueError("boom")
    assert session.calls == ["rollback", "close"]


def test_build_engine_uses_given_dsn() -> None:
    engine = build_engine("sqlite+pysqlite:///:memory:")
    assert engine.dialect.name == "sqlite"
    engine.dispose()

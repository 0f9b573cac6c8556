from __future__ import annotations

import pytest
from sqlalchemy import event
from sqlalchemy.orm import Session, sessionmaker

from entities import Base
from translatable.adapter.orm import TranslatableORMAdapter
from translatable.config import Settings
from translatable.database import build_engine, get_session
from translatable.entity.base import Base as TranslatableBase


class StatementRecorder:
    def __init__(self) -> None:
        self.statements: list[str] = []
        self.enabled = False

    def __call__(self, conn, cursor, statement, parameters, context, executemany) -> None:  # noqa: ANN001
        if self.enabled:
            self.statements.append(statement)

    def start(self) -> StatementRecorder:
        self.statements.clear()
        self.enabled = True
        return self

    @property
    def count(self) -> int:
        return len(self.statements)


@pytest.fixture
def engine():
    engine = build_engine("sqlite+pysqlite:///:memory:")
    Base.metadata.create_all(engine)
    TranslatableBase.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine) -> Session:
    factory = sessionmaker(bind=engine, expire_on_commit=False, class_=Session)
    with get_session(factory) as session:
        yield session


@pytest.fixture
def statements(engine) -> StatementRecorder:
    recorder = StatementRecorder()
    event.listen(engine, "before_cursor_execute", recorder)
    yield recorder
    event.remove(engine, "before_cursor_execute", recorder)


@pytest.fixture
def adapter(session) -> TranslatableORMAdapter:
    return TranslatableORMAdapter(session, settings=Settings())

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base holding the extension's own tables."""

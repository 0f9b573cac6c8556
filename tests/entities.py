import uuid
from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from translatable.entity.translation import AbstractPersonalTranslation, AbstractTranslation


class Base(DeclarativeBase):
    pass


class Article(Base):
    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(255))
    views: Mapped[int] = mapped_column(Integer, default=0)
    published_on: Mapped[Optional[date]] = mapped_column(nullable=True)


class ArticleTranslation(Base, AbstractTranslation):
    __tablename__ = "article_translations"

    foreign_key: Mapped[int] = mapped_column(Integer, nullable=False)


class Note(Base):
    __tablename__ = "notes"

    code: Mapped[str] = mapped_column(String(16), primary_key=True)
    text: Mapped[str] = mapped_column(Text)


class NoteTranslation(Base, AbstractTranslation):
    __tablename__ = "note_translations"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )


class Page(Base):
    __tablename__ = "pages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    body: Mapped[str] = mapped_column(Text)
    translations: Mapped[list["PageTranslation"]] = relationship(
        back_populates="object",
        lazy="selectin",
        cascade="all, delete-orphan",
    )


class PageTranslation(Base, AbstractPersonalTranslation):
    __tablename__ = "page_translations"

    object_id: Mapped[int] = mapped_column(ForeignKey("pages.id"), nullable=False)
    object: Mapped[Page] = relationship(back_populates="translations")


class Book(Base):
    __tablename__ = "books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    summary: Mapped[str] = mapped_column(Text)


class BookTranslation(Base, AbstractPersonalTranslation):
    # No collection on Book, so translations are always queried.
    __tablename__ = "book_translations"

    object_id: Mapped[int] = mapped_column(ForeignKey("books.id"), nullable=False)
    object: Mapped[Book] = relationship()


class Revision(Base):
    __tablename__ = "revisions"

    document_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    number: Mapped[int] = mapped_column(Integer, primary_key=True)
    label: Mapped[str] = mapped_column(String(64))


class StampedTranslation(Base, AbstractTranslation):
    __tablename__ = "stamped_translations"

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    status: Mapped[str] = mapped_column(String(16), nullable=False, server_default="new")


class PairTranslation(Base, AbstractTranslation):
    __tablename__ = "pair_translations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    locale: Mapped[str] = mapped_column(String(8), primary_key=True)


class TokenTranslation(Base, AbstractTranslation):
    __tablename__ = "token_translations"

    id: Mapped[str] = mapped_column(
        String(32),
        primary_key=True,
        default=func.lower(func.hex(func.randomblob(16))),
    )

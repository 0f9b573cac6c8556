"""Mapped superclasses for translation records.

Concrete translation classes mix one of these into their declarative base::

    class ArticleTranslation(Base, AbstractTranslation):
        __tablename__ = "article_translations"

    class PageTranslation(Base, AbstractPersonalTranslation):
        __tablename__ = "page_translations"

        object_id: Mapped[int] = mapped_column(ForeignKey("pages.id"))
        object: Mapped["Page"] = relationship(back_populates="translations")

Generic translations are matched by ``foreign_key`` + ``object_class``,
personal translations by their ``object`` relationship.
"""

from typing import Optional

from sqlalchemy import Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from translatable.entity.base import Base


class AbstractTranslation:
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    locale: Mapped[str] = mapped_column(String(8), nullable=False)
    object_class: Mapped[str] = mapped_column(String(191), nullable=False)
    field: Mapped[str] = mapped_column(String(32), nullable=False)
    # Identifier of the owner; may be redeclared with an integer type.
    foreign_key: Mapped[str] = mapped_column(String(64), nullable=False)
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} {self.object_class}#{self.foreign_key} "
            f"{self.field}@{self.locale}>"
        )


class AbstractPersonalTranslation:
    """Marker for translations owned through a direct ``object`` relationship.

    Subclasses declare ``object`` (many-to-one to the owner) and its foreign
    key column themselves, since the target differs per owner class.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    locale: Mapped[str] = mapped_column(String(8), nullable=False)
    field: Mapped[str] = mapped_column(String(32), nullable=False)
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.field}@{self.locale}>"


class Translation(Base, AbstractTranslation):
    __tablename__ = "ext_translations"
    __table_args__ = (
        Index("translations_lookup_idx", "locale", "object_class", "foreign_key"),
        UniqueConstraint(
            "locale",
            "object_class",
            "field",
            "foreign_key",
            name="lookup_unique_idx",
        ),
    )

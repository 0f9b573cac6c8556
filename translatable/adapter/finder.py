from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from translatable.adapter.base import BaseAdapter
from translatable.adapter.enums.actions import AdapterAction
from translatable.mapping.foreign_key import ForeignKeyCoercer
from translatable.mapping.identity_cache import (
    IdentityCache,
    NullIdentityCache,
    is_placeholder,
)
from translatable.mapping.strategy import TranslationStrategySelector
from translatable.mapping.wrapper import EntityWrapper


class TranslationFinder(BaseAdapter):
    def __init__(
        self,
        session: Session,
        selector: TranslationStrategySelector,
        coercer: ForeignKeyCoercer,
        cache: IdentityCache | None = None,
    ) -> None:
        super().__init__(session, selector, coercer)
        self.cache = cache if cache is not None else NullIdentityCache()

    def find(
        self,
        obj: Any,
        locale: str,
        field: str,
        translation_class: type,
        object_class: Optional[str] = None,
    ) -> Optional[Any]:
        """Return the translation of ``field`` in ``locale`` for ``obj``.

        Instances already loaded in the identity cache are checked first, so a
        hit costs no query and also sees changes not yet flushed. If several
        rows match, whichever comes first wins.
        """
        wrapped = EntityWrapper.wrap(obj, self.session)
        object_class = object_class or wrapped.class_name
        personal = self.selector.is_personal(translation_class)

        cached = self._find_cached(wrapped, locale, field, translation_class, object_class, personal)
        if cached is not None:
            self._log(AdapterAction.FIND, locale=locale, field=field, source="identity_map")
            return cached

        stmt = select(translation_class).where(
            translation_class.locale == locale,
            translation_class.field == field,
        )
        if personal:
            owner = wrapped.get_object() if wrapped.has_valid_identifier() else None
            stmt = stmt.where(translation_class.object == owner)
        else:
            stmt = stmt.where(
                translation_class.foreign_key
                == self.coercer.coerce(wrapped.get_identifier(), translation_class),
                translation_class.object_class == object_class,
            )
        translation = self.session.scalars(stmt.limit(1)).first()
        self._log(
            AdapterAction.FIND,
            locale=locale,
            field=field,
            source="query",
            found=translation is not None,
        )
        return translation

    def _find_cached(
        self,
        wrapped: EntityWrapper,
        locale: str,
        field: str,
        translation_class: type,
        object_class: str,
        personal: bool,
    ) -> Optional[Any]:
        if personal:
            required = ("locale", "field", "object")
        else:
            if not wrapped.has_valid_identifier():
                # A transient owner cannot be told apart by foreign key.
                return None
            required = ("locale", "field", "foreign_key", "object_class")
            object_id = self.coercer.coerce(wrapped.get_identifier(), translation_class)

        for trans in self.cache.candidates(translation_class):
            if is_placeholder(trans, *required):
                continue
            if trans.locale != locale or trans.field != field:
                continue
            if personal:
                if trans.object is wrapped.get_object():
                    return trans
            elif trans.foreign_key == object_id and trans.object_class == object_class:
                return trans
        return None

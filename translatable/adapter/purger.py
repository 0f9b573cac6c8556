from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import delete

from translatable.adapter.base import BaseAdapter
from translatable.adapter.enums.actions import AdapterAction
from translatable.mapping.wrapper import EntityWrapper


class TranslationPurger(BaseAdapter):
    def purge(
        self,
        obj: Any,
        translation_class: type,
        object_class: Optional[str] = None,
    ) -> int:
        """Delete every translation owned by ``obj``; returns the row count."""
        wrapped = EntityWrapper.wrap(obj, self.session)
        stmt = delete(translation_class)
        if self.selector.is_personal(translation_class):
            stmt = stmt.where(translation_class.object == wrapped.get_object())
        else:
            stmt = stmt.where(
                translation_class.foreign_key
                == self.coercer.coerce(wrapped.get_identifier(), translation_class),
                translation_class.object_class == (object_class or wrapped.class_name),
            )
        result = self.session.execute(stmt)
        self._log(
            AdapterAction.PURGE,
            translation_class=translation_class.__name__,
            deleted=result.rowcount,
        )
        return result.rowcount

from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.orm import RelationshipDirection, RelationshipProperty

from translatable.adapter.base import BaseAdapter
from translatable.adapter.enums.actions import AdapterAction
from translatable.mapping.wrapper import EntityWrapper
from translatable.models.translated_field import TranslatedFieldModel

OWNER_BACK_REFERENCE = "object"


class TranslationLoader(BaseAdapter):
    def load_all(
        self,
        obj: Any,
        translation_class: type,
        locale: str,
        object_class: Optional[str] = None,
    ) -> list[TranslatedFieldModel]:
        wrapped = EntityWrapper.wrap(obj, self.session)
        if self.selector.is_personal(translation_class):
            collection = self._translation_collection(wrapped, translation_class)
            if collection is not None:
                result = [
                    TranslatedFieldModel.model_validate(trans)
                    for trans in wrapped.get_property_value(collection.key)
                    if trans.locale == locale
                ]
                self._log(AdapterAction.LOAD, locale=locale, source="collection", count=len(result))
                return result
            stmt = select(translation_class.content, translation_class.field).where(
                translation_class.locale == locale,
                translation_class.object == wrapped.get_object(),
            )
        else:
            object_class = object_class or wrapped.class_name
            stmt = select(translation_class.content, translation_class.field).where(
                translation_class.foreign_key
                == self.coercer.coerce(wrapped.get_identifier(), translation_class),
                translation_class.locale == locale,
                translation_class.object_class == object_class,
            )

        rows = self.session.execute(stmt).all()
        self._log(AdapterAction.LOAD, locale=locale, source="query", count=len(rows))
        return [TranslatedFieldModel.model_validate(row) for row in rows]

    @staticmethod
    def _translation_collection(
        wrapped: EntityWrapper, translation_class: type
    ) -> Optional[RelationshipProperty]:
        for relationship in wrapped.metadata.relationships:
            if (
                relationship.mapper.class_ is translation_class
                and relationship.back_populates == OWNER_BACK_REFERENCE
                and relationship.direction is RelationshipDirection.ONETOMANY
            ):
                return relationship
        return None

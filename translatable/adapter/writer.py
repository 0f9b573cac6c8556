from __future__ import annotations

from typing import Any

from sqlalchemy import insert
from sqlalchemy.orm import Session

from translatable.adapter.base import BaseAdapter
from translatable.adapter.enums.actions import AdapterAction
from translatable.exceptions import TranslationWriteError
from translatable.mapping.foreign_key import ForeignKeyCoercer
from translatable.mapping.schema import IdentifierPolicy, InsertSchema, inspect_schema
from translatable.mapping.strategy import TranslationStrategySelector
from translatable.mapping.wrapper import EntityWrapper

_MISSING = object()


class TranslationWriter(BaseAdapter):
    def __init__(
        self,
        session: Session,
        selector: TranslationStrategySelector,
        coercer: ForeignKeyCoercer,
    ) -> None:
        super().__init__(session, selector, coercer)
        self._schemas: dict[type, InsertSchema] = {}

    def schema_for(self, translation_class: type) -> InsertSchema:
        schema = self._schemas.get(translation_class)
        if schema is None:
            schema = inspect_schema(translation_class)
            self._schemas[translation_class] = schema
        return schema

    def insert(self, translation: Any) -> None:
        """Insert ``translation`` right away, outside the session's flush.

        The record is written as a single row against its table; the
        identifier is generated up front unless the store assigns it.
        """
        schema = self.schema_for(type(translation))
        identifier = schema.identifier
        data: dict[str, Any] = {}
        for descriptor in schema.columns:
            if descriptor is identifier:
                continue
            value = descriptor.value_of(translation)
            if value is None and descriptor.has_default:
                continue
            data[descriptor.column_name] = value

        if identifier is not None:
            value = getattr(translation, identifier.attribute)
            if value is None and schema.identifier_policy is IdentifierPolicy.PRE_INSERT:
                value = schema.generate_identifier(self.session)
            if value is not None or schema.identifier_policy is IdentifierPolicy.ASSIGNED:
                data[identifier.column_name] = value

        result = self.session.execute(insert(schema.table).values(data))
        if result.rowcount != 1:
            raise TranslationWriteError(
                "Failed to insert new Translation record",
                table=schema.table.name,
                data=data,
            )

        if identifier is not None and getattr(translation, identifier.attribute) is None:
            if identifier.column_name in data:
                generated = data[identifier.column_name]
            else:
                generated = result.inserted_primary_key[0]
            setattr(translation, identifier.attribute, generated)
        self._log(AdapterAction.INSERT, table=schema.table.name, locale=data.get("locale"))

    def read_value(self, obj: Any, field: str, value: Any = _MISSING) -> Any:
        """Convert the attribute value (or ``value``) to its storage form."""
        wrapped = EntityWrapper.wrap(obj, self.session)
        dialect = self.session.get_bind(mapper=wrapped.metadata).dialect
        type_ = wrapped.metadata.columns[field].type.dialect_impl(dialect)
        if value is _MISSING:
            value = wrapped.get_property_value(field)
        processor = type_.bind_processor(dialect)
        self._log(AdapterAction.READ_VALUE, field=field)
        return processor(value) if processor is not None else value

    def write_value(self, obj: Any, field: str, value: Any) -> None:
        """Convert a storage value back and assign it to ``field``."""
        wrapped = EntityWrapper.wrap(obj, self.session)
        dialect = self.session.get_bind(mapper=wrapped.metadata).dialect
        type_ = wrapped.metadata.columns[field].type.dialect_impl(dialect)
        processor = type_.result_processor(dialect, None)
        if processor is not None:
            value = processor(value)
        wrapped.set_property_value(field, value)
        self._log(AdapterAction.WRITE_VALUE, field=field)

"""Insert descriptors for translation tables.

A translation row is written with a plain ``INSERT`` outside the unit of work,
so the columns, their source attributes and the identifier policy are resolved
once per translation class and kept here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from sqlalchemy import Column, Sequence, Table, inspect, select
from sqlalchemy.orm import Mapper, RelationshipDirection, Session


class IdentifierPolicy(str, Enum):
    # The store assigns it on insert (autoincrement, server default).
    POST_INSERT = "post_insert"
    # Generated by the application before the insert.
    PRE_INSERT = "pre_insert"
    # Taken as-is from the record.
    ASSIGNED = "assigned"


@dataclass(frozen=True, slots=True)
class ColumnDescriptor:
    column_name: str
    attribute: str
    is_identifier: bool = False
    relationship: Optional[str] = None
    remote_attribute: Optional[str] = None
    # Core fills the column in when it is left out of the INSERT.
    has_default: bool = False

    def value_of(self, instance: Any) -> Any:
        value = getattr(instance, self.attribute)
        if value is None and self.relationship is not None:
            related = getattr(instance, self.relationship)
            if related is not None:
                value = getattr(related, self.remote_attribute)
        return value


@dataclass(frozen=True, slots=True)
class InsertSchema:
    table: Table
    columns: tuple[ColumnDescriptor, ...]
    identifier_column: Optional[Column]
    identifier_policy: IdentifierPolicy

    @classmethod
    def from_mapper(cls, mapper: Mapper) -> InsertSchema:
        table = mapper.local_table
        related = _many_to_one_columns(mapper)
        primary_key = set(mapper.primary_key)
        columns = []
        for prop in mapper.column_attrs:
            for column in prop.columns:
                if not isinstance(column, Column) or column.table is not table:
                    continue
                relationship, remote_attribute = related.get(column, (None, None))
                columns.append(
                    ColumnDescriptor(
                        column_name=column.name,
                        attribute=prop.key,
                        is_identifier=column in primary_key,
                        relationship=relationship,
                        remote_attribute=remote_attribute,
                        has_default=(
                            column.default is not None or column.server_default is not None
                        ),
                    )
                )
        identifier_column = mapper.primary_key[0] if len(mapper.primary_key) == 1 else None
        return cls(
            table=table,
            columns=tuple(columns),
            identifier_column=identifier_column,
            identifier_policy=_identifier_policy(table, identifier_column),
        )

    @property
    def identifier(self) -> Optional[ColumnDescriptor]:
        """The single identifier column; None for composite keys."""
        if self.identifier_column is None:
            return None
        for descriptor in self.columns:
            if descriptor.column_name == self.identifier_column.name:
                return descriptor
        return None

    def generate_identifier(self, session: Session) -> Any:
        default = self.identifier_column.default
        if isinstance(default, Sequence):
            return session.execute(select(default.next_value())).scalar_one()
        if default.is_callable:
            return default.arg(None)
        return default.arg


def _many_to_one_columns(mapper: Mapper) -> dict[Column, tuple[str, str]]:
    related: dict[Column, tuple[str, str]] = {}
    for relationship in mapper.relationships:
        if relationship.direction is not RelationshipDirection.MANYTOONE:
            continue
        remote_mapper = relationship.mapper
        for local, remote in relationship.local_remote_pairs:
            remote_prop = remote_mapper.get_property_by_column(remote)
            related[local] = (relationship.key, remote_prop.key)
    return related


def _identifier_policy(table: Table, column: Optional[Column]) -> IdentifierPolicy:
    if column is None:
        return IdentifierPolicy.ASSIGNED
    if isinstance(column.default, Sequence):
        return IdentifierPolicy.PRE_INSERT
    if column.default is not None and not column.default.is_clause_element:
        return IdentifierPolicy.PRE_INSERT
    if column.default is not None:
        # SQL expression default, rendered into the INSERT by Core.
        return IdentifierPolicy.POST_INSERT
    if column is table.autoincrement_column or column.server_default is not None:
        return IdentifierPolicy.POST_INSERT
    return IdentifierPolicy.ASSIGNED


def inspect_schema(translation_class: type) -> InsertSchema:
    return InsertSchema.from_mapper(inspect(translation_class))

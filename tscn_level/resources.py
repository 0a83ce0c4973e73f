"""
Resource index: maps external resources (entity template scenes) to entity
types, keyed by the token instances use to reference them.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from tscn_level.data_model import (
    EntityKind, PathConvention, Record, ResourceCategory, LevelTables,
)
from tscn_level.errors import RecordFieldError, UnknownIdentifierError
from tscn_level.tables import DEFAULT_TABLES


def resource_token(resource_id) -> str:
    """The value an instance record uses to reference resource `resource_id`."""
    return f'ExtResource({resource_id})'


def path_key(path: str, convention: PathConvention) -> str:
    """Reduce a template path to its bare file name, e.g. 'barn'."""
    key = path
    if key.startswith(convention.strip):
        key = key[len(convention.strip):]
    if key.endswith(convention.suffix):
        key = key[:-len(convention.suffix)]
    return key


def lookup_type(path: str, category: ResourceCategory) -> str:
    name = category.names.get(path_key(path, category.convention))
    if name is None:
        raise UnknownIdentifierError(category.kind.value, path)
    return name


def build_resource_table(records: Iterable[Record],
                         category: ResourceCategory) -> Dict[str, str]:
    """
    Collect every record whose path lies under the category's prefix.

    Returns:
        dict of resource token ('ExtResource(<id>)') → entity type name
    """
    table = {}
    for record in records:
        path = record.path
        if path is None or not path.startswith(category.convention.prefix):
            continue
        name = lookup_type(path, category)
        if record.id is None:
            raise RecordFieldError(record, 'id')
        table[resource_token(record.id)] = name
    return table


@dataclass(frozen=True)
class ResourceIndex:
    tables: Dict[EntityKind, Dict[str, str]]

    def table(self, kind: EntityKind) -> Dict[str, str]:
        return self.tables[kind]

    def resolve(self, kind: EntityKind, token: Optional[str]) -> Optional[str]:
        """Entity type referenced by `token`, or None if it isn't one of `kind`."""
        if token is None:
            return None
        return self.tables[kind].get(token)


def build_resource_index(records, tables: LevelTables = DEFAULT_TABLES):
    records = list(records)
    return ResourceIndex(tables={
        c.kind: build_resource_table(records, c) for c in tables.categories
    })

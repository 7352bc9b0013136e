"""
Schema definition for resource search indexing.

Every logical field ``F`` declared by a resource adapter is provisioned as
three physical fields, one per ``FieldVariant``:

- FUZZY: ``F`` analyzed with the standard analyzer (fuzzy and prefix matching)
- EXACT: ``F.raw`` kept whole by the keyword analyzer (exact and wildcard matching)
- SUBSTRING: ``F.ng`` analyzed with the simple analyzer (partial matching)

A single analyzer cannot serve all three kinds of matching, so the same value
is indexed once per variant.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum


class FieldVariant(str, Enum):
    """Physical variants provisioned for every logical field."""

    FUZZY = "fuzzy"
    EXACT = "exact"
    SUBSTRING = "substring"

    @property
    def suffix(self) -> str:
        return _VARIANT_SUFFIXES[self]

    @property
    def analyzer_name(self) -> str:
        return _VARIANT_ANALYZERS[self]

    def physical_name(self, logical_name: str) -> str:
        """Return the index field name holding this variant of ``logical_name``."""
        return logical_name + self.suffix


_VARIANT_SUFFIXES = {
    FieldVariant.FUZZY: "",
    FieldVariant.EXACT: ".raw",
    FieldVariant.SUBSTRING: ".ng",
}

_VARIANT_ANALYZERS = {
    FieldVariant.FUZZY: "standard",
    FieldVariant.EXACT: "keyword",
    FieldVariant.SUBSTRING: "simple",
}


@dataclass(frozen=True)
class SchemaField:
    """One physical field of the index."""

    name: str
    variant: FieldVariant

    @property
    def physical_name(self) -> str:
        return self.variant.physical_name(self.name)

    @property
    def analyzer_name(self) -> str:
        return self.variant.analyzer_name


@dataclass
class Schema:
    """
    Schema definition for a transient resource index.

    Example:
        schema = build_schema(["name", "ocid"])
        schema.field("name", FieldVariant.EXACT).physical_name  # "name.raw"
    """

    fields: list[SchemaField]

    def __post_init__(self) -> None:
        self._by_physical: dict[str, SchemaField] = {}
        self._by_logical: dict[tuple[str, FieldVariant], SchemaField] = {}
        for schema_field in self.fields:
            physical = schema_field.physical_name
            if physical in self._by_physical:
                msg = f"Duplicate physical field '{physical}' in schema"
                raise ValueError(msg)
            self._by_physical[physical] = schema_field
            self._by_logical[(schema_field.name, schema_field.variant)] = schema_field

    def __getitem__(self, physical_name: str) -> SchemaField:
        return self._by_physical[physical_name]

    def __contains__(self, physical_name: str) -> bool:
        return physical_name in self._by_physical

    def __iter__(self) -> Iterator[SchemaField]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def field(self, logical_name: str, variant: FieldVariant) -> SchemaField:
        """Return the physical field for a logical field and variant."""
        try:
            return self._by_logical[(logical_name, variant)]
        except KeyError:
            msg = f"Field '{logical_name}' ({variant.value}) not found in schema"
            raise KeyError(msg) from None

    @property
    def logical_fields(self) -> list[str]:
        """Logical field names in declaration order."""
        seen: dict[str, None] = {}
        for schema_field in self.fields:
            seen.setdefault(schema_field.name, None)
        return list(seen)


def build_schema(fields: Iterable[str]) -> Schema:
    """Provision FUZZY, EXACT and SUBSTRING variants for every logical field.

    Declaration order is preserved and repeated names are collapsed.
    """

    schema_fields: list[SchemaField] = []
    seen: set[str] = set()
    for name in fields:
        if not name:
            msg = "Field names must be non-empty strings"
            raise ValueError(msg)
        if name in seen:
            continue
        seen.add(name)
        schema_fields.extend(SchemaField(name, variant) for variant in FieldVariant)
    return Schema(fields=schema_fields)

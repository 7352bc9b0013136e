"""The Indexable Adapter contract.

Every resource kind plugs into the engine through a subclass of
``IndexableAdapter`` providing three operations:

- ``to_indexable(record)``: flatten one record into lower-cased scalar fields;
  unknown values become ``""``, never a missing key.
- ``searchable_fields()``: every field the engine may query.
- ``boosted_fields()``: the subset that identifies the resource (name, OCID)
  and should outrank other matches.

A subclass missing any of the three cannot be instantiated.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

from resource_search.search.index import IndexValue


T = TypeVar("T")


@dataclass(frozen=True)
class FieldDeclaration:
    """Searchable and boosted field names for one resource kind."""

    searchable: tuple[str, ...]
    boosted: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.searchable:
            msg = "At least one searchable field is required"
            raise ValueError(msg)
        stray = [name for name in self.boosted if name not in self.searchable]
        if stray:
            msg = f"Boosted fields {stray} must also be searchable"
            raise ValueError(msg)


class IndexableAdapter(ABC, Generic[T]):
    """Flattens records of one resource kind for the search engine."""

    @abstractmethod
    def to_indexable(self, record: T) -> dict[str, IndexValue]:
        """Return the record's searchable fields, string values lower-cased."""

    @abstractmethod
    def searchable_fields(self) -> tuple[str, ...]:
        """Fields to index and query, in a fixed order."""

    @abstractmethod
    def boosted_fields(self) -> tuple[str, ...]:
        """Subset of ``searchable_fields`` whose matches weigh more."""

    def declaration(self) -> FieldDeclaration:
        return FieldDeclaration(tuple(self.searchable_fields()), tuple(self.boosted_fields()))

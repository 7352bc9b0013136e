"""Write-once, memory-only inverted index for a single search call.

``build_index`` turns the adapter output for every record into one document
keyed by the record's position in the input slice. Each non-empty string field
``F`` is copied into its ``F.raw`` and ``F.ng`` variants, and every variant is
analyzed with its own analyzer. Nothing is persisted. The index is discarded
when the caller drops it, so memory is O(records x fields).
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator, Mapping, Sequence
import logging
from typing import Any

from resource_search.search.analyzers import Analyzer, get_analyzer
from resource_search.search.errors import IndexBuildError
from resource_search.search.schema import FieldVariant, Schema
from resource_search.search.stats import FieldLengthStats, compute_field_length_stats


logger = logging.getLogger(__name__)

IndexValue = str | int | float | bool

_DUPLICATED_VARIANTS = (FieldVariant.EXACT, FieldVariant.SUBSTRING)


class MemoryIndex:
    """Inverted index over the physical fields of a ``Schema``.

    Postings are stored as ``field -> term -> {doc_id: frequency}``. Document
    ids keep their insertion order, which is the tie-break order for equal
    scores.
    """

    def __init__(self, schema: Schema) -> None:
        self.schema = schema
        self._analyzers: dict[str, Analyzer] = {f.physical_name: get_analyzer(f.analyzer_name) for f in schema}
        self._postings: dict[str, dict[str, dict[str, int]]] = defaultdict(lambda: defaultdict(dict))
        self._field_lengths: dict[str, dict[str, int]] = defaultdict(dict)
        self._stored: dict[str, dict[str, Any]] = {}
        self._order: dict[str, int] = {}
        self._stats: dict[str, FieldLengthStats] | None = None

    def __len__(self) -> int:
        return len(self._stored)

    def __contains__(self, doc_id: str) -> bool:
        return doc_id in self._stored

    def add_document(self, doc_id: str, document: Mapping[str, Any]) -> None:
        """Analyze and store ``document`` under ``doc_id``.

        Only physical fields declared by the schema are indexed; anything else
        is stored as-is. Non-string values are stored but not text-indexed.
        """
        if doc_id in self._stored:
            msg = f"Document id '{doc_id}' already indexed"
            raise ValueError(msg)

        for field_name, value in document.items():
            if field_name not in self.schema or not isinstance(value, str) or not value:
                continue
            tokens = self._analyzers[field_name](value)
            if not tokens:
                continue
            field_postings = self._postings[field_name]
            for token in tokens:
                postings = field_postings[token.text]
                postings[doc_id] = postings.get(doc_id, 0) + 1
            self._field_lengths[field_name][doc_id] = len(tokens)

        self._order[doc_id] = len(self._order)
        self._stored[doc_id] = dict(document)
        self._stats = None

    def doc_ids(self) -> Iterator[str]:
        """Document ids in insertion order."""
        return iter(self._order)

    def order_of(self, doc_id: str) -> int:
        return self._order[doc_id]

    def get_document(self, doc_id: str) -> dict[str, Any] | None:
        return self._stored.get(doc_id)

    def terms(self, field_name: str) -> Mapping[str, Mapping[str, int]]:
        """Term dictionary for a physical field (empty when nothing was indexed)."""
        return self._postings.get(field_name, {})

    def field_length(self, field_name: str, doc_id: str) -> int:
        return self._field_lengths.get(field_name, {}).get(doc_id, 0)

    def field_stats(self, field_name: str) -> FieldLengthStats | None:
        if self._stats is None:
            self._stats = compute_field_length_stats(self._field_lengths)
        return self._stats.get(field_name)


def _duplicate_variants(document: dict[str, Any], schema: Schema) -> dict[str, Any]:
    for logical_name in schema.logical_fields:
        value = document.get(logical_name)
        if isinstance(value, str) and value:
            for variant in _DUPLICATED_VARIANTS:
                document[variant.physical_name(logical_name)] = value
    return document


def _check_document(document: Mapping[str, Any], schema: Schema) -> None:
    missing = [name for name in schema.logical_fields if name not in document]
    if missing:
        msg = f"missing searchable fields {missing}"
        raise ValueError(msg)
    for name, value in document.items():
        if not isinstance(value, (str, int, float)):
            msg = f"field '{name}' has unsupported type {type(value).__name__}"
            raise ValueError(msg)


def build_index(
    documents: Sequence[Mapping[str, IndexValue]],
    schema: Schema,
    *,
    log: logging.Logger | None = None,
) -> MemoryIndex:
    """Build an index holding one document per entry of ``documents``.

    Document ``i`` is stored under the key ``str(i)``. The first failing
    entry aborts the build with an ``IndexBuildError`` naming its position.
    """

    log = log or logger
    index = MemoryIndex(schema)
    for position, indexable in enumerate(documents):
        try:
            _check_document(indexable, schema)
            index.add_document(str(position), _duplicate_variants(dict(indexable), schema))
        except (TypeError, ValueError) as exc:
            log.warning("Failed to index record %d: %s", position, exc)
            raise IndexBuildError(str(exc), position=position) from exc

    log.debug("Built index with %d documents over %d fields", len(index), len(schema.logical_fields))
    return index

"""Tiered fuzzy search over a transient resource index.

``FuzzySearchEngine.run`` resolves a free-text pattern in up to three tiers:

1. exact: the whole pattern equals a ``.raw`` value (specific patterns only)
2. substring: the pattern occurs inside a ``.raw`` value (specific patterns only)
3. general: fuzzy, prefix, partial and wildcard clauses ORed together, with
   extra weight for the caller's boosted fields

The first tier with hits wins. Empty patterns return no results.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
import logging
import time
from typing import TYPE_CHECKING, TypeVar

from resource_search.observability.metrics import INDEX_BUILD_LATENCY, QUERY_COUNT, QUERY_LATENCY, track_latency
from resource_search.observability.tracing import create_span
from resource_search.search.errors import IndexBuildError, QueryError
from resource_search.search.index import IndexValue, MemoryIndex, build_index
from resource_search.search.queries import (
    DisjunctionQuery,
    FuzzyQuery,
    Hit,
    MatchQuery,
    PrefixQuery,
    Query,
    TermQuery,
    WildcardQuery,
    execute,
)
from resource_search.search.schema import FieldVariant, Schema, build_schema
from resource_search.search.specificity import looks_specific, normalize_pattern


if TYPE_CHECKING:
    from resource_search.adapters.base import IndexableAdapter

logger = logging.getLogger(__name__)

T = TypeVar("T")

EXACT_LIMIT = 200
SUBSTRING_LIMIT = 500
GENERAL_LIMIT = 1000

FUZZINESS = 2
SUBSTRING_BOOST = 1.0
FUZZY_BOOST = 1.2
PREFIX_BOOST = 1.3
NGRAM_BOOST = 1.5
WILDCARD_BOOST = 1.1
BOOSTED_FIELD_BOOST = 1.8


class Tier(str, Enum):
    """Which stage of the search produced the result."""

    NONE = "none"
    EXACT = "exact"
    SUBSTRING = "substring"
    GENERAL = "general"


@dataclass(frozen=True)
class SearchOutcome:
    """Positions matched by one search call plus how they were found."""

    pattern: str
    specific: bool
    tier: Tier
    positions: tuple[int, ...] = ()

    @classmethod
    def empty(cls, pattern: str = "", *, specific: bool = False) -> SearchOutcome:
        return cls(pattern=pattern, specific=specific, tier=Tier.NONE)


def exact_query(pattern: str, fields: Sequence[str]) -> Query:
    return DisjunctionQuery(tuple(TermQuery(pattern, FieldVariant.EXACT.physical_name(f)) for f in fields))


def substring_query(pattern: str, fields: Sequence[str]) -> Query:
    wildcard = f"*{pattern}*"
    return DisjunctionQuery(
        tuple(WildcardQuery(wildcard, FieldVariant.EXACT.physical_name(f), SUBSTRING_BOOST) for f in fields)
    )


def general_query(pattern: str, fields: Sequence[str], boosted_fields: Sequence[str]) -> Query:
    """Four clauses per field plus one extra partial-match clause per boosted field."""

    wildcard = f"*{pattern}*"
    clauses: list[Query] = []
    for name in fields:
        tokenized = FieldVariant.FUZZY.physical_name(name)
        clauses.append(FuzzyQuery(pattern, tokenized, fuzziness=FUZZINESS, boost=FUZZY_BOOST))
        clauses.append(PrefixQuery(pattern, tokenized, boost=PREFIX_BOOST))
        clauses.append(MatchQuery(pattern, FieldVariant.SUBSTRING.physical_name(name), boost=NGRAM_BOOST))
        clauses.append(WildcardQuery(wildcard, FieldVariant.EXACT.physical_name(name), boost=WILDCARD_BOOST))

    for name in boosted_fields:
        clauses.append(MatchQuery(pattern, FieldVariant.SUBSTRING.physical_name(name), boost=BOOSTED_FIELD_BOOST))

    return DisjunctionQuery(tuple(clauses))


def _positions(hits: Sequence[Hit]) -> tuple[int, ...]:
    return tuple(int(hit.doc_id) for hit in hits)


class FuzzySearchEngine:
    """Build transient indexes and resolve patterns into record positions.

    The engine holds no state between calls apart from the logger it was
    given, so one instance can serve any number of sequential searches.
    """

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def build_schema(self, fields: Sequence[str]) -> Schema:
        try:
            return build_schema(fields)
        except (TypeError, ValueError) as exc:
            msg = f"building schema: {exc}"
            raise IndexBuildError(msg) from exc

    def build_index(self, documents: Sequence[Mapping[str, IndexValue]], fields: Sequence[str]) -> MemoryIndex:
        """Index ``documents`` (adapter output, one per record) over ``fields``."""

        schema = self.build_schema(fields)
        attributes = {"search.records": len(documents), "search.fields": len(schema.logical_fields)}
        with create_span("resource_search.build_index", attributes=attributes), track_latency(INDEX_BUILD_LATENCY):
            index = build_index(documents, schema, log=self.logger)
            self.logger.debug("Indexed %d records", len(index))
        return index

    def run(
        self,
        index: MemoryIndex,
        pattern: str,
        fields: Sequence[str],
        boosted_fields: Sequence[str] = (),
    ) -> SearchOutcome:
        """Resolve ``pattern`` against ``index`` and report the winning tier."""

        normalized = normalize_pattern(pattern)
        if not normalized:
            return SearchOutcome.empty()

        unknown = [name for name in boosted_fields if name not in fields]
        if unknown:
            msg = f"boosted fields {unknown} are not searchable fields"
            raise QueryError(msg)

        specific = looks_specific(normalized)
        started = time.perf_counter()
        with create_span(
            "resource_search.search",
            attributes={"search.pattern_length": len(normalized), "search.specific": specific},
        ) as span:
            outcome = self._run_tiers(index, normalized, fields, boosted_fields, specific)
            span.set_attribute("search.tier", outcome.tier.value)
            span.set_attribute("search.hits", len(outcome.positions))

            QUERY_LATENCY.labels(tier=outcome.tier.value).observe(time.perf_counter() - started)
            QUERY_COUNT.labels(tier=outcome.tier.value).inc()
            self.logger.info(
                "Search matched %d of %d records (tier=%s, specific=%s)",
                len(outcome.positions),
                len(index),
                outcome.tier.value,
                specific,
            )
        return outcome

    def _run_tiers(
        self,
        index: MemoryIndex,
        pattern: str,
        fields: Sequence[str],
        boosted_fields: Sequence[str],
        specific: bool,
    ) -> SearchOutcome:
        if specific:
            hits = execute(index, exact_query(pattern, fields), EXACT_LIMIT)
            if hits:
                return SearchOutcome(pattern, specific, Tier.EXACT, _positions(hits))
            self.logger.debug("No exact match for %r, trying substring tier", pattern)

            hits = execute(index, substring_query(pattern, fields), SUBSTRING_LIMIT)
            if hits:
                return SearchOutcome(pattern, specific, Tier.SUBSTRING, _positions(hits))
            self.logger.debug("No substring match for %r, falling back to general tier", pattern)

        hits = execute(index, general_query(pattern, fields, boosted_fields), GENERAL_LIMIT)
        if not hits:
            return SearchOutcome.empty(pattern, specific=specific)
        return SearchOutcome(pattern, specific, Tier.GENERAL, _positions(hits))

    def search(
        self,
        index: MemoryIndex,
        pattern: str,
        fields: Sequence[str],
        boosted_fields: Sequence[str] = (),
    ) -> list[int]:
        """Return matching record positions, best first."""
        return list(self.run(index, pattern, fields, boosted_fields).positions)

    def search_records(self, records: Sequence[T], adapter: IndexableAdapter[T], pattern: str) -> list[T]:
        """Adapt, index and search ``records``, returning the matches in hit order."""

        if not normalize_pattern(pattern):
            return []
        declaration = adapter.declaration()
        documents = [adapter.to_indexable(record) for record in records]
        index = self.build_index(documents, declaration.searchable)
        positions = self.search(index, pattern, declaration.searchable, declaration.boosted)
        return [records[i] for i in positions if 0 <= i < len(records)]

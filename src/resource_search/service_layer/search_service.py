"""Resource search orchestration.

Each resource kind runs the same flow on every search:
fetch the current slice, index it, search it, map the hits back to records.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
import logging
from typing import Generic, TypeVar

from resource_search.adapters.base import IndexableAdapter
from resource_search.observability.tracing import create_span
from resource_search.search.engine import FuzzySearchEngine
from resource_search.search.errors import SearchError
from resource_search.search.specificity import normalize_pattern


logger = logging.getLogger(__name__)

T = TypeVar("T")

RecordSource = Callable[[], Sequence[T]]


class RecordSourceError(SearchError):
    """The record source failed to produce the slice to search."""


class ResourceSearchService(Generic[T]):
    """Fuzzy search over one resource kind.

    Args:
        source: Zero-argument callable returning the full slice of records.
            It is called once per search, so results always reflect the
            current state of the source.
        adapter: Flattens records for the engine.
        engine: Shared engine; a fresh one is created when omitted.
        logger: Logger handed to the engine and used for this service's messages.
    """

    def __init__(
        self,
        source: RecordSource[T],
        adapter: IndexableAdapter[T],
        engine: FuzzySearchEngine | None = None,
        *,
        logger: logging.Logger | None = None,
    ):
        self.source = source
        self.adapter = adapter
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.engine = engine if engine is not None else FuzzySearchEngine(logger=self.logger)

    def fetch(self) -> list[T]:
        try:
            records = self.source()
        except Exception as exc:
            msg = f"fetching {type(self.adapter).__name__} records failed: {exc}"
            raise RecordSourceError(msg) from exc
        return list(records or ())

    def fuzzy_search(self, pattern: str) -> list[T]:
        """Return the records matching ``pattern``, best match first.

        An empty or whitespace-only pattern returns no records without
        touching the source.
        """

        if not normalize_pattern(pattern):
            return []

        kind = type(self.adapter).__name__
        with create_span("resource_search.fuzzy_search", attributes={"search.adapter": kind}):
            records = self.fetch()
            self.logger.debug("Searching %d %s records", len(records), kind)
            if not records:
                return []

            matches = self.engine.search_records(records, self.adapter, pattern)
            self.logger.info("Pattern matched %d of %d records", len(matches), len(records))
        return matches

"""Exceptions raised by the resource search engine.

Callers only need to catch ``SearchError``. The subclasses tell index
construction failures apart from query failures, but no error names the tier
that was running.
"""

from __future__ import annotations


class SearchError(Exception):
    """Base class for engine failures."""


class IndexBuildError(SearchError):
    """Raised when the schema or a record's document cannot be built.

    ``position`` is the failing record's index in the input slice, or None
    when the failure happened before any record was processed.
    """

    def __init__(self, message: str, *, position: int | None = None) -> None:
        self.position = position
        if position is not None:
            message = f"indexing {position}: {message}"
        super().__init__(message)


class QueryError(SearchError):
    """Raised when a query cannot be constructed or executed."""

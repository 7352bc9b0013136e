"""Service layer - per-resource search orchestration."""

from .search_service import RecordSource, RecordSourceError, ResourceSearchService


__all__ = [
    "RecordSource",
    "RecordSourceError",
    "ResourceSearchService",
]

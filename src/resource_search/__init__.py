"""Fuzzy search over cloud resource listings.

Records of any kind are flattened by an ``IndexableAdapter``, indexed into a
transient in-memory index and resolved by ``FuzzySearchEngine`` in exact,
substring and general tiers.
"""

from resource_search.adapters.base import FieldDeclaration, IndexableAdapter
from resource_search.search.engine import FuzzySearchEngine
from resource_search.search.errors import IndexBuildError, QueryError, SearchError
from resource_search.service_layer.search_service import RecordSourceError, ResourceSearchService


__version__ = "0.1.0"

__all__ = [
    "FieldDeclaration",
    "FuzzySearchEngine",
    "IndexBuildError",
    "IndexableAdapter",
    "QueryError",
    "RecordSourceError",
    "ResourceSearchService",
    "SearchError",
    "__version__",
]

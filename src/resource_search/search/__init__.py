"""
Transient full-text search package.

This package provides a pure-Python, memory-only search stack:
- analyzers: Tokenizers and filters (standard, keyword, simple)
- schema: Logical fields and their FUZZY / EXACT / SUBSTRING variants
- index: Write-once inverted index keyed by record position
- queries: Term, prefix, fuzzy, wildcard, match and disjunction queries
- specificity: Identifier-vs-word pattern classifier
- engine: Tiered FuzzySearchEngine
"""

from resource_search.search.engine import FuzzySearchEngine, SearchOutcome, Tier
from resource_search.search.errors import IndexBuildError, QueryError, SearchError
from resource_search.search.index import MemoryIndex, build_index
from resource_search.search.schema import FieldVariant, Schema, SchemaField, build_schema
from resource_search.search.specificity import looks_specific, normalize_pattern


__all__ = [
    "FieldVariant",
    "FuzzySearchEngine",
    "IndexBuildError",
    "MemoryIndex",
    "QueryError",
    "Schema",
    "SchemaField",
    "SearchError",
    "SearchOutcome",
    "Tier",
    "build_index",
    "build_schema",
    "looks_specific",
    "normalize_pattern",
]

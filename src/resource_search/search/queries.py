"""Query primitives evaluated against a ``MemoryIndex``.

Leaf queries target one physical field and produce ``{doc_id: score}``
mappings. Each (term, document) pair is weighted with BM25 and IDF and then
multiplied by the query boost. ``DisjunctionQuery`` ORs its children and
applies a coordination factor, so documents that satisfy more clauses rank
higher.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
import heapq
import re

from resource_search.search.analyzers import get_analyzer
from resource_search.search.errors import QueryError
from resource_search.search.fuzzy import MAX_FUZZINESS, find_fuzzy_matches
from resource_search.search.index import MemoryIndex
from resource_search.search.stats import bm25, calculate_idf


# Fuzzy expansions score below the exact term
_FUZZY_DISCOUNT = 0.8


@dataclass(frozen=True)
class Hit:
    """A scored document returned by ``execute``."""

    doc_id: str
    score: float


class Query(ABC):
    """Base class for every query node."""

    boost: float

    @abstractmethod
    def score(self, index: MemoryIndex) -> dict[str, float]:
        """Return scores for every matching document."""


def _score_terms(
    index: MemoryIndex,
    field_name: str,
    terms: Iterable[tuple[str, float]],
    boost: float,
) -> dict[str, float]:
    field_terms = index.terms(field_name)
    stats = index.field_stats(field_name)
    if not field_terms or stats is None:
        return {}

    total_docs = max(len(index), 1)
    avg_length = max(stats.average_length, 1e-9)
    scores: dict[str, float] = {}
    for term, weight in terms:
        postings = field_terms.get(term)
        if not postings:
            continue
        idf = calculate_idf(len(postings), total_docs)
        for doc_id, frequency in postings.items():
            doc_length = index.field_length(field_name, doc_id) or frequency
            scores[doc_id] = scores.get(doc_id, 0.0) + idf * bm25(frequency, doc_length, avg_length) * weight * boost
    return scores


@dataclass(frozen=True)
class TermQuery(Query):
    """Exact term lookup without analysis."""

    term: str
    field: str
    boost: float = 1.0

    def score(self, index: MemoryIndex) -> dict[str, float]:
        return _score_terms(index, self.field, [(self.term, 1.0)], self.boost)


@dataclass(frozen=True)
class PrefixQuery(Query):
    """Matches every term starting with ``prefix``."""

    prefix: str
    field: str
    boost: float = 1.0

    def score(self, index: MemoryIndex) -> dict[str, float]:
        expansions = ((term, 1.0) for term in index.terms(self.field) if term.startswith(self.prefix))
        return _score_terms(index, self.field, expansions, self.boost)


@dataclass(frozen=True)
class FuzzyQuery(Query):
    """Matches terms within ``fuzziness`` edits of ``term``."""

    term: str
    field: str
    fuzziness: int = 1
    boost: float = 1.0

    def __post_init__(self) -> None:
        if not 0 <= self.fuzziness <= MAX_FUZZINESS:
            msg = f"Fuzziness must be between 0 and {MAX_FUZZINESS}, got {self.fuzziness}"
            raise QueryError(msg)

    def score(self, index: MemoryIndex) -> dict[str, float]:
        matches = find_fuzzy_matches(self.term, index.terms(self.field), self.fuzziness)
        expansions = ((term, 1.0 if distance == 0 else _FUZZY_DISCOUNT) for term, distance in matches)
        return _score_terms(index, self.field, expansions, self.boost)


def wildcard_to_regex(pattern: str) -> re.Pattern[str]:
    """Translate ``*`` and ``?`` wildcards; every other character is literal."""

    parts: list[str] = []
    for ch in pattern:
        if ch == "*":
            parts.append(".*")
        elif ch == "?":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    return re.compile("".join(parts), re.DOTALL)


@dataclass(frozen=True)
class WildcardQuery(Query):
    """Whole-term wildcard match (``*`` any run, ``?`` one character)."""

    pattern: str
    field: str
    boost: float = 1.0

    def score(self, index: MemoryIndex) -> dict[str, float]:
        regex = wildcard_to_regex(self.pattern)
        expansions = ((term, 1.0) for term in index.terms(self.field) if regex.fullmatch(term))
        return _score_terms(index, self.field, expansions, self.boost)


@dataclass(frozen=True)
class MatchQuery(Query):
    """Analyzes ``text`` with the field's analyzer and ORs the resulting terms."""

    text: str
    field: str
    boost: float = 1.0

    def score(self, index: MemoryIndex) -> dict[str, float]:
        analyzer_name = index.schema[self.field].analyzer_name if self.field in index.schema else None
        tokens = get_analyzer(analyzer_name)(self.text)
        terms = list(dict.fromkeys(token.text for token in tokens))
        if not terms:
            return {}
        term_queries = tuple(TermQuery(term, self.field, self.boost) for term in terms)
        return DisjunctionQuery(term_queries).score(index)


@dataclass(frozen=True)
class DisjunctionQuery(Query):
    """Logical OR over child queries with a coordination factor."""

    children: tuple[Query, ...] = ()
    boost: float = 1.0

    def score(self, index: MemoryIndex) -> dict[str, float]:
        if not self.children:
            return {}
        totals: dict[str, float] = {}
        matched: dict[str, int] = {}
        for child in self.children:
            for doc_id, child_score in child.score(index).items():
                totals[doc_id] = totals.get(doc_id, 0.0) + child_score
                matched[doc_id] = matched.get(doc_id, 0) + 1

        clause_count = len(self.children)
        return {doc_id: total * (matched[doc_id] / clause_count) * self.boost for doc_id, total in totals.items()}


def rank(scores: Mapping[str, float], index: MemoryIndex, limit: int) -> list[Hit]:
    """Order by score descending, then by index insertion order, capped at ``limit``."""

    if limit <= 0:
        return []

    def key(item: tuple[str, float]) -> tuple[float, int]:
        return (-item[1], index.order_of(item[0]))

    items: Sequence[tuple[str, float]]
    if limit < len(scores):
        items = heapq.nsmallest(limit, scores.items(), key=key)
    else:
        items = sorted(scores.items(), key=key)
    return [Hit(doc_id=doc_id, score=score) for doc_id, score in items]


def execute(index: MemoryIndex, query: Query, limit: int) -> list[Hit]:
    """Run ``query`` and return at most ``limit`` ranked hits."""

    try:
        scores = query.score(index)
        return rank(scores, index, limit)
    except QueryError:
        raise
    except (KeyError, TypeError, ValueError, re.error) as exc:
        msg = f"executing {type(query).__name__}: {exc}"
        raise QueryError(msg) from exc

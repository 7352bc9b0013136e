"""Prometheus metrics for index builds and tiered queries."""

from __future__ import annotations

from contextlib import contextmanager
import time
from typing import TYPE_CHECKING

from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, Counter, Histogram, generate_latest


if TYPE_CHECKING:
    from collections.abc import Generator


INDEX_BUILD_LATENCY = Histogram(
    "resource_search_index_build_seconds",
    "Time spent building a transient resource index",
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)

QUERY_LATENCY = Histogram(
    "resource_search_query_seconds",
    "Fuzzy search latency by winning tier",
    ["tier"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5),
)

QUERY_COUNT = Counter(
    "resource_search_queries_total",
    "Fuzzy searches by winning tier",
    ["tier"],
)


@contextmanager
def track_latency(histogram: Histogram, **labels: str) -> Generator[None, None, None]:
    """Context manager to track operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        target = histogram.labels(**labels) if labels else histogram
        target.observe(time.perf_counter() - start)


def get_metrics() -> bytes:
    """Return metrics in Prometheus exposition format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    return CONTENT_TYPE_LATEST

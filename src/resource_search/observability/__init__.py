"""Observability module for logging, tracing and metrics."""

from __future__ import annotations

from resource_search.config import Settings, get_settings
from resource_search.observability.context import get_trace_context, set_trace_context, trace_context
from resource_search.observability.logging import JsonFormatter, configure_logging
from resource_search.observability.metrics import (
    INDEX_BUILD_LATENCY,
    QUERY_COUNT,
    QUERY_LATENCY,
    get_metrics,
    get_metrics_content_type,
    track_latency,
)
from resource_search.observability.tracing import create_span, get_tracer, init_tracing


def bootstrap(settings: Settings | None = None) -> Settings:
    """Configure logging (and tracing when enabled) from settings."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_json, logger_levels=settings.logger_levels)
    if settings.tracing_enabled:
        init_tracing(service_name=settings.service_name)
    return settings


__all__ = [
    "INDEX_BUILD_LATENCY",
    "QUERY_COUNT",
    "QUERY_LATENCY",
    "JsonFormatter",
    "bootstrap",
    "configure_logging",
    "create_span",
    "get_metrics",
    "get_metrics_content_type",
    "get_trace_context",
    "get_tracer",
    "init_tracing",
    "set_trace_context",
    "trace_context",
    "track_latency",
]

"""Trace and span ids of the active span, read by the JSON log formatter."""

from __future__ import annotations

from contextvars import ContextVar, Token


trace_context: ContextVar[dict[str, str] | None] = ContextVar("trace_context", default=None)


def get_trace_context() -> dict[str, str]:
    """Return the active ``trace_id``/``span_id`` pair, or an empty dict outside any span."""
    return trace_context.get() or {}


def set_trace_context(trace_id: str, span_id: str) -> Token:
    return trace_context.set({"trace_id": trace_id, "span_id": span_id})


def reset_trace_context(token: Token) -> None:
    trace_context.reset(token)

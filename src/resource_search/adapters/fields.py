"""Value helpers shared by the resource adapters.

None of these raise: anything that cannot be rendered becomes ``""`` so an
adapter can never fail on odd input.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging
from typing import Any


logger = logging.getLogger(__name__)


def render(value: Any) -> str:
    """Render a scalar the way it reads in the console (``true``, ``5``, ``2.5``)."""

    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception:  # noqa: BLE001 - adapters must not fail on unrenderable values
        logger.debug("Could not render %s value for indexing", type(value).__name__)
        return ""


def lower_or_empty(value: Any) -> str:
    return render(value).lower()


def join_lower(values: Iterable[Any] | None, sep: str = " ") -> str:
    """Lower-case, trim and join ``values``, skipping blanks."""

    if not values:
        return ""
    parts = [lower_or_empty(v).strip() for v in values]
    return sep.join(p for p in parts if p)


def flatten_tags(
    freeform: Mapping[str, str] | None,
    defined: Mapping[str, Mapping[str, Any]] | None,
) -> str:
    """Flatten tags into space-separated ``key:value`` and ``namespace.key:value`` pairs.

    Freeform entries with an empty key or value are skipped, as are defined
    entries with an empty namespace or key or a missing value.

    Example:
        >>> flatten_tags({"Env": "Prod"}, {"Ops": {"team": "core"}})
        'env:prod ops.team:core'
    """

    parts: list[str] = []
    for key, value in (freeform or {}).items():
        if not key or not value:
            continue
        parts.append(f"{key.lower()}:{lower_or_empty(value)}")
    for namespace, entries in (defined or {}).items():
        if not namespace or entries is None:
            continue
        for key, value in entries.items():
            if not key or value is None:
                continue
            parts.append(f"{namespace.lower()}.{key.lower()}:{lower_or_empty(value)}")
    return " ".join(parts)


def extract_tag_values(
    freeform: Mapping[str, str] | None,
    defined: Mapping[str, Mapping[str, Any]] | None,
) -> str:
    """Space-separated tag values only, so values match without their key prefix."""

    values = [v for v in (freeform or {}).values() if v]
    for entries in (defined or {}).values():
        if entries is None:
            continue
        values.extend(v for v in entries.values() if v is not None)
    return join_lower(values)

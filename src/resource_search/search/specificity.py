"""Classify search patterns as identifier-like or word-like.

Long or punctuated patterns (OCIDs, hostnames, IPs, ``key:value`` tag pairs)
are usually meant to match exactly or as a substring. Short plain words are
usually fuzzy fragments of a name. The engine runs its exact and substring
tiers only for identifier-like ("specific") patterns.
"""

from __future__ import annotations


SPECIFIC_MIN_LENGTH = 15
SPECIFIC_CHARACTERS = frozenset(".:-_/[]@")
DOTTED_IDENTIFIER_DOTS = 3


def normalize_pattern(pattern: str) -> str:
    """Trim surrounding whitespace and lower-case."""
    return pattern.strip().lower()


def looks_specific(pattern: str) -> bool:
    """Return True when ``pattern`` looks like an identifier rather than a word.

    ``pattern`` is expected to be normalized already. A pattern is specific
    when it is at least 15 characters long, contains any of ``. : - _ / [ ] @``,
    or contains exactly three dots.

    Examples:
        >>> looks_specific("ocid1.instance.oc1..aaaa")
        True
        >>> looks_specific("web")
        False
        >>> looks_specific("key:value")
        True
    """
    if len(pattern) >= SPECIFIC_MIN_LENGTH:
        return True
    if any(ch in SPECIFIC_CHARACTERS for ch in pattern):
        return True
    # dotted quads
    return pattern.count(".") == DOTTED_IDENTIFIER_DOTS

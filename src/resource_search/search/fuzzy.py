"""Edit-distance helpers for typo-tolerant term matching.

The general search tier runs a fuzzy clause with a fixed tolerance of two
edits; the functions here find which indexed terms fall inside that budget.
"""

from __future__ import annotations

from collections.abc import Iterable


MAX_FUZZINESS = 2


def levenshtein_distance(s1: str, s2: str, max_distance: int | None = None) -> int:
    """Return the Levenshtein (edit) distance between two strings.

    With ``max_distance`` set, the computation stops as soon as the distance
    is known to exceed it and ``max_distance + 1`` is returned instead.

    Examples:
        >>> levenshtein_distance("kitten", "sitting")
        3
        >>> levenshtein_distance("web", "wbe")
        2
    """
    if not s1:
        return len(s2)
    if not s2:
        return len(s1)

    # Shorter string indexes the columns
    if len(s1) > len(s2):
        s1, s2 = s2, s1

    m, n = len(s1), len(s2)
    if max_distance is not None and n - m > max_distance:
        return max_distance + 1

    prev_row = list(range(m + 1))
    curr_row = [0] * (m + 1)

    for j in range(1, n + 1):
        curr_row[0] = j
        row_min = j
        ch = s2[j - 1]
        for i in range(1, m + 1):
            cost = 0 if s1[i - 1] == ch else 1
            curr_row[i] = min(prev_row[i] + 1, curr_row[i - 1] + 1, prev_row[i - 1] + cost)
            row_min = min(row_min, curr_row[i])

        if max_distance is not None and row_min > max_distance:
            return max_distance + 1

        prev_row, curr_row = curr_row, prev_row

    return prev_row[m]


def find_fuzzy_matches(
    query_term: str,
    vocabulary: Iterable[str],
    max_distance: int = MAX_FUZZINESS,
) -> list[tuple[str, int]]:
    """Return ``(term, distance)`` pairs within ``max_distance`` edits.

    Matching is case-sensitive; indexed terms and patterns are both already
    lower-cased. Results are sorted closest first, then alphabetically.
    """
    if not query_term:
        return []
    if max_distance < 0 or max_distance > MAX_FUZZINESS:
        msg = f"Fuzziness must be between 0 and {MAX_FUZZINESS}, got {max_distance}"
        raise ValueError(msg)

    matches: list[tuple[str, int]] = []
    for term in vocabulary:
        if abs(len(query_term) - len(term)) > max_distance:
            continue
        distance = levenshtein_distance(query_term, term, max_distance)
        if distance <= max_distance:
            matches.append((term, distance))

    matches.sort(key=lambda x: (x[1], x[0]))
    return matches

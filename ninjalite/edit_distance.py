"""Levenshtein edit distance between two strings."""

from __future__ import annotations


def edit_distance(
    s1: str,
    s2: str,
    allow_replacements: bool = True,
    max_edit_distance: int = 0,
) -> int:
    """Return the edit distance between ``s1`` and ``s2``.

    When ``allow_replacements`` is false a substitution costs a deletion plus
    an insertion.  When ``max_edit_distance`` is non-zero the computation
    stops early and returns ``max_edit_distance + 1`` once every entry of a
    row exceeds the limit.
    """
    # Only one row of the classic dynamic-programming table is kept; the
    # top-left neighbour of each cell is carried in ``previous``.
    row = list(range(len(s2) + 1))

    for y, c1 in enumerate(s1, start=1):
        previous = row[0]
        row[0] = y
        best_this_row = y
        for x, c2 in enumerate(s2, start=1):
            old = row[x]
            if allow_replacements:
                row[x] = min(previous + (c1 != c2), min(row[x - 1], old) + 1)
            elif c1 == c2:
                row[x] = previous
            else:
                row[x] = min(row[x - 1], old) + 1
            previous = old
            best_this_row = min(best_this_row, row[x])

        if max_edit_distance and best_this_row > max_edit_distance:
            return max_edit_distance + 1

    return row[-1]
from __future__ import annotations

"""Levenshtein edit distance: full-table and rolling-row dynamic programmes."""

from typing import Callable, Dict, Iterator, List, Sequence, Union

Symbols = Union[Sequence[str], str]
DistanceFn = Callable[[Symbols, Symbols], int]


def build_table(a: Symbols, b: Symbols) -> List[List[int]]:
    """Return the full ``(len(a) + 1) x (len(b) + 1)`` cost table.

    Cell ``[i][j]`` holds the edit distance between ``a[:i]`` and ``b[:j]``.
    """

    m, n = len(a), len(b)
    table = [[0] * (n + 1) for _ in range(m + 1)]
    for j in range(n + 1):
        table[0][j] = j  # insert j symbols into an empty prefix
    for i in range(m + 1):
        table[i][0] = i  # delete i symbols down to an empty prefix

    for i in range(1, m + 1):
        above = table[i - 1]
        row = table[i]
        char_a = a[i - 1]
        for j in range(1, n + 1):
            insert_cost = row[j - 1] + 1
            delete_cost = above[j] + 1
            replace_cost = above[j - 1] + (char_a != b[j - 1])
            row[j] = min(insert_cost, delete_cost, replace_cost)
    return table


def full_table_edit_distance(a: Symbols, b: Symbols) -> int:
    """Edit distance in O(mn) time and O(mn) space."""

    return build_table(a, b)[len(a)][len(b)]


def iter_rolling_rows(a: Symbols, b: Symbols) -> Iterator[List[int]]:
    """Yield each logical table row using only two buffers of ``len(b) + 1``.

    The yielded list is the live ``current`` buffer; it is overwritten two
    rows later, so callers that keep rows must copy them.
    """

    n = len(b)
    previous = [0] * (n + 1)
    current = list(range(n + 1))
    yield current
    for i in range(1, len(a) + 1):
        previous, current = current, previous
        char_a = a[i - 1]
        current[0] = i
        for j in range(1, n + 1):
            if char_a == b[j - 1]:
                current[j] = previous[j - 1]
            else:
                current[j] = min(current[j - 1], previous[j], previous[j - 1]) + 1
        yield current


def rolling_row_edit_distance(a: Symbols, b: Symbols) -> int:
    """Edit distance in O(mn) time and O(min(m, n)) space.

    The shorter operand becomes the row dimension; distance is symmetric so
    the result is the same as :func:`full_table_edit_distance`.
    """

    if len(a) < len(b):
        a, b = b, a
    last: List[int] = []
    for last in iter_rolling_rows(a, b):
        pass
    return last[-1]


def theoretical_cells(variant: str, m: int, n: int) -> int:
    """Number of table cells a variant keeps alive for inputs of size m and n."""

    if variant == "full_table":
        return m * n
    if variant == "rolling_row":
        return min(m, n)
    raise ValueError(f"Unknown variant '{variant}'")


_VARIANTS: Dict[str, DistanceFn] = {
    "full_table": full_table_edit_distance,
    "rolling_row": rolling_row_edit_distance,
}


def get_variant(name: str) -> DistanceFn:
    try:
        return _VARIANTS[name]
    except KeyError as exc:
        raise ValueError(f"Unknown variant '{name}'") from exc


def register_variant(name: str, fn: DistanceFn) -> None:
    """Register an additional distance implementation under *name*."""

    if not name:
        raise ValueError("Variant name must be non-empty")
    _VARIANTS[name] = fn


def available_variants() -> Dict[str, DistanceFn]:
    """Return the currently registered variant mapping."""

    return dict(_VARIANTS)


__all__ = [
    "build_table",
    "full_table_edit_distance",
    "iter_rolling_rows",
    "rolling_row_edit_distance",
    "theoretical_cells",
    "get_variant",
    "register_variant",
    "available_variants",
]

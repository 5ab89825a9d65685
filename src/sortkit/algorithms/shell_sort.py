"""
Shell sort with Knuth's increment sequence (1, 4, 13, 40, 121, ...).

For each gap h, from the largest usable one down to 1, every element of
[lo + h, hi] is walked backward in steps of h while the element h positions
earlier is greater. The final h = 1 pass is a plain insertion sort over an
input that earlier passes have made nearly sorted.

Both natural ordering and an explicit ordering run the full gapped procedure.

Public API (stable):
    sort(a, lo=None, hi=None, *, ordering=None, stats=None) -> None
    is_sorted(a, ordering=None) -> bool
    is_h_sorted(a, h, ordering=None) -> bool
    h_sort(a, h, lo=None, hi=None, *, ordering=None, stats=None) -> None
    gap_sequence(n) -> list[int]
"""

from __future__ import annotations

from typing import List, MutableSequence, Optional

from sortkit.ordering import (
    Ordering,
    SortStats,
    T,
    exchange,
    is_h_sorted,
    is_sorted,
    less,
    resolve_range,
)

__all__ = ["sort", "h_sort", "is_sorted", "is_h_sorted", "gap_sequence"]


def gap_sequence(n: int) -> List[int]:
    """
    Return the gaps used for a subrange of length `n`, largest first.

    The starting gap is the largest Knuth increment h with h grown from 1 by
    h = 3h + 1 while h < n // 3. The list always ends with 1.

    >>> gap_sequence(10)
    [4, 1]
    >>> gap_sequence(100)
    [40, 13, 4, 1]
    """
    if n < 0:
        raise ValueError("n must be nonnegative")
    h = 1
    while h < n // 3:
        h = 3 * h + 1

    gaps: List[int] = []
    while h > 0:
        gaps.append(h)
        h //= 3
    return gaps


def sort(
    a: MutableSequence[T],
    lo: Optional[int] = None,
    hi: Optional[int] = None,
    *,
    ordering: Optional[Ordering] = None,
    stats: Optional[SortStats] = None,
) -> None:
    """Sort `a[lo..hi]` (inclusive) in place with Shell sort.

    Same parameters and errors as `selection_sort.sort`.
    """
    bounds = resolve_range(a, lo, hi)
    if bounds is None:
        return
    lo, hi = bounds

    for h in gap_sequence(hi - lo + 1):
        _h_pass(a, h, lo, hi, ordering, stats)


def h_sort(
    a: MutableSequence[T],
    h: int,
    lo: Optional[int] = None,
    hi: Optional[int] = None,
    *,
    ordering: Optional[Ordering] = None,
    stats: Optional[SortStats] = None,
) -> None:
    """
    Run a single gapped insertion pass with gap `h` over `a[lo..hi]`.

    Afterwards the subrange is h-sorted, and it stays sorted at every gap it
    was already sorted at.
    """
    if h < 1:
        raise ValueError(f"h must be a positive integer; got {h!r}")
    bounds = resolve_range(a, lo, hi)
    if bounds is None:
        return
    _h_pass(a, h, bounds[0], bounds[1], ordering, stats)


def _h_pass(
    a: MutableSequence[T],
    h: int,
    lo: int,
    hi: int,
    ordering: Optional[Ordering],
    stats: Optional[SortStats],
) -> None:
    for i in range(lo + h, hi + 1):
        j = i
        while j >= lo + h and less(a[j], a[j - h], ordering, stats=stats):
            exchange(a, j, j - h, stats=stats)
            j -= h

"""
Selection sort.

For each position i in [lo, hi - 1], find the leftmost minimum of [i, hi] and
exchange it into position i.

Properties:
- In place, O(1) auxiliary space.
- Non-adaptive: (n choose 2) comparisons whatever the input order.
- Exactly hi - lo exchanges (self-exchanges included).
- Not stable.
"""

from __future__ import annotations

from typing import MutableSequence, Optional

from sortkit.ordering import Ordering, SortStats, T, exchange, is_sorted, less, resolve_range

__all__ = ["sort", "is_sorted"]


def sort(
    a: MutableSequence[T],
    lo: Optional[int] = None,
    hi: Optional[int] = None,
    *,
    ordering: Optional[Ordering] = None,
    stats: Optional[SortStats] = None,
) -> None:
    """
    Sort `a[lo..hi]` (inclusive) in place with selection sort.

    Parameters
    ----------
    a : mutable sequence
        Sequence to sort. Elements outside [lo, hi] are left untouched.
    lo, hi : int, optional
        Inclusive bounds; default to the whole sequence.
    ordering : callable, optional
        Three-way comparator; natural ordering if omitted.
    stats : SortStats, optional
        Accumulates comparison and exchange counts.

    Raises
    ------
    InvalidRangeError
        If the bounds do not lie within the sequence.
    UndefinedOrderingError, IncomparableElementsError
        If natural ordering cannot relate two elements.
    """
    bounds = resolve_range(a, lo, hi)
    if bounds is None:
        return
    lo, hi = bounds

    for i in range(lo, hi):
        k = i
        for j in range(i + 1, hi + 1):
            # strict less keeps the leftmost minimum
            if less(a[j], a[k], ordering, stats=stats):
                k = j
        exchange(a, i, k, stats=stats)

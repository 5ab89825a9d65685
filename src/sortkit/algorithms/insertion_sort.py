"""
Insertion sort.

Each element of [lo + 1, hi] is walked backward by adjacent exchanges until
its left neighbour is not greater than it, growing a sorted prefix.

Properties:
- In place, O(1) auxiliary space.
- Adaptive: sorted input costs n - 1 comparisons and no exchanges;
  reversed input costs Theta(n^2).
- Stable: an element never moves past an equal one.
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
    """Sort `a[lo..hi]` (inclusive) in place with insertion sort.

    Same parameters and errors as `selection_sort.sort`.
    """
    bounds = resolve_range(a, lo, hi)
    if bounds is None:
        return
    lo, hi = bounds

    for i in range(lo + 1, hi + 1):
        j = i
        while j > lo and less(a[j], a[j - 1], ordering, stats=stats):
            exchange(a, j, j - 1, stats=stats)
            j -= 1

"""
Oracle for sorting correctness.

Python's built-in `sorted()` is the ground truth:
- Correct total order for any naturally ordered elements
- Accepts a three-way ordering through `functools.cmp_to_key`
- Stable, so it also fixes the expected order of ties for stable sorts

Public API (stable):
    oracle_sort(a, ordering=None) -> list
    equals_oracle(a, out, ordering=None) -> bool

Conventions:
- The oracle never mutates its input and always returns a **new** list.
- Unstable sorts only match the oracle when ties are indistinguishable
  (e.g. plain integers); compare keys otherwise.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, List, Optional, Sequence

from sortkit.ordering import Ordering

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]


def oracle_sort(a: Sequence[Any], ordering: Optional[Ordering] = None) -> List[Any]:
    """
    Return the ground-truth sorted copy of `a`.

    Parameters
    ----------
    a : sequence
        Input elements. Not mutated.
    ordering : callable, optional
        Three-way comparator; natural ordering if omitted.
    """
    if ordering is None:
        return sorted(a)
    return sorted(a, key=cmp_to_key(ordering))


def equals_oracle(
    a: Sequence[Any], out: Sequence[Any], ordering: Optional[Ordering] = None
) -> bool:
    """True iff `out` is element-wise equal to `oracle_sort(a, ordering)`."""
    return list(out) == oracle_sort(a, ordering)

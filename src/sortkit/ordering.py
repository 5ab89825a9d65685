"""
Ordering primitives shared by every sorting routine.

Public API (stable):
    less(a, b, ordering=None, *, stats=None) -> bool
    exchange(seq, i, j, *, stats=None) -> None
    is_sorted(seq, ordering=None) -> bool
    is_h_sorted(seq, h, ordering=None) -> bool
    resolve_range(seq, lo, hi) -> tuple[int, int] | None
    natural_order(a, b) -> int
    reversed_order(ordering=None) -> Ordering
    SortStats

Conventions:
- An *ordering* is a three-way comparator `cmp(a, b) -> int` (negative when
  `a` comes first, zero when tied, positive otherwise), the same contract as
  `functools.cmp_to_key`. When no ordering is given, the elements' natural
  ordering (`<`) is used. The two are never mixed within one sort call.
- A *sequence* is anything with `len`, integer `__getitem__` and
  `__setitem__`: lists, `array.array`, 1-D NumPy arrays.
- Bounds `lo`/`hi` are inclusive.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Protocol, Tuple, TypeVar

from .errors import IncomparableElementsError, InvalidRangeError, UndefinedOrderingError

__all__ = [
    "Comparable",
    "T",
    "Ordering",
    "SortStats",
    "less",
    "exchange",
    "is_sorted",
    "is_h_sorted",
    "resolve_range",
    "natural_order",
    "reversed_order",
]


class Comparable(Protocol):
    def __lt__(self, other: Any) -> bool: ...


# Element type of a sequence being sorted.
T = TypeVar("T", bound=Comparable)
Ordering = Callable[[Any, Any], int]


@dataclass
class SortStats:
    """Operation counters filled in by a sort call when passed as `stats=`."""

    comparisons: int = 0
    exchanges: int = 0

    def reset(self) -> None:
        self.comparisons = 0
        self.exchanges = 0

    def as_dict(self) -> Dict[str, int]:
        return {"comparisons": self.comparisons, "exchanges": self.exchanges}


def less(
    a: Any,
    b: Any,
    ordering: Optional[Ordering] = None,
    *,
    stats: Optional[SortStats] = None,
) -> bool:
    """
    Return True iff `a` strictly precedes `b`.

    Parameters
    ----------
    a, b : Any
        Elements to compare.
    ordering : callable, optional
        Three-way comparator. If omitted, natural ordering (`a < b`) is used.
    stats : SortStats, optional
        Incremented by one comparison.

    Raises
    ------
    UndefinedOrderingError
        Natural ordering and either element is None.
    IncomparableElementsError
        Natural ordering and `a < b` raised TypeError.
    Anything raised by `ordering` propagates unchanged.
    """
    if stats is not None:
        stats.comparisons += 1
    if ordering is not None:
        return ordering(a, b) < 0
    if a is None or b is None:
        raise UndefinedOrderingError(a, b)
    try:
        return a < b
    except TypeError as e:
        raise IncomparableElementsError(a, b) from e


def exchange(seq: Any, i: int, j: int, *, stats: Optional[SortStats] = None) -> None:
    """Swap the elements at positions `i` and `j`."""
    if stats is not None:
        stats.exchanges += 1
    seq[i], seq[j] = seq[j], seq[i]


def is_sorted(seq: Any, ordering: Optional[Ordering] = None) -> bool:
    """Return True iff no element precedes its left neighbour (full sequence)."""
    return is_h_sorted(seq, 1, ordering)


def is_h_sorted(seq: Any, h: int, ordering: Optional[Ordering] = None) -> bool:
    """
    Return True iff every element is not less than the element `h` positions
    earlier, i.e. each of the `h` interleaved subsequences is sorted.
    """
    if h < 1:
        raise ValueError(f"h must be a positive integer; got {h!r}")
    for i in range(h, len(seq)):
        if less(seq[i], seq[i - h], ordering):
            return False
    return True


def resolve_range(
    seq: Any, lo: Optional[int] = None, hi: Optional[int] = None
) -> Optional[Tuple[int, int]]:
    """
    Validate inclusive bounds against `seq` and fill in the defaults.

    Returns None when the range is empty, i.e. `hi == lo - 1` with
    `0 <= lo <= len(seq)`. This covers an empty sequence with default bounds
    and an explicit `sort(a, k, k - 1)`. Otherwise returns `(lo, hi)` with
    `0 <= lo <= hi <= len(seq) - 1`.

    Raises
    ------
    InvalidRangeError
        If a bound is not an integer or falls outside the sequence, or
        lo > hi + 1.
    """
    n = len(seq)
    lo_i = 0 if lo is None else _as_index("lo", lo)
    hi_i = n - 1 if hi is None else _as_index("hi", hi)

    if hi_i == lo_i - 1 and 0 <= lo_i <= n:
        return None

    if not (0 <= lo_i < n):
        raise InvalidRangeError(f"lo out of range: {lo_i} (sequence length {n})")
    if not (0 <= hi_i < n):
        raise InvalidRangeError(f"hi out of range: {hi_i} (sequence length {n})")
    if lo_i > hi_i:
        raise InvalidRangeError(f"invalid range: lo > hi ({lo_i} > {hi_i})")
    return lo_i, hi_i


def natural_order(a: T, b: T) -> int:
    """Three-way comparator equivalent to natural ordering."""
    if less(a, b):
        return -1
    if less(b, a):
        return 1
    return 0


def reversed_order(ordering: Optional[Ordering] = None) -> Ordering:
    """Return a comparator that inverts `ordering` (natural ordering if omitted)."""
    base = natural_order if ordering is None else ordering

    def _reversed(a: Any, b: Any) -> int:
        return base(b, a)

    return _reversed


# ------------------------- helpers ------------------------- #


def _as_index(name: str, value: Any) -> int:
    # bool is an int subclass but never a meaningful bound
    if isinstance(value, bool):
        raise InvalidRangeError(f"{name} must be an integer; got {value!r}")
    try:
        return operator.index(value)
    except TypeError as e:
        raise InvalidRangeError(f"{name} must be an integer; got {value!r}") from e

"""
sortkit: in-place comparison sorts over mutable sequences.

Re-exports so callers can write:
    from sortkit import shell_sort, SortStats
    shell_sort(a)                         # whole sequence, natural ordering
    shell_sort(a, 2, 7)                   # inclusive subrange
    shell_sort(a, ordering=my_cmp)        # three-way comparator
"""

from .algorithms.insertion_sort import sort as insertion_sort
from .algorithms.selection_sort import sort as selection_sort
from .algorithms.shell_sort import gap_sequence
from .algorithms.shell_sort import sort as shell_sort
from .errors import (
    IncomparableElementsError,
    InvalidRangeError,
    SortError,
    UndefinedOrderingError,
)
from .ordering import (
    SortStats,
    exchange,
    is_h_sorted,
    is_sorted,
    less,
    natural_order,
    reversed_order,
)

__version__ = "0.1.0"

__all__ = [
    "selection_sort",
    "insertion_sort",
    "shell_sort",
    "gap_sequence",
    "SortStats",
    "less",
    "exchange",
    "is_sorted",
    "is_h_sorted",
    "natural_order",
    "reversed_order",
    "SortError",
    "UndefinedOrderingError",
    "IncomparableElementsError",
    "InvalidRangeError",
]

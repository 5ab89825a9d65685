"""
Sorting algorithms.

Each module exposes the same entry point so callers (and the benchmark
runner, which resolves `sortkit.algorithms.<name>`) can swap them freely:

    sort(a, lo=None, hi=None, *, ordering=None, stats=None) -> None
    is_sorted(a, ordering=None) -> bool

`shell_sort` additionally exposes `h_sort`, `is_h_sorted` and `gap_sequence`.
"""

from . import insertion_sort, selection_sort, shell_sort

ALGORITHMS = {
    "selection_sort": selection_sort.sort,
    "insertion_sort": insertion_sort.sort,
    "shell_sort": shell_sort.sort,
}

__all__ = ["ALGORITHMS", "selection_sort", "insertion_sort", "shell_sort"]

"""
Property helpers for validating sorting results.

These are independent of the algorithms under test: they use `sorted`,
`Counter` and plain comparisons (or the given ordering) rather than
`sortkit.ordering`, so a bug in the shared primitives cannot hide itself.

Public API (stable):
    is_nondecreasing(xs, ordering=None) -> bool
    first_nondecreasing_violation_index(xs, ordering=None) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    assert_untouched_outside(before, after, lo, hi) -> None
    is_stable(before, after, ordering=None) -> bool

Notes
-----
- Permutation checks need hashable elements (they count with `Counter`).
- Stability cannot be inferred from values alone when equal keys are
  indistinguishable. `is_stable` expects (key, tag) pairs, as produced by
  `sortkit.datasets.make_tagged_dataset`, and checks that tags of equal keys
  keep their original relative order.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Any, Dict, Hashable, List, Optional, Sequence, Tuple

from sortkit.ordering import Ordering

__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_untouched_outside",
    "is_stable",
]


def is_nondecreasing(xs: Sequence[Any], ordering: Optional[Ordering] = None) -> bool:
    """Return True iff no xs[i+1] strictly precedes xs[i]."""
    return first_nondecreasing_violation_index(xs, ordering) is None


def first_nondecreasing_violation_index(
    xs: Sequence[Any], ordering: Optional[Ordering] = None
) -> int | None:
    """
    Return the first index i where xs[i+1] strictly precedes xs[i], or None.

    Useful for precise error messages:
        i = first_nondecreasing_violation_index(out)
        assert i is None, f"not nondecreasing at i={i}: {out[i]} > {out[i+1]}"
    """
    for i in range(len(xs) - 1):
        if ordering is None:
            out_of_order = xs[i + 1] < xs[i]
        else:
            out_of_order = ordering(xs[i + 1], xs[i]) < 0
        if out_of_order:
            return i
    return None


def is_permutation(a: Sequence[Hashable], b: Sequence[Hashable]) -> bool:
    """Return True iff `a` and `b` contain exactly the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(
    a: Sequence[Hashable], b: Sequence[Hashable]
) -> Dict[Hashable, int]:
    """
    Return a dict of value -> count difference (count_a - count_b).

    Empty dict means `a` and `b` have identical multiplicities.
    Positive values indicate extra occurrences in `a`, negative in `b`.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}


def assert_untouched_outside(
    before: Sequence[Any], after: Sequence[Any], lo: int, hi: int
) -> None:
    """
    Assert that a subrange sort of [lo, hi] left every other position alone.

    Raises AssertionError naming the first changed position.
    """
    if len(before) != len(after):
        raise AssertionError(
            f"Sequence length changed from {len(before)} to {len(after)}"
        )
    for i, (x, y) in enumerate(zip(before, after)):
        if lo <= i <= hi:
            continue
        if x != y:
            raise AssertionError(
                f"Position {i} outside [{lo}, {hi}] changed: before={x!r}, after={y!r}"
            )


def is_stable(
    before: Sequence[Tuple[Any, Any]],
    after: Sequence[Tuple[Any, Any]],
    ordering: Optional[Ordering] = None,
) -> bool:
    """
    Return True iff (key, tag) pairs with equal keys appear in `after` in the
    same relative order as in `before`.

    Keys are grouped by equality, or by `ordering(k1, k2) == 0` when an
    ordering over keys is given.
    """
    return _tag_runs(before, ordering) == _tag_runs(after, ordering)


# ------------------------- helpers ------------------------- #


def _tag_runs(
    pairs: Sequence[Tuple[Any, Any]], ordering: Optional[Ordering]
) -> List[List[Any]]:
    if ordering is None:
        groups: Dict[Any, List[Any]] = defaultdict(list)
        for key, tag in pairs:
            groups[key].append(tag)
        return sorted(groups.values(), key=lambda tags: tags[0])

    # Unhashable or ordering-defined equality: quadratic grouping is fine for tests.
    reps: List[Any] = []
    runs: List[List[Any]] = []
    for key, tag in pairs:
        for idx, rep in enumerate(reps):
            if ordering(key, rep) == 0:
                runs[idx].append(tag)
                break
        else:
            reps.append(key)
            runs.append([tag])
    return sorted(runs, key=lambda tags: tags[0])

"""
Correctness tests for every sort against the oracle (Python's built-in sorted).

What we check, per algorithm:
- Output exactly matches the oracle
- Nondecreasing order and permutation preservation (diagnostics)
- Subrange sorts leave everything outside [lo, hi] untouched
- Sorting is idempotent
- An explicit ordering gives the same result as natural ordering
- Any mutable sequence works (list, array.array, NumPy array)
"""

from __future__ import annotations

import array
from typing import Any, Callable, List

import numpy as np
import pytest
from hypothesis import given, settings, strategies as st

from sortkit.algorithms import ALGORITHMS
from sortkit.ordering import is_sorted, natural_order, reversed_order
from sortkit.validate import (
    assert_untouched_outside,
    first_nondecreasing_violation_index,
    is_permutation,
    oracle_sort,
)

ALGO_NAMES = sorted(ALGORITHMS)


def ascending(a: int, b: int) -> int:
    return (a > b) - (a < b)


# ------------------------- helpers ------------------------- #

def _check_one(sort: Callable[..., None], a: List[Any], **kwargs: Any) -> None:
    """Common assertion bundle for one full-sequence sort."""
    before = list(a)
    result = sort(a, **kwargs)

    assert result is None, "sort works in place and returns None"
    assert a == oracle_sort(before, kwargs.get("ordering")), "Output must match the oracle"

    i = first_nondecreasing_violation_index(a, kwargs.get("ordering"))
    assert i is None, f"not nondecreasing at i={i}: {a[i]} > {a[i + 1]}"
    assert is_permutation(before, a), "Output is not a permutation of input"


# ------------------------- unit tests (deterministic) ------------------------- #

@pytest.mark.parametrize("algo_name", ALGO_NAMES)
@pytest.mark.parametrize(
    "a",
    [
        [],
        [5],
        [2, 1],
        [1, 2, 3, 4],
        [4, 3, 2, 1],
        [7, 7, 7, 7],
        [1, 3, 2, 3, 1, 2],
        list(range(20)),
        list(range(20))[::-1],
        [0, -1, 5, -10, 3, 3, 2],
        [3.5, -0.25, 2, 1e9, 0],
        ["pear", "apple", "fig", "banana"],
    ],
)
def test_unit_cases(algo_name: str, a: List[Any]) -> None:
    _check_one(ALGORITHMS[algo_name], a)


@pytest.mark.parametrize("algo_name", ALGO_NAMES)
def test_concrete_scenario(algo_name: str) -> None:
    a = [5, 3, 8, 1, 9, 2]
    ALGORITHMS[algo_name](a)
    assert a == [1, 2, 3, 5, 8, 9]


@pytest.mark.parametrize("algo_name", ALGO_NAMES)
def test_subrange_scenario(algo_name: str) -> None:
    a = [9, 5, 3, 8, 1, 2]
    ALGORITHMS[algo_name](a, 1, 4)
    assert a == [9, 1, 3, 5, 8, 2]


@pytest.mark.parametrize("algo_name", ALGO_NAMES)
def test_subrange_with_ordering(algo_name: str) -> None:
    a = [9, 5, 3, 8, 1, 2]
    ALGORITHMS[algo_name](a, 1, 4, ordering=reversed_order())
    assert a == [9, 8, 5, 3, 1, 2]


@pytest.mark.parametrize("algo_name", ALGO_NAMES)
def test_single_element_range_is_noop(algo_name: str) -> None:
    a = [3, 2, 1]
    ALGORITHMS[algo_name](a, 1, 1)
    assert a == [3, 2, 1]


@pytest.mark.parametrize("algo_name", ALGO_NAMES)
def test_comparator_equivalence(algo_name: str) -> None:
    natural = [3, 1, 2]
    explicit = [3, 1, 2]
    ALGORITHMS[algo_name](natural)
    ALGORITHMS[algo_name](explicit, ordering=ascending)
    assert natural == explicit == [1, 2, 3]


@pytest.mark.parametrize("algo_name", ALGO_NAMES)
def test_descending_ordering(algo_name: str) -> None:
    a = [5, 3, 8, 1, 9, 2]
    ALGORITHMS[algo_name](a, ordering=reversed_order())
    assert a == [9, 8, 5, 3, 2, 1]
    assert is_sorted(a, reversed_order())
    assert not is_sorted(a)


@pytest.mark.parametrize("algo_name", ALGO_NAMES)
def test_ordering_on_records(algo_name: str) -> None:
    people = [("carol", 41), ("alice", 29), ("bob", 35)]
    ALGORITHMS[algo_name](people, ordering=lambda x, y: natural_order(x[1], y[1]))
    assert [name for name, _ in people] == ["alice", "bob", "carol"]


@pytest.mark.parametrize("algo_name", ALGO_NAMES)
def test_array_module_sequence(algo_name: str) -> None:
    a = array.array("i", [5, 3, 8, 1, 9, 2])
    ALGORITHMS[algo_name](a)
    assert a.tolist() == [1, 2, 3, 5, 8, 9]


@pytest.mark.parametrize("algo_name", ALGO_NAMES)
def test_numpy_sequence(algo_name: str) -> None:
    a = np.array([5, 3, 8, 1, 9, 2], dtype=np.int64)
    ALGORITHMS[algo_name](a, 1, 4)
    assert a.tolist() == [5, 1, 3, 8, 9, 2]


@pytest.mark.parametrize("algo_name", ALGO_NAMES)
def test_sequence_identity_preserved(algo_name: str) -> None:
    a = [2, 1]
    ref = a
    ALGORITHMS[algo_name](a)
    assert ref is a and a == [1, 2]


# ------------------------- property-based tests (randomized) ------------------------- #

small_ints = st.integers(min_value=-10_000, max_value=10_000)


@pytest.mark.parametrize("algo_name", ALGO_NAMES)
@settings(deadline=None, max_examples=60)
@given(st.lists(small_ints, min_size=0, max_size=120))
def test_property_random_small_range(algo_name: str, a: List[int]) -> None:
    _check_one(ALGORITHMS[algo_name], a)


@pytest.mark.parametrize("algo_name", ALGO_NAMES)
@settings(deadline=None, max_examples=60)
@given(st.lists(st.integers(min_value=0, max_value=7), min_size=0, max_size=150))
def test_property_many_duplicates(algo_name: str, a: List[int]) -> None:
    _check_one(ALGORITHMS[algo_name], a)


@pytest.mark.parametrize("algo_name", ALGO_NAMES)
@settings(deadline=None, max_examples=40)
@given(st.lists(small_ints, min_size=0, max_size=80))
def test_property_reversed_ordering(algo_name: str, a: List[int]) -> None:
    _check_one(ALGORITHMS[algo_name], a, ordering=reversed_order(ascending))


@pytest.mark.parametrize("algo_name", ALGO_NAMES)
@settings(deadline=None, max_examples=60)
@given(st.data())
def test_property_subrange(algo_name: str, data: st.DataObject) -> None:
    a = data.draw(st.lists(small_ints, min_size=1, max_size=80), label="a")
    lo = data.draw(st.integers(min_value=0, max_value=len(a) - 1), label="lo")
    hi = data.draw(st.integers(min_value=lo, max_value=len(a) - 1), label="hi")
    before = list(a)

    ALGORITHMS[algo_name](a, lo, hi)

    assert a[lo:hi + 1] == sorted(before[lo:hi + 1])
    assert_untouched_outside(before, a, lo, hi)


@pytest.mark.parametrize("algo_name", ALGO_NAMES)
@settings(deadline=None, max_examples=40)
@given(st.lists(small_ints, min_size=0, max_size=80))
def test_property_idempotent(algo_name: str, a: List[int]) -> None:
    sort = ALGORITHMS[algo_name]
    sort(a)
    once = list(a)
    sort(a)
    assert a == once

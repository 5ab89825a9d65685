"""
Tests for the dataset generators and the validation helpers.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Dict

import numpy as np
import pytest

from sortkit.datasets import SUPPORTED_DISTS, make_dataset, make_tagged_dataset
from sortkit.ordering import natural_order, reversed_order
from sortkit.validate import (
    ORACLE_NAME,
    assert_untouched_outside,
    equals_oracle,
    first_nondecreasing_violation_index,
    is_nondecreasing,
    is_permutation,
    is_stable,
    oracle_sort,
    permutation_counter_diff,
)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(12345)


# ------------------------- datasets ------------------------- #

def test_supported_dists() -> None:
    assert SUPPORTED_DISTS == {"random", "sorted", "nearly_sorted", "few_uniques", "reversed"}


def test_random_within_inclusive_range(rng: np.random.Generator) -> None:
    out = make_dataset(500, {"dist": "random", "params": {"range": [-3, 3]}}, rng)
    assert len(out) == 500
    assert all(isinstance(x, int) for x in out)
    assert set(out) == set(range(-3, 4))


def test_deterministic_dists(rng: np.random.Generator) -> None:
    assert make_dataset(5, {"dist": "sorted"}, rng) == [0, 1, 2, 3, 4]
    assert make_dataset(5, {"dist": "reversed", "params": {}}, rng) == [4, 3, 2, 1, 0]


def test_nearly_sorted_is_permutation(rng: np.random.Generator) -> None:
    out = make_dataset(100, {"dist": "nearly_sorted", "params": {"swap_frac": 0.1}}, rng)
    assert sorted(out) == list(range(100))
    assert make_dataset(10, {"dist": "nearly_sorted", "params": {"swap_frac": 0.0}}, rng) == list(range(10))


def test_few_uniques_bounded_distinct(rng: np.random.Generator) -> None:
    out = make_dataset(300, {"dist": "few_uniques", "params": {"k": 4, "range": [10, 1000]}}, rng)
    assert len(out) == 300
    assert 1 <= len(set(out)) <= 4
    assert all(10 <= x <= 1000 for x in out)


@pytest.mark.parametrize("dist", sorted(["random", "sorted", "nearly_sorted", "few_uniques", "reversed"]))
def test_empty_dataset(dist: str, rng: np.random.Generator) -> None:
    params: Dict[str, Any] = {"range": [0, 9], "k": 2}
    assert make_dataset(0, {"dist": dist, "params": params}, rng) == []


def test_same_seed_same_dataset() -> None:
    spec = {"dist": "random", "params": {"range": [0, 10**6]}}
    a = make_dataset(50, spec, np.random.default_rng(1))
    b = make_dataset(50, spec, np.random.default_rng(1))
    assert a == b


def test_tagged_dataset_tags_positions(rng: np.random.Generator) -> None:
    out = make_tagged_dataset(4, {"dist": "reversed"}, rng)
    assert out == [(3, 0), (2, 1), (1, 2), (0, 3)]


@pytest.mark.parametrize(
    "n, spec",
    [
        (-1, {"dist": "sorted"}),
        (1.5, {"dist": "sorted"}),
        (3, "sorted"),
        (3, {"dist": "bogus"}),
        (3, {"dist": "random"}),
        (3, {"dist": "random", "params": {"range": [5, 1]}}),
        (3, {"dist": "random", "params": {"range": [0, 1, 2]}}),
        (3, {"dist": "random", "params": {"range": ["a", 1]}}),
        (3, {"dist": "nearly_sorted", "params": {"swap_frac": 2.0}}),
        (3, {"dist": "nearly_sorted", "params": {"swap_frac": "lots"}}),
        (3, {"dist": "few_uniques", "params": {}}),
        (3, {"dist": "few_uniques", "params": {"k": 0}}),
        (0, {"dist": "few_uniques", "params": {"k": 0}}),
        (3, {"dist": "sorted", "params": [1]}),
    ],
)
def test_invalid_specs(n: Any, spec: Any, rng: np.random.Generator) -> None:
    with pytest.raises(ValueError):
        make_dataset(n, spec, rng)


# ------------------------- oracle ------------------------- #

def test_oracle_does_not_mutate() -> None:
    a = [3, 1, 2]
    assert oracle_sort(a) == [1, 2, 3]
    assert a == [3, 1, 2]
    assert ORACLE_NAME == "python_sorted_timsort"


def test_oracle_with_ordering() -> None:
    assert oracle_sort([3, 1, 2], reversed_order()) == [3, 2, 1]
    assert equals_oracle([3, 1, 2], [3, 2, 1], reversed_order())
    assert not equals_oracle([3, 1, 2], [1, 2, 3], reversed_order())
    assert equals_oracle([3, 1, 2], (1, 2, 3))


# ------------------------- properties ------------------------- #

def test_nondecreasing_helpers() -> None:
    assert is_nondecreasing([])
    assert is_nondecreasing([1, 1, 2])
    assert not is_nondecreasing([1, 3, 2])
    assert first_nondecreasing_violation_index([1, 3, 2, 1]) == 1
    assert first_nondecreasing_violation_index([1, 2]) is None
    assert is_nondecreasing([3, 2, 2], reversed_order())


def test_permutation_helpers() -> None:
    assert is_permutation([1, 2, 2], [2, 1, 2])
    assert not is_permutation([1, 2], [1, 2, 2])
    assert not is_permutation([1, 1, 2], [1, 2, 2])
    assert permutation_counter_diff([1, 1, 2], [1, 2, 3]) == {1: 1, 3: -1}
    assert permutation_counter_diff([5, 6], [6, 5]) == {}


def test_assert_untouched_outside() -> None:
    assert_untouched_outside([9, 5, 3, 2], [9, 3, 5, 2], 1, 2)
    with pytest.raises(AssertionError, match="Position 3"):
        assert_untouched_outside([9, 5, 3, 2], [9, 3, 5, 7], 1, 2)
    with pytest.raises(AssertionError, match="length"):
        assert_untouched_outside([1, 2], [1], 0, 0)


def test_is_stable() -> None:
    before = [(1, 0), (0, 1), (1, 2), (0, 3)]
    stable = sorted(before, key=lambda p: p[0])
    assert is_stable(before, stable)
    assert not is_stable(before, [(0, 3), (0, 1), (1, 0), (1, 2)])


def test_is_stable_with_ordering() -> None:
    def mod3(x: int, y: int) -> int:
        return natural_order(x % 3, y % 3)

    before = [(4, 0), (3, 1), (1, 2)]
    after = sorted(before, key=cmp_to_key(lambda p, q: mod3(p[0], q[0])))
    assert after == [(3, 1), (4, 0), (1, 2)]
    assert is_stable(before, after, mod3)
    assert not is_stable(before, [(3, 1), (1, 2), (4, 0)], mod3)

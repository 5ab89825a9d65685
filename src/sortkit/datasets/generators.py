"""
Input generators for exercising and benchmarking the sorts.

Currently implemented:
- dist == "random":
    Integers drawn uniformly from an inclusive range.

- dist == "sorted":
    Deterministic [0, 1, ..., n-1]; the best case for insertion sort.

- dist == "nearly_sorted":
    Start from [0, 1, ..., n-1] then perform ceil(swap_frac * n) random
    index swaps using the provided RNG.

- dist == "few_uniques":
    Choose up to k distinct integers (uniform over an inclusive range), then
    fill the array by sampling among them. Many ties, useful for stability.

- dist == "reversed":
    Deterministic [n-1, n-2, ..., 0]; the worst case for insertion sort.

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]
    make_tagged_dataset(n: int, spec: dict, rng) -> list[tuple[int, int]]

Conventions:
- Ranges in params["range"] are **inclusive** on both ends.
- Returns plain Python lists; the sorts operate on any mutable sequence but
  tests and benchmarks use lists so results compare with `==`.
- The caller supplies the RNG (seeded upstream) for reproducibility.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

import numpy as np

__all__ = ["SUPPORTED_DISTS", "make_dataset", "make_tagged_dataset"]

_DEFAULT_RANGE = (0, 4294967295)


def _random(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    lo, hi = _parse_range(params, required=True)
    # Generator.integers is half-open [low, high); +1 makes hi inclusive.
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n))


def _nearly_sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    swap_frac = _parse_swap_frac(params)
    arr = list(range(n))
    # ceil so a small nonzero fraction still swaps at least once
    num_swaps = int(np.ceil(swap_frac * n))
    if num_swaps <= 0:
        return arr
    idxs = rng.integers(0, n, size=(num_swaps, 2))
    for i, j in idxs.tolist():
        arr[i], arr[j] = arr[j], arr[i]
    return arr


def _few_uniques(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    k = _parse_k(params)
    lo, hi = _parse_range(params, required=False)
    if n == 0:
        return []
    span = hi - lo + 1
    actual_k = int(min(k, n, span))

    # Draw distinct values through `rng` (not `random`) to keep runs reproducible.
    chosen: List[int] = []
    seen = set()
    while len(chosen) < actual_k:
        need = actual_k - len(chosen)
        for v in rng.integers(lo, hi + 1, size=need * 2).tolist():
            if v not in seen:
                seen.add(v)
                chosen.append(v)
                if len(chosen) == actual_k:
                    break

    return [chosen[t] for t in rng.integers(0, actual_k, size=n).tolist()]


def _reversed(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n - 1, -1, -1))


_GENERATORS: Dict[str, Callable[[int, Dict[str, Any], np.random.Generator], List[int]]] = {
    "random": _random,
    "sorted": _sorted,
    "nearly_sorted": _nearly_sorted,
    "few_uniques": _few_uniques,
    "reversed": _reversed,
}

SUPPORTED_DISTS = frozenset(_GENERATORS)


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate an integer dataset according to `spec`, using the provided RNG.

    Parameters
    ----------
    n : int
        Number of elements to generate. Must be >= 0.
    spec : dict
        Distribution specification:

            {"dist": "random",        "params": {"range": [min_int, max_int]}}
            {"dist": "sorted"}
            {"dist": "nearly_sorted", "params": {"swap_frac": 0.05}}
            {"dist": "few_uniques",   "params": {"k": 10, "range": [0, 99]}}
            {"dist": "reversed"}

        For "few_uniques" the range is optional (default [0, 4294967295]).
    rng : numpy.random.Generator
        Random number generator owned by the caller. Unused for the
        deterministic "sorted" and "reversed" distributions.

    Returns
    -------
    list[int]

    Raises
    ------
    ValueError
        If `n` or `spec` is invalid or the distribution is unsupported.
    """
    _validate_n(n)
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )

    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")

    # Generators parse their params before any n == 0 shortcut,
    # so a bad spec fails on every size.
    return _GENERATORS[dist](n, params, rng)


def make_tagged_dataset(
    n: int, spec: Dict[str, Any], rng: np.random.Generator
) -> List[Tuple[int, int]]:
    """
    Like `make_dataset`, but pair every key with its original position:
    `[(key, 0), (key, 1), ...]`. Sort with an ordering on the key only and
    check stability with `sortkit.validate.is_stable`.
    """
    return [(key, tag) for tag, key in enumerate(make_dataset(n, spec, rng))]


# ------------------------- helpers ------------------------- #


def _validate_n(n: int) -> None:
    if not _is_int_like(n) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _parse_range(params: Dict[str, Any], *, required: bool) -> Tuple[int, int]:
    """
    Parse the inclusive integer range `params["range"] == [min_int, max_int]`.

    If absent and not `required`, return the default full 32-bit range.
    """
    if "range" not in params:
        if required:
            raise ValueError("params.range must be provided as [min, max] (inclusive)")
        return _DEFAULT_RANGE

    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError("params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError("params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    """Parse swap_frac in [0.0, 1.0]; default 0.05."""
    val = params.get("swap_frac", 0.05)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}"
        ) from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}")
    return x


def _parse_k(params: Dict[str, Any]) -> int:
    if "k" not in params:
        raise ValueError("few_uniques.params.k must be provided (int >= 1)")
    k = params["k"]
    if not isinstance(k, int) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    return k


def _is_int_like(x: Any) -> bool:
    # Accept Python ints and NumPy integer types
    return isinstance(x, (int, np.integer))

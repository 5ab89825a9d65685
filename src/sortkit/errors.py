"""
Error types raised by the sorting routines.

Every error derives from `SortError` and from the builtin exception a caller
would naturally expect (`TypeError` for comparison failures, `ValueError` for
bad bounds), so existing `except TypeError:` handlers keep working.

Errors raised by a caller-supplied ordering function are never wrapped; they
propagate exactly as the function raised them.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "SortError",
    "UndefinedOrderingError",
    "IncomparableElementsError",
    "InvalidRangeError",
]


class SortError(Exception):
    """Base class for errors raised by sortkit."""


class UndefinedOrderingError(SortError, TypeError):
    """Natural ordering was asked to compare a missing (None) element."""

    def __init__(self, a: Any, b: Any) -> None:
        super().__init__(f"natural ordering is undefined for None: {a!r} vs {b!r}")
        self.a = a
        self.b = b


class IncomparableElementsError(SortError, TypeError):
    """Natural ordering cannot relate two elements of mismatched types."""

    def __init__(self, a: Any, b: Any) -> None:
        super().__init__(
            f"cannot compare {type(a).__name__} {a!r} with {type(b).__name__} {b!r}"
        )
        self.a = a
        self.b = b


class InvalidRangeError(SortError, ValueError):
    """The [lo, hi] bounds do not describe a subrange of the sequence."""

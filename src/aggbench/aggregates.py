"""Aggregation operations over integer sequences.

Thin wrappers around the ``min``/``max``/``sum`` builtins which give every
operation a defined failure mode for empty input.
"""

from collections.abc import Sequence


class EmptySequenceError(ValueError):
    """Raised when an aggregation needs at least one element."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation}() arg is an empty sequence")
        self.operation = operation


def integer_range(start: int, count: int) -> tuple[int, ...]:
    """Return ``count`` consecutive integers beginning at ``start``."""
    if count < 0:
        raise ValueError(f"Invalid count; expected >=0 but got {count}")
    return tuple(range(start, start + count))


def minimum(items: Sequence[int]) -> int:
    """Return the smallest element of ``items``."""
    if not items:
        raise EmptySequenceError("min")
    return min(items)


def maximum(items: Sequence[int]) -> int:
    """Return the largest element of ``items``."""
    if not items:
        raise EmptySequenceError("max")
    return max(items)


def average(items: Sequence[int]) -> float:
    """Return the arithmetic mean of ``items`` as a float.

    The mean is computed as ``sum(items) / len(items)`` using true division, so
    it always equals the float quotient of ``total`` by the element count.
    """
    if not items:
        raise EmptySequenceError("average")
    return sum(items) / len(items)


def total(items: Sequence[int]) -> int:
    """Return the sum of ``items``; zero for an empty sequence."""
    return sum(items)

"""Higher-order helpers: a left fold over integers and a sampled integral."""

from __future__ import annotations

from typing import Callable, Iterable

_SAMPLES = 101


def add(a: int, b: int) -> int:
    return a + b


def sub(a: int, b: int) -> int:
    return a - b


def mul(a: int, b: int) -> int:
    return a * b


def reduce_ints(fn: Callable[[int, int], int], values: Iterable[int]) -> int:
    """Fold ``values`` from the left with ``fn``, starting from the first value."""
    iterator = iter(values)
    try:
        result = next(iterator)
    except StopIteration:
        raise ValueError("cannot reduce an empty sequence") from None
    for value in iterator:
        result = fn(result, value)
    return result


def compute_sum(func: Callable[[float], float], lo: float, hi: float) -> float:
    """Approximate the integral of ``func`` over [lo, hi] from 101 equally spaced samples."""
    span = hi - lo
    total = sum(func(i / 100.0 * span + lo) for i in range(_SAMPLES))
    return total / float(_SAMPLES) * span
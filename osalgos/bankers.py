"""Banker's algorithm for deadlock avoidance."""

from __future__ import annotations

import argparse
from typing import Sequence


class UnsafeStateError(Exception):
    """Raised when no safe sequence exists for the given state."""

    def __init__(self, completed: Sequence[int]) -> None:
        super().__init__("The following system is not safe")
        self.completed = tuple(completed)


def safe_sequence(
    allocation: Sequence[Sequence[int]],
    maximum: Sequence[Sequence[int]],
    available: Sequence[int],
) -> list[int]:
    """Return process indices in an order that lets every process finish.

    Each pass over the processes runs, in index order, every unfinished
    process whose remaining need fits the available resources.
    """
    alloc = [list(row) for row in allocation]
    maxima = [list(row) for row in maximum]
    free = list(available)
    if len(alloc) != len(maxima):
        raise ValueError("allocation and maximum must list the same processes")
    if any(len(row) != len(free) for row in (*alloc, *maxima)):
        raise ValueError("every row must have one entry per resource type")
    need = [[m - a for m, a in zip(mrow, arow)] for mrow, arow in zip(maxima, alloc)]
    if any(value < 0 for row in need for value in row):
        raise ValueError("allocation may not exceed the declared maximum")

    finished = [False] * len(alloc)
    order: list[int] = []
    for _ in range(len(alloc)):
        for process, done in enumerate(finished):
            if done or any(n > f for n, f in zip(need[process], free)):
                continue
            order.append(process)
            free = [f + a for f, a in zip(free, alloc[process])]
            finished[process] = True
    if not all(finished):
        raise UnsafeStateError(order)
    return order


_ALLOCATION = ((0, 1, 0), (2, 0, 0), (3, 0, 2), (2, 1, 1), (0, 0, 2))
_MAXIMUM = ((7, 5, 3), (3, 2, 2), (9, 0, 2), (2, 2, 2), (4, 3, 3))
_AVAILABLE = (3, 3, 2)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="osalgos-bankers", description="Find a safe sequence with the banker's algorithm."
    )
    parser.add_argument("--available", type=int, nargs=len(_AVAILABLE),
                        default=list(_AVAILABLE))
    args = parser.parse_args(argv)
    try:
        order = safe_sequence(_ALLOCATION, _MAXIMUM, args.available)
    except UnsafeStateError as exc:
        print(exc)
        return 1
    print("Following is the SAFE Sequence")
    print(" " + " -> ".join(f"P{p}" for p in order))
    return 0
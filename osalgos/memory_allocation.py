"""Contiguous memory allocation: first, best and worst fit, and a free list."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence

DEFAULT_BLOCKS = (100, 500, 200, 300, 600)
DEFAULT_PROCESSES = (212, 417, 112, 426)


class AllocationError(Exception):
    """Raised when no free block is large enough for a request."""

    def __init__(self, size: int) -> None:
        super().__init__(f"Block of size {size} cannot be allocated")
        self.size = size


@dataclass(frozen=True)
class Allocation:
    """A request and the index of the block it was placed in, if any."""

    tag: int
    size: int
    block: Optional[int]

    @property
    def allocated(self) -> bool:
        return self.block is not None


def _sizes(values: Iterable[int], what: str) -> list[int]:
    sizes = list(values)
    if any(size < 0 for size in sizes):
        raise ValueError(f"{what} sizes must be non-negative")
    return sizes


_Chooser = Callable[[list[tuple[int, int]]], int]


def _fit(blocks: Iterable[int], processes: Iterable[int], choose: _Chooser) -> list[Allocation]:
    free = _sizes(blocks, "block")
    requests = _sizes(processes, "process")
    result = []
    for tag, size in enumerate(requests, start=1):
        candidates = [(index, room) for index, room in enumerate(free) if room >= size]
        block = choose(candidates) if candidates else None
        if block is not None:
            free[block] -= size
        result.append(Allocation(tag, size, block))
    return result


def first_fit(blocks: Iterable[int], processes: Iterable[int]) -> list[Allocation]:
    """Place each process in the first block with enough room.

    Processes are tagged from 1; blocks are indexed from 0.
    """
    return _fit(blocks, processes, lambda candidates: candidates[0][0])


def best_fit(blocks: Iterable[int], processes: Iterable[int]) -> list[Allocation]:
    """Place each process in the smallest block with enough room."""
    return _fit(blocks, processes, lambda c: min(c, key=lambda item: item[1])[0])


def worst_fit(blocks: Iterable[int], processes: Iterable[int]) -> list[Allocation]:
    """Place each process in the largest block with enough room."""
    return _fit(blocks, processes, lambda c: max(c, key=lambda item: item[1])[0])


class FreeListAllocator:
    """First-fit allocator over a list of free blocks that allows release.

    Successful allocations get tags 0, 1, 2, ... in order; a failed
    request does not use up a tag.
    """

    def __init__(self, block_sizes: Iterable[int]) -> None:
        self._free = _sizes(block_sizes, "block")
        self._allocations: list[Allocation] = []
        self._next_tag = 0

    @property
    def free_blocks(self) -> tuple[int, ...]:
        """Remaining room in each block, indexed by block tag."""
        return tuple(self._free)

    @property
    def allocations(self) -> tuple[Allocation, ...]:
        """Live allocations in the order they were made."""
        return tuple(self._allocations)

    def allocate(self, size: int) -> Allocation:
        if size < 0:
            raise ValueError("size must be non-negative")
        block = next(
            (index for index, room in enumerate(self._free) if size <= room), None
        )
        if block is None:
            raise AllocationError(size)
        self._free[block] -= size
        allocation = Allocation(self._next_tag, size, block)
        self._allocations.append(allocation)
        self._next_tag += 1
        return allocation

    def release(self, tag: int) -> Allocation:
        """Free the allocation with the given tag and return it."""
        for index, allocation in enumerate(self._allocations):
            if allocation.tag == tag:
                del self._allocations[index]
                self._free[allocation.block] += allocation.size
                return allocation
        raise KeyError(tag)


def _print_fit_table(allocations: Sequence[Allocation]) -> None:
    print("Process No.\tProcess Size\tBlock no.")
    for allocation in allocations:
        block = "Not allocated" if allocation.block is None else allocation.block + 1
        print(f"{allocation.tag}\t\t{allocation.size}\t\t{block}")


def _print_allocator(allocator: FreeListAllocator) -> None:
    print("Tag\tBlock ID\tSize")
    for allocation in allocator.allocations:
        print(f"{allocation.tag}\t{allocation.block}\t{allocation.size}")


def _run_free_list(blocks: Sequence[int], processes: Sequence[int]) -> None:
    allocator = FreeListAllocator(blocks)
    for size in processes:
        try:
            allocator.allocate(size)
        except AllocationError as exc:
            print(exc)
    _print_allocator(allocator)
    allocator.release(0)
    try:
        allocator.allocate(426)
    except AllocationError as exc:
        print(exc)
    print("After deleting block with tag id 0.")
    _print_allocator(allocator)


_FITS = {"first": first_fit, "best": best_fit, "worst": worst_fit}


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="osalgos-memory", description="Simulate contiguous memory allocation."
    )
    parser.add_argument("algorithm", choices=(*_FITS, "free-list"))
    parser.add_argument("--blocks", type=int, nargs="+")
    parser.add_argument("--processes", type=int, nargs="+")
    args = parser.parse_args(argv)

    try:
        if args.algorithm == "free-list":
            _run_free_list(args.blocks or [100, 500, 200],
                           args.processes or [417, 112, 426, 95])
        else:
            allocations = _FITS[args.algorithm](
                args.blocks or DEFAULT_BLOCKS, args.processes or DEFAULT_PROCESSES
            )
            _print_fit_table(allocations)
    except (ValueError, KeyError) as exc:
        parser.error(str(exc))
    return 0
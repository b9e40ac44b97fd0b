"""Page replacement: second chance, least recently used and optimal."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

Frames = tuple[Optional[int], ...]

DEFAULT_FRAMES = 3


@dataclass(frozen=True)
class ReplacementResult:
    """The frame contents after every reference and the number of faults."""

    pages: tuple[int, ...]
    snapshots: tuple[Frames, ...]
    faults: int

    @property
    def hits(self) -> int:
        return len(self.pages) - self.faults

    @property
    def frames(self) -> Frames:
        """Frame contents after the last reference."""
        return self.snapshots[-1] if self.snapshots else ()

    def steps(self) -> Iterator[tuple[int, Frames]]:
        """Yield each referenced page with the frame contents that follow it."""
        return zip(self.pages, self.snapshots)


def _check(pages: Iterable[int], frames: int) -> tuple[int, ...]:
    if frames < 1:
        raise ValueError("at least one frame is required")
    return tuple(pages)


def _second_chance_victim(bits: list[bool]) -> int:
    slot = 0
    while bits[slot]:
        bits[slot] = False
        slot = (slot + 1) % len(bits)
    return slot


def second_chance(pages: Iterable[int], frames: int = DEFAULT_FRAMES) -> ReplacementResult:
    """Second chance replacement.

    On every fault the search for a victim starts at the first frame,
    clearing set reference bits as it passes them. A page's bit is set
    when it is loaded; a hit leaves the bits untouched.
    """
    refs = _check(pages, frames)
    table: list[Optional[int]] = [None] * frames
    bits = [False] * frames
    snapshots: list[Frames] = []
    faults = 0
    for page in refs:
        if page not in table:
            victim = _second_chance_victim(bits)
            table[victim] = page
            bits[victim] = True
            faults += 1
        snapshots.append(tuple(table))
    return ReplacementResult(refs, tuple(snapshots), faults)


def lru(pages: Iterable[int], frames: int = DEFAULT_FRAMES) -> ReplacementResult:
    """Least recently used replacement; empty frames are filled first."""
    refs = _check(pages, frames)
    table: list[Optional[int]] = [None] * frames
    last_used = [0] * frames
    snapshots: list[Frames] = []
    faults = 0
    for clock, page in enumerate(refs, start=1):
        if page in table:
            last_used[table.index(page)] = clock
        else:
            if None in table:
                slot = table.index(None)
            else:
                slot = min(range(frames), key=last_used.__getitem__)
            table[slot] = page
            last_used[slot] = clock
            faults += 1
        snapshots.append(tuple(table))
    return ReplacementResult(refs, tuple(snapshots), faults)


def optimal(pages: Iterable[int], frames: int = DEFAULT_FRAMES) -> ReplacementResult:
    """Optimal replacement: evict the page whose next use is farthest away.

    A page that is never used again is evicted first; among several such
    pages, and among ties for the farthest use, the lowest frame wins.
    """
    refs = _check(pages, frames)
    table: list[Optional[int]] = [None] * frames
    snapshots: list[Frames] = []
    faults = 0
    for position, page in enumerate(refs):
        if page not in table:
            if None in table:
                slot = table.index(None)
            else:
                future = refs[position + 1:]
                next_use = [
                    future.index(resident) if resident in future else None
                    for resident in table
                ]
                slot = next(
                    (s for s, use in enumerate(next_use) if use is None), None
                )
                if slot is None:
                    slot = max(range(frames), key=next_use.__getitem__)
            table[slot] = page
            faults += 1
        snapshots.append(tuple(table))
    return ReplacementResult(refs, tuple(snapshots), faults)


_ALGORITHMS = {"second-chance": second_chance, "lru": lru, "optimal": optimal}


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="osalgos-pages", description="Simulate a page replacement algorithm."
    )
    parser.add_argument("algorithm", choices=tuple(_ALGORITHMS))
    parser.add_argument("pages", type=int, nargs="*",
                        help="page references; read from standard input when omitted")
    parser.add_argument("--frames", type=int, default=DEFAULT_FRAMES)
    args = parser.parse_args(argv)

    pages = args.pages
    if not pages:
        try:
            pages = [int(word) for word in sys.stdin.read().split()]
        except ValueError:
            parser.error("page references must be integers")
    try:
        result = _ALGORITHMS[args.algorithm](pages, args.frames)
    except ValueError as exc:
        parser.error(str(exc))

    if args.algorithm == "second-chance":
        for page, snapshot in result.steps():
            print(f"Reference: {page}")
            cells = "".join(f" {'-' if f is None else f}" for f in snapshot)
            print(f"Frames: {cells}")
        print(f"Total page faults: {result.faults}")
    else:
        for snapshot in result.snapshots:
            print("\t".join(str(-1 if f is None else f) for f in snapshot))
        print()
        print(f"Total Page Faults = {result.faults}")
    return 0
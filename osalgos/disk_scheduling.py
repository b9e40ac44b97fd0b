"""Disk scheduling: LOOK, C-LOOK, C-SCAN, SCAN and shortest seek time first."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from itertools import pairwise
from typing import Iterable, Iterator, Sequence

DEFAULT_REQUESTS = (176, 79, 34, 60, 92, 11, 41, 114)
DEFAULT_HEAD = 50
DEFAULT_DISK_SIZE = 200


@dataclass(frozen=True)
class SeekResult:
    """Order in which tracks are visited and the total head movement."""

    head: int
    sequence: tuple[int, ...]
    total: int
    requests: int

    @property
    def path(self) -> tuple[int, ...]:
        """The starting head position followed by every visited track."""
        return (self.head, *self.sequence)

    def moves(self) -> Iterator[tuple[int, int, int]]:
        """Yield each head movement as (from, to, distance)."""
        for start, end in pairwise(self.path):
            yield start, end, abs(end - start)

    @property
    def average(self) -> float:
        """Total seek divided by the number of requests."""
        return self.total / self.requests if self.requests else 0.0


def _travel(head: int, tracks: Iterable[int]) -> int:
    return sum(abs(end - start) for start, end in pairwise((head, *tracks)))


def _split(tracks: Sequence[int], head: int) -> tuple[list[int], list[int]]:
    left = sorted(t for t in tracks if t < head)
    right = sorted(t for t in tracks if t > head)
    return left, right


def look(requests: Iterable[int], head: int, direction: str = "right") -> SeekResult:
    """LOOK: sweep one way up to the last request, then reverse.

    Requests on the head's own track are not serviced.
    """
    if direction not in ("left", "right"):
        raise ValueError("direction must be 'left' or 'right'")
    tracks = list(requests)
    left, right = _split(tracks, head)
    descending = left[::-1]
    sequence = right + descending if direction == "right" else descending + right
    return SeekResult(head, tuple(sequence), _travel(head, sequence), len(tracks))


def c_look(requests: Iterable[int], head: int) -> SeekResult:
    """C-LOOK: sweep right, jump to the lowest request, sweep right again."""
    tracks = list(requests)
    left, right = _split(tracks, head)
    total = _travel(head, right)
    position = right[-1] if right else head
    if left:
        total += abs(position - left[0])
        total += _travel(left[0], left)
    sequence = tuple(right + left)
    return SeekResult(head, sequence, total, len(tracks))


def c_scan(
    requests: Iterable[int], head: int, disk_size: int = DEFAULT_DISK_SIZE
) -> SeekResult:
    """C-SCAN: sweep right to the last cylinder, return to 0, sweep right again.

    The return trip counts as ``disk_size - 1`` of head movement.
    """
    if disk_size <= 0:
        raise ValueError("disk size must be positive")
    tracks = list(requests)
    last = disk_size - 1
    if not 0 <= head <= last or any(not 0 <= t <= last for t in tracks):
        raise ValueError(f"tracks must lie between 0 and {last}")
    left = sorted([0, *(t for t in tracks if t < head)])
    right = sorted([last, *(t for t in tracks if t > head)])
    total = _travel(head, right) + last + _travel(0, left)
    return SeekResult(head, tuple(right + left), total, len(tracks))


def scan(requests: Iterable[int], head: int, max_range: int) -> SeekResult:
    """SCAN (elevator): sweep up to ``max_range``, then down through the rest.

    Requests at or below the head are serviced on the way down.
    """
    tracks = list(requests)
    if not 0 <= head <= max_range or any(not 0 <= t <= max_range for t in tracks):
        raise ValueError(f"tracks must lie between 0 and {max_range}")
    upper = sorted(t for t in tracks if t > head)
    lower = sorted((t for t in tracks if t <= head), reverse=True)
    sequence = (*upper, max_range, *lower)
    return SeekResult(head, sequence, _travel(head, sequence), len(tracks))


def sstf(requests: Iterable[int], head: int) -> SeekResult:
    """Shortest seek time first; ties go to the request given first."""
    pending = list(requests)
    count = len(pending)
    sequence = []
    total = 0
    position = head
    while pending:
        nearest = min(range(len(pending)), key=lambda i: abs(pending[i] - position))
        track = pending.pop(nearest)
        total += abs(track - position)
        sequence.append(track)
        position = track
    return SeekResult(head, tuple(sequence), total, count)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="osalgos-disk", description="Simulate a disk scheduling algorithm."
    )
    parser.add_argument("algorithm", choices=("look", "c-look", "c-scan", "scan", "sstf"))
    parser.add_argument("--requests", type=int, nargs="+", default=list(DEFAULT_REQUESTS))
    parser.add_argument("--head", type=int, default=DEFAULT_HEAD)
    parser.add_argument("--direction", choices=("left", "right"), default="right")
    parser.add_argument("--disk-size", type=int, default=DEFAULT_DISK_SIZE)
    parser.add_argument("--max-range", type=int, default=DEFAULT_DISK_SIZE - 1)
    args = parser.parse_args(argv)

    try:
        if args.algorithm == "look":
            result = look(args.requests, args.head, args.direction)
        elif args.algorithm == "c-look":
            result = c_look(args.requests, args.head)
        elif args.algorithm == "c-scan":
            result = c_scan(args.requests, args.head, args.disk_size)
        elif args.algorithm == "scan":
            result = scan(args.requests, args.head, args.max_range)
        else:
            result = sstf(args.requests, args.head)
    except ValueError as exc:
        parser.error(str(exc))

    if args.algorithm == "scan":
        for start, end, distance in result.moves():
            print(f"Disk head moves from position {start} to {end} with Seek {distance}")
        print(f"Total Seek Time= {result.total}")
        print(f"Average Seek Time= {result.average:f}")
        return 0

    print(f"Initial position of head: {result.head}")
    print(f"Total number of seek operations = {result.total}")
    print("Seek Sequence is")
    for track in result.sequence:
        print(track)
    return 0
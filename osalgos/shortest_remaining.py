"""Preemptive shortest-remaining-time-first scheduling."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from typing import Sequence

from osalgos.cpu_scheduling import ProcessStats, ScheduleResult, format_table


@dataclass(frozen=True)
class Job:
    """A process with its burst and arrival time."""

    pid: int
    burst: int
    arrival: int = 0


def _shortest_remaining_first(jobs: Sequence[Job]) -> ScheduleResult:
    job_list = list(jobs)
    if not job_list:
        raise ValueError("at least one job is required")
    if any(job.burst <= 0 for job in job_list):
        raise ValueError("burst times must be positive")

    remaining = [job.burst for job in job_list]
    waiting = [0] * len(job_list)
    minimum: float = math.inf
    shortest = 0
    running = False
    completed = 0
    clock = 0

    while completed < len(job_list):
        # A new job only preempts when strictly shorter than the current one.
        for index, job in enumerate(job_list):
            if job.arrival <= clock and 0 < remaining[index] < minimum:
                minimum = remaining[index]
                shortest = index
                running = True
        if not running:
            clock += 1
            continue

        remaining[shortest] -= 1
        minimum = remaining[shortest] or math.inf
        if remaining[shortest] == 0:
            completed += 1
            running = False
            job = job_list[shortest]
            waiting[shortest] = max(0, clock + 1 - job.burst - job.arrival)
        clock += 1

    return ScheduleResult(
        tuple(
            ProcessStats(job.pid, job.burst, wait, job.burst + wait, job.arrival)
            for job, wait in zip(job_list, waiting)
        )
    )


def srtf(jobs: Sequence[Job]) -> ScheduleResult:
    """Shortest remaining time first, one time unit at a time."""
    return _shortest_remaining_first(jobs)


def clairvoyant_sjf(jobs: Sequence[Job]) -> ScheduleResult:
    """Clairvoyant shortest job first.

    Picks, at every time unit, the arrived job with the least remaining
    burst, so it yields the same schedule as SRTF.
    """
    return _shortest_remaining_first(jobs)


_DEFAULT_JOBS = (
    Job(1, 6, 2),
    Job(2, 2, 5),
    Job(3, 8, 1),
    Job(4, 3, 0),
    Job(5, 4, 4),
)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="osalgos-srtf",
        description="Simulate shortest-remaining-time-first scheduling.",
    )
    parser.add_argument("algorithm", choices=("srtf", "clairvoyant"), nargs="?",
                        default="srtf")
    parser.add_argument("--bursts", type=int, nargs="+")
    parser.add_argument("--arrivals", type=int, nargs="+")
    args = parser.parse_args(argv)

    if args.bursts is None:
        jobs = list(_DEFAULT_JOBS)
    else:
        arrivals = args.arrivals or [0] * len(args.bursts)
        if len(arrivals) != len(args.bursts):
            parser.error("arrivals and bursts must have the same length")
        jobs = [
            Job(pid, burst, arrival)
            for pid, (burst, arrival) in enumerate(zip(args.bursts, arrivals), start=1)
        ]

    scheduler = srtf if args.algorithm == "srtf" else clairvoyant_sjf
    try:
        result = scheduler(jobs)
    except ValueError as exc:
        parser.error(str(exc))
    print(format_table(result))
    return 0
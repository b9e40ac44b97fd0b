"""Priority scheduling, with and without preemption.

A lower priority number means a more urgent job.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class PriorityJob:
    """A process with its arrival time, burst time and priority."""

    pid: int
    arrival: int
    burst: int
    priority: int


@dataclass(frozen=True)
class PriorityStats:
    """A scheduled job and the time at which it completed."""

    pid: int
    priority: int
    arrival: int
    burst: int
    completion: int

    @property
    def turnaround(self) -> int:
        return self.completion - self.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.burst


def _check_jobs(jobs: Iterable[PriorityJob]) -> list[PriorityJob]:
    job_list = list(jobs)
    if not job_list:
        raise ValueError("at least one job is required")
    if any(job.burst <= 0 for job in job_list):
        raise ValueError("burst times must be positive")
    if any(job.arrival < 0 for job in job_list):
        raise ValueError("arrival times must be non-negative")
    return job_list


def _stats(job_list: Sequence[PriorityJob], completion: Sequence[int]) -> tuple[PriorityStats, ...]:
    return tuple(
        PriorityStats(job.pid, job.priority, job.arrival, job.burst, done)
        for job, done in zip(job_list, completion)
    )


def _runs_before(first: PriorityJob, other: PriorityJob) -> bool:
    if first.arrival == other.arrival:
        return first.priority < other.priority
    return first.arrival < other.arrival


def non_preemptive_priority(jobs: Iterable[PriorityJob]) -> tuple[PriorityStats, ...]:
    """Run each selected job to completion; results are in input order.

    The first job is the earliest arrival, ties broken by priority (a
    later job wins a full tie). Afterwards the most urgent arrived job
    runs next, the earlier-listed job winning ties. When nothing has
    arrived yet the CPU idles until the next arrival.
    """
    job_list = _check_jobs(jobs)
    completion = [0] * len(job_list)
    pending = list(range(len(job_list)))

    first = pending[0]
    for candidate in pending[1:]:
        if not _runs_before(job_list[first], job_list[candidate]):
            first = candidate
    clock = job_list[first].arrival + job_list[first].burst
    completion[first] = clock
    pending.remove(first)

    while pending:
        ready = [i for i in pending if job_list[i].arrival <= clock]
        if not ready:
            clock = min(job_list[i].arrival for i in pending)
            continue
        chosen = min(ready, key=lambda i: job_list[i].priority)
        clock += job_list[chosen].burst
        completion[chosen] = clock
        pending.remove(chosen)
    return _stats(job_list, completion)


def preemptive_priority(jobs: Iterable[PriorityJob]) -> tuple[PriorityStats, ...]:
    """Each time unit runs the most urgent arrived job; results are in input order.

    Among jobs of equal priority the one listed first runs.
    """
    job_list = _check_jobs(jobs)
    remaining = [job.burst for job in job_list]
    completion = [0] * len(job_list)
    clock = 0
    while any(remaining):
        ready = [
            i for i, job in enumerate(job_list)
            if job.arrival <= clock and remaining[i] > 0
        ]
        if not ready:
            clock = min(
                job.arrival for i, job in enumerate(job_list) if remaining[i] > 0
            )
            continue
        chosen = min(ready, key=lambda i: job_list[i].priority)
        remaining[chosen] -= 1
        clock += 1
        if remaining[chosen] == 0:
            completion[chosen] = clock
    return _stats(job_list, completion)


def _format(stats: Sequence[PriorityStats]) -> str:
    count = len(stats)
    lines = ["Process\tPriority\tAT\tBT\tCT\tTAT\tWT"]
    lines.extend(
        f"P{s.pid}\t{s.priority}\t{s.arrival}\t{s.burst}\t{s.completion}"
        f"\t{s.turnaround}\t{s.waiting}"
        for s in stats
    )
    lines.append(
        f"Average Completion Time is : {sum(s.completion for s in stats) / count:f}"
    )
    lines.append(
        f"Average Turn Around Time is : {sum(s.turnaround for s in stats) / count:f}"
    )
    lines.append(f"Average Waiting Time is : {sum(s.waiting for s in stats) / count:f}")
    return "\n".join(lines)


_DEFAULT_JOBS = (
    PriorityJob(1, 0, 5, 1),
    PriorityJob(2, 1, 4, 2),
    PriorityJob(3, 2, 3, 3),
    PriorityJob(4, 3, 2, 4),
    PriorityJob(5, 4, 1, 5),
)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="osalgos-priority", description="Simulate priority scheduling."
    )
    parser.add_argument("algorithm", choices=("non-preemptive", "preemptive"),
                        nargs="?", default="non-preemptive")
    parser.add_argument("--bursts", type=int, nargs="+")
    parser.add_argument("--arrivals", type=int, nargs="+")
    parser.add_argument("--priorities", type=int, nargs="+")
    args = parser.parse_args(argv)

    if args.bursts is None:
        jobs = list(_DEFAULT_JOBS)
    else:
        count = len(args.bursts)
        arrivals = args.arrivals or [0] * count
        priorities = args.priorities or [0] * count
        if len(arrivals) != count or len(priorities) != count:
            parser.error("arrivals, bursts and priorities must have the same length")
        jobs = [
            PriorityJob(pid, arrival, burst, priority)
            for pid, (arrival, burst, priority) in enumerate(
                zip(arrivals, args.bursts, priorities), start=1
            )
        ]

    scheduler = (
        non_preemptive_priority if args.algorithm == "non-preemptive"
        else preemptive_priority
    )
    try:
        stats = scheduler(jobs)
    except ValueError as exc:
        parser.error(str(exc))
    print(_format(stats))
    return 0
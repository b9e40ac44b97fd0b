"""CPU scheduling: first come first served, shortest job first and round robin."""

from __future__ import annotations

import argparse
from collections import deque
from dataclasses import dataclass
from itertools import accumulate, pairwise
from typing import Iterator, Sequence


@dataclass(frozen=True)
class ProcessStats:
    """Timing figures of one process after scheduling."""

    pid: int
    burst: int
    waiting: int
    turnaround: int
    arrival: int = 0


@dataclass(frozen=True)
class ScheduleResult:
    """Per-process statistics, in the order the scheduler reports them."""

    processes: tuple[ProcessStats, ...]

    def __post_init__(self) -> None:
        if not self.processes:
            raise ValueError("a schedule needs at least one process")

    def __iter__(self) -> Iterator[ProcessStats]:
        return iter(self.processes)

    def __len__(self) -> int:
        return len(self.processes)

    @property
    def average_waiting(self) -> float:
        return sum(p.waiting for p in self.processes) / len(self.processes)

    @property
    def average_turnaround(self) -> float:
        return sum(p.turnaround for p in self.processes) / len(self.processes)


def _check_bursts(burst_times: Sequence[int], *, positive: bool = False) -> list[int]:
    bursts = list(burst_times)
    if not bursts:
        raise ValueError("at least one burst time is required")
    lowest = 1 if positive else 0
    if any(b < lowest for b in bursts):
        kind = "positive" if positive else "non-negative"
        raise ValueError(f"burst times must be {kind}")
    return bursts


def _check_quantum(quantum: int) -> None:
    if quantum <= 0:
        raise ValueError("time quantum must be positive")


def fcfs(burst_times: Sequence[int]) -> ScheduleResult:
    """Schedule processes in the order given; all arrive at time 0."""
    bursts = _check_bursts(burst_times)
    waits = accumulate(bursts[:-1], initial=0)
    return ScheduleResult(
        tuple(
            ProcessStats(pid, burst, wait, burst + wait)
            for pid, (burst, wait) in enumerate(zip(bursts, waits), start=1)
        )
    )


def sjf(burst_times: Sequence[int]) -> ScheduleResult:
    """Non-preemptive shortest job first; results are in execution order.

    Jobs are ordered by a selection sort, so jobs with equal bursts are
    not guaranteed to keep their input order.
    """
    bursts = _check_bursts(burst_times)
    order = list(enumerate(bursts, start=1))
    for i in range(len(order)):
        j = min(range(i, len(order)), key=lambda k: order[k][1])
        order[i], order[j] = order[j], order[i]
    waits = accumulate((burst for _, burst in order[:-1]), initial=0)
    return ScheduleResult(
        tuple(
            ProcessStats(pid, burst, wait, burst + wait)
            for (pid, burst), wait in zip(order, waits)
        )
    )


def round_robin(burst_times: Sequence[int], quantum: int) -> ScheduleResult:
    """Round robin with every process arriving at time 0."""
    bursts = _check_bursts(burst_times, positive=True)
    _check_quantum(quantum)
    remaining = list(bursts)
    waiting = [0] * len(bursts)
    clock = 0
    while any(left > 0 for left in remaining):
        for i, left in enumerate(remaining):
            if left <= 0:
                continue
            if left > quantum:
                clock += quantum
                remaining[i] -= quantum
            else:
                clock += left
                waiting[i] = clock - bursts[i]
                remaining[i] = 0
    return ScheduleResult(
        tuple(
            ProcessStats(pid, burst, wait, burst + wait)
            for pid, (burst, wait) in enumerate(zip(bursts, waiting), start=1)
        )
    )


def round_robin_with_arrival(
    arrivals: Sequence[int], bursts: Sequence[int], quantum: int
) -> ScheduleResult:
    """Round robin where processes arrive at different times.

    Arrival times must be given in non-decreasing order. Processes that
    arrive during a time slice join the ready queue before the preempted
    process goes back to its end; an idle CPU waits for the next arrival.
    """
    arrival_times = list(arrivals)
    burst_list = _check_bursts(bursts, positive=True)
    _check_quantum(quantum)
    if len(arrival_times) != len(burst_list):
        raise ValueError("arrivals and bursts must have the same length")
    if any(later < earlier for earlier, later in pairwise(arrival_times)):
        raise ValueError("arrival times must be in non-decreasing order")

    count = len(burst_list)
    remaining = list(burst_list)
    completion: list[int | None] = [None] * count
    clock = arrival_times[0]
    ready: deque[int] = deque([0])
    next_arrival = 1

    def admit() -> None:
        nonlocal next_arrival
        while next_arrival < count and arrival_times[next_arrival] <= clock:
            ready.append(next_arrival)
            next_arrival += 1

    while any(done is None for done in completion):
        if not ready:
            clock = max(clock, arrival_times[next_arrival])
            admit()
            continue
        current = ready.popleft()
        for _ in range(min(quantum, remaining[current])):
            remaining[current] -= 1
            clock += 1
            admit()
        if remaining[current] == 0:
            completion[current] = clock
        else:
            ready.append(current)

    stats = []
    for pid, (arrival, burst, done) in enumerate(
        zip(arrival_times, burst_list, completion), start=1
    ):
        turnaround = done - arrival
        stats.append(ProcessStats(pid, burst, turnaround - burst, turnaround, arrival))
    return ScheduleResult(tuple(stats))


def format_table(result: ScheduleResult) -> str:
    """Render a schedule as a tab-separated table followed by the averages."""
    lines = ["Process\tArrival\tBurst\tWaiting\tTurnaround"]
    lines.extend(
        f"P{p.pid}\t{p.arrival}\t{p.burst}\t{p.waiting}\t{p.turnaround}"
        for p in result
    )
    lines.append(f"Average waiting time = {result.average_waiting:f}")
    lines.append(f"Average turn around time = {result.average_turnaround:f}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="osalgos-cpu", description="Simulate a CPU scheduling algorithm."
    )
    parser.add_argument("algorithm", choices=("fcfs", "sjf", "rr", "rr-arrival"))
    parser.add_argument("--bursts", type=int, nargs="+", default=[10, 5, 8])
    parser.add_argument("--arrivals", type=int, nargs="+")
    parser.add_argument("--quantum", type=int, default=2)
    args = parser.parse_args(argv)

    try:
        if args.algorithm == "fcfs":
            result = fcfs(args.bursts)
        elif args.algorithm == "sjf":
            result = sjf(args.bursts)
        elif args.algorithm == "rr":
            result = round_robin(args.bursts, args.quantum)
        else:
            arrivals = args.arrivals or [0] * len(args.bursts)
            result = round_robin_with_arrival(arrivals, args.bursts, args.quantum)
    except ValueError as exc:
        parser.error(str(exc))
    print(format_table(result))
    return 0
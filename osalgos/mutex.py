"""Software mutual exclusion: Peterson's lock for two threads, Lamport's bakery for many."""

from __future__ import annotations

import argparse
import threading
import time
from typing import Callable, Sequence

_HOLD_TIME = 0.002


def _yield() -> None:
    time.sleep(0)


def _run_threads(count: int, target: Callable[[int], None]) -> None:
    threads = [threading.Thread(target=target, args=(i,)) for i in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


class PetersonLock:
    """Peterson's mutual exclusion between threads 0 and 1.

    A waiting thread yields the processor between checks instead of
    spinning.
    """

    def __init__(self) -> None:
        self._flag = [False, False]
        self._turn = 0

    @staticmethod
    def _other(me: int) -> int:
        if me not in (0, 1):
            raise ValueError("Peterson's lock serves threads 0 and 1 only")
        return 1 - me

    def acquire(self, me: int) -> None:
        other = self._other(me)
        self._flag[me] = True
        self._turn = other
        while self._flag[other] and self._turn == other:
            _yield()

    def release(self, me: int) -> None:
        self._other(me)
        self._flag[me] = False


class BakeryLock:
    """Lamport's bakery lock for a fixed number of threads, served first come first served."""

    def __init__(self, threads: int) -> None:
        if threads < 1:
            raise ValueError("at least one thread is required")
        self._choosing = [False] * threads
        self._tickets = [0] * threads

    def _check(self, thread_id: int) -> None:
        if not 0 <= thread_id < len(self._tickets):
            raise ValueError(f"thread id must lie between 0 and {len(self._tickets) - 1}")

    def acquire(self, thread_id: int) -> None:
        self._check(thread_id)
        self._choosing[thread_id] = True
        self._tickets[thread_id] = max(self._tickets) + 1
        self._choosing[thread_id] = False
        mine = (self._tickets[thread_id], thread_id)
        for other in range(len(self._tickets)):
            while self._choosing[other]:
                _yield()
            while True:
                ticket = self._tickets[other]
                if ticket == 0 or (ticket, other) >= mine:
                    break
                _yield()

    def release(self, thread_id: int) -> None:
        self._check(thread_id)
        self._tickets[thread_id] = 0


def count_with_peterson(iterations: int = 100_000) -> int:
    """Two threads each add ``iterations`` to a shared counter inside a Peterson lock."""
    if iterations < 0:
        raise ValueError("iterations must be non-negative")
    lock = PetersonLock()
    total = 0

    def work(me: int) -> None:
        nonlocal total
        lock.acquire(me)
        try:
            for _ in range(iterations):
                total += 1
        finally:
            lock.release(me)

    _run_threads(2, work)
    return total


def use_resource_with_bakery(threads: int = 8) -> list[int]:
    """Let ``threads`` threads use one resource under a bakery lock.

    Returns the thread ids in the order they used the resource; raises
    RuntimeError if a thread found the resource still in use.
    """
    lock = BakeryLock(threads)
    order: list[int] = []
    conflicts: list[str] = []
    in_use: list[int | None] = [None]

    def body(me: int) -> None:
        lock.acquire(me)
        try:
            holder = in_use[0]
            if holder is not None:
                conflicts.append(
                    f"Resource was acquired by {me}, but is still in-use by {holder}!"
                )
            in_use[0] = me
            order.append(me)
            time.sleep(_HOLD_TIME)
            in_use[0] = None
        finally:
            lock.release(me)

    _run_threads(threads, body)
    if conflicts:
        raise RuntimeError(conflicts[0])
    return order


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="osalgos-mutex", description="Demonstrate software mutual exclusion."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    peterson = commands.add_parser("peterson", help="two threads counting under Peterson's lock")
    peterson.add_argument("--iterations", type=int, default=100_000)
    bakery = commands.add_parser("bakery", help="threads sharing a resource under a bakery lock")
    bakery.add_argument("--threads", type=int, default=8)
    args = parser.parse_args(argv)

    try:
        if args.command == "peterson":
            count = count_with_peterson(args.iterations)
            print(f"Actual Count: {count} | Expected Count: {2 * args.iterations}")
        else:
            for thread_id in use_resource_with_bakery(args.threads):
                print(f"{thread_id} using resource...")
    except ValueError as exc:
        parser.error(str(exc))
    except RuntimeError as exc:
        print(exc)
        return 1
    return 0
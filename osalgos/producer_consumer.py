"""A bounded buffer for the producer-consumer problem, with an interactive menu."""

from __future__ import annotations

import argparse
import threading
from typing import Sequence

DEFAULT_CAPACITY = 10


class BufferFull(Exception):
    """Raised when producing into a full buffer."""

    def __init__(self) -> None:
        super().__init__("Buffer is full!")


class BufferEmpty(Exception):
    """Raised when consuming from an empty buffer."""

    def __init__(self) -> None:
        super().__init__("Buffer is empty!")


class BoundedBuffer:
    """A buffer of numbered items with a fixed number of slots.

    Producing adds the next item number; consuming removes the most
    recently produced item, so numbers are reused after consumption.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items = 0
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def free_slots(self) -> int:
        return self._capacity - self._items

    def __len__(self) -> int:
        return self._items

    def produce(self) -> int:
        """Add an item and return its number."""
        with self._lock:
            if self._items == self._capacity:
                raise BufferFull()
            self._items += 1
            return self._items

    def consume(self) -> int:
        """Remove the most recent item and return its number."""
        with self._lock:
            if self._items == 0:
                raise BufferEmpty()
            item = self._items
            self._items -= 1
            return item


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="osalgos-buffer", description="Produce and consume items interactively."
    )
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY)
    args = parser.parse_args(argv)
    try:
        buffer = BoundedBuffer(args.capacity)
    except ValueError as exc:
        parser.error(str(exc))

    print("1. Press 1 for Producer\n2. Press 2 for Consumer\n3. Press 3 for Exit")
    while True:
        try:
            choice = input("Enter your choice:").strip()
        except EOFError:
            return 0
        if choice == "1":
            try:
                print(f"Producer produces item {buffer.produce()}")
            except BufferFull as exc:
                print(exc)
        elif choice == "2":
            try:
                print(f"Consumer consumes item {buffer.consume()}")
            except BufferEmpty as exc:
                print(exc)
        elif choice == "3":
            return 0
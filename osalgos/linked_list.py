"""A doubly linked list of values with an in-place merge sort."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None


def _split(head: _Node) -> Optional[_Node]:
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        fast = fast.next.next
        slow = slow.next
    second = slow.next
    slow.next = None
    if second is not None:
        second.prev = None
    return second


def _merge(first: Optional[_Node], second: Optional[_Node]) -> Optional[_Node]:
    head: Optional[_Node] = None
    tail: Optional[_Node] = None
    while first is not None and second is not None:
        if first.value < second.value:
            node, first = first, first.next
        else:
            node, second = second, second.next
        node.prev = tail
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    rest = first if first is not None else second
    if tail is None:
        return rest
    tail.next = rest
    if rest is not None:
        rest.prev = tail
    return head


def _sort(head: Optional[_Node]) -> Optional[_Node]:
    if head is None or head.next is None:
        return head
    second = _split(head)
    return _merge(_sort(head), _sort(second))


class DoublyLinkedList:
    """Doubly linked list; iterates forwards and, with reversed(), backwards."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the beginning of the list."""
        node = _Node(value)
        node.next = self._head
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def merge_sort(self) -> None:
        """Sort the list in ascending order by relinking its nodes."""
        self._head = _sort(self._head)
        if self._head is not None:
            self._head.prev = None
        node = self._head
        while node is not None and node.next is not None:
            node = node.next
        self._tail = node

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"
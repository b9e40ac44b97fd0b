import random

from osalgos.linked_list import DoublyLinkedList


def _build(values):
    dll = DoublyLinkedList()
    for value in values:
        dll.push_front(value)
    return dll


def test_push_front_reverses_insertion_order():
    dll = _build([5, 20, 4, 3, 30, 10])
    assert list(dll) == [10, 30, 3, 4, 20, 5]
    assert list(reversed(dll)) == [5, 20, 4, 3, 30, 10]
    assert len(dll) == 6


def test_merge_sort_driver_example():
    dll = _build([5, 20, 4, 3, 30, 10])
    dll.merge_sort()
    assert list(dll) == [3, 4, 5, 10, 20, 30]
    assert list(reversed(dll)) == [30, 20, 10, 5, 4, 3]
    assert len(dll) == 6


def test_sort_empty_and_single():
    empty = DoublyLinkedList()
    empty.merge_sort()
    assert list(empty) == []
    assert list(reversed(empty)) == []
    single = _build([7])
    single.merge_sort()
    assert list(single) == [7]
    assert list(reversed(single)) == [7]


def test_random_sort_matches_sorted():
    rng = random.Random(42)
    values = [rng.randint(-100, 100) for _ in range(257)]
    dll = _build(values)
    dll.merge_sort()
    assert list(dll) == sorted(values)
    assert list(reversed(dll)) == sorted(values, reverse=True)


def test_push_after_sort_keeps_links():
    dll = _build([3, 1, 2])
    dll.merge_sort()
    dll.push_front(9)
    assert list(dll) == [9, 1, 2, 3]
    assert list(reversed(dll)) == [3, 2, 1, 9]
    assert len(dll) == 4
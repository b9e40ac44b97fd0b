import pytest

from osalgos.bankers import UnsafeStateError, main, safe_sequence

ALLOCATION = [[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]]
MAXIMUM = [[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]]
AVAILABLE = [3, 3, 2]


def test_source_example_sequence():
    assert safe_sequence(ALLOCATION, MAXIMUM, AVAILABLE) == [1, 3, 4, 0, 2]


def test_sequence_is_valid_and_complete():
    order = safe_sequence(ALLOCATION, MAXIMUM, AVAILABLE)
    assert sorted(order) == list(range(len(ALLOCATION)))
    free = list(AVAILABLE)
    for process in order:
        need = [m - a for m, a in zip(MAXIMUM[process], ALLOCATION[process])]
        assert all(n <= f for n, f in zip(need, free))
        free = [f + a for f, a in zip(free, ALLOCATION[process])]


def test_available_not_mutated():
    available = list(AVAILABLE)
    safe_sequence(ALLOCATION, MAXIMUM, available)
    assert available == AVAILABLE


def test_unsafe_state_raises():
    with pytest.raises(UnsafeStateError) as info:
        safe_sequence(ALLOCATION, MAXIMUM, [0, 0, 0])
    assert info.value.completed == ()


def test_partially_unsafe_reports_completed():
    allocation = [[0], [0]]
    maximum = [[1], [5]]
    with pytest.raises(UnsafeStateError) as info:
        safe_sequence(allocation, maximum, [1])
    assert info.value.completed == (0,)


def test_mismatched_rows_rejected():
    with pytest.raises(ValueError):
        safe_sequence(ALLOCATION, MAXIMUM[:-1], AVAILABLE)


def test_wrong_resource_count_rejected():
    with pytest.raises(ValueError):
        safe_sequence(ALLOCATION, MAXIMUM, [3, 3])


def test_allocation_above_maximum_rejected():
    with pytest.raises(ValueError):
        safe_sequence([[5]], [[2]], [1])


def test_main_prints_safe_sequence(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    order = safe_sequence(ALLOCATION, MAXIMUM, AVAILABLE)
    assert "Following is the SAFE Sequence" in out
    assert " -> ".join(f"P{p}" for p in order) in out


def test_main_reports_unsafe(capsys):
    assert main(["--available", "0", "0", "0"]) == 1
    assert "not safe" in capsys.readouterr().out
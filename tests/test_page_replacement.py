import pytest

from osalgos.page_replacement import (
    ReplacementResult,
    lru,
    main,
    optimal,
    second_chance,
)

TEXTBOOK = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2, 1, 2, 0, 1, 7, 0, 1]

STRINGS = [
    TEXTBOOK,
    [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5],
    [5, 5, 5, 5],
    [1, 2, 3, 1, 2, 3, 4, 5, 6, 1],
    [9, 8, 7, 6, 5, 4, 3, 2, 1],
]


def test_textbook_optimal():
    assert optimal(TEXTBOOK, 3).faults == 9


def test_textbook_lru():
    assert lru(TEXTBOOK, 3).faults == 12


@pytest.mark.parametrize("pages", STRINGS)
@pytest.mark.parametrize("frames", [1, 2, 3, 4])
def test_optimal_never_worse(pages, frames):
    best = optimal(pages, frames).faults
    assert best <= lru(pages, frames).faults
    assert best <= second_chance(pages, frames).faults


@pytest.mark.parametrize("pages", STRINGS)
def test_referenced_page_is_resident(pages):
    results = [second_chance(pages, 3), lru(pages, 3), optimal(pages, 3)]
    for result in results:
        assert len(result.snapshots) == len(pages)
        for page, snapshot in result.steps():
            assert page in snapshot
            assert len(snapshot) == 3


@pytest.mark.parametrize("pages", STRINGS)
def test_fault_bounds(pages):
    results = [second_chance(pages, 2), lru(pages, 2), optimal(pages, 2)]
    for result in results:
        assert len(set(pages)) <= result.faults <= len(pages)
        assert result.hits == len(pages) - result.faults


@pytest.mark.parametrize("pages", STRINGS)
def test_enough_frames_only_cold_misses(pages):
    frames = len(set(pages))
    assert lru(pages, frames).faults == len(set(pages))
    assert optimal(pages, frames).faults == len(set(pages))


def test_repeated_page():
    pages = [4, 4, 4, 4]
    results = [second_chance(pages, 3), lru(pages, 3), optimal(pages, 3)]
    for result in results:
        assert result.faults == 1
        assert result.frames.count(4) == 1


def test_lru_single_frame_faults_on_every_change():
    pages = [1, 1, 2, 2, 1, 3, 3, 3, 1]
    assert lru(pages, 1).faults == 5


def test_lru_evicts_least_recent():
    result = lru([1, 2, 3, 1, 4], 3)
    assert result.frames == (1, 4, 3)


def test_second_chance_search_starts_at_first_frame():
    result = second_chance([10, 20, 30], 3)
    assert result.snapshots[0] == (10, None, None)
    assert result.snapshots[1] == (10, 20, None)
    assert result.snapshots[2] == (30, 20, None)


def test_zero_frames_rejected():
    with pytest.raises(ValueError):
        second_chance([1, 2], 0)
    with pytest.raises(ValueError):
        lru([1, 2], 0)
    with pytest.raises(ValueError):
        optimal([1, 2], 0)


def test_empty_reference_string():
    result = lru([], 3)
    assert isinstance(result, ReplacementResult)
    assert result.faults == 0
    assert result.frames == ()


def test_main_lru_output(capsys):
    pages = ["1", "2", "1", "3"]
    assert main(["lru", "--frames", "2", *pages]) == 0
    out = capsys.readouterr().out.strip().splitlines()
    expected = lru([int(p) for p in pages], 2).faults
    assert out[-1] == f"Total Page Faults = {expected}"


def test_main_second_chance_output(capsys):
    assert main(["second-chance", "--frames", "3", "5"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Reference: 5"
    assert out[1] == "Frames:  5 - -"
import pytest

from osalgos.disk_scheduling import SeekResult, c_look, c_scan, look, main, scan, sstf

REQUESTS = (176, 79, 34, 60, 92, 11, 41, 114)
HEAD = 50


def _above():
    return sorted(t for t in REQUESTS if t > HEAD)


def _below():
    return sorted(t for t in REQUESTS if t < HEAD)


def test_look_right_total():
    assert look(REQUESTS, HEAD, "right").total == 291


def test_look_right_order():
    result = look(REQUESTS, HEAD, "right")
    assert list(result.sequence) == _above() + _below()[::-1]


def test_look_left_order():
    result = look(REQUESTS, HEAD, "left")
    assert list(result.sequence) == _below()[::-1] + _above()


def test_look_rejects_bad_direction():
    with pytest.raises(ValueError):
        look(REQUESTS, HEAD, "up")


def test_look_skips_request_on_head_track():
    result = look([HEAD, 60], HEAD, "right")
    assert result.sequence == (60,)
    assert result.requests == 2


def test_c_look_order():
    result = c_look(REQUESTS, HEAD)
    assert list(result.sequence) == _above() + _below()


def test_c_look_without_lower_requests_is_ascending():
    result = c_look([60, 90, 70], HEAD)
    assert list(result.sequence) == [60, 70, 90]
    assert result.total == 90 - HEAD


def test_c_scan_total():
    assert c_scan(REQUESTS, HEAD, 200).total == 389


def test_c_scan_visits_both_ends():
    result = c_scan(REQUESTS, HEAD, 200)
    assert list(result.sequence) == _above() + [199, 0] + _below()


def test_c_scan_rejects_out_of_range():
    with pytest.raises(ValueError):
        c_scan([250], HEAD, 200)


def test_scan_sequence_reaches_max_range():
    result = scan(REQUESTS, HEAD, 199)
    assert list(result.sequence) == _above() + [199] + _below()[::-1]


def test_scan_request_at_head_served_on_way_down():
    result = scan([HEAD, 80], HEAD, 100)
    assert result.sequence == (80, 100, HEAD)


def test_scan_average_uses_request_count():
    result = scan(REQUESTS, HEAD, 199)
    assert result.average == result.total / len(REQUESTS)


def test_scan_rejects_out_of_range():
    with pytest.raises(ValueError):
        scan([300], HEAD, 199)


def test_sstf_total():
    assert sstf(REQUESTS, HEAD).total == 204


def test_sstf_visits_every_request_once():
    result = sstf(REQUESTS, HEAD)
    assert sorted(result.sequence) == sorted(REQUESTS)
    assert result.path[0] == HEAD


def test_sstf_always_picks_nearest():
    result = sstf(REQUESTS, HEAD)
    remaining = list(REQUESTS)
    position = HEAD
    for track in result.sequence:
        assert abs(track - position) == min(abs(t - position) for t in remaining)
        remaining.remove(track)
        position = track


def test_sstf_empty():
    result = sstf([], HEAD)
    assert result.sequence == ()
    assert result.total == 0
    assert result.average == 0.0


@pytest.mark.parametrize(
    "result",
    [
        look(REQUESTS, HEAD, "right"),
        look(REQUESTS, HEAD, "left"),
        c_look(REQUESTS, HEAD),
        c_scan(REQUESTS, HEAD, 200),
        scan(REQUESTS, HEAD, 199),
        sstf(REQUESTS, HEAD),
    ],
)
def test_total_matches_moves(result: SeekResult):
    assert result.total == sum(distance for _, _, distance in result.moves())


def test_main_prints_look(capsys):
    assert main(["look"]) == 0
    out = capsys.readouterr().out
    expected = look(REQUESTS, HEAD, "right")
    assert f"Total number of seek operations = {expected.total}" in out
    assert "Seek Sequence is" in out


def test_main_prints_scan_moves(capsys):
    assert main(["scan"]) == 0
    out = capsys.readouterr().out
    expected = scan(REQUESTS, HEAD, 199)
    assert f"Total Seek Time= {expected.total}" in out
    assert "Disk head moves from position 50 to 60 with Seek 10" in out
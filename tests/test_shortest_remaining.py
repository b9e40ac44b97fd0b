import pytest

from osalgos.shortest_remaining import Job, clairvoyant_sjf, main, srtf

SOURCE_JOBS = [
    Job(1, 6, 2),
    Job(2, 2, 5),
    Job(3, 8, 1),
    Job(4, 3, 0),
    Job(5, 4, 4),
]


def test_srtf_source_example_waiting_times():
    result = srtf(SOURCE_JOBS)
    assert [p.waiting for p in result] == [7, 0, 14, 0, 2]


def test_srtf_turnaround_is_burst_plus_waiting():
    for p in srtf(SOURCE_JOBS):
        assert p.turnaround == p.burst + p.waiting


def test_srtf_cpu_never_idle_when_first_job_arrives_at_zero():
    result = srtf(SOURCE_JOBS)
    assert max(p.arrival + p.turnaround for p in result) == sum(
        job.burst for job in SOURCE_JOBS
    )


def test_srtf_keeps_input_order():
    result = srtf(SOURCE_JOBS)
    assert [p.pid for p in result] == [job.pid for job in SOURCE_JOBS]
    assert [p.arrival for p in result] == [job.arrival for job in SOURCE_JOBS]


def test_clairvoyant_matches_srtf():
    jobs = [Job(1, 5, 0), Job(2, 3, 1), Job(3, 1, 2), Job(4, 2, 3)]
    assert clairvoyant_sjf(jobs) == srtf(jobs)


def test_late_single_job_does_not_wait():
    result = srtf([Job(1, 3, 5)])
    only = result.processes[0]
    assert only.waiting == 0
    assert only.turnaround == only.burst


def test_equal_remaining_time_does_not_preempt():
    result = srtf([Job(1, 2, 0), Job(2, 1, 1)])
    assert [p.waiting for p in result] == [0, 1]


def test_shorter_arrival_preempts():
    result = srtf([Job(1, 10, 0), Job(2, 1, 1)])
    assert result.processes[1].waiting == 0
    assert result.processes[0].turnaround == result.processes[0].burst + 1


def test_rejects_empty_and_non_positive_bursts():
    with pytest.raises(ValueError):
        srtf([])
    with pytest.raises(ValueError):
        clairvoyant_sjf([Job(1, 0, 0)])


def test_main_default_jobs(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "P5" in out
    assert "Average turn around time" in out


def test_main_custom_jobs(capsys):
    assert main(["clairvoyant", "--bursts", "3", "2", "--arrivals", "0", "0"]) == 0
    out = capsys.readouterr().out
    assert "P2" in out


def test_main_mismatched_lengths():
    with pytest.raises(SystemExit):
        main(["srtf", "--bursts", "3", "2", "--arrivals", "0"])
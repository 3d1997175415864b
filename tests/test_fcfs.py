import pytest

from algokit.fcfs import fcfs_stats, first_come_first_serve, format_fcfs_table
from algokit.schedule_report import Process


def _sample():
    return [Process(3, 2, 1), Process(1, 0, 4), Process(2, 1, 3)]


def test_runs_in_arrival_order():
    done = first_come_first_serve(_sample())
    assert [p.p_id for p in done] == [1, 2, 3]
    assert [p.completion_time for p in done] == [4, 7, 8]


def test_ties_broken_by_id():
    done = first_come_first_serve([Process(5, 0, 1), Process(2, 0, 1)])
    assert [p.p_id for p in done] == [2, 5]


def test_slices_do_not_overlap():
    done = first_come_first_serve(_sample() + [Process(4, 20, 2), Process(5, 3, 6)])
    previous_end = None
    for p in done:
        start = p.completion_time - p.burst_time
        assert start >= p.arrival_time
        if previous_end is not None:
            assert start >= previous_end
        previous_end = p.completion_time
        assert p.waiting_time >= 0
        assert p.response_time == p.waiting_time


def test_idle_gap_starts_at_arrival():
    done = first_come_first_serve([Process(1, 0, 2), Process(2, 5, 1)])
    assert done[1].completion_time == 6
    assert done[1].waiting_time == 0


def test_input_not_modified():
    procs = _sample()
    first_come_first_serve(procs)
    assert all(p.completion_time is None for p in procs)


def test_empty_schedule():
    assert first_come_first_serve([]) == []
    with pytest.raises(ValueError):
        fcfs_stats([])


def test_stats_consistent_with_schedule():
    procs = _sample()
    done = first_come_first_serve(procs)
    stats = fcfs_stats(procs)
    assert stats.scheduling_length == done[-1].completion_time - done[0].arrival_time
    assert stats.throughput * stats.scheduling_length == pytest.approx(len(done))
    assert stats.avg_waiting_time == pytest.approx(
        sum(p.waiting_time for p in done) / len(done)
    )
    assert stats.avg_turn_around_time == pytest.approx(
        sum(p.turn_around_time for p in done) / len(done)
    )


def test_format_table_lists_rows_and_stats():
    procs = _sample()
    stats = fcfs_stats(procs)
    text = format_fcfs_table(procs)
    lines = text.splitlines()
    assert lines[3].startswith("1")
    assert lines[5].startswith("3")
    assert f"Scheduling length : {stats.scheduling_length}" in lines
    assert f"Average waiting time : {stats.avg_waiting_time:g}" in lines
    assert any(line.startswith("Throughput : ") for line in lines)
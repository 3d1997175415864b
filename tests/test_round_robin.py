import random

import pytest

from algokit.round_robin import (
    RoundRobinTimes,
    round_robin,
    round_robin_by_ticks,
    round_robin_queue,
)
from algokit.schedule_report import Process

CASE_ONE = [Process(0, 0, 12), Process(1, 2, 5), Process(2, 4, 10)]


def _random_case(seed):
    rng = random.Random(seed)
    count = rng.randint(1, 7)
    arrivals = sorted(rng.randint(0, 20) for _ in range(count))
    bursts = [rng.randint(1, 9) for _ in range(count)]
    quantum = rng.randint(1, 5)
    return arrivals, bursts, quantum


def test_round_robin_gantt_chart_for_source_case():
    result = round_robin(CASE_ONE, 5)
    assert result.gantt_chart == [(0, 0), (1, 5), (2, 10), (0, 15), (2, 20), (0, 25)]


def test_round_robin_completion_times_for_source_case():
    result = round_robin(CASE_ONE, 5)
    completions = {p.p_id: p.completion_time for p in result.processes}
    assert completions == {0: 27, 1: 10, 2: 25}
    assert result.summary.scheduling_length == 27.0


def test_round_robin_does_not_modify_input():
    processes = [Process(0, 0, 3), Process(1, 1, 2)]
    round_robin(processes, 1)
    assert all(p.completion_time is None for p in processes)


def test_round_robin_jumps_idle_gap():
    result = round_robin([Process(0, 0, 2), Process(1, 10, 3)], 4)
    assert result.gantt_chart == [(0, 0), (1, 10)]
    assert [p.response_time for p in result.processes] == [0, 0]


@pytest.mark.parametrize("seed", range(20))
def test_round_robin_invariants(seed):
    arrivals, bursts, quantum = _random_case(seed)
    processes = [Process(i, a, b) for i, (a, b) in enumerate(zip(arrivals, bursts))]
    result = round_robin(processes, quantum)
    for process in result.processes:
        assert process.completion_time >= process.arrival_time + process.burst_time
        assert process.waiting_time >= 0
        assert 0 <= process.response_time <= process.waiting_time
    starts = [start for _, start in result.gantt_chart]
    assert starts == sorted(starts)


def test_round_robin_rejects_bad_quantum():
    with pytest.raises(ValueError):
        round_robin(CASE_ONE, 0)


def test_round_robin_rejects_empty_input():
    with pytest.raises(ValueError):
        round_robin([], 3)


def test_by_ticks_source_case_waiting_times():
    times = round_robin_by_ticks([0, 2, 4], [12, 5, 10], 5)
    assert times.waiting_times == [15, 3, 11]
    assert times.turn_around_times == [w + b for w, b in zip(times.waiting_times, [12, 5, 10])]


@pytest.mark.parametrize("seed", range(30))
def test_three_styles_agree(seed):
    arrivals, bursts, quantum = _random_case(seed)
    processes = [Process(i, a, b) for i, (a, b) in enumerate(zip(arrivals, bursts))]
    sliced = round_robin(processes, quantum)
    by_id = sorted(sliced.processes, key=lambda p: p.p_id)
    expected = [p.completion_time for p in by_id]
    assert round_robin_by_ticks(arrivals, bursts, quantum).completion_times == expected
    assert round_robin_queue(arrivals, bursts, quantum).completion_times == expected


def test_queue_handles_unsorted_arrivals_in_input_order():
    unsorted = round_robin_queue([4, 0, 2], [10, 12, 5], 5)
    sorted_times = round_robin_queue([0, 2, 4], [12, 5, 10], 5)
    assert unsorted.completion_times == [
        sorted_times.completion_times[2],
        sorted_times.completion_times[0],
        sorted_times.completion_times[1],
    ]


def test_averages_match_lists():
    times = round_robin_queue([0, 1, 3], [4, 2, 6], 2)
    assert isinstance(times, RoundRobinTimes)
    assert times.avg_waiting_time == sum(times.waiting_times) / 3
    assert times.avg_turn_around_time == sum(times.turn_around_times) / 3


def test_single_process_runs_straight_through():
    times = round_robin_by_ticks([3], [7], 2)
    assert times.completion_times == [10]
    assert times.waiting_times == [0]


def test_by_ticks_rejects_unsorted_arrivals():
    with pytest.raises(ValueError):
        round_robin_by_ticks([5, 1], [2, 2], 1)


@pytest.mark.parametrize("func", [round_robin_by_ticks, round_robin_queue])
def test_rejects_mismatched_lengths(func):
    with pytest.raises(ValueError):
        func([0, 1], [3], 2)


@pytest.mark.parametrize("func", [round_robin_by_ticks, round_robin_queue])
def test_rejects_non_positive_burst(func):
    with pytest.raises(ValueError):
        func([0, 1], [3, 0], 2)


@pytest.mark.parametrize("func", [round_robin_by_ticks, round_robin_queue])
def test_rejects_non_positive_quantum(func):
    with pytest.raises(ValueError):
        func([0], [3], 0)
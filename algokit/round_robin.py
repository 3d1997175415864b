"""Round-robin CPU scheduling in three styles: slices, single ticks and a ready queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from itertools import pairwise

from algokit.schedule_report import Process, ScheduleResult, summarize


@dataclass(frozen=True)
class RoundRobinTimes:
    """Per-process times of a round-robin run, listed in input order."""

    completion_times: list[int]
    waiting_times: list[int]
    turn_around_times: list[int]

    @property
    def avg_waiting_time(self) -> float:
        """Mean waiting time."""
        return sum(self.waiting_times) / len(self.waiting_times)

    @property
    def avg_turn_around_time(self) -> float:
        """Mean turnaround time."""
        return sum(self.turn_around_times) / len(self.turn_around_times)


def _check_quantum(quantum: int) -> None:
    if quantum <= 0:
        raise ValueError("the time quantum must be positive")


def _check_inputs(arrivals: Sequence[int], bursts: Sequence[int], quantum: int) -> None:
    _check_quantum(quantum)
    if not arrivals:
        raise ValueError("no processes to schedule")
    if len(arrivals) != len(bursts):
        raise ValueError("arrivals and bursts must have the same length")
    if any(a < 0 for a in arrivals):
        raise ValueError("arrival times must not be negative")
    if any(b <= 0 for b in bursts):
        raise ValueError("burst times must be positive")


def _times(
    arrivals: Sequence[int], bursts: Sequence[int], completion: Sequence[int]
) -> RoundRobinTimes:
    turn_around = [c - a for c, a in zip(completion, arrivals)]
    waiting = [t - b for t, b in zip(turn_around, bursts)]
    return RoundRobinTimes(list(completion), waiting, turn_around)


def round_robin(processes: Iterable[Process], quantum: int) -> ScheduleResult:
    """Give each ready process up to ``quantum`` units in turn.

    Processes that arrive during a slice join the queue ahead of the process
    that was just preempted. Every slice is a Gantt chart entry. The input is
    not modified.
    """
    _check_quantum(quantum)
    ordered = sorted(
        (replace(p, completion_time=None, response_time=None) for p in processes),
        key=lambda p: (p.arrival_time, p.p_id),
    )
    if not ordered:
        raise ValueError("no processes to schedule")
    if any(p.burst_time < 0 for p in ordered):
        raise ValueError("burst times must not be negative")

    remaining = [p.burst_time for p in ordered]
    chart: list[tuple[int, int]] = []
    ready: deque[int] = deque()
    admitted = 0
    time = ordered[0].arrival_time

    def admit_until(moment: int) -> None:
        nonlocal admitted
        while admitted < len(ordered) and ordered[admitted].arrival_time <= moment:
            ready.append(admitted)
            admitted += 1

    admit_until(time)
    while ready:
        position = ready.popleft()
        current = ordered[position]
        chart.append((current.p_id, time))
        if current.response_time is None:
            current.response_time = time - current.arrival_time
        if remaining[position] <= quantum:
            time += remaining[position]
            remaining[position] = 0
            current.completion_time = time
        else:
            remaining[position] -= quantum
            time += quantum
        admit_until(time)
        if not current.completed:
            ready.append(position)
        if not ready and admitted < len(ordered):
            time = ordered[admitted].arrival_time
            admit_until(time)

    return ScheduleResult(ordered, chart, summarize(ordered))


def round_robin_by_ticks(
    arrivals: Sequence[int], bursts: Sequence[int], quantum: int
) -> RoundRobinTimes:
    """Simulate round robin one time unit at a time.

    Arrival times must be in non-decreasing order. Arrived processes stay in
    a rotating queue; finished ones are passed over, and the clock ticks idly
    while nothing that has arrived is left to run.
    """
    arrivals = list(arrivals)
    bursts = list(bursts)
    _check_inputs(arrivals, bursts, quantum)
    if any(later < earlier for earlier, later in pairwise(arrivals)):
        raise ValueError("arrival times must be in non-decreasing order")

    count = len(arrivals)
    remaining = list(bursts)
    completion: list[int | None] = [None] * count
    finished = 0
    timer = arrivals[0]
    queue: deque[int] = deque()
    admitted = 0

    def admit() -> None:
        nonlocal admitted
        while admitted < count and arrivals[admitted] <= timer:
            queue.append(admitted)
            admitted += 1

    admit()
    while finished < count:
        front = queue[0]
        ran = 0
        while ran < quantum and remaining[front] > 0:
            remaining[front] -= 1
            timer += 1
            ran += 1
            admit()
        if remaining[front] == 0 and completion[front] is None:
            completion[front] = timer
            finished += 1
        if admitted < count and all(completion[i] is not None for i in queue):
            timer += 1
            admit()
        queue.rotate(-1)

    return _times(arrivals, bursts, [c for c in completion if c is not None])


def round_robin_queue(
    arrivals: Sequence[int], bursts: Sequence[int], quantum: int
) -> RoundRobinTimes:
    """Simulate round robin with a FIFO ready queue of process indices.

    Processes are considered in order of arrival, ties kept in input order.
    New arrivals are queued before a preempted process goes to the back.
    """
    arrivals = list(arrivals)
    bursts = list(bursts)
    _check_inputs(arrivals, bursts, quantum)

    order = sorted(range(len(arrivals)), key=lambda i: arrivals[i])
    remaining = list(bursts)
    completion: list[int | None] = [None] * len(arrivals)
    queued = [False] * len(arrivals)
    ready: deque[int] = deque()
    time = arrivals[order[0]]

    def check_for_new_arrivals() -> None:
        for index in order:
            if arrivals[index] <= time and not queued[index]:
                queued[index] = True
                ready.append(index)

    check_for_new_arrivals()
    while ready:
        index = ready.popleft()
        if remaining[index] <= quantum:
            time += remaining[index]
            remaining[index] = 0
            completion[index] = time
            check_for_new_arrivals()
        else:
            remaining[index] -= quantum
            time += quantum
            check_for_new_arrivals()
            ready.append(index)
        if not ready:
            waiting = [arrivals[i] for i in order if not queued[i]]
            if waiting:
                time = min(waiting)
                check_for_new_arrivals()

    return _times(arrivals, bursts, [c for c in completion if c is not None])
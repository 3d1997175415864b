"""Shortest-job-first CPU scheduling, without and with preemption."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

from algokit.schedule_report import Process, ScheduleResult, summarize


@dataclass(frozen=True)
class BurstStats:
    """Outcome of a shortest-job or shortest-remaining-time run.

    ``processes`` keeps the input order, with completion and response times
    filled in. A process starts at ``arrival_time + response_time``.
    """

    processes: list[Process]
    total_idle_time: int
    avg_turn_around_time: float
    avg_waiting_time: float
    avg_response_time: float
    cpu_utilisation: float
    throughput: float


def _fresh_copies(processes: Iterable[Process]) -> list[Process]:
    copies = [
        replace(p, completion_time=None, response_time=None) for p in processes
    ]
    if not copies:
        raise ValueError("no processes to schedule")
    if any(p.burst_time <= 0 for p in copies):
        raise ValueError("burst times must be positive")
    return copies


def _stats(done: list[Process], idle: int) -> BurstStats:
    count = len(done)
    last_completion = max(p.completion_time for p in done)
    first_arrival = min(p.arrival_time for p in done)
    return BurstStats(
        processes=done,
        total_idle_time=idle,
        avg_turn_around_time=sum(p.turn_around_time for p in done) / count,
        avg_waiting_time=sum(p.waiting_time for p in done) / count,
        avg_response_time=sum(p.response_time for p in done) / count,
        cpu_utilisation=(last_completion - idle) / last_completion * 100,
        throughput=count / (last_completion - first_arrival),
    )


def shortest_job_first(processes: Iterable[Process]) -> BurstStats:
    """Run, without preemption, the arrived process with the shortest burst.

    The clock starts at 0. Ties go to the earlier arrival, then to the
    process listed first. The input is not modified.
    """
    done = _fresh_copies(processes)
    pending = list(range(len(done)))
    time = 0
    previous = 0
    idle = 0
    while pending:
        ready = [i for i in pending if done[i].arrival_time <= time]
        if not ready:
            time = min(done[i].arrival_time for i in pending)
            continue
        index = min(ready, key=lambda i: (done[i].burst_time, done[i].arrival_time, i))
        process = done[index]
        process.response_time = time - process.arrival_time
        idle += time - previous
        time += process.burst_time
        process.completion_time = time
        previous = time
        pending.remove(index)
    return _stats(done, idle)


def shortest_remaining_time_first(processes: Iterable[Process]) -> BurstStats:
    """Run, one time unit at a time, the arrived process with least work left.

    The clock starts at 0. Ties go to the earlier arrival, then to the
    process listed first. The input is not modified.
    """
    done = _fresh_copies(processes)
    remaining = [p.burst_time for p in done]
    pending = list(range(len(done)))
    time = 0
    previous = 0
    idle = 0
    while pending:
        ready = [i for i in pending if done[i].arrival_time <= time]
        if not ready:
            time = min(done[i].arrival_time for i in pending)
            continue
        index = min(ready, key=lambda i: (remaining[i], done[i].arrival_time, i))
        process = done[index]
        if process.response_time is None:
            process.response_time = time - process.arrival_time
            idle += time - previous
        remaining[index] -= 1
        time += 1
        previous = time
        if remaining[index] == 0:
            process.completion_time = time
            pending.remove(index)
    return _stats(done, idle)


def shortest_remaining_time_queue(processes: Iterable[Process]) -> ScheduleResult:
    """Preemptive shortest remaining time, switching only when a process arrives.

    The clock starts at the first arrival. Ties go to the earlier arrival,
    then to the lower id. The Gantt chart gains an entry whenever a different
    process takes the CPU. The input is not modified.
    """
    ordered = sorted(_fresh_copies(processes), key=lambda p: (p.arrival_time, p.p_id))
    remaining = [p.burst_time for p in ordered]
    heap: list[tuple[int, int, int, int]] = []
    chart: list[tuple[int, int]] = []
    admitted = 0
    time = ordered[0].arrival_time

    def push(position: int) -> None:
        p = ordered[position]
        heapq.heappush(heap, (remaining[position], p.arrival_time, p.p_id, position))

    def admit_until(moment: int) -> None:
        nonlocal admitted
        while admitted < len(ordered) and ordered[admitted].arrival_time <= moment:
            push(admitted)
            admitted += 1

    admit_until(time)
    while heap:
        position = heapq.heappop(heap)[-1]
        current = ordered[position]
        if not chart or chart[-1][0] != current.p_id:
            chart.append((current.p_id, time))
        if current.response_time is None:
            current.response_time = time - current.arrival_time
        next_at = ordered[admitted].arrival_time if admitted < len(ordered) else None
        if next_at is None or remaining[position] <= next_at - time:
            time += remaining[position]
            remaining[position] = 0
            current.completion_time = time
        else:
            remaining[position] -= next_at - time
            time = next_at
            push(position)
        if not heap and admitted < len(ordered):
            time = ordered[admitted].arrival_time
        admit_until(time)

    return ScheduleResult(ordered, chart, summarize(ordered))


def format_burst_table(stats: BurstStats) -> str:
    """Render the per-process table and the averages to two decimals."""
    lines = ["#P\tAT\tBT\tST\tCT\tTAT\tWT\tRT\t\n\n"]
    for p in stats.processes:
        values: Sequence[int] = (
            p.p_id,
            p.arrival_time,
            p.burst_time,
            p.arrival_time + p.response_time,
            p.completion_time,
            p.turn_around_time,
            p.waiting_time,
            p.response_time,
        )
        lines.append("\t".join(str(v) for v in values) + "\t\n\n")
    lines += [
        "\n\n",
        f"Average Turnaround Time = {stats.avg_turn_around_time:.2f}\n",
        f"Average Waiting Time = {stats.avg_waiting_time:.2f}\n",
        f"Average Response Time = {stats.avg_response_time:.2f}\n",
        f"CPU Utilization = {stats.cpu_utilisation:.2f}%\n",
        f"Throughput = {stats.throughput:.2f} process/unit time\n",
    ]
    return "".join(lines)
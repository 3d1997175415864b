"""First-come, first-served CPU scheduling."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, replace

from algokit.schedule_report import Process


@dataclass(frozen=True)
class FcfsStats:
    """Averages, scheduling length and throughput of a FCFS schedule."""

    avg_waiting_time: float
    avg_turn_around_time: float
    scheduling_length: int
    throughput: float


def first_come_first_serve(processes: Iterable[Process]) -> list[Process]:
    """Run the processes in order of arrival, ties broken by id.

    Returns new process records, in run order, with their times filled in.
    """
    ordered = sorted(
        (replace(p, completion_time=None, response_time=None) for p in processes),
        key=lambda p: (p.arrival_time, p.p_id),
    )
    time: int | None = None
    for process in ordered:
        start = process.arrival_time if time is None else max(time, process.arrival_time)
        process.response_time = start - process.arrival_time
        time = start + process.burst_time
        process.completion_time = time
    return ordered


def fcfs_stats(processes: Iterable[Process]) -> FcfsStats:
    """Schedule the processes and compute the statistics of the run."""
    done = first_come_first_serve(processes)
    if not done:
        raise ValueError("no processes to schedule")
    count = len(done)
    length = max(p.completion_time for p in done) - min(p.arrival_time for p in done)
    return FcfsStats(
        avg_waiting_time=sum(p.waiting_time for p in done) / count,
        avg_turn_around_time=sum(p.turn_around_time for p in done) / count,
        scheduling_length=length,
        throughput=count / length if length else math.inf,
    )


def format_fcfs_table(processes: Iterable[Process]) -> str:
    """Schedule the processes and render the table and statistics."""
    done = first_come_first_serve(processes)
    stats = fcfs_stats(done)
    rule = "-" * 85 + "\n"
    lines = [
        rule,
        "Process ID | Arrival Time | Burst Time | Completion time   |   TAT  "
        "|   Waiting Time |   \n",
        rule,
    ]
    for p in done:
        lines.append(
            f"{p.p_id}{p.arrival_time:>16}{p.burst_time:>16}{p.completion_time:>16}"
            f"{p.turn_around_time:>16}{p.waiting_time:>16}\n"
        )
    lines += [
        "-" * 86 + "\n",
        f"Average waiting time : {stats.avg_waiting_time:g}\n",
        f"Average TAT : {stats.avg_turn_around_time:g}\n",
        f"Scheduling length : {stats.scheduling_length}\n",
        f"Throughput : {stats.throughput:g}\n",
    ]
    return "".join(lines)
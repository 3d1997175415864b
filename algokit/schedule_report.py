"""Process records and text reports shared by the CPU schedulers."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

_COLUMN_WIDTH = 19
_GANTT_CELL = 10


@dataclass
class Process:
    """A process to schedule, with the times a scheduler fills in."""

    p_id: int
    arrival_time: int
    burst_time: int
    priority: int = 0
    completion_time: int | None = None
    response_time: int | None = None

    @property
    def completed(self) -> bool:
        """Tell whether a completion time has been set."""
        return self.completion_time is not None

    @property
    def turn_around_time(self) -> int | None:
        """Time from arrival to completion, or ``None`` while unfinished."""
        if self.completion_time is None:
            return None
        return self.completion_time - self.arrival_time

    @property
    def waiting_time(self) -> int | None:
        """Turnaround time not spent running, or ``None`` while unfinished."""
        turn_around = self.turn_around_time
        if turn_around is None:
            return None
        return turn_around - self.burst_time


@dataclass(frozen=True)
class ScheduleSummary:
    """Averages and totals over a finished schedule."""

    avg_turn_around_time: float
    avg_waiting_time: float
    avg_response_time: float
    scheduling_length: float
    throughput: float


@dataclass
class ScheduleResult:
    """The processes after scheduling, the Gantt chart and the summary.

    Each Gantt entry is ``(process id, start time)``.
    """

    processes: list[Process]
    gantt_chart: list[tuple[int, int]]
    summary: ScheduleSummary
    show_priority: bool = False


def pad(text: str, width: int = _COLUMN_WIDTH) -> str:
    """Centre ``text`` in ``width`` columns, any odd space going to the left."""
    spare = width - len(text)
    if spare <= 0:
        return text
    left = spare // 2 + spare % 2
    return " " * left + text + " " * (spare - left)


def summarize(processes: Sequence[Process]) -> ScheduleSummary:
    """Compute the averages, the scheduling length and the throughput."""
    if not processes:
        raise ValueError("no processes to summarize")
    turn_around = []
    waiting = []
    response = []
    for process in processes:
        if process.completion_time is None or process.response_time is None:
            raise ValueError(f"process {process.p_id} has not finished")
        turn_around.append(process.turn_around_time)
        waiting.append(process.waiting_time)
        response.append(process.response_time)
    count = len(processes)
    length = float(max(0, *(p.completion_time for p in processes)))
    return ScheduleSummary(
        avg_turn_around_time=sum(turn_around) / count,
        avg_waiting_time=sum(waiting) / count,
        avg_response_time=sum(response) / count,
        scheduling_length=length,
        throughput=count / length if length else math.inf,
    )


def _cell(value: int | None) -> str:
    return pad(str(-1 if value is None else value))


def format_table(processes: Sequence[Process], with_priority: bool = False) -> str:
    """Render the per-process table with centred columns."""
    headers = ["Process ID", "Arrival time", "Burst Time"]
    if with_priority:
        headers.append("Priority")
    headers += ["Completion Time", "TAT", "Waiting Time", "Response Time"]
    border = "|" + "-" * (len(headers) * (_COLUMN_WIDTH + 1) - 1) + "|\n"
    lines = [border, "|" + "|".join(pad(h) for h in headers) + "|\n", border]
    for process in processes:
        values = [process.p_id, process.arrival_time, process.burst_time]
        if with_priority:
            values.append(process.priority)
        values += [
            process.completion_time,
            process.turn_around_time,
            process.waiting_time,
            process.response_time,
        ]
        lines.append("|" + "|".join(_cell(v) for v in values) + "|\n")
    lines.append(border)
    return "".join(lines)


def format_gantt_chart(chart: Sequence[tuple[int, int]], length: int) -> str:
    """Render a Gantt chart of ``(process id, start)`` slices ending at ``length``."""
    extra = sum(len(str(start)) - 1 for _, start in chart)
    line = "-" * (_GANTT_CELL * len(chart) + len(chart) + 1 + extra) + "\n"
    labels = []
    for p_id, start in chart:
        digits = len(str(start))
        shift = " " * digits if digits >= 2 else ""
        labels.append("|" + shift + pad(f"P{p_id}", _GANTT_CELL))
    times = "".join(f"{start}{pad('', _GANTT_CELL)}" for _, start in chart)
    return (
        "GANTT CHART : \n"
        + line
        + "".join(labels)
        + "|\n"
        + line
        + times
        + f"{length}\n"
    )


def format_summary(summary: ScheduleSummary) -> str:
    """Render the averages, scheduling length and throughput."""
    rows = [
        ("Average Turn Around Time", summary.avg_turn_around_time),
        ("Average Waiting Time    ", summary.avg_waiting_time),
        ("Average Response Time   ", summary.avg_response_time),
        ("Scheduling Length       ", summary.scheduling_length),
        ("Throughput              ", summary.throughput),
    ]
    return "".join(f"{label} : {value:g}\n" for label, value in rows)


def format_result(result: ScheduleResult) -> str:
    """Render the table, the Gantt chart and the summary of a schedule."""
    return (
        format_table(result.processes, result.show_priority)
        + format_gantt_chart(result.gantt_chart, int(result.summary.scheduling_length))
        + format_summary(result.summary)
    )
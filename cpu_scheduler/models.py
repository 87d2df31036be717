"""
Data model
==========

Plain dataclasses shared by the scheduling algorithms, the metrics helpers
and the GUI:

- ``Process``       the immutable input facts for one process.
- ``ProcessStats``  a process annotated with the results of one algorithm run.
- ``ScheduleEntry`` one contiguous CPU interval of the Gantt chart.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from .errors import EmptyInputSetError, InvalidInputError


@dataclass(frozen=True)
class Process:
    """
    Represents a single process for CPU scheduling.

    Attributes:
        pid:          Positive process identifier (1-based input order).
        arrival_time: The time at which the process arrives in the ready queue.
        burst_time:   The total CPU time required by the process.
        priority:     Process priority (lower number = higher priority).
    """

    pid: int
    arrival_time: int
    burst_time: int
    priority: int = 0

    @property
    def label(self) -> str:
        """Human-readable name used in tables and the Gantt chart (e.g. "P1")."""
        return f"P{self.pid}"

    def clone(self) -> "Process":
        return replace(self)

    def completed(self, completion_time: int) -> "ProcessStats":
        """Annotate this process with its completion time and derived metrics."""
        turnaround = completion_time - self.arrival_time
        return ProcessStats(
            pid=self.pid,
            arrival_time=self.arrival_time,
            burst_time=self.burst_time,
            priority=self.priority,
            completion_time=completion_time,
            turnaround_time=turnaround,
            waiting_time=turnaround - self.burst_time,
        )


@dataclass(frozen=True)
class ProcessStats:
    """Per-process metrics produced by one run of a scheduling algorithm."""

    pid: int
    arrival_time: int
    burst_time: int
    priority: int
    completion_time: int
    turnaround_time: int
    waiting_time: int

    @property
    def label(self) -> str:
        return f"P{self.pid}"


# Each schedule entry represents one contiguous CPU execution interval.
# A ``None`` pid marks an interval during which the CPU was idle.
ScheduleEntry = Dict[str, Any]  # keys: "pid", "start", "end"

# What every scheduling function returns: (Gantt schedule, stats in pid order).
ScheduleResult = Tuple[List[ScheduleEntry], List[ProcessStats]]


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_processes(processes: Sequence[Process]) -> None:
    """
    Check a process set before any simulation step runs.

    Raises:
        EmptyInputSetError: if ``processes`` is empty.
        InvalidInputError:  if a field is missing, not an integer, or out of
                            range, or if two processes share a pid.
    """
    if not processes:
        raise EmptyInputSetError("At least one process is required.")

    seen = set()
    for p in processes:
        for name in ("pid", "arrival_time", "burst_time", "priority"):
            if not _is_int(getattr(p, name, None)):
                raise InvalidInputError(
                    f"Process {getattr(p, 'pid', '?')}: {name} must be an integer."
                )
        if p.pid <= 0:
            raise InvalidInputError(f"pid must be positive. Got: {p.pid}")
        if p.pid in seen:
            raise InvalidInputError(f"Duplicate pid: {p.pid}")
        seen.add(p.pid)
        if p.arrival_time < 0:
            raise InvalidInputError(
                f"{p.label}: arrival time must be >= 0. Got: {p.arrival_time}"
            )
        if p.burst_time <= 0:
            raise InvalidInputError(
                f"{p.label}: burst time must be > 0. Got: {p.burst_time}"
            )


def validate_quantum(quantum: Optional[int]) -> int:
    """Return ``quantum`` if it is a positive integer, else raise InvalidInputError."""
    if quantum is None:
        raise InvalidInputError("Time quantum is required for Round Robin.")
    if not _is_int(quantum) or quantum <= 0:
        raise InvalidInputError(f"Time quantum must be a positive integer. Got: {quantum}")
    return quantum


def build_processes(rows: Iterable[Sequence[int]]) -> List[Process]:
    """
    Build validated processes from ``(arrival, burst, priority)`` rows.

    Pids are assigned from the 1-based position of each row.
    """
    processes: List[Process] = []
    for index, row in enumerate(rows, start=1):
        if len(row) != 3:
            raise InvalidInputError(
                f"Row {index}: expected (arrival, burst, priority). Got: {tuple(row)}"
            )
        arrival, burst, priority = row
        processes.append(
            Process(pid=index, arrival_time=arrival, burst_time=burst, priority=priority)
        )
    validate_processes(processes)
    return processes

"""Aggregate metrics computed from a finished schedule."""

from typing import Dict, List, Sequence, Tuple

from .errors import EmptyInputSetError
from .models import ProcessStats, ScheduleEntry


def average_times(stats: Sequence[ProcessStats]) -> Tuple[float, float]:
    """
    Return ``(average waiting time, average turnaround time)``.

    Values are full precision; rounding for display is left to the caller.
    """
    if not stats:
        raise EmptyInputSetError("Cannot average an empty set of processes.")
    n = len(stats)
    avg_waiting = sum(p.waiting_time for p in stats) / n
    avg_turnaround = sum(p.turnaround_time for p in stats) / n
    return avg_waiting, avg_turnaround


def idle_time(schedule: List[ScheduleEntry]) -> int:
    """Total time the CPU spent idle in ``schedule``."""
    return sum(entry["end"] - entry["start"] for entry in schedule if entry["pid"] is None)


def compute_aggregates(
    schedule: List[ScheduleEntry],
    stats: Sequence[ProcessStats],
) -> Dict[str, float]:
    """Compute aggregate metrics from a schedule and per-process stats."""
    avg_waiting, avg_turnaround = average_times(stats)

    makespan = max(p.completion_time for p in stats)
    busy_time = sum(
        entry["end"] - entry["start"] for entry in schedule if entry["pid"] is not None
    )

    return {
        "avg_waiting": avg_waiting,
        "avg_turnaround": avg_turnaround,
        "min_waiting": min(p.waiting_time for p in stats),
        "max_waiting": max(p.waiting_time for p in stats),
        "makespan": makespan,
        "busy_time": busy_time,
        "idle_time": idle_time(schedule),
        # makespan > 0 because every burst is positive
        "cpu_utilization": busy_time / makespan,
        "throughput": len(stats) / makespan,
    }

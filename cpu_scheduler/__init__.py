"""
CPU scheduling simulator.

Batch simulation of FCFS, non-preemptive SJF, non-preemptive Priority and
Round Robin scheduling, with per-process completion, turnaround and
waiting times.
"""

from .algorithms import (
    DEFAULT_QUANTUM,
    Algorithm,
    fcfs_scheduling,
    priority_scheduling,
    round_robin_scheduling,
    run_algorithm,
    run_all,
    sjf_scheduling,
)
from .errors import EmptyInputSetError, InvalidInputError, SchedulingError
from .metrics import average_times, compute_aggregates
from .models import Process, ProcessStats, ScheduleEntry, ScheduleResult, build_processes

__version__ = "1.0.0"

__all__ = [
    "Algorithm",
    "DEFAULT_QUANTUM",
    "EmptyInputSetError",
    "InvalidInputError",
    "Process",
    "ProcessStats",
    "ScheduleEntry",
    "ScheduleResult",
    "SchedulingError",
    "average_times",
    "build_processes",
    "compute_aggregates",
    "fcfs_scheduling",
    "priority_scheduling",
    "round_robin_scheduling",
    "run_algorithm",
    "run_all",
    "sjf_scheduling",
]

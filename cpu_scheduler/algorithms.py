"""
Scheduling algorithms
=====================

Pure simulation functions for the classic CPU scheduling disciplines
studied in an operating systems course:

- First-Come, First-Served (FCFS)
- Shortest Job First (SJF, non-preemptive)
- Priority Scheduling (non-preemptive, lower number = higher priority)
- Round Robin (with configurable time quantum)

Every function validates its input, works on its own sorted copy of the
process set and returns ``(schedule, stats)``:

- ``schedule`` is the Gantt chart as a list of ``{"pid", "start", "end"}``
  intervals (``pid`` is ``None`` while the CPU is idle).
- ``stats`` holds one ``ProcessStats`` per process, in pid order.

The functions never share state, so ``run_all`` can execute them on worker
threads and compare the results side by side.
"""

import logging
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import Callable, Deque, Dict, List, Optional, Sequence, Tuple, Union

from .errors import InvalidInputError
from .metrics import average_times
from .models import (
    Process,
    ProcessStats,
    ScheduleEntry,
    ScheduleResult,
    validate_processes,
    validate_quantum,
)

logger = logging.getLogger(__name__)

DEFAULT_QUANTUM = 2


class Algorithm(Enum):
    """The closed set of supported scheduling disciplines."""

    FCFS = "FCFS"
    SJF = "SJF"
    PRIORITY = "PRIORITY"
    ROUND_ROBIN = "RR"

    @property
    def label(self) -> str:
        return _ALGORITHM_LABELS[self]

    @property
    def needs_quantum(self) -> bool:
        return self is Algorithm.ROUND_ROBIN

    @classmethod
    def from_key(cls, key: str) -> "Algorithm":
        """Resolve an internal key such as "FCFS" or "rr" to an Algorithm."""
        try:
            return cls(key.strip().upper())
        except (AttributeError, ValueError):
            raise InvalidInputError(f"Unsupported algorithm key: {key!r}") from None


_ALGORITHM_LABELS: Dict[Algorithm, str] = {
    Algorithm.FCFS: "First-Come, First-Served (FCFS)",
    Algorithm.SJF: "Shortest Job First (SJF, non-preemptive)",
    Algorithm.PRIORITY: "Priority Scheduling (non-preemptive)",
    Algorithm.ROUND_ROBIN: "Round Robin (RR)",
}


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _arrival_order(processes: Sequence[Process]) -> List[Process]:
    """Private copy of the process set, sorted by arrival time then pid."""
    return sorted((p.clone() for p in processes), key=lambda p: (p.arrival_time, p.pid))


def _advance_if_idle(
    current_time: int, next_arrival: int, schedule: List[ScheduleEntry]
) -> int:
    """
    Jump the clock forward to ``next_arrival`` if nothing can run before it.

    The idle gap is recorded in the schedule. Returns the new clock value,
    which is ``current_time`` itself when the next process has already arrived.
    """
    if current_time < next_arrival:
        logger.debug("CPU idle from t=%d to t=%d", current_time, next_arrival)
        schedule.append({"pid": None, "start": current_time, "end": next_arrival})
        return next_arrival
    return current_time


def _admit_arrivals(
    procs: List[Process],
    next_index: int,
    current_time: int,
    ready_queue: Union[List[Process], Deque[Process]],
) -> int:
    """
    Append every process that has arrived by ``current_time`` to the ready queue.

    ``procs`` must be in arrival order; ``next_index`` is the first process not
    yet admitted. Returns the updated index.
    """
    while next_index < len(procs) and procs[next_index].arrival_time <= current_time:
        ready_queue.append(procs[next_index])
        next_index += 1
    return next_index


def _stats_in_pid_order(
    procs: Sequence[Process], completion_times: Dict[int, int]
) -> List[ProcessStats]:
    return [p.completed(completion_times[p.pid]) for p in sorted(procs, key=lambda p: p.pid)]


# ---------------------------------------------------------------------------
# Scheduling algorithms
# ---------------------------------------------------------------------------


def fcfs_scheduling(processes: Sequence[Process]) -> ScheduleResult:
    """
    First-Come, First-Served (FCFS) scheduling.

    Concept:
        - Non-preemptive.
        - Processes are ordered by arrival time (pid breaks ties).
        - If the CPU becomes idle (no ready process), time jumps forward
          to the arrival of the next process.

    Raises:
        EmptyInputSetError, InvalidInputError: before any step is simulated.
    """
    validate_processes(processes)
    procs = _arrival_order(processes)

    current_time = 0
    schedule: List[ScheduleEntry] = []
    completion_times: Dict[int, int] = {}

    for p in procs:
        current_time = _advance_if_idle(current_time, p.arrival_time, schedule)

        end = current_time + p.burst_time
        schedule.append({"pid": p.pid, "start": current_time, "end": end})
        completion_times[p.pid] = end
        current_time = end

    return schedule, _stats_in_pid_order(procs, completion_times)


def _non_preemptive_scheduling(
    processes: Sequence[Process], selection_key: Callable[[Process], Tuple[int, ...]]
) -> ScheduleResult:
    """
    Driver shared by SJF and Priority scheduling.

    At every decision point the ready process with the smallest
    ``selection_key`` runs to completion. Keys end in ``(arrival_time, pid)``
    so the choice is always unique.
    """
    validate_processes(processes)
    procs = _arrival_order(processes)
    n = len(procs)

    current_time = 0
    schedule: List[ScheduleEntry] = []
    completion_times: Dict[int, int] = {}

    ready_queue: List[Process] = []
    next_index = 0  # Index into procs for the next process that has not yet arrived

    while len(completion_times) < n:
        if not ready_queue:
            current_time = _advance_if_idle(
                current_time, procs[next_index].arrival_time, schedule
            )
        next_index = _admit_arrivals(procs, next_index, current_time, ready_queue)

        current = min(ready_queue, key=selection_key)
        ready_queue.remove(current)

        end = current_time + current.burst_time
        logger.debug("t=%d: dispatch %s until t=%d", current_time, current.label, end)
        schedule.append({"pid": current.pid, "start": current_time, "end": end})
        completion_times[current.pid] = end
        current_time = end

    return schedule, _stats_in_pid_order(procs, completion_times)


def sjf_scheduling(processes: Sequence[Process]) -> ScheduleResult:
    """
    Shortest Job First (SJF) scheduling, non-preemptive.

    Among the processes that have arrived, always choose the one with the
    smallest burst time; ties go to the earlier arrival, then the lower pid.
    """
    return _non_preemptive_scheduling(
        processes, lambda p: (p.burst_time, p.arrival_time, p.pid)
    )


def priority_scheduling(processes: Sequence[Process]) -> ScheduleResult:
    """
    Priority scheduling, non-preemptive.

    Convention:
        - Lower numeric priority value means *higher* priority.
          (Priority 1 is higher than 2.)
        - Ties go to the earlier arrival, then the lower pid.
    """
    return _non_preemptive_scheduling(
        processes, lambda p: (p.priority, p.arrival_time, p.pid)
    )


def round_robin_scheduling(processes: Sequence[Process], quantum: int) -> ScheduleResult:
    """
    Round Robin (RR) scheduling with a given time quantum.

    Concept:
        - Preemptive.
        - Each process gets a time slice of at most ``quantum``.
        - Processes that arrive while a slice runs join the ready queue
          *before* the preempted process is put back at its tail.
        - When the ready queue is empty, the CPU is idle until the next
          process arrives.

    Args:
        processes: Processes to schedule.
        quantum:   The time quantum (must be a positive integer).
    """
    validate_processes(processes)
    validate_quantum(quantum)
    procs = _arrival_order(processes)
    n = len(procs)

    remaining: Dict[int, int] = {p.pid: p.burst_time for p in procs}
    completion_times: Dict[int, int] = {}

    schedule: List[ScheduleEntry] = []
    ready_queue: Deque[Process] = deque()

    current_time = 0
    next_index = 0  # Next process that has not yet been inserted into the ready queue.

    while len(completion_times) < n:
        if not ready_queue:
            current_time = _advance_if_idle(
                current_time, procs[next_index].arrival_time, schedule
            )
            next_index = _admit_arrivals(procs, next_index, current_time, ready_queue)

        current = ready_queue.popleft()

        run_time = min(quantum, remaining[current.pid])
        end = current_time + run_time
        logger.debug(
            "t=%d: %s runs %d unit(s), %d left",
            current_time,
            current.label,
            run_time,
            remaining[current.pid] - run_time,
        )
        schedule.append({"pid": current.pid, "start": current_time, "end": end})

        current_time = end
        remaining[current.pid] -= run_time

        next_index = _admit_arrivals(procs, next_index, current_time, ready_queue)

        if remaining[current.pid] > 0:
            ready_queue.append(current)
        else:
            completion_times[current.pid] = current_time

    return schedule, _stats_in_pid_order(procs, completion_times)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


_NON_PREEMPTIVE: Dict[Algorithm, Callable[[Sequence[Process]], ScheduleResult]] = {
    Algorithm.FCFS: fcfs_scheduling,
    Algorithm.SJF: sjf_scheduling,
    Algorithm.PRIORITY: priority_scheduling,
}


def run_algorithm(
    algorithm: Union[Algorithm, str],
    processes: Sequence[Process],
    quantum: Optional[int] = None,
) -> ScheduleResult:
    """Run a scheduling algorithm (enum member or key) and return (schedule, stats)."""
    if not isinstance(algorithm, Algorithm):
        algorithm = Algorithm.from_key(algorithm)

    if algorithm.needs_quantum:
        schedule, stats = round_robin_scheduling(processes, quantum)
    else:
        schedule, stats = _NON_PREEMPTIVE[algorithm](processes)

    avg_waiting, avg_turnaround = average_times(stats)
    logger.info(
        "%s finished %d process(es): avg waiting %.2f, avg turnaround %.2f",
        algorithm.value,
        len(stats),
        avg_waiting,
        avg_turnaround,
    )
    return schedule, stats


def run_all(
    processes: Sequence[Process],
    quantum: Optional[int] = DEFAULT_QUANTUM,
    max_workers: Optional[int] = None,
) -> Dict[Algorithm, ScheduleResult]:
    """
    Run every algorithm on the same process set, one worker thread each.

    Input is validated once, before any worker starts. If ``quantum`` is
    ``None`` Round Robin is left out of the comparison.
    """
    validate_processes(processes)
    algorithms = list(Algorithm)
    if quantum is None:
        logger.info("No time quantum given; skipping Round Robin in comparison")
        algorithms.remove(Algorithm.ROUND_ROBIN)
    else:
        validate_quantum(quantum)

    results: Dict[Algorithm, ScheduleResult] = {}
    with ThreadPoolExecutor(max_workers=max_workers or len(algorithms)) as executor:
        futures = {
            algorithm: executor.submit(run_algorithm, algorithm, processes, quantum)
            for algorithm in algorithms
        }
        for algorithm, future in futures.items():
            results[algorithm] = future.result()
    return results

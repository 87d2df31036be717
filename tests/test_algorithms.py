"""Tests for the four scheduling algorithms and their dispatch."""

import pytest

from cpu_scheduler.algorithms import (
    Algorithm,
    fcfs_scheduling,
    priority_scheduling,
    round_robin_scheduling,
    run_algorithm,
    run_all,
    sjf_scheduling,
)
from cpu_scheduler.errors import EmptyInputSetError, InvalidInputError
from cpu_scheduler.metrics import average_times
from cpu_scheduler.models import Process, build_processes


def _ct(stats):
    return [p.completion_time for p in stats]


def _wt(stats):
    return [p.waiting_time for p in stats]


def _order(schedule):
    return [entry["pid"] for entry in schedule if entry["pid"] is not None]


class TestFCFS:
    def test_three_processes(self, three_processes):
        _, stats = fcfs_scheduling(three_processes)
        assert _ct(stats) == [5, 8, 16]
        assert [p.turnaround_time for p in stats] == [5, 7, 14]
        assert _wt(stats) == [0, 4, 6]

    def test_results_in_pid_order_regardless_of_arrival(self):
        processes = build_processes([(6, 2, 0), (0, 3, 0), (1, 1, 0)])
        schedule, stats = fcfs_scheduling(processes)
        assert [p.pid for p in stats] == [1, 2, 3]
        assert _order(schedule) == [2, 3, 1]
        assert _ct(stats) == [8, 3, 4]

    def test_arrival_ties_broken_by_pid(self):
        processes = build_processes([(0, 4, 0), (0, 1, 0), (0, 2, 0)])
        schedule, _ = fcfs_scheduling(processes)
        assert _order(schedule) == [1, 2, 3]

    def test_idle_gaps_recorded(self, idle_gap_processes):
        schedule, stats = fcfs_scheduling(idle_gap_processes)
        assert schedule == [
            {"pid": None, "start": 0, "end": 3},
            {"pid": 1, "start": 3, "end": 5},
            {"pid": None, "start": 5, "end": 10},
            {"pid": 2, "start": 10, "end": 14},
            {"pid": 3, "start": 14, "end": 15},
        ]
        assert _ct(stats) == [5, 14, 15]


class TestSJF:
    def test_shortest_ready_job_runs_next(self):
        # P1 holds the CPU until t=8; then P4 < P3 < P2 by burst.
        processes = build_processes([(0, 8, 1), (1, 4, 1), (2, 2, 1), (3, 1, 1)])
        schedule, stats = sjf_scheduling(processes)
        assert _order(schedule) == [1, 4, 3, 2]
        assert _ct(stats) == [8, 15, 11, 9]
        assert _wt(stats) == [0, 10, 7, 5]
        assert average_times(stats)[0] == pytest.approx(5.5)

    def test_is_non_preemptive(self):
        processes = build_processes([(0, 10, 0), (1, 1, 0)])
        _, stats = sjf_scheduling(processes)
        assert _ct(stats) == [10, 11]

    def test_burst_ties_broken_by_pid(self):
        processes = build_processes([(0, 3, 0), (0, 3, 0), (0, 1, 0)])
        schedule, _ = sjf_scheduling(processes)
        assert _order(schedule) == [3, 1, 2]

    def test_burst_ties_broken_by_arrival_before_pid(self):
        processes = build_processes([(0, 10, 0), (2, 3, 0), (1, 3, 0)])
        schedule, stats = sjf_scheduling(processes)
        assert _order(schedule) == [1, 3, 2]
        assert _ct(stats) == [10, 16, 13]

    def test_idle_jump_to_next_arrival(self):
        processes = build_processes([(5, 2, 0), (20, 1, 0), (21, 3, 0)])
        schedule, stats = sjf_scheduling(processes)
        assert schedule[0] == {"pid": None, "start": 0, "end": 5}
        assert {"pid": None, "start": 7, "end": 20} in schedule
        assert _ct(stats) == [7, 21, 24]


class TestPriority:
    def test_lower_value_runs_first(self):
        processes = build_processes([(0, 2, 3), (0, 3, 1), (0, 4, 2)])
        schedule, stats = priority_scheduling(processes)
        assert _order(schedule) == [2, 3, 1]
        assert _ct(stats) == [9, 3, 7]

    def test_starvation_scenario(self):
        processes = build_processes(
            [(0, 20, 5), (2, 3, 1), (4, 4, 1), (6, 2, 1), (8, 1, 1)]
        )
        schedule, stats = priority_scheduling(processes)
        assert _order(schedule) == [1, 2, 3, 4, 5]
        assert _ct(stats) == [20, 23, 27, 29, 30]

    def test_priority_ties_broken_by_arrival_then_pid(self):
        processes = build_processes([(0, 5, 0), (3, 1, 2), (1, 1, 2), (1, 1, 2)])
        schedule, _ = priority_scheduling(processes)
        assert _order(schedule) == [1, 3, 4, 2]


class TestRoundRobin:
    def test_two_processes_alternate(self):
        processes = build_processes([(0, 4, 0), (0, 4, 0)])
        schedule, stats = round_robin_scheduling(processes, quantum=2)
        assert [(e["pid"], e["start"], e["end"]) for e in schedule] == [
            (1, 0, 2),
            (2, 2, 4),
            (1, 4, 6),
            (2, 6, 8),
        ]
        assert _ct(stats) == [6, 8]
        assert [p.turnaround_time for p in stats] == [6, 8]
        assert _wt(stats) == [2, 4]
        assert average_times(stats) == (3.0, 7.0)

    def test_three_processes(self, three_processes):
        _, stats = round_robin_scheduling(three_processes, quantum=2)
        assert _ct(stats) == [12, 9, 16]
        assert _wt(stats) == [7, 5, 6]

    def test_arrivals_join_before_preempted_process(self):
        # P2 arrives exactly when P1's slice ends and must run before P1 resumes.
        processes = build_processes([(0, 3, 0), (2, 2, 0)])
        schedule, stats = round_robin_scheduling(processes, quantum=2)
        assert _order(schedule) == [1, 2, 1]
        assert _ct(stats) == [5, 4]

    def test_bootstrap_and_idle_gaps(self, idle_gap_processes):
        schedule, stats = round_robin_scheduling(idle_gap_processes, quantum=2)
        assert schedule[0] == {"pid": None, "start": 0, "end": 3}
        assert {"pid": None, "start": 5, "end": 10} in schedule
        assert _order(schedule) == [1, 2, 3, 2]
        assert _ct(stats) == [5, 15, 13]

    def test_short_last_slice(self):
        processes = build_processes([(0, 5, 0)])
        schedule, stats = round_robin_scheduling(processes, quantum=3)
        assert [(e["start"], e["end"]) for e in schedule] == [(0, 3), (3, 5)]
        assert _ct(stats) == [5]

    @pytest.mark.parametrize("quantum", [0, -1, None])
    def test_invalid_quantum_rejected(self, three_processes, quantum):
        with pytest.raises(InvalidInputError):
            round_robin_scheduling(three_processes, quantum)


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_single_process(algorithm):
    processes = build_processes([(0, 4, 1)])
    _, stats = run_algorithm(algorithm, processes, quantum=2)
    assert (stats[0].completion_time, stats[0].turnaround_time, stats[0].waiting_time) == (
        4,
        4,
        0,
    )


@pytest.mark.parametrize("algorithm", list(Algorithm))
@pytest.mark.parametrize(
    "processes",
    [
        [Process(1, 0, 0, 1)],
        [Process(1, -1, 3, 1)],
        [Process(1, 0, 3, 1), Process(2, 2, 0, 1)],
    ],
)
def test_invalid_process_rejected(algorithm, processes):
    with pytest.raises(InvalidInputError):
        run_algorithm(algorithm, processes, quantum=2)


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_empty_set_rejected(algorithm):
    with pytest.raises(EmptyInputSetError):
        run_algorithm(algorithm, [], quantum=2)


class TestDispatch:
    def test_from_key(self):
        assert Algorithm.from_key("fcfs") is Algorithm.FCFS
        assert Algorithm.from_key(" RR ") is Algorithm.ROUND_ROBIN
        assert Algorithm.from_key("Priority") is Algorithm.PRIORITY

    @pytest.mark.parametrize("key", ["SRTF", "", None])
    def test_unknown_key_rejected(self, key):
        with pytest.raises(InvalidInputError):
            Algorithm.from_key(key)

    def test_only_round_robin_needs_quantum(self):
        assert [a for a in Algorithm if a.needs_quantum] == [Algorithm.ROUND_ROBIN]

    def test_run_algorithm_accepts_key(self, three_processes):
        assert run_algorithm("RR", three_processes, 2) == round_robin_scheduling(
            three_processes, 2
        )
        assert run_algorithm("SJF", three_processes) == sjf_scheduling(three_processes)

    def test_quantum_ignored_by_non_preemptive(self, three_processes):
        assert run_algorithm(Algorithm.FCFS, three_processes, quantum=0) == fcfs_scheduling(
            three_processes
        )

    def test_round_robin_requires_quantum(self, three_processes):
        with pytest.raises(InvalidInputError):
            run_algorithm(Algorithm.ROUND_ROBIN, three_processes)


class TestRunAll:
    def test_matches_individual_runs(self, three_processes):
        results = run_all(three_processes, quantum=2)
        assert list(results) == list(Algorithm)
        assert results[Algorithm.FCFS] == fcfs_scheduling(three_processes)
        assert results[Algorithm.SJF] == sjf_scheduling(three_processes)
        assert results[Algorithm.PRIORITY] == priority_scheduling(three_processes)
        assert results[Algorithm.ROUND_ROBIN] == round_robin_scheduling(three_processes, 2)

    def test_without_quantum_skips_round_robin(self, three_processes):
        results = run_all(three_processes, quantum=None)
        assert Algorithm.ROUND_ROBIN not in results
        assert len(results) == 3

    def test_single_worker(self, three_processes):
        assert run_all(three_processes, 2, max_workers=1) == run_all(three_processes, 2)

    def test_validates_before_running(self, three_processes):
        with pytest.raises(InvalidInputError):
            run_all(three_processes, quantum=0)
        with pytest.raises(EmptyInputSetError):
            run_all([], quantum=2)

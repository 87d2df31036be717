"""Properties every algorithm must satisfy on any valid input."""

import random

import pytest

from cpu_scheduler.algorithms import (
    Algorithm,
    fcfs_scheduling,
    priority_scheduling,
    round_robin_scheduling,
    run_algorithm,
    sjf_scheduling,
)
from cpu_scheduler.metrics import idle_time
from cpu_scheduler.models import build_processes
from cpu_scheduler.scenarios import SCENARIOS, load_scenario

SEEDS = range(8)


def _random_processes(seed, n=7, same_burst=False, same_priority=False):
    rng = random.Random(seed)
    return build_processes(
        (
            rng.randint(0, 20),
            3 if same_burst else rng.randint(1, 9),
            1 if same_priority else rng.randint(0, 4),
        )
        for _ in range(n)
    )


def _process_sets():
    sets = [load_scenario(name) for name in SCENARIOS]
    sets.extend(_random_processes(seed) for seed in SEEDS)
    return sets


@pytest.mark.parametrize("algorithm", list(Algorithm))
@pytest.mark.parametrize("quantum", [1, 2, 5])
def test_metric_identities(algorithm, quantum):
    for processes in _process_sets():
        _, stats = run_algorithm(algorithm, processes, quantum)
        assert [p.pid for p in stats] == [p.pid for p in processes]
        for p in stats:
            assert p.turnaround_time == p.completion_time - p.arrival_time
            assert p.waiting_time == p.turnaround_time - p.burst_time
            assert p.waiting_time >= 0
            assert p.completion_time >= p.arrival_time + p.burst_time


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_schedule_covers_timeline_without_gaps(algorithm):
    for processes in _process_sets():
        schedule, stats = run_algorithm(algorithm, processes, 2)
        assert schedule[0]["start"] == 0
        for previous, current in zip(schedule, schedule[1:]):
            assert previous["end"] == current["start"]
        makespan = max(p.completion_time for p in stats)
        assert schedule[-1]["end"] == makespan
        assert sum(p.burst_time for p in processes) == makespan - idle_time(schedule)


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_repeated_runs_are_identical(algorithm):
    processes = _random_processes(seed=42, n=10)
    snapshot = list(processes)
    first = run_algorithm(algorithm, processes, 3)
    for _ in range(3):
        assert run_algorithm(algorithm, processes, 3) == first
    assert processes == snapshot


@pytest.mark.parametrize("seed", SEEDS)
def test_fcfs_completes_in_arrival_order(seed):
    processes = _random_processes(seed)
    _, stats = fcfs_scheduling(processes)
    by_arrival = sorted(stats, key=lambda p: (p.arrival_time, p.pid))
    completions = [p.completion_time for p in by_arrival]
    assert completions == sorted(completions)


@pytest.mark.parametrize("seed", SEEDS)
def test_round_robin_with_large_quantum_matches_fcfs(seed):
    processes = _random_processes(seed)
    quantum = max(p.burst_time for p in processes)
    assert round_robin_scheduling(processes, quantum)[1] == fcfs_scheduling(processes)[1]


@pytest.mark.parametrize("seed", SEEDS)
def test_sjf_with_equal_bursts_matches_fcfs(seed):
    processes = _random_processes(seed, same_burst=True)
    assert sjf_scheduling(processes) == fcfs_scheduling(processes)


@pytest.mark.parametrize("seed", SEEDS)
def test_priority_with_equal_priorities_matches_fcfs(seed):
    processes = _random_processes(seed, same_priority=True)
    assert priority_scheduling(processes) == fcfs_scheduling(processes)

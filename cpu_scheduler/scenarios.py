"""
Example scenarios for quickly loading demo datasets.

Each scenario is a list of ``(arrival, burst, priority)`` rows; pids are
assigned from the row order.
"""

from typing import Dict, List, Tuple

from .models import Process, build_processes

SCENARIOS: Dict[str, List[Tuple[int, int, int]]] = {
    "Simple FCFS demo": [
        (0, 5, 2),
        (2, 3, 1),
        (4, 1, 3),
        (6, 7, 2),
    ],
    "Starvation example (Priority)": [
        # One low-priority job arrives first, many high-priority jobs arrive later.
        (0, 20, 5),  # P1, low priority, long job
        (2, 3, 1),   # P2, high priority
        (4, 4, 1),   # P3, high priority
        (6, 2, 1),   # P4, high priority
        (8, 1, 1),   # P5, high priority
    ],
    "Convoy effect (FCFS vs SJF)": [
        (0, 8, 1),
        (1, 4, 1),
        (2, 2, 1),
        (3, 1, 1),
    ],
    "Idle CPU gaps": [
        (3, 2, 2),
        (10, 4, 1),
        (11, 1, 3),
    ],
    "Round Robin time slicing": [
        (0, 5, 2),
        (1, 3, 1),
        (2, 8, 3),
    ],
}


def scenario_names() -> List[str]:
    return list(SCENARIOS)


def load_scenario(name: str) -> List[Process]:
    """Build the processes of a named scenario (KeyError if unknown)."""
    return build_processes(SCENARIOS[name])

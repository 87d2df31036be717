"""
Parsing of the raw text typed into the GUI entry fields.

The helpers raise ``InvalidInputError`` with a message suitable for showing
to the user directly.
"""

from typing import Optional, Tuple

from .errors import InvalidInputError


def parse_process_fields(
    arrival_text: str, burst_text: str, priority_text: str = ""
) -> Tuple[int, int, int]:
    """
    Parse arrival time, burst time and priority from entry text.

    Arrival time and burst time must be integers; burst time must be > 0,
    and arrival time must be >= 0. Priority is optional (defaults to 0
    if left blank).
    """
    try:
        arrival = int(arrival_text.strip())
        burst = int(burst_text.strip())
    except ValueError:
        raise InvalidInputError("Arrival and burst times must be integers.") from None

    if arrival < 0 or burst <= 0:
        raise InvalidInputError("Arrival time must be >= 0 and burst time must be > 0.")

    priority_text = priority_text.strip()
    if not priority_text:
        return arrival, burst, 0
    try:
        priority = int(priority_text)
    except ValueError:
        raise InvalidInputError("Priority must be an integer if specified.") from None
    return arrival, burst, priority


def parse_quantum(quantum_text: str, required: bool = True) -> Optional[int]:
    """
    Parse the Round Robin time quantum.

    Returns ``None`` for blank text when ``required`` is false.
    """
    quantum_text = quantum_text.strip()
    if not quantum_text:
        if required:
            raise InvalidInputError("Please enter a time quantum for Round Robin.")
        return None
    try:
        quantum = int(quantum_text)
    except ValueError:
        raise InvalidInputError("Time quantum must be a positive integer.") from None
    if quantum <= 0:
        raise InvalidInputError("Time quantum must be a positive integer.")
    return quantum

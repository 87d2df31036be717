"""
Error taxonomy for the scheduling engine.

All errors derive from ``ValueError`` so that callers which only know about
the built-in exception (for example the GUI's message-box handler) keep
working unchanged.
"""


class SchedulingError(ValueError):
    """Base class for every error raised by the scheduling engine."""


class InvalidInputError(SchedulingError):
    """A process field, the time quantum, or an algorithm key is invalid."""


class EmptyInputSetError(SchedulingError):
    """The process set is empty; there is nothing to schedule."""

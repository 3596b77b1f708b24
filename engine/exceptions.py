"""
Engine Exceptions

Raised synchronously to the caller of the playback controller and the
run facade.  A search that finds nothing is NOT an error: drivers report
the NOT_FOUND sentinel instead.
"""

from structures.exceptions import WorkingSetError


class InvalidTransition(RuntimeError):
    """Raised when a control is used from a state that does not allow it (e.g. pause() while not running)."""

    def __init__(self, operation: str, state):
        self.operation = operation
        self.state = state
        label = getattr(state, "value", state)
        super().__init__(f"Cannot {operation}() while {label}")


class DriverInvariantError(RuntimeError):
    """Raised when a driver emits a corrupted snapshot sequence. Always a programming error."""
    pass


__all__ = ["InvalidTransition", "DriverInvariantError", "WorkingSetError"]

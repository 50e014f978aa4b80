"""
Error kinds raised by seqpos.

All of these are contract violations, not transient faults. They are raised
at the call that breaks the contract and are never retried.

Each one also derives from the closest built-in exception so callers that
already catch IndexError / TypeError keep working.
"""


class PositionError(Exception):
    """Base class for every seqpos error."""
    pass


class InvalidPosition(PositionError, LookupError):
    """
    Raised when a position is used as if it denoted a live element.

    Examples:
        - dereferencing the end sentinel
        - using a position whose sequence no longer exists
        - a PositionalInsert whose position belongs to another sequence
    """
    pass


class UnsupportedOperation(PositionError, TypeError):
    """
    Raised when an operation needs a capability the target lacks.

    Examples:
        - retreating a ForwardOnly position
        - offset / difference on a Bidirectional position
        - appending to a destination with no append primitive
    """
    pass


class OutOfRange(PositionError, IndexError):
    """Raised when advancing or retreating past a sequence's bounds."""
    pass


class Unreachable(PositionError, ValueError):
    """Raised by distance() when `last` cannot be reached from `first`."""
    pass

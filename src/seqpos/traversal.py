"""
Traversal algorithms: advance, next_position, prev_position, distance.

Each algorithm is a functools.singledispatch function keyed on the
position class, so the tier decides the implementation:

    advance        RandomAccess: O(1) offset     others: step loop
    distance       RandomAccess: O(1) difference others: counted scan

A ForwardOnly position can never move backward. Running past either end
of a sequence raises OutOfRange; a looping advance that fails part way
leaves the position at the bound it reached.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Optional

from seqpos.config import Settings
from seqpos.errors import Unreachable, UnsupportedOperation
from seqpos.position import BidirectionalPosition, Position, RandomAccessPosition

logger = logging.getLogger(__name__)


def _step_forward(position: Position, n: int) -> None:
    for _ in range(n):
        position.increment()


def _step_backward(position: BidirectionalPosition, n: int) -> None:
    for _ in range(n):
        position.decrement()


# =========================================================================
# advance
# =========================================================================

@functools.singledispatch
def advance_stepwise(position: Any, n: int = 1) -> Position:
    """
    Move `position` by `n` one step at a time, in place, and return it.

    This is the loop form of advance() for every tier, including
    RandomAccess positions.
    """
    raise UnsupportedOperation(f"{type(position).__name__} is not a Position")


@advance_stepwise.register(Position)
def _advance_forward_only(position: Position, n: int = 1) -> Position:
    if n < 0:
        raise UnsupportedOperation(
            f"Cannot move a {position.capability.name} position backward by {-n}"
        )
    _step_forward(position, n)
    return position


@advance_stepwise.register(BidirectionalPosition)
def _advance_bidirectional(position: BidirectionalPosition, n: int = 1) -> Position:
    if n > 0:
        _step_forward(position, n)
    elif n < 0:
        _step_backward(position, -n)
    return position


@functools.singledispatch
def advance(position: Any, n: int = 1) -> Position:
    """
    Move `position` by `n` elements in place and return it.

    Args:
        position: Position to move (mutated)
        n: Signed step count. Negative steps need Bidirectional or better.

    Returns:
        The same position object

    Raises:
        UnsupportedOperation: n < 0 on a ForwardOnly position
        OutOfRange: the move leaves [begin, end]
    """
    return advance_stepwise(position, n)


@advance.register(RandomAccessPosition)
def _advance_random_access(position: RandomAccessPosition, n: int = 1) -> Position:
    position.offset(n)
    return position


# =========================================================================
# next / prev
# =========================================================================

def next_position(position: Position, n: int = 1) -> Position:
    """Return a copy of `position` moved forward by `n`. `position` is untouched."""
    return advance(position.copy(), n)


@functools.singledispatch
def prev_position(position: Any, n: int = 1) -> Position:
    """
    Return a copy of `position` moved backward by `n`. `position` is untouched.

    Raises:
        UnsupportedOperation: position is ForwardOnly (whatever n is)
    """
    capability = getattr(position, "capability", None)
    tier = capability.name if capability is not None else type(position).__name__
    raise UnsupportedOperation(f"prev_position requires a bidirectional position, got {tier}")


@prev_position.register(BidirectionalPosition)
def _prev_bidirectional(position: BidirectionalPosition, n: int = 1) -> Position:
    return advance(position.copy(), -n)


# =========================================================================
# distance
# =========================================================================

@functools.singledispatch
def distance(first: Any, last: Any, limit: Optional[int] = None, *,
             settings: Optional[Settings] = None) -> int:
    """
    Number of forward steps from `first` to `last`.

    RandomAccess positions answer in O(1) and may return a negative count
    when `last` precedes `first`. Other tiers scan forward from `first`.

    Args:
        first: Start position
        last: Position forward-reachable from `first` in the same sequence
        limit: Maximum steps to scan for non-random-access positions.
               Takes precedence over settings.
        settings: Source of distance_scan_limit when limit is not given.
                  Without either the scan is bounded only by the end sentinel.

    Raises:
        Unreachable: the scan hit the end sentinel or the limit without
                     meeting `last`, or the positions share no sequence
    """
    raise UnsupportedOperation(f"{type(first).__name__} is not a Position")


@distance.register(Position)
def _distance_scan(first: Position, last: Any, limit: Optional[int] = None, *,
                   settings: Optional[Settings] = None) -> int:
    if limit is None and settings is not None:
        limit = settings.distance_scan_limit

    cursor = first.copy()
    count = 0
    while cursor != last:
        if cursor.is_end:
            logger.debug("distance scan reached the end sentinel after %d steps", count)
            raise Unreachable(f"End sentinel reached after {count} steps without meeting last")
        if limit is not None and count >= limit:
            logger.debug("distance scan stopped at limit %d", limit)
            raise Unreachable(f"last not reached within {limit} steps")
        cursor.increment()
        count += 1
    return count


@distance.register(RandomAccessPosition)
def _distance_random_access(first: RandomAccessPosition, last: Any, limit: Optional[int] = None, *,
                            settings: Optional[Settings] = None) -> int:
    return first.difference_to(last)

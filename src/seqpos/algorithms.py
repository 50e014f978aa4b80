"""
Insertion-copy algorithms.

copy_into() walks a source range [first, last) forward and hands each
element to an Inserter strategy. There is a single copy loop; the strategy
decides whether elements are appended or spliced in before a position.

Complexity:
    AppendInsert       O(k) amortized for k copied elements
    PositionalInsert   O(k + m), m = destination elements shifted
                       (m = 0 for node-based destinations)

PRECONDITION (source and destination are the same sequence):
    A source taken through a View counts as the View's store.
    Only AppendInsert into a random-access destination is accepted, and it
    copies the range as it was when the call started. Every other self-copy
    raises UnsupportedOperation before anything is written, unless the
    caller passes Settings(check_aliasing=False), in which case behavior is
    undefined.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from seqpos.config import Settings
from seqpos.errors import OutOfRange, UnsupportedOperation
from seqpos.inserters import Inserter
from seqpos.position import Position
from seqpos.view import View

logger = logging.getLogger(__name__)

_DEFAULT_SETTINGS = Settings()


def _source_sequence(first: Position) -> Any:
    """The object whose elements `first` reads, looking through Views."""
    anchor = first._anchor()
    while isinstance(anchor, View):
        anchor = anchor.store
    return anchor


def _check_aliasing(first: Position, strategy: Inserter, settings: Optional[Settings]) -> None:
    if not (settings or _DEFAULT_SETTINGS).check_aliasing:
        return
    if _source_sequence(first) is strategy.destination and not strategy.tolerates_self_copy:
        raise UnsupportedOperation(
            f"Cannot copy a range of {type(strategy.destination).__name__} into itself "
            f"with {type(strategy).__name__}"
        )


def copy_into(first: Position, last: Position, strategy: Inserter, *,
              settings: Optional[Settings] = None) -> Inserter:
    """
    Copy every element of [first, last), in order, through `strategy`.

    Args:
        first: Start of the source range
        last: End of the source range (forward-reachable from first)
        strategy: AppendInsert or PositionalInsert bound to the destination
        settings: Optional Settings; only check_aliasing is read

    Returns:
        The strategy, so further puts continue where this copy stopped

    Raises:
        UnsupportedOperation: unsafe self-copy
        OutOfRange: the source ran out before reaching `last`; elements
                    copied up to that point stay in the destination
    """
    _check_aliasing(first, strategy, settings)

    cursor = first.copy()
    copied = 0
    while cursor != last:
        if cursor.is_end:
            raise OutOfRange(f"Source range ended after {copied} elements without reaching last")
        strategy.put(cursor.deref())
        cursor.increment()
        copied += 1

    logger.debug("Copied %d elements with %s", copied, type(strategy).__name__)
    return strategy


def copy_n_into(first: Position, n: int, strategy: Inserter, *,
                settings: Optional[Settings] = None) -> Inserter:
    """
    Copy exactly `n` elements starting at `first` through `strategy`.

    Raises:
        ValueError: n is negative
        UnsupportedOperation: unsafe self-copy
        OutOfRange: fewer than n elements remain after `first`
    """
    if n < 0:
        raise ValueError(f"Element count must be non-negative, got {n}")
    _check_aliasing(first, strategy, settings)

    cursor = first.copy()
    for copied in range(n):
        if cursor.is_end:
            raise OutOfRange(f"Source ran out after {copied} of {n} elements")
        strategy.put(cursor.deref())
        cursor.increment()

    logger.debug("Copied %d elements with %s", n, type(strategy).__name__)
    return strategy

"""
Inserter strategies.

An inserter describes HOW copied elements are written into a destination.
The copy algorithm only ever calls `put(value)`; the strategy is chosen
once at the call site.

    AppendInsert(dest)          dest.append(value) for each element
    PositionalInsert(dest, at)  dest.insert_before(...) before `at`

Destinations are duck-typed: any object with the matching mutation
primitive qualifies (ArraySequence, LinkedSequence, ForwardList for
append, or a caller's own container).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from seqpos.errors import InvalidPosition, UnsupportedOperation
from seqpos.position import Capability, Position


class Inserter(ABC):
    """Base class for insertion strategies."""

    destination: Any
    inserted: int

    @abstractmethod
    def put(self, value: Any) -> None:
        """Write one element into the destination."""

    @property
    @abstractmethod
    def tolerates_self_copy(self) -> bool:
        """True if a range of the destination itself may be copied through this strategy."""


@dataclass(eq=False)
class AppendInsert(Inserter):
    """
    Appends every element at the destination's logical end.

    Final layout: original destination ++ copied elements.

    Properties:
        destination: Container with an append(value) method
        inserted: Number of elements written so far
    """

    destination: Any
    inserted: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if not callable(getattr(self.destination, "append", None)):
            raise UnsupportedOperation(
                f"{type(self.destination).__name__} does not support append"
            )

    def put(self, value: Any) -> None:
        self.destination.append(value)
        self.inserted += 1

    @property
    def tolerates_self_copy(self) -> bool:
        # Index positions survive growth at the end; node positions to the
        # end sentinel do not.
        capability = getattr(self.destination, "capability", None)
        return capability is Capability.RANDOM_ACCESS


@dataclass(eq=False)
class PositionalInsert(Inserter):
    """
    Inserts elements immediately before a position, in source order.

    Elements originally at or after `at` end up after every inserted
    element. Inserting at begin() prepends; at end() appends.

    Properties:
        destination: Container with insert_before(position, value)
        at: Position into `destination`. Not modified; the inserter keeps
            its own cursor.
        inserted: Number of elements written so far

    INVARIANT:
        `at` belongs to `destination` (same instance).
    """

    destination: Any
    at: Position
    inserted: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if not callable(getattr(self.destination, "insert_before", None)):
            raise UnsupportedOperation(
                f"{type(self.destination).__name__} does not support insertion before a position"
            )
        if not isinstance(self.at, Position) or self.at._anchor() is not self.destination:
            raise InvalidPosition("Insert position does not belong to the destination")
        self._cursor = self.at.copy()

    @property
    def cursor(self) -> Position:
        """Position the next element will be inserted before."""
        return self._cursor.copy()

    def put(self, value: Any) -> None:
        inserted_at = self.destination.insert_before(self._cursor, value)
        inserted_at.increment()
        self._cursor = inserted_at
        self.inserted += 1

    @property
    def tolerates_self_copy(self) -> bool:
        return False


def back_inserter(destination: Any) -> AppendInsert:
    return AppendInsert(destination)


def inserter(destination: Any, at: Position) -> PositionalInsert:
    return PositionalInsert(destination, at)

"""
Positions and Capability Tiers

A Position is an opaque handle to a location within a sequence. It is either
dereferenceable (denotes a live element) or equal to the sequence's end
sentinel (one past the last element, never dereferenceable).

The capability tier of a Position is part of its CLASS:

    Position                  ForwardOnly     increment()
    BidirectionalPosition     Bidirectional   + decrement()
    RandomAccessPosition      RandomAccess    + offset(n), difference_to(other)

Algorithms dispatch on the class hierarchy, never on a runtime tag.

ARCHITECTURAL RULE:
    A Position never owns its sequence.
    Invalidation after a relocating mutation is the caller's responsibility
    and is NOT checked here.
"""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar, Optional

from seqpos.errors import InvalidPosition, OutOfRange, Unreachable


class Capability(Enum):
    """
    Traversal capability tiers, ordered weakest to strongest.

    Every tier supports everything the tiers below it support.
    """

    FORWARD_ONLY = 1
    BIDIRECTIONAL = 2
    RANDOM_ACCESS = 3

    def at_least(self, other: Capability) -> bool:
        return self.value >= other.value


class Position(ABC):
    """
    Base class for all positions (ForwardOnly tier).

    Subclasses provide:
        _anchor():  the backing sequence, or None if it no longer exists
        _slot():    what the position denotes inside that sequence
        increment(), deref(), assign(), copy(), is_end

    Equality compares the denoted location (same sequence instance, same
    slot). The capability tier plays no part in it.
    """

    capability: ClassVar[Capability] = Capability.FORWARD_ONLY

    # Positions are mutable, so they are not hashable.
    __hash__ = None  # type: ignore[assignment]

    @abstractmethod
    def _anchor(self) -> Optional[Any]:
        ...

    @abstractmethod
    def _slot(self) -> Any:
        ...

    @property
    @abstractmethod
    def is_end(self) -> bool:
        """True if this position is the end sentinel."""

    @abstractmethod
    def increment(self) -> None:
        """Step forward by one. Raises OutOfRange at the end sentinel."""

    @abstractmethod
    def deref(self) -> Any:
        """Return the denoted element. Raises InvalidPosition at the end sentinel."""

    @abstractmethod
    def assign(self, value: Any) -> None:
        """Overwrite the denoted element."""

    @abstractmethod
    def copy(self) -> Position:
        ...

    @property
    def sequence(self) -> Any:
        """The sequence this position points into."""
        anchor = self._anchor()
        if anchor is None:
            raise InvalidPosition("Position refers to a sequence that no longer exists")
        return anchor

    @property
    def value(self) -> Any:
        return self.deref()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._anchor() is other._anchor() and self._slot() == other._slot()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result


class BidirectionalPosition(Position):
    """A position that can also step backward."""

    capability: ClassVar[Capability] = Capability.BIDIRECTIONAL

    @abstractmethod
    def decrement(self) -> None:
        """Step backward by one. Raises OutOfRange at the first element."""


class RandomAccessPosition(BidirectionalPosition):
    """
    A position supporting constant-time jumps and differences.

    offset(n) and difference_to(other) must both be O(1).
    """

    capability: ClassVar[Capability] = Capability.RANDOM_ACCESS

    @abstractmethod
    def offset(self, n: int) -> None:
        """Move by n elements in O(1). Raises OutOfRange outside [begin, end]."""

    @abstractmethod
    def difference_to(self, other: RandomAccessPosition) -> int:
        """Signed number of forward steps from self to other, in O(1)."""


@functools.total_ordering
class IndexPosition(RandomAccessPosition):
    """
    Random-access position over any indexable store.

    The store only has to provide __len__ and __getitem__ (and __setitem__
    for assign). Lists, tuples, ArraySequence and View all qualify.

    Properties:
        store:
            The indexable object this position points into.
            Held by reference, never copied.

        index:
            Offset from the first element.
            index == len(store) is the end sentinel.
    """

    __slots__ = ("_store", "_index")

    def __init__(self, store: Any, index: int = 0):
        self._store = store
        self._index = index

    @property
    def store(self) -> Any:
        return self._store

    @property
    def index(self) -> int:
        return self._index

    def _anchor(self) -> Any:
        return self._store

    def _slot(self) -> int:
        return self._index

    @property
    def is_end(self) -> bool:
        return self._index >= len(self._store)

    def increment(self) -> None:
        if self._index >= len(self._store):
            raise OutOfRange("Cannot increment past the end sentinel")
        self._index += 1

    def decrement(self) -> None:
        if self._index <= 0:
            raise OutOfRange("Cannot decrement before the first element")
        self._index -= 1

    def offset(self, n: int) -> None:
        target = self._index + n
        if target < 0 or target > len(self._store):
            raise OutOfRange(
                f"Offset {n} from index {self._index} leaves [0, {len(self._store)}]"
            )
        self._index = target

    def difference_to(self, other: RandomAccessPosition) -> int:
        if not isinstance(other, IndexPosition) or other._store is not self._store:
            raise Unreachable("Positions belong to different sequences")
        return other._index - self._index

    def deref(self) -> Any:
        if not 0 <= self._index < len(self._store):
            raise InvalidPosition(f"Index {self._index} is not dereferenceable")
        return self._store[self._index]

    def assign(self, value: Any) -> None:
        if not 0 <= self._index < len(self._store):
            raise InvalidPosition(f"Index {self._index} is not dereferenceable")
        self._store[self._index] = value

    def copy(self) -> IndexPosition:
        return IndexPosition(self._store, self._index)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, IndexPosition):
            return NotImplemented
        return self.difference_to(other) > 0

    def __repr__(self) -> str:
        return f"IndexPosition(index={self._index}, len={len(self._store)})"

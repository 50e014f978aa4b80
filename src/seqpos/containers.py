"""
Backing Containers

Concrete sequences that hand out Positions into themselves.

    ArraySequence    contiguous, resizable        RandomAccess
    LinkedSequence   doubly linked, sentinel      Bidirectional
    ForwardList      singly linked, tail pointer  ForwardOnly

Every container provides:
    - begin() / end() positions of its capability tier
    - append(value) in amortized O(1)
    - insert_before(position, value) where the structure allows it

Node-based positions hold a weak reference to their container, so a
position never keeps a container alive. Every operation on such a position
raises InvalidPosition once its container is gone; keep the container
bound while its positions are in use.
"""

from __future__ import annotations

import weakref
from collections.abc import MutableSequence
from typing import Any, Iterable, Iterator, List, Optional

from seqpos.errors import InvalidPosition, OutOfRange
from seqpos.position import BidirectionalPosition, Capability, IndexPosition, Position


class ArraySequence(MutableSequence):
    """
    Contiguous resizable sequence with random-access positions.

    Positions are index based. Growth at the end never invalidates them;
    insertion or deletion shifts the elements at and after the change.
    """

    capability = Capability.RANDOM_ACCESS

    def __init__(self, items: Optional[Iterable[Any]] = None):
        self._items: List[Any] = list(items) if items is not None else []

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        self._items[index] = value

    def __delitem__(self, index) -> None:
        del self._items[index]

    def insert(self, index: int, value: Any) -> None:
        self._items.insert(index, value)

    def append(self, value: Any) -> None:
        self._items.append(value)

    def begin(self) -> IndexPosition:
        return IndexPosition(self, 0)

    def end(self) -> IndexPosition:
        return IndexPosition(self, len(self._items))

    def position_at(self, index: int) -> IndexPosition:
        if not 0 <= index <= len(self._items):
            raise OutOfRange(f"Index {index} outside [0, {len(self._items)}]")
        return IndexPosition(self, index)

    def insert_before(self, position: Position, value: Any) -> IndexPosition:
        """
        Insert value before position. O(n - i).

        Returns the position of the inserted element.
        """
        if not isinstance(position, IndexPosition) or position.store is not self:
            raise InvalidPosition("Position does not belong to this ArraySequence")
        if position.index > len(self._items):
            raise InvalidPosition(f"Stale position at index {position.index}")
        self._items.insert(position.index, value)
        return IndexPosition(self, position.index)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ArraySequence):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ArraySequence({self._items!r})"


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any = None):
        self.value = value
        self.prev: _Node = self
        self.next: _Node = self


class NodePosition(BidirectionalPosition):
    """Bidirectional position into a LinkedSequence."""

    def __init__(self, owner: LinkedSequence, node: _Node):
        self._owner = weakref.ref(owner)
        self._node = node

    def _anchor(self) -> Optional[LinkedSequence]:
        return self._owner()

    def _slot(self) -> _Node:
        return self._node

    @property
    def is_end(self) -> bool:
        return self._node is self.sequence._sentinel

    def increment(self) -> None:
        if self.is_end:
            raise OutOfRange("Cannot increment past the end sentinel")
        self._node = self._node.next

    def decrement(self) -> None:
        if self._node.prev is self.sequence._sentinel:
            raise OutOfRange("Cannot decrement before the first element")
        self._node = self._node.prev

    def deref(self) -> Any:
        if self.is_end:
            raise InvalidPosition("Cannot dereference the end sentinel")
        return self._node.value

    def assign(self, value: Any) -> None:
        if self.is_end:
            raise InvalidPosition("Cannot assign through the end sentinel")
        self._node.value = value

    def copy(self) -> NodePosition:
        return NodePosition(self.sequence, self._node)

    def __repr__(self) -> str:
        anchor = self._anchor()
        if anchor is None:
            return "NodePosition(<dead>)"
        if self._node is anchor._sentinel:
            return "NodePosition(<end>)"
        return f"NodePosition({self._node.value!r})"


class LinkedSequence:
    """
    Doubly linked list with a sentinel node.

    The sentinel is the end position. Insertion never invalidates
    positions to other elements.
    """

    capability = Capability.BIDIRECTIONAL

    def __init__(self, items: Optional[Iterable[Any]] = None):
        self._sentinel = _Node()
        self._size = 0
        for item in items or ():
            self.append(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._sentinel.next
        while node is not self._sentinel:
            yield node.value
            node = node.next

    def begin(self) -> NodePosition:
        return NodePosition(self, self._sentinel.next)

    def end(self) -> NodePosition:
        return NodePosition(self, self._sentinel)

    def insert_before(self, position: Position, value: Any) -> NodePosition:
        """Insert value before position in O(1) and return its position."""
        if not isinstance(position, NodePosition) or position._anchor() is not self:
            raise InvalidPosition("Position does not belong to this LinkedSequence")
        after = position._node
        node = _Node(value)
        node.prev = after.prev
        node.next = after
        after.prev.next = node
        after.prev = node
        self._size += 1
        return NodePosition(self, node)

    def append(self, value: Any) -> None:
        self.insert_before(self.end(), value)

    def __repr__(self) -> str:
        return f"LinkedSequence({list(self)!r})"


class _ForwardNode:
    __slots__ = ("value", "next")

    def __init__(self, value: Any = None, next: Optional[_ForwardNode] = None):
        self.value = value
        self.next = next


class ForwardPosition(Position):
    """ForwardOnly position into a ForwardList. The end sentinel is node None."""

    def __init__(self, owner: ForwardList, node: Optional[_ForwardNode]):
        self._owner = weakref.ref(owner)
        self._node = node

    def _anchor(self) -> Optional[ForwardList]:
        return self._owner()

    def _slot(self) -> Optional[_ForwardNode]:
        return self._node

    @property
    def is_end(self) -> bool:
        if self._anchor() is None:
            raise InvalidPosition("Position refers to a sequence that no longer exists")
        return self._node is None

    def increment(self) -> None:
        if self.is_end:
            raise OutOfRange("Cannot increment past the end sentinel")
        self._node = self._node.next

    def deref(self) -> Any:
        if self.is_end:
            raise InvalidPosition("Cannot dereference the end sentinel")
        return self._node.value

    def assign(self, value: Any) -> None:
        if self.is_end:
            raise InvalidPosition("Cannot assign through the end sentinel")
        self._node.value = value

    def copy(self) -> ForwardPosition:
        return ForwardPosition(self.sequence, self._node)

    def __repr__(self) -> str:
        if self._node is None:
            return "ForwardPosition(<end>)"
        return f"ForwardPosition({self._node.value!r})"


class ForwardList:
    """
    Singly linked list.

    Supports append and insert_after only; there is no way to insert
    before an arbitrary position without walking from the head.
    """

    capability = Capability.FORWARD_ONLY

    def __init__(self, items: Optional[Iterable[Any]] = None):
        self._head = _ForwardNode()
        self._tail = self._head
        self._size = 0
        for item in items or ():
            self.append(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not None:
            yield node.value
            node = node.next

    def begin(self) -> ForwardPosition:
        return ForwardPosition(self, self._head.next)

    def end(self) -> ForwardPosition:
        return ForwardPosition(self, None)

    def append(self, value: Any) -> None:
        node = _ForwardNode(value)
        self._tail.next = node
        self._tail = node
        self._size += 1

    def push_front(self, value: Any) -> None:
        node = _ForwardNode(value, self._head.next)
        self._head.next = node
        if self._tail is self._head:
            self._tail = node
        self._size += 1

    def insert_after(self, position: Position, value: Any) -> ForwardPosition:
        """Insert value after position in O(1) and return its position."""
        if not isinstance(position, ForwardPosition) or position._anchor() is not self:
            raise InvalidPosition("Position does not belong to this ForwardList")
        if position.is_end:
            raise InvalidPosition("Cannot insert after the end sentinel")
        before = position._node
        node = _ForwardNode(value, before.next)
        before.next = node
        if self._tail is before:
            self._tail = node
        self._size += 1
        return ForwardPosition(self, node)

    def __repr__(self) -> str:
        return f"ForwardList({list(self)!r})"

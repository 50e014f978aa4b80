"""
Non-owning contiguous View.

A View is a window (start, length) over a contiguous store. It never copies
or owns the elements.

Two kinds of store are supported:
    - buffer-protocol objects (bytes, bytearray, array.array, memoryview)
      are borrowed through a memoryview slice. While the View is live a
      resizable buffer cannot be resized, the buffer protocol enforces it.
    - indexable sequences (list, tuple, str, ArraySequence) are addressed
      through the store reference plus an offset. Keeping such a store
      unmoved for the View's lifetime is the caller's responsibility.

ARCHITECTURAL RULE:
    The store owns the elements. The View must not outlive the store and
    releasing a View never touches the store's data.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional

from seqpos.errors import InvalidPosition, OutOfRange, UnsupportedOperation
from seqpos.position import IndexPosition

logger = logging.getLogger(__name__)


class View:
    """
    A window of `length` elements starting at `start` in `store`.

    Examples:
        View([1, 2, 3, 4])                 all four elements
        View(bytearray(b"abcdef"), 2, 3)   b"cde", borrowing the bytearray
        with View(buf) as v: ...           release the borrow on exit

    Properties:
        store:
            The backing store. Held by reference.

        start:
            Offset of the first element within the store.

    INVARIANTS:
        - 0 <= length
        - start + length <= len(store) at construction
    """

    def __init__(self, store: Any, start: int = 0, length: Optional[int] = None):
        try:
            root = memoryview(store)
        except TypeError:
            root = None
        if root is not None and root.ndim != 1:
            root.release()
            raise UnsupportedOperation("View requires a one-dimensional buffer")

        total = len(root) if root is not None else len(store)
        if length is None:
            length = total - start
        if start < 0 or length < 0 or start + length > total:
            if root is not None:
                root.release()
            raise OutOfRange(
                f"Window (start={start}, length={length}) does not fit a store of {total}"
            )

        self._store = store
        self._start = start
        self._length = length
        self._window: Optional[memoryview] = None
        self._released = False
        if root is not None:
            self._window = root[start:start + length]

    # ------------------------------------------------------------------
    # Lifetime
    # ------------------------------------------------------------------

    def release(self) -> None:
        """End the borrow. The store is left untouched."""
        if self._released:
            return
        if self._window is not None:
            self._window.release()
        self._released = True
        logger.debug("Released view of %d elements", self._length)

    @property
    def released(self) -> bool:
        return self._released

    def __enter__(self) -> View:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def _check_live(self) -> None:
        if self._released:
            raise InvalidPosition("View has been released")

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    @property
    def store(self) -> Any:
        return self._store

    @property
    def start(self) -> int:
        return self._start

    @property
    def empty(self) -> bool:
        return len(self) == 0

    @property
    def is_buffer(self) -> bool:
        return self._window is not None

    @property
    def writable(self) -> bool:
        """True if element writes reach the store."""
        self._check_live()
        if self._window is not None:
            return not self._window.readonly
        return hasattr(type(self._store), "__setitem__")

    @property
    def itemsize(self) -> int:
        if self._window is None:
            raise UnsupportedOperation("Element size is only known for buffer stores")
        self._check_live()
        return self._window.itemsize

    @property
    def size_bytes(self) -> int:
        return len(self) * self.itemsize

    def __len__(self) -> int:
        self._check_live()
        return self._length

    def _normalize(self, index: int) -> int:
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise OutOfRange(f"Index {index} outside view of length {self._length}")
        return index

    def __getitem__(self, key):
        self._check_live()
        if isinstance(key, slice):
            start, stop, step = key.indices(self._length)
            if step != 1:
                raise UnsupportedOperation("A View must stay contiguous (slice step 1)")
            return self.subview(start, max(0, stop - start))
        index = self._normalize(key)
        if self._window is not None:
            return self._window[index]
        return self._store[self._start + index]

    def __setitem__(self, key: int, value: Any) -> None:
        self._check_live()
        index = self._normalize(key)
        if not self.writable:
            raise UnsupportedOperation(f"{type(self._store).__name__} store is not writable")
        if self._window is not None:
            self._window[index] = value
        else:
            self._store[self._start + index] = value

    def __iter__(self) -> Iterator[Any]:
        self._check_live()
        if self._window is not None:
            yield from self._window
        else:
            for i in range(self._start, self._start + self._length):
                yield self._store[i]

    def front(self) -> Any:
        if self.empty:
            raise InvalidPosition("front() of an empty View")
        return self[0]

    def back(self) -> Any:
        if self.empty:
            raise InvalidPosition("back() of an empty View")
        return self[self._length - 1]

    def to_list(self) -> list:
        """Copy the viewed elements into a new list."""
        return list(self)

    # ------------------------------------------------------------------
    # Positions
    # ------------------------------------------------------------------

    def begin(self) -> IndexPosition:
        self._check_live()
        return IndexPosition(self, 0)

    def end(self) -> IndexPosition:
        self._check_live()
        return IndexPosition(self, self._length)

    # ------------------------------------------------------------------
    # Sub-views
    # ------------------------------------------------------------------

    def subview(self, offset: int, count: Optional[int] = None) -> View:
        """View of `count` elements starting `offset` into this view."""
        self._check_live()
        if count is None:
            count = self._length - offset
        if offset < 0 or count < 0 or offset + count > self._length:
            raise OutOfRange(
                f"Subview (offset={offset}, count={count}) exceeds view of length {self._length}"
            )
        return View(self._store, self._start + offset, count)

    def first(self, count: int) -> View:
        return self.subview(0, count)

    def last(self, count: int) -> View:
        if count < 0 or count > len(self):
            raise OutOfRange(f"Cannot take last {count} of {self._length} elements")
        return self.subview(self._length - count, count)

    def __repr__(self) -> str:
        if self._released:
            return "View(<released>)"
        return f"View(start={self._start}, length={self._length}, store={type(self._store).__name__})"

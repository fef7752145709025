"""
Forward cursor with unbounded lookahead.

The scanner walks its source through a MultiPeekCursor of characters, and the
driver hands the finished token list to the parser through a MultiPeekCursor
of tokens. Peeking never consumes; only ``next()`` moves the cursor.

Author: xwest
"""

from typing import Generic, Iterable, Iterator, Optional, Sequence, TypeVar

T = TypeVar("T")


class MultiPeekCursor(Generic[T]):
    """
    Single-owner cursor over a sequence.

    Not thread-safe; create one per scan.
    """

    def __init__(self, items: Iterable[T]):
        self._items: Sequence[T] = items if isinstance(items, (str, list, tuple)) else list(items)
        self._pos = 0

    def next(self) -> Optional[T]:
        """Consume and return the next item, or None at end."""
        if self._pos >= len(self._items):
            return None
        item = self._items[self._pos]
        self._pos += 1
        return item

    def peek(self, offset: int = 0) -> Optional[T]:
        """Look ``offset`` items past the next one without consuming."""
        if offset < 0:
            raise ValueError(f"peek offset must be non-negative, got {offset}")
        peek_pos = self._pos + offset
        if peek_pos < len(self._items):
            return self._items[peek_pos]
        return None

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._items)

    def remaining(self) -> int:
        return len(self._items) - self._pos

    def __iter__(self) -> Iterator[T]:
        while not self.at_end:
            yield self._items[self._pos]
            self._pos += 1

    def __repr__(self) -> str:
        return f"MultiPeekCursor(pos={self._pos}, remaining={self.remaining()})"

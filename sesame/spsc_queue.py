"""A bounded first-in first-out queue between one producer and one consumer."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, Optional, TypeVar

T = TypeVar("T")


class SPSCQueue(Generic[T]):
    """A bounded FIFO queue; ``push`` blocks while the queue is full."""

    def __init__(self, capacity: int) -> None:
        self._capacity = max(int(capacity), 1)
        self._items: Deque[T] = deque()
        self._cond = threading.Condition()

    def push(self, item: T) -> None:
        """Append an item, waiting for room if the queue is full."""
        with self._cond:
            while len(self._items) >= self._capacity:
                self._cond.wait()
            self._items.append(item)
            self._cond.notify_all()

    def try_push(self, item: T) -> bool:
        """Append an item if there is room; return whether it was added."""
        with self._cond:
            if len(self._items) >= self._capacity:
                return False
            self._items.append(item)
            self._cond.notify_all()
            return True

    def front(self) -> Optional[T]:
        """Return the oldest item without removing it, or None when empty."""
        with self._cond:
            return self._items[0] if self._items else None

    def pop(self) -> T:
        """Remove and return the oldest item."""
        with self._cond:
            if not self._items:
                raise IndexError("pop from an empty queue")
            item = self._items.popleft()
            self._cond.notify_all()
            return item

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)

    def empty(self) -> bool:
        """Return True when the queue holds no items."""
        return len(self) == 0

    def capacity(self) -> int:
        """Return the maximum number of items the queue can hold."""
        return self._capacity
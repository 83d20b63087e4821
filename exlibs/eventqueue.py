"""A thread-safe FIFO queue whose consumers block until an item arrives."""

from __future__ import annotations

import threading
from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class EventQueue(Generic[T]):
    """Blocking first-in first-out queue shared between threads.

    :meth:`dequeue` waits until an item is available. Once :meth:`stop`
    has been called, every dequeue returns the queue's *default* value
    instead of an item.
    """

    def __init__(self, default: T | None = None) -> None:
        self._items: deque[T] = deque()
        self._condition = threading.Condition()
        self._stopped = False
        self._default = default

    @property
    def stopped(self) -> bool:
        """True once :meth:`stop` has been called."""
        return self._stopped

    def dequeue(self) -> T | None:
        """Remove and return the oldest item, waiting for one if needed.

        Returns the default value when the queue has been stopped.
        """
        with self._condition:
            self._condition.wait_for(lambda: self._items or self._stopped)
            if self._stopped:
                return self._default
            return self._items.popleft()

    def enqueue(self, item: T) -> None:
        """Append *item* and wake one waiting consumer."""
        with self._condition:
            self._items.append(item)
            self._condition.notify()

    def stop(self) -> None:
        """Stop the queue and wake every waiting consumer."""
        with self._condition:
            self._stopped = True
            self._condition.notify_all()

    def size(self) -> int:
        """Number of items currently held."""
        return len(self._items)

    def __len__(self) -> int:
        return self.size()
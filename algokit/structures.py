"""A FIFO queue built from two stacks."""

from __future__ import annotations


class StackQueue:
    """First-in first-out queue kept as an inbox stack and an outbox stack."""

    def __init__(self) -> None:
        self._inbox: list[int] = []
        self._outbox: list[int] = []

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("queue is empty")

    def push(self, value: int) -> None:
        """Add a value at the back of the queue."""
        self._inbox.append(value)

    def front(self) -> int:
        """Return the value at the front without removing it."""
        self._refill()
        return self._outbox[-1]

    def pop(self) -> int:
        """Remove and return the value at the front."""
        self._refill()
        return self._outbox.pop()

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)
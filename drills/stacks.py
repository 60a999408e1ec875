"""A list-backed stack, a queue built from two stacks, and stack drills."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")

_PAIRS = {")": "(", "]": "[", "}": "{"}


class Stack(Generic[T]):
    """A last-in, first-out stack."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, item: T) -> None:
        """Put ``item`` on top."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item; IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it; IndexError when empty."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Whether the stack holds no items."""
        return not self._items


class TwoStackQueue(Generic[T]):
    """A first-in, first-out queue kept in two stacks.

    ``pop``/``peek`` work at the front (oldest item); ``pop_bottom``/``bottom``
    work at the back (newest item).
    """

    def __init__(self) -> None:
        self._inbox: Stack[T] = Stack()
        self._outbox: Stack[T] = Stack()

    def __len__(self) -> int:
        return len(self._inbox)

    def _front(self, remove: bool) -> T:
        if self.is_empty():
            raise IndexError("queue is empty")
        while not self._inbox.is_empty():
            self._outbox.push(self._inbox.pop())
        item = self._outbox.pop() if remove else self._outbox.peek()
        while not self._outbox.is_empty():
            self._inbox.push(self._outbox.pop())
        return item

    def push(self, item: T) -> None:
        """Add ``item`` at the back."""
        self._inbox.push(item)

    def pop(self) -> T:
        """Remove and return the oldest item; IndexError when empty."""
        return self._front(remove=True)

    def peek(self) -> T:
        """Return the oldest item; IndexError when empty."""
        return self._front(remove=False)

    def pop_bottom(self) -> T:
        """Remove and return the newest item; IndexError when empty."""
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._inbox.pop()

    def bottom(self) -> T:
        """Return the newest item; IndexError when empty."""
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._inbox.peek()

    def is_empty(self) -> bool:
        """Whether the queue holds no items."""
        return self._inbox.is_empty()


def is_valid(s: str) -> bool:
    """Whether every bracket in ``s`` is closed by its match, in order.

    An empty string or one of odd length is never valid.
    """
    if not s or len(s) % 2:
        return False
    stack: Stack[str] = Stack()
    for char in s:
        if not stack.is_empty() and _PAIRS.get(char) == stack.peek():
            stack.pop()
        else:
            stack.push(char)
    return stack.is_empty()


def remove_duplicates(s: str) -> str:
    """Repeatedly drop adjacent equal characters until none remain."""
    stack: Stack[str] = Stack()
    for char in s:
        if stack.is_empty() or stack.peek() != char:
            stack.push(char)
        else:
            stack.pop()
    kept = []
    while not stack.is_empty():
        kept.append(stack.pop())
    return "".join(reversed(kept))
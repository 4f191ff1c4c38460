"""Bounded and unbounded queues and stacks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_QUEUE_CAPACITY = 100
DEFAULT_STACK_CAPACITY = 5


class ContainerFullError(Exception):
    """Raised when a value is added to a container that has no room left."""


class ContainerEmptyError(Exception):
    """Raised when a value is taken from a container that holds none."""


class ArrayQueue(Generic[T]):
    """A FIFO queue over a fixed block of slots.

    Slots are used once: a dequeued slot is not reused, so the queue
    overflows after ``capacity`` enqueues in total, however many were removed.
    """

    def __init__(self, capacity: int = DEFAULT_QUEUE_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._slots: list[T] = []
        self._front = 0

    @property
    def capacity(self) -> int:
        """The number of slots the queue was created with."""
        return self._capacity

    def enqueue(self, value: T) -> None:
        """Add a value at the rear; raise ContainerFullError once every slot was used."""
        if len(self._slots) == self._capacity:
            raise ContainerFullError("queue overflow")
        self._slots.append(value)

    def dequeue(self) -> T:
        """Remove and return the value at the front."""
        if self._front >= len(self._slots):
            raise ContainerEmptyError("queue underflow")
        value = self._slots[self._front]
        self._front += 1
        return value

    def __iter__(self) -> Iterator[T]:
        """Yield the queued values from front to rear."""
        return iter(self._slots[self._front:])

    def __len__(self) -> int:
        return len(self._slots) - self._front


class LinkedQueue(Generic[T]):
    """An unbounded FIFO queue."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def enqueue(self, value: T) -> None:
        """Add a value at the rear."""
        self._items.append(value)

    def dequeue(self) -> T:
        """Remove and return the value at the front."""
        if not self._items:
            raise ContainerEmptyError("queue is empty")
        return self._items.popleft()

    def front(self) -> T:
        """Return the value at the front without removing it."""
        if not self._items:
            raise ContainerEmptyError("queue is empty")
        return self._items[0]

    def __iter__(self) -> Iterator[T]:
        """Yield the queued values from front to rear."""
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


class ArrayStack(Generic[T]):
    """A LIFO stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_STACK_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: list[T] = []

    @property
    def capacity(self) -> int:
        """The most values the stack can hold."""
        return self._capacity

    def push(self, value: T) -> None:
        """Put a value on top; raise ContainerFullError when the stack is full."""
        if self.is_full():
            raise ContainerFullError("stack is full")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value."""
        if self.is_empty():
            raise ContainerEmptyError("stack is empty")
        return self._items.pop()

    def is_empty(self) -> bool:
        """Tell whether the stack holds no values."""
        return not self._items

    def is_full(self) -> bool:
        """Tell whether the stack has no room left."""
        return len(self._items) == self._capacity

    def __iter__(self) -> Iterator[T]:
        """Yield the values from top to bottom."""
        return iter(self._items[::-1])

    def __len__(self) -> int:
        return len(self._items)


class LinkedStack(Generic[T]):
    """An unbounded LIFO stack."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, value: T) -> None:
        """Put a value on top."""
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value."""
        if not self._items:
            raise ContainerEmptyError("stack underflow")
        return self._items.pop()

    def __iter__(self) -> Iterator[T]:
        """Yield the values from top to bottom."""
        return iter(self._items[::-1])

    def __len__(self) -> int:
        return len(self._items)
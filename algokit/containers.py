"""Small container types: min stack, two-stack queue, hash map, linked list, ring buffer."""

from __future__ import annotations

from collections.abc import Iterator

from algokit.linked_lists import ListNode

__all__ = [
    "MinStack",
    "StackQueue",
    "DirectHashMap",
    "SinglyLinkedList",
    "CircularQueue",
]


class MinStack:
    """A stack that reports its minimum in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def push(self, val: int) -> None:
        """Push ``val`` on top of the stack."""
        current_min = min(val, self._items[-1][1]) if self._items else val
        self._items.append((val, current_min))

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()[0]

    def top(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1][0]

    def get_min(self) -> int:
        """Return the smallest value currently on the stack."""
        if not self._items:
            raise IndexError("minimum of empty stack")
        return self._items[-1][1]

    def __len__(self) -> int:
        return len(self._items)


class StackQueue:
    """A FIFO queue built from two LIFO stacks."""

    def __init__(self) -> None:
        self._inbox: list[int] = []
        self._outbox: list[int] = []

    def push(self, x: int) -> None:
        """Add ``x`` to the back of the queue."""
        self._inbox.append(x)

    def pop(self) -> int:
        """Remove and return the front value."""
        self.peek()
        return self._outbox.pop()

    def peek(self) -> int:
        """Return the front value without removing it."""
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("peek from empty queue")
        return self._outbox[-1]

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


class DirectHashMap:
    """An integer map over keys 0 to ``MAX_KEY``; absent keys read as -1."""

    MAX_KEY = 1_000_000
    MISSING = -1

    def __init__(self) -> None:
        self._data: dict[int, int] = {}

    def _check(self, key: int) -> None:
        if not 0 <= key <= self.MAX_KEY:
            raise ValueError(f"key {key} outside 0..{self.MAX_KEY}")

    def put(self, key: int, value: int) -> None:
        """Map ``key`` to ``value``, replacing any earlier value."""
        self._check(key)
        self._data[key] = value

    def get(self, key: int) -> int:
        """Return the value for ``key``, or -1 if it has none."""
        self._check(key)
        return self._data.get(key, self.MISSING)

    def remove(self, key: int) -> None:
        """Drop the mapping for ``key`` if there is one."""
        self._check(key)
        self._data.pop(key, None)


class SinglyLinkedList:
    """An index-addressed singly linked list with head and tail pointers.

    Out-of-range reads return -1; out-of-range inserts and deletes do nothing.
    """

    def __init__(self) -> None:
        self._head: ListNode | None = None
        self._tail: ListNode | None = None
        self._size = 0

    def _node_at(self, index: int) -> ListNode:
        node = self._head
        for _ in range(index):
            node = node.next  # type: ignore[union-attr]
        return node  # type: ignore[return-value]

    def get(self, index: int) -> int:
        """Return the value at ``index``, or -1 if the index is out of range."""
        if not 0 <= index < self._size:
            return -1
        if index == self._size - 1:
            return self._tail.val  # type: ignore[union-attr]
        return self._node_at(index).val

    def add_at_head(self, val: int) -> None:
        """Insert ``val`` before the first element."""
        self._head = ListNode(val, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def add_at_tail(self, val: int) -> None:
        """Append ``val`` after the last element."""
        node = ListNode(val)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def add_at_index(self, index: int, val: int) -> None:
        """Insert ``val`` before position ``index``; ``index == len`` appends."""
        if not 0 <= index <= self._size:
            return
        if index == 0:
            self.add_at_head(val)
        elif index == self._size:
            self.add_at_tail(val)
        else:
            before = self._node_at(index - 1)
            before.next = ListNode(val, before.next)
            self._size += 1

    def delete_at_index(self, index: int) -> None:
        """Remove the element at ``index`` if the index is in range."""
        if not 0 <= index < self._size:
            return
        if index == 0:
            self._head = self._head.next  # type: ignore[union-attr]
            if self._head is None:
                self._tail = None
        else:
            before = self._node_at(index - 1)
            before.next = before.next.next  # type: ignore[union-attr]
            if before.next is None:
                self._tail = before
        self._size -= 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return iter(self._head) if self._head is not None else iter(())


class CircularQueue:
    """A fixed-capacity FIFO ring buffer."""

    def __init__(self, k: int) -> None:
        if k < 0:
            raise ValueError("capacity must not be negative")
        self._slots = [0] * (k + 1)
        self._front = 0
        self._rear = 0

    def _advance(self, position: int) -> int:
        return (position + 1) % len(self._slots)

    def enqueue(self, value: int) -> bool:
        """Add ``value`` at the back; return False if the queue is full."""
        if self.is_full():
            return False
        self._slots[self._rear] = value
        self._rear = self._advance(self._rear)
        return True

    def dequeue(self) -> bool:
        """Drop the front value; return False if the queue is empty."""
        if self.is_empty():
            return False
        self._front = self._advance(self._front)
        return True

    def front(self) -> int:
        """Return the front value, or -1 if the queue is empty."""
        if self.is_empty():
            return -1
        return self._slots[self._front]

    def rear(self) -> int:
        """Return the back value, or -1 if the queue is empty."""
        if self.is_empty():
            return -1
        return self._slots[self._rear - 1]

    def is_empty(self) -> bool:
        return self._front == self._rear

    def is_full(self) -> bool:
        return self._advance(self._rear) == self._front
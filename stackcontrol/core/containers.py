"""
Fixed-capacity containers for the piece supply.

Both are array-backed with no growth: a full container rejects new pieces and an empty one
reports underflow. Failures come back as `OpResult` values instead of exceptions so callers
always check before using a removed piece.
"""
from __future__ import annotations

import logging

from stackcontrol.core.results import ErrorKind, OpResult
from stackcontrol.pieces import Piece

logger = logging.getLogger(__name__)

QUEUE_CAPACITY = 5
STACK_CAPACITY = 3


class BoundedQueue:
    """Circular-buffer FIFO of upcoming pieces.

    Logical position 0 is the front (next to leave). The tail slot is derived from
    `head` and `count`, so only those two indices are stored.
    """

    __slots__ = ("_slots", "_head", "_count")

    def __init__(self, capacity: int = QUEUE_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be > 0")
        self._slots: list[Piece | None] = [None] * capacity
        self._head: int = 0
        self._count: int = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def head(self) -> int:
        return self._head

    @property
    def count(self) -> int:
        return self._count

    @property
    def tail(self) -> int | None:
        if self._count == 0:
            return None
        return (self._head + self._count - 1) % self.capacity

    def __len__(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self.capacity

    def slot_index(self, position: int) -> int:
        """Map a logical position (0 = front) to its backing slot."""

        if not 0 <= position < self._count:
            raise IndexError(f"queue position {position} out of range (count={self._count})")
        return (self._head + position) % self.capacity

    def enqueue(self, piece: Piece) -> OpResult:
        if self.is_full():
            logger.debug("enqueue rejected, queue full: %s", piece.label)
            return OpResult.failure(
                ErrorKind.capacity_exceeded,
                f"Queue is full. Could not add piece {piece.id}.",
                pieces=(piece,),
            )
        idx = (self._head + self._count) % self.capacity
        self._slots[idx] = piece
        self._count += 1
        return OpResult.success(pieces=(piece,))

    def dequeue(self) -> OpResult:
        if self.is_empty():
            logger.debug("dequeue rejected, queue empty")
            return OpResult.failure(ErrorKind.underflow, "Queue is empty.")
        piece = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._count -= 1
        return OpResult.success(pieces=(piece,))  # type: ignore[arg-type]

    def peek(self, position: int) -> Piece | None:
        if not 0 <= position < self._count:
            return None
        return self._slots[(self._head + position) % self.capacity]

    def peek_front(self) -> Piece | None:
        return self.peek(0)

    def swap_at(self, position: int, piece: Piece) -> Piece:
        """Replace the piece at a live logical position, returning the previous one.

        Counts and indices are untouched; only the stored value changes.
        """

        idx = self.slot_index(position)
        previous = self._slots[idx]
        self._slots[idx] = piece
        return previous  # type: ignore[return-value]

    def snapshot_ordered(self) -> tuple[Piece, ...]:
        """Live pieces front-to-back. Does not consume anything."""

        out: list[Piece] = []
        idx = self._head
        for _ in range(self._count):
            out.append(self._slots[idx])  # type: ignore[arg-type]
            idx = (idx + 1) % self.capacity
        return tuple(out)


class BoundedStack:
    """Array-backed LIFO reserve. `top` is -1 when empty and capacity-1 when full."""

    __slots__ = ("_slots", "_top")

    def __init__(self, capacity: int = STACK_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be > 0")
        self._slots: list[Piece | None] = [None] * capacity
        self._top: int = -1

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def top(self) -> int:
        return self._top

    @property
    def count(self) -> int:
        return self._top + 1

    def __len__(self) -> int:
        return self._top + 1

    def is_empty(self) -> bool:
        return self._top == -1

    def is_full(self) -> bool:
        return self._top == self.capacity - 1

    def push(self, piece: Piece) -> OpResult:
        if self.is_full():
            logger.debug("push rejected, stack full: %s", piece.label)
            return OpResult.failure(
                ErrorKind.capacity_exceeded,
                f"Reserve stack is full. Could not add piece {piece.id}.",
                pieces=(piece,),
            )
        self._top += 1
        self._slots[self._top] = piece
        return OpResult.success(pieces=(piece,))

    def pop(self) -> OpResult:
        if self.is_empty():
            logger.debug("pop rejected, stack empty")
            return OpResult.failure(ErrorKind.underflow, "Reserve stack is empty.")
        piece = self._slots[self._top]
        self._slots[self._top] = None
        self._top -= 1
        return OpResult.success(pieces=(piece,))  # type: ignore[arg-type]

    def peek(self, position: int) -> Piece | None:
        """Piece at a storage position (0 = base)."""

        if not 0 <= position <= self._top:
            return None
        return self._slots[position]

    def peek_top(self) -> Piece | None:
        return self.peek(self._top)

    def swap_at(self, position: int, piece: Piece) -> Piece:
        if not 0 <= position <= self._top:
            raise IndexError(f"stack position {position} out of range (top={self._top})")
        previous = self._slots[position]
        self._slots[position] = piece
        return previous  # type: ignore[return-value]

    def snapshot_ordered(self) -> tuple[Piece, ...]:
        """Live pieces top-to-base."""

        return tuple(self._slots[i] for i in range(self._top, -1, -1))  # type: ignore[misc]

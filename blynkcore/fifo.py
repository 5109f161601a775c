"""Bounded byte FIFO with ring-buffer semantics."""

from __future__ import annotations

from typing import Iterable, Union


class Fifo:
    """A byte queue sized like a ring buffer of ``capacity`` slots.

    One slot always stays empty, so at most ``capacity - 1`` bytes are held.
    Writes that do not fit are cut short rather than waiting for room.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots = capacity
        self._data = bytearray()

    @property
    def capacity(self) -> int:
        return self._slots

    def clear(self) -> None:
        self._data.clear()

    def free(self) -> int:
        return self._slots - 1 - len(self._data)

    def writeable(self) -> bool:
        return self.free() > 0

    def readable(self) -> bool:
        return bool(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def put(self, data: Union[int, bytes, bytearray, memoryview, Iterable[int]]) -> int:
        """Store as many bytes as fit and return how many were stored."""
        chunk = bytes([data]) if isinstance(data, int) else bytes(data)
        stored = chunk[: self.free()]
        self._data += stored
        return len(stored)

    def get(self, count: int = 1) -> bytes:
        """Remove and return up to ``count`` bytes."""
        if count < 0:
            raise ValueError("count must not be negative")
        taken = bytes(self._data[:count])
        del self._data[:count]
        return taken

    def peek(self) -> int:
        """Return the next byte without removing it."""
        if not self._data:
            raise IndexError("peek from empty fifo")
        return self._data[0]
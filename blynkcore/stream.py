"""A stream that swallows writes and never has data to read."""

from __future__ import annotations

from typing import Union


class NullStream:
    """Accepts any output and reports no input; reads give -1 like an idle serial port.

    ``pending`` counts the bytes discarded since the last flush.
    """

    def __init__(self) -> None:
        self.pending = 0

    def write(self, data: Union[int, bytes, bytearray, memoryview]) -> int:
        count = 1 if isinstance(data, int) else len(data)
        self.pending += count
        return count

    def available_for_write(self) -> int:
        return 4096

    def flush(self) -> None:
        """Drop whatever has been written so far."""
        self.pending = 0

    def available(self) -> int:
        return 0

    def read(self) -> int:
        return -1

    def peek(self) -> int:
        return -1

    def read_bytes(self, size: int) -> bytes:
        """Read up to ``size`` bytes; there never are any."""
        if size < 0:
            raise ValueError("size must not be negative")
        return bytes(min(size, self.available()))


null_stream = NullStream()
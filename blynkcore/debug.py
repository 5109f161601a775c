"""Timestamped diagnostic logging and hex dumps of binary data."""

from __future__ import annotations

import sys
import time
from typing import Callable, Optional, Sequence, TextIO, Union

BytesLike = Union[bytes, bytearray, memoryview]

_START = time.monotonic()


def _default_clock() -> int:
    return int((time.monotonic() - _START) * 1000)


def _is_printable(octet: int) -> bool:
    return 32 < octet < 127


def format_dump(data: BytesLike) -> str:
    """Render bytes as text: printable characters as-is, others as bracketed hex.

    Runs of non-printable bytes are enclosed in ``[`` and ``]`` and separated
    by ``|``, for example ``ab[00|01]c``.
    """
    parts = []
    prev_printable = True
    for octet in bytes(data):
        if _is_printable(octet):
            if not prev_printable:
                parts.append("]")
            parts.append(chr(octet))
            prev_printable = True
        else:
            parts.append("[" if prev_printable else "|")
            parts.append(f"{octet:02x}")
            prev_printable = False
    if not prev_printable:
        parts.append("]")
    return "".join(parts)


class DebugLog:
    """Writes lines prefixed with ``[<milliseconds>] `` to a text stream."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._clock = clock or _default_clock

    def _prefix(self) -> str:
        return f"[{self._clock()}] "

    def _write_line(self, text: str) -> None:
        self._stream.write(self._prefix() + text + "\n")

    def log(self, *args: object) -> None:
        """Write all arguments, joined without separators, as one line."""
        self._write_line("".join(str(arg) for arg in args))

    def log_ip(self, message: str, ip: Sequence[int]) -> None:
        """Write a message followed by a dotted IPv4 address."""
        if len(ip) < 4:
            raise ValueError("an IPv4 address needs four octets")
        self._write_line(message + ".".join(str(octet) for octet in ip[:4]))

    def log_ip_reversed(self, message: str, ip: Sequence[int]) -> None:
        """Write a message followed by an IPv4 address stored in reverse order."""
        if len(ip) < 4:
            raise ValueError("an IPv4 address needs four octets")
        self._write_line(message + ".".join(str(octet) for octet in reversed(ip[:4])))

    def dump(self, message: str, data: BytesLike) -> None:
        """Write a message followed by a dump of ``data``; nothing for empty data."""
        if len(data) == 0:
            return
        self._write_line(message + format_dump(data))
"""Container for handler parameters: a buffer of NUL-separated values."""

from __future__ import annotations

import re
from typing import Iterator, Optional, Tuple, Union

_INT_PREFIX = re.compile(rb"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    rb"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

BytesLike = Union[bytes, bytearray, memoryview]


def _leading_int(data: bytes) -> int:
    """Parse a leading integer the way ``atoi`` does; 0 when there is none."""
    match = _INT_PREFIX.match(data)
    return int(match.group(1)) if match else 0


def _leading_float(data: bytes) -> float:
    """Parse a leading number the way ``atof`` does; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(data)
    return float(match.group(1)) if match else 0.0


def _encode(text: Union[str, BytesLike]) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8")
    return bytes(text)


class ParamValue:
    """One value taken from a :class:`BlynkParam`; ``None`` data marks a missing value."""

    __slots__ = ("_data",)

    def __init__(self, data: Optional[Union[str, BytesLike]] = None) -> None:
        self._data = None if data is None else _encode(data)

    @property
    def data(self) -> Optional[bytes]:
        return self._data

    def as_str(self) -> Optional[str]:
        if self._data is None:
            return None
        return self._data.decode("utf-8", errors="replace")

    def as_int(self) -> int:
        if self._data is None:
            return 0
        return _leading_int(self._data)

    def as_float(self) -> float:
        if self._data is None:
            return 0.0
        return _leading_float(self._data)

    def is_valid(self) -> bool:
        return self._data is not None

    def is_empty(self) -> bool:
        return self._data is None or self._data == b""

    def __str__(self) -> str:
        return self.as_str() or ""

    def __int__(self) -> int:
        return self.as_int()

    def __float__(self) -> float:
        return self.as_float()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ParamValue):
            return self._data == other._data
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"ParamValue({self._data!r})"


class BlynkParam:
    """A bounded buffer of NUL-terminated values.

    ``capacity`` limits how many bytes the buffer may hold; additions that do
    not fit are dropped whole. When omitted it equals the size of ``data``.
    """

    def __init__(self, data: Union[str, BytesLike] = b"", capacity: Optional[int] = None) -> None:
        raw = _encode(data)
        if capacity is None:
            capacity = len(raw)
        if capacity < len(raw):
            raise ValueError(f"data of {len(raw)} bytes exceeds capacity {capacity}")
        self._buf = bytearray(raw)
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    def _first(self) -> bytes:
        end = self._buf.find(0)
        return bytes(self._buf if end < 0 else self._buf[:end])

    def as_str(self) -> str:
        """The first value as text."""
        return self._first().decode("utf-8", errors="replace")

    def as_int(self) -> int:
        return _leading_int(self._first())

    def as_float(self) -> float:
        return _leading_float(self._first())

    def is_empty(self) -> bool:
        return not self._buf or self._buf[0] == 0

    def _spans(self) -> Iterator[Tuple[int, int, int]]:
        """Yield (start, end of text, start of next value) for each value."""
        buf = self._buf
        size = len(buf)
        pos = 0
        while pos < size:
            end = buf.find(0, pos)
            if end < 0:
                yield pos, size, size
                return
            yield pos, end, end + 1
            pos = end + 1

    def __iter__(self) -> Iterator[ParamValue]:
        for start, end, _ in self._spans():
            yield ParamValue(bytes(self._buf[start:end]))

    def __len__(self) -> int:
        """Number of bytes in use."""
        return len(self._buf)

    def __getitem__(self, key: Union[int, str, BytesLike]) -> ParamValue:
        """Value at a position, or the value that follows a key; invalid if absent."""
        if isinstance(key, int):
            if key < 0:
                return ParamValue()
            for index, value in enumerate(self):
                if index == key:
                    return value
            return ParamValue()
        if isinstance(key, (str, bytes, bytearray, memoryview)):
            target = _encode(key)
            values = iter(self)
            for name in values:
                value = next(values, ParamValue())
                if name.data == target:
                    return value
            return ParamValue()
        raise TypeError(f"unsupported key type: {type(key).__name__}")

    def to_bytes(self) -> bytes:
        return bytes(self._buf)

    def clear(self) -> None:
        self._buf.clear()

    def add_raw(self, data: BytesLike) -> bool:
        """Append raw bytes; return False and change nothing if they do not fit."""
        chunk = bytes(data)
        if len(self._buf) + len(chunk) > self._capacity:
            return False
        self._buf += chunk
        return True

    def add(self, value: Union[None, int, float, str, BytesLike]) -> bool:
        """Append one value followed by a NUL terminator."""
        if value is None:
            text = b""
        elif isinstance(value, int):
            text = str(int(value)).encode("ascii")
        elif isinstance(value, float):
            text = f"{value:.7f}".encode("ascii")
        elif isinstance(value, (str, bytes, bytearray, memoryview)):
            text = _encode(value)
        else:
            raise TypeError(f"cannot add value of type {type(value).__name__}")
        return self.add_raw(text + b"\0")

    def add_multi(self, *args: Union[None, int, float, str, BytesLike]) -> None:
        for value in args:
            self.add(value)

    def add_key(self, key: Union[str, BytesLike], value: Union[None, int, float, str, BytesLike]) -> None:
        self.add(key)
        self.add(value)

    def remove_key(self, key: Union[str, BytesLike]) -> None:
        """Remove every key/value pair whose key matches."""
        target = _encode(key)
        kept = bytearray()
        spans = self._spans()
        for start, text_end, after in spans:
            value_span = next(spans, None)
            stop = value_span[2] if value_span else after
            if bytes(self._buf[start:text_end]) != target:
                kept += self._buf[start:stop]
        self._buf = kept

    def __repr__(self) -> str:
        return f"BlynkParam({bytes(self._buf)!r}, capacity={self._capacity})"
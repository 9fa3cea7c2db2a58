"""Growable byte buffers: a C-string oriented char array and a plain byte array."""

from __future__ import annotations

from corekit.errors import CoreKitError, InvalidArgumentError


def _check_size(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidArgumentError(f"{name} must be a non-negative integer")
    return value


def _check_new_size(new_size: int) -> int:
    _check_size(new_size, "new size")
    if new_size == 0:
        raise InvalidArgumentError("new size must not be zero")
    return new_size


def _as_bytes(src: str | bytes | bytearray) -> bytes:
    if isinstance(src, str):
        return src.encode("utf-8")
    if isinstance(src, (bytes, bytearray, memoryview)):
        return bytes(src)
    raise InvalidArgumentError("source must be str or bytes")


def _c_string(data: bytes) -> bytes:
    end = data.find(b"\0")
    return data if end < 0 else data[:end]


class _ResizableBuffer:
    """Storage of a fixed capacity with a used length inside it."""

    _data: bytearray
    _length: int

    @property
    def capacity(self) -> int:
        """Number of bytes of storage."""
        return len(self._data)

    @property
    def length(self) -> int:
        """Number of bytes in use."""
        return self._length

    @length.setter
    def length(self, value: int) -> None:
        _check_size(value, "length")
        if value > self.capacity:
            raise InvalidArgumentError("length cannot exceed capacity")
        self._length = value

    @property
    def buffer(self) -> bytearray:
        """The whole underlying storage, writable in place."""
        return self._data

    def __bytes__(self) -> bytes:
        return bytes(self._data[: self._length])

    def __len__(self) -> int:
        return self._length

    def _set_capacity(self, new_size: int) -> None:
        current = len(self._data)
        if new_size < current:
            del self._data[new_size:]
        else:
            self._data.extend(bytes(new_size - current))
        self._length = min(self._length, new_size)


class CharArray(_ResizableBuffer):
    """A byte buffer holding a NUL-terminated string that grows as needed.

    ``length`` counts the terminating NUL after string operations.
    """

    def __init__(self, capacity: int = 0) -> None:
        self._data = bytearray(_check_size(capacity, "capacity"))
        self._length = 0

    def resize(self, new_size: int) -> None:
        """Set the capacity to ``new_size``, keeping the contents that still fit."""
        self._set_capacity(_check_new_size(new_size))

    @property
    def value(self) -> str:
        """The text stored in the buffer, up to the first NUL."""
        return _c_string(bytes(self)).decode("utf-8")

    def _strlen(self) -> int:
        return len(_c_string(bytes(self)))

    def expand_as_needed(self, new_size: int) -> None:
        """Grow to ``new_size`` only if the capacity is smaller."""
        _check_size(new_size, "new size")
        if new_size > self.capacity:
            self.resize(new_size)

    def sprintf(self, fmt: str, *args: object) -> None:
        """Replace the contents with ``fmt % args``."""
        if not isinstance(fmt, str):
            raise InvalidArgumentError("format must be a string")
        try:
            text = fmt % args
        except (TypeError, ValueError, KeyError) as exc:
            raise CoreKitError(f"failed to format string: {exc}") from exc
        encoded = text.encode("utf-8")
        self.expand_as_needed(len(encoded) + 1)
        self._data[: len(encoded) + 1] = encoded + b"\0"
        self._length = len(encoded) + 1

    def strncat(self, src: str | bytes, n: int) -> None:
        """Append at most ``n`` bytes of the string ``src``."""
        _check_size(n, "n")
        piece = _c_string(_as_bytes(src))[:n]
        start = self._strlen()
        new_length = start + len(piece) + 1
        self.expand_as_needed(new_length)
        self._data[start:new_length] = piece + b"\0"
        self._length = new_length

    def strcat(self, src: str | bytes) -> None:
        """Append the whole string ``src``."""
        piece = _c_string(_as_bytes(src))
        self.strncat(piece, len(piece))

    def memcpy(self, src: str | bytes, n: int) -> None:
        """Copy the first ``n`` bytes of ``src`` to the start of the buffer."""
        _check_size(n, "n")
        data = _as_bytes(src)
        if n > len(data):
            raise InvalidArgumentError("n exceeds the length of the source")
        self.expand_as_needed(n)
        self._data[:n] = data[:n]
        self._length = n

    def strcpy(self, src: str | bytes) -> None:
        """Replace the contents with the string ``src`` and its terminating NUL."""
        piece = _c_string(_as_bytes(src)) + b"\0"
        self.memcpy(piece, len(piece))

    def __repr__(self) -> str:
        return f"CharArray(length={self._length}, capacity={self.capacity})"


class Uint8Array(_ResizableBuffer):
    """A resizable array of unsigned bytes."""

    def __init__(self, capacity: int = 0) -> None:
        self._data = bytearray(_check_size(capacity, "capacity"))
        self._length = 0

    def resize(self, new_size: int) -> None:
        """Set the capacity to ``new_size``, keeping the contents that still fit."""
        self._set_capacity(_check_new_size(new_size))

    def __repr__(self) -> str:
        return f"Uint8Array(length={self._length}, capacity={self.capacity})"
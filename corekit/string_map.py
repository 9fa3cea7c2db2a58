"""A string-to-string map with an explicit, growable slot capacity."""

from __future__ import annotations

from collections.abc import Iterator

from corekit.errors import (
    InvalidArgumentError,
    KeyNotFoundError,
    NotEnoughSpaceError,
)


def _check_count(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidArgumentError(f"{name} must be a non-negative integer")
    return value


def _check_text(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string")
    return value


class StringMap:
    """Maps string keys to string values, stored in a fixed number of slots.

    Keys keep the slot they were first stored in; iteration follows slot
    order, so a key added after a removal fills the earliest free slot.
    :meth:`set` doubles the capacity when the map is full, while
    :meth:`set_no_resize` raises :class:`NotEnoughSpaceError` instead.
    """

    def __init__(self, initial_capacity: int = 0) -> None:
        _check_count(initial_capacity, "initial capacity")
        self._keys: list[str | None] = []
        self._values: list[str | None] = []
        self._size = 0
        self.reserve(initial_capacity)

    @property
    def capacity(self) -> int:
        """Number of slots available for key-value pairs."""
        return len(self._keys)

    @property
    def size(self) -> int:
        """Number of key-value pairs stored."""
        return self._size

    def reserve(self, capacity: int) -> None:
        """Set the capacity, never below the current size."""
        _check_count(capacity, "capacity")
        capacity = max(capacity, self._size)
        current = len(self._keys)
        if capacity == current:
            return
        if capacity == 0:
            self._keys = []
            self._values = []
            return
        if capacity > current:
            extra = capacity - current
            self._keys.extend([None] * extra)
            self._values.extend([None] * extra)
            return
        if any(key is not None for key in self._keys[capacity:]):
            pairs = [
                (key, value)
                for key, value in zip(self._keys, self._values)
                if key is not None
            ]
            padding = [None] * (capacity - len(pairs))
            self._keys = [key for key, _ in pairs] + padding
            self._values = [value for _, value in pairs] + list(padding)
        else:
            del self._keys[capacity:]
            del self._values[capacity:]

    def clear(self) -> None:
        """Remove every pair, keeping the capacity."""
        self._keys = [None] * len(self._keys)
        self._values = [None] * len(self._values)
        self._size = 0

    def _find(self, key: str, key_length: int) -> int | None:
        for index, stored in enumerate(self._keys):
            if stored is None:
                continue
            count = max(key_length, len(stored))
            if key[:count] == stored:
                return index
        return None

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, doubling the capacity when full."""
        _check_text(key, "key")
        _check_text(value, "value")
        try:
            self.set_no_resize(key, value)
        except NotEnoughSpaceError:
            capacity = self.capacity
            self.reserve(2 * capacity if capacity else 1)
            self.set_no_resize(key, value)

    def set_no_resize(self, key: str, value: str) -> None:
        """Store ``value`` under ``key`` without growing the map."""
        _check_text(key, "key")
        _check_text(value, "value")
        index = self._find(key, len(key))
        if index is None:
            if self._size == len(self._keys):
                raise NotEnoughSpaceError("string map is full")
            index = self._keys.index(None)
            self._keys[index] = key
            self._size += 1
        self._values[index] = value

    def unset(self, key: str) -> None:
        """Remove ``key`` and its value."""
        _check_text(key, "key")
        index = self._find(key, len(key))
        if index is None:
            raise KeyNotFoundError(f"key '{key}' not found")
        self._keys[index] = None
        self._values[index] = None
        self._size -= 1

    def key_exists(self, key: str | None) -> bool:
        """Return whether ``key`` is stored; None is never stored."""
        if key is None:
            return False
        return self.key_existsn(key, len(key))

    def key_existsn(self, key: str | None, key_length: int) -> bool:
        """Like :meth:`key_exists`, looking at the first ``key_length`` characters."""
        if key is None:
            return False
        _check_text(key, "key")
        _check_count(key_length, "key length")
        return self._find(key, key_length) is not None

    def get(self, key: str | None) -> str | None:
        """Return the value for ``key``, or None when it is absent."""
        if key is None:
            return None
        return self.getn(key, len(key))

    def getn(self, key: str | None, key_length: int) -> str | None:
        """Like :meth:`get`, looking at the first ``key_length`` characters."""
        if key is None:
            return None
        _check_text(key, "key")
        _check_count(key_length, "key length")
        index = self._find(key, key_length)
        return None if index is None else self._values[index]

    def next_key(self, key: str | None = None) -> str | None:
        """Return the key after ``key`` in slot order, or the first key for None.

        Returns None when there is no further key or ``key`` is not stored.
        """
        if self._size == 0:
            return None
        start = 0
        if key is not None:
            try:
                start = self._keys.index(key) + 1
            except ValueError:
                return None
        for stored in self._keys[start:]:
            if stored is not None:
                return stored
        return None

    def copy_to(self, destination: StringMap) -> None:
        """Set every pair of this map into ``destination``, overwriting its values."""
        if not isinstance(destination, StringMap):
            raise InvalidArgumentError("destination must be a StringMap")
        for key, value in list(self.items()):
            destination.set(key, value)

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield the pairs in slot order."""
        for key, value in zip(self._keys, self._values):
            if key is not None:
                yield key, value

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self.items())

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.key_exists(key)

    def __getitem__(self, key: str) -> str:
        value = self.get(key)
        if value is None:
            raise KeyNotFoundError(f"key '{key}' not found")
        return value

    def __setitem__(self, key: str, value: str) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        self.unset(key)

    def __repr__(self) -> str:
        return f"StringMap({dict(self.items())!r}, capacity={self.capacity})"
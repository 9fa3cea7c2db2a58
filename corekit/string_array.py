"""An ordered array of strings with lexicographic comparison."""

from __future__ import annotations

import functools
from collections.abc import Iterable, Iterator, MutableSequence
from typing import overload

from corekit.errors import CoreKitError, InvalidArgumentError


def _check_item(item: object) -> str | None:
    if item is not None and not isinstance(item, str):
        raise InvalidArgumentError("string array items must be strings or None")
    return item


@functools.total_ordering
class StringArray(MutableSequence):
    """A mutable sequence of strings in which a slot may still be empty (None)."""

    def __init__(self, items: Iterable[str | None] = ()) -> None:
        if isinstance(items, str):
            raise InvalidArgumentError("items must be an iterable of strings, not a string")
        self._items: list[str | None] = [_check_item(item) for item in items]

    @classmethod
    def of_size(cls, size: int) -> StringArray:
        """Return an array of ``size`` empty slots."""
        if isinstance(size, bool) or not isinstance(size, int) or size < 0:
            raise InvalidArgumentError("size must be a non-negative integer")
        return cls([None] * size)

    @overload
    def __getitem__(self, index: int) -> str | None: ...

    @overload
    def __getitem__(self, index: slice) -> StringArray: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return StringArray(self._items[index])
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            self._items[index] = [_check_item(item) for item in value]
        else:
            self._items[index] = _check_item(value)

    def __delitem__(self, index) -> None:
        if isinstance(index, slice):
            doomed = sorted(range(len(self._items))[index], reverse=True)
            for position in doomed:
                self._items.pop(position)
        else:
            self._items.pop(index)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str | None]:
        return iter(self._items)

    def insert(self, index: int, value: str | None) -> None:
        self._items.insert(index, _check_item(value))

    def compare(self, other: StringArray) -> int:
        """Compare lexicographically; return -1, 0 or 1.

        Elements are compared pairwise up to the shorter length; if all of
        those are equal, the shorter array sorts first. An empty slot among
        the compared elements is an error.
        """
        if not isinstance(other, StringArray):
            raise InvalidArgumentError("can only compare with another StringArray")
        for index, (left, right) in enumerate(zip(self._items, other._items)):
            if left is None:
                raise CoreKitError(f"lhs array element {index} is empty")
            if right is None:
                raise CoreKitError(f"rhs array element {index} is empty")
            if left != right:
                return -1 if left < right else 1
        if len(self) < len(other):
            return -1
        if len(self) > len(other):
            return 1
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringArray):
            return NotImplemented
        return self._items == other._items

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, StringArray):
            return NotImplemented
        return self.compare(other) < 0

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"StringArray({self._items!r})"
"""Error types and the error-state record shared across the package."""

from __future__ import annotations

from dataclasses import dataclass

_UINT64_MAX = 2**64 - 1


class CoreKitError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(CoreKitError, ValueError):
    """An argument was missing, of the wrong kind, or out of range."""


class NotEnoughSpaceError(CoreKitError):
    """A container has no room left and was not allowed to grow."""


class KeyNotFoundError(CoreKitError, KeyError):
    """A requested key is not present."""


def _check_line_number(line_number: int) -> None:
    if isinstance(line_number, bool) or not isinstance(line_number, int):
        raise InvalidArgumentError("line number must be an integer")
    if not 0 <= line_number <= _UINT64_MAX:
        raise InvalidArgumentError("line number must fit in an unsigned 64-bit integer")


def format_error_string(message: str, file: str, line_number: int) -> str:
    """Render an error as ``"<message>, at <file>:<line_number>"``."""
    if not isinstance(message, str):
        raise InvalidArgumentError("message must be a string")
    if not isinstance(file, str):
        raise InvalidArgumentError("file must be a string")
    _check_line_number(line_number)
    return f"{message}, at {file}:{line_number}"


@dataclass(frozen=True)
class ErrorState:
    """Where and why an error happened."""

    message: str
    file: str
    line_number: int

    def __post_init__(self) -> None:
        if not isinstance(self.message, str):
            raise InvalidArgumentError("message must be a string")
        if not isinstance(self.file, str):
            raise InvalidArgumentError("file must be a string")
        _check_line_number(self.line_number)

    def format(self) -> str:
        """Return the human-readable error string for this state."""
        return format_error_string(self.message, self.file, self.line_number)

    def __str__(self) -> str:
        return self.format()
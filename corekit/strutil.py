"""String helpers: replacement, duplication, bounded formatting and splitting."""

from __future__ import annotations

from typing import NamedTuple

from corekit.errors import CoreKitError, InvalidArgumentError


class FormattedText(NamedTuple):
    """Result of :func:`snprintf`: the text that fit and the full length."""

    text: str
    length: int


def repl_str(text: str, old: str, new: str) -> str:
    """Replace every non-overlapping occurrence of ``old`` with ``new``, left to right."""
    if not old:
        raise InvalidArgumentError("the string to replace must not be empty")
    return text.replace(old, new)


def strdup(text: str | None) -> str | None:
    """Return a copy of ``text``, or None when given None."""
    if text is None:
        return None
    return text


def strndup(text: str | None, length: int) -> str | None:
    """Return the first ``length`` characters of ``text``, or None when given None."""
    if text is None:
        return None
    if length < 0:
        raise InvalidArgumentError("length must not be negative")
    return text[:length]


def snprintf(buffer_size: int, fmt: str, *args: object) -> FormattedText:
    """Format with ``%``-style ``fmt`` into at most ``buffer_size - 1`` characters.

    The returned length is always that of the untruncated result. A
    ``buffer_size`` of zero only measures the output.
    """
    if fmt is None:
        raise InvalidArgumentError("format must not be None")
    if buffer_size < 0:
        raise InvalidArgumentError("buffer size must not be negative")
    try:
        full = fmt % args
    except (TypeError, ValueError, KeyError) as exc:
        raise CoreKitError(f"failed to format string: {exc}") from exc
    if buffer_size == 0:
        return FormattedText("", len(full))
    return FormattedText(full[: buffer_size - 1], len(full))


def _check_delimiter(delimiter: str) -> None:
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise InvalidArgumentError("delimiter must be a single character")


def split(text: str | None, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``, dropping every empty token."""
    _check_delimiter(delimiter)
    if not text:
        return []
    return [token for token in text.split(delimiter) if token]


def split_last(text: str | None, delimiter: str) -> list[str]:
    """Split ``text`` in two at its last inner ``delimiter``.

    One leading and one trailing delimiter are ignored, and one delimiter
    directly before the split point is dropped. Without an inner delimiter
    the text after any leading delimiter is returned as a single item.
    """
    _check_delimiter(delimiter)
    if not text:
        return []
    size = len(text)
    start = 1 if text[0] == delimiter else 0
    end = size - 1 if text[-1] == delimiter else size

    last = text.rfind(delimiter, start, end)
    if last < 0:
        return [text[start:]]

    head_end = last - 1 if last > 0 and text[last - 1] == delimiter else last
    head = text[start:head_end] if head_end > start else ""
    tail = text[last + 1 : end]
    return [head, tail]
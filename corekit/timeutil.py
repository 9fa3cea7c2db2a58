"""Clock readings in integer nanoseconds and their fixed-width text forms."""

from __future__ import annotations

import time

from corekit.errors import CoreKitError, InvalidArgumentError

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_NS_PER_SECOND = 1_000_000_000


def _check_time_point(time_point: object) -> int:
    if isinstance(time_point, bool) or not isinstance(time_point, int):
        raise InvalidArgumentError("time point must be an integer number of nanoseconds")
    if not _INT64_MIN <= time_point <= _INT64_MAX:
        raise InvalidArgumentError("time point must fit in a signed 64-bit integer")
    return time_point


def _checked_reading(nanoseconds: int) -> int:
    if nanoseconds < 0:
        raise CoreKitError("unexpected negative time")
    return nanoseconds


def system_time_now() -> int:
    """Return the wall-clock time as nanoseconds since the Unix epoch."""
    return _checked_reading(time.time_ns())


def _steady_reading() -> int:
    raw_clock = getattr(time, "CLOCK_MONOTONIC_RAW", None)
    if raw_clock is not None:
        try:
            return time.clock_gettime_ns(raw_clock)
        except OSError:
            pass
    return time.monotonic_ns()


def steady_time_now() -> int:
    """Return a monotonic clock reading in nanoseconds from an unspecified start."""
    return _checked_reading(_steady_reading())


def nanoseconds_string(time_point: int) -> str:
    """Render ``time_point`` as a sign and at least 19 zero-padded digits."""
    value = _check_time_point(time_point)
    sign = "-" if value < 0 else ""
    return f"{sign}{abs(value):019d}"


def seconds_string(time_point: int) -> str:
    """Render ``time_point`` as seconds: a sign, 10 integer digits, a dot and 9 decimals.

    The whole and fractional parts are computed separately, so no floating
    point rounding takes place.
    """
    value = _check_time_point(time_point)
    sign = "" if value >= 0 else "-"
    seconds, nanoseconds = divmod(abs(value), _NS_PER_SECOND)
    return f"{sign}{seconds:010d}.{nanoseconds:09d}"
"""Information about the running process."""

from __future__ import annotations

import ntpath
import os
import posixpath
import sys

_WINDOWS = os.name == "nt" or sys.platform == "cygwin"


def get_pid() -> int:
    """Return the identifier of the current process."""
    return os.getpid()


def _posix_basename(path: str) -> str:
    stripped = path.rstrip("/")
    if not stripped:
        return "/" if path else ""
    return posixpath.basename(stripped)


def _invocation_path() -> str:
    orig_argv = getattr(sys, "orig_argv", None)
    if orig_argv:
        return orig_argv[0]
    return sys.executable or ""


def get_executable_name() -> str | None:
    """Return the file name the running program was started as.

    On Windows the extension is dropped. Returns None if the name is unknown.
    """
    path = _invocation_path()
    if not path:
        return None
    if _WINDOWS:
        return ntpath.splitext(ntpath.basename(path))[0]
    return _posix_basename(path)
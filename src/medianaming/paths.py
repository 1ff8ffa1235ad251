"""Path-string helpers.

Resolution only ever interprets the path strings handed in by the caller, so
these helpers never touch the filesystem. Both ``/`` and ``\\`` are treated as
separators because libraries are commonly shared between POSIX hosts and
Windows/UNC clients.
"""

from __future__ import annotations

import re

_SEPARATOR_PATTERN = re.compile(r"[\\/]")


def file_name(path: str) -> str:
    """Return the final path component (``/a/b/movie.mkv`` -> ``movie.mkv``)."""
    return _SEPARATOR_PATTERN.split(path)[-1]


def extension(path: str) -> str:
    """Return the extension including the dot, or an empty string."""
    name = file_name(path)
    index = name.rfind(".")
    if index < 0 or index == len(name) - 1:
        return ""
    return name[index:]


def file_name_without_extension(path: str) -> str:
    name = file_name(path)
    index = name.rfind(".")
    if index < 0:
        return name
    return name[:index]


def directory_name(path: str) -> str:
    """Return everything before the final separator, or an empty string."""
    parts = _SEPARATOR_PATTERN.split(path)
    if len(parts) < 2:
        return ""
    return path[: len(path) - len(parts[-1]) - 1]


def parent_name(path: str) -> str:
    """Return the name of the directory containing ``path``."""
    parent = directory_name(path)
    if not parent:
        return ""
    return file_name(parent)


class MalformedPathError(ValueError):
    """Raised when a resolver is handed a missing or blank path."""


def require_path(path: str | None) -> str:
    if path is None or not str(path).strip():
        raise MalformedPathError("path must be a non-empty string")
    return path

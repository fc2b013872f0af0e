"""Pure string classification and canonicalization for virtual paths.

No function in this module touches the application root or the filesystem.

Key functions:
- classify: Decide whether a raw string is app-relative, absolute or unrooted
- canonize: Convert backslashes and collapse separator runs in one pass
"""

from __future__ import annotations

from enum import Enum

APP_RELATIVE_MARKER = "~"
SEPARATOR = "/"

_SEPARATORS = ("/", "\\")


class PathKind(str, Enum):
    """Classification of a raw virtual path string."""

    APP_RELATIVE = "app_relative"
    ABSOLUTE = "absolute"
    UNROOTED = "unrooted"


def classify(raw: str) -> PathKind:
    """Classify ``raw`` by its leading marker.

    ``~`` alone, or ``~`` followed by a separator, is app-relative. ``~name``
    is not: the marker only counts when it stands for a whole segment.
    """
    if not raw:
        return PathKind.UNROOTED
    if raw[0] == SEPARATOR:
        return PathKind.ABSOLUTE
    if raw[0] == APP_RELATIVE_MARKER and (len(raw) == 1 or raw[1] in _SEPARATORS):
        return PathKind.APP_RELATIVE
    return PathKind.UNROOTED


def is_absolute(raw: str) -> bool:
    return classify(raw) is PathKind.ABSOLUTE


def is_app_relative(raw: str) -> bool:
    return classify(raw) is PathKind.APP_RELATIVE


def is_rooted(raw: str) -> bool:
    return classify(raw) is not PathKind.UNROOTED


def _first_irregular_separator(path: str) -> int:
    for i, ch in enumerate(path):
        if ch == "\\":
            return i
        if ch == "/" and i + 1 < len(path) and path[i + 1] in _SEPARATORS:
            return i
    return -1


def canonize(path: str) -> str:
    """Return ``path`` using ``/`` only, with no doubled separators.

    Characters are copied verbatim up to the first backslash or doubled
    separator; from there every run of ``/`` and ``\\`` becomes a single ``/``.
    """
    index = _first_irregular_separator(path)
    if index < 0:
        return path

    out = [path[:index]]
    length = len(path)
    for i in range(index, length):
        ch = path[i]
        if ch in _SEPARATORS:
            if i + 1 < length and path[i + 1] in _SEPARATORS:
                continue
            out.append(SEPARATOR)
        else:
            out.append(ch)
    return "".join(out)


__all__ = [
    "APP_RELATIVE_MARKER",
    "SEPARATOR",
    "PathKind",
    "classify",
    "is_absolute",
    "is_app_relative",
    "is_rooted",
    "canonize",
]

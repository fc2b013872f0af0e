"""Resolution of ``.`` and ``..`` segments in rooted virtual paths.

Normalization runs in two separate steps:
- collapse_segments: Stack walk over the segments. It reports how many ``..``
  segments ran past the start of the path (the underflow) and which segments remain.
- resolve_against_root: For app-relative paths only. It absorbs the underflow by
  borrowing the application root's own segments, without ever leaving the site root.

An app-relative path that needed borrowing comes back as an absolute path.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from virtualpath.app_root import AppRoot, AppRootLike, resolve_app_root
from virtualpath.canonical import APP_RELATIVE_MARKER, PathKind, canonize, classify
from virtualpath.errors import PathEscapesRootError, UnrootedPathError

logger = logging.getLogger(__name__)


def collapse_segments(segments: Iterable[str]) -> Tuple[int, List[str]]:
    """Resolve ``.`` and ``..`` and return ``(underflow, kept)``.

    ``..`` only underflows while nothing is kept, so the resolved location is
    always "go up ``underflow`` levels, then descend into ``kept``".
    """
    underflow = 0
    kept: List[str] = []
    for seg in segments:
        if not seg or seg == ".":
            continue
        if seg == "..":
            if kept:
                kept.pop()
            else:
                underflow += 1
            continue
        kept.append(seg)
    return underflow, kept


def resolve_against_root(root: AppRoot, underflow: int, path: str = "") -> List[str]:
    """Return the root segments left after climbing ``underflow`` levels above ``~``.

    Raises:
        PathEscapesRootError: If the climb would exit above the site root
    """
    if underflow > root.depth:
        logger.debug("rejected %s: %d levels above application root %s", path, underflow, root.path)
        raise PathEscapesRootError(path)
    borrowed = list(root.segments[: root.depth - underflow])
    logger.debug("resolved %s against application root %s", path, root.path)
    return borrowed


def normalize(path: str, app_root: AppRootLike = None) -> str:
    """Return ``path`` with every ``.`` and ``..`` segment resolved.

    Args:
        path: Rooted virtual path (``~/...`` or ``/...``)
        app_root: Explicit application root; the ambient root is used when omitted
            and only when an app-relative path climbs above ``~``

    Raises:
        UnrootedPathError: If ``path`` has neither marker
        PathEscapesRootError: If ``..`` resolution would exit above the top directory
    """
    kind = classify(path)
    if kind is PathKind.UNROOTED:
        raise UnrootedPathError(path)

    if len(path) == 1:
        return path

    path = canonize(path)
    if "." not in path:
        return path

    app_relative = kind is PathKind.APP_RELATIVE
    body = path[1:] if app_relative else path
    ends_with_slash = body.endswith("/")

    underflow, kept = collapse_segments(body.split("/"))

    if underflow:
        if not app_relative:
            logger.debug("rejected %s: leading .. above site root", path)
            raise PathEscapesRootError(path)
        # the borrowed root segments replace the ~ marker
        kept = resolve_against_root(resolve_app_root(app_root), underflow, path) + kept
        app_relative = False

    result = (APP_RELATIVE_MARKER if app_relative else "") + "".join("/" + seg for seg in kept)
    if not result:
        return "/"
    if ends_with_slash:
        result += "/"
    return result


__all__ = ["collapse_segments", "resolve_against_root", "normalize"]

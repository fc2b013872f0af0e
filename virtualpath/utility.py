"""String-in, string-out operations on virtual paths.

These are thin wrappers over :class:`virtualpath.types.VirtualPath`. Every
function that may need the application root accepts ``app_root``; when it is
omitted the ambient root from :mod:`virtualpath.app_root` is used.
"""

from __future__ import annotations

import logging
from typing import Optional

from virtualpath.app_root import AppRootLike
from virtualpath.canonical import canonize, is_rooted
from virtualpath.errors import KindMismatchError, UnrootedPathError
from virtualpath.types import VirtualPath

logger = logging.getLogger(__name__)


# ---------- Conversions ----------


def to_absolute(path: str, app_root: AppRootLike = None) -> str:
    """Return the site-absolute form of ``path``, e.g. ``~/a`` -> ``/app/a``."""
    return str(VirtualPath.parse(path, app_root).to_absolute(app_root))


def to_app_relative(
    path: str,
    app_root: AppRootLike = None,
    *,
    null_if_not_in_app: bool = False,
    ignore_case: Optional[bool] = None,
) -> Optional[str]:
    """Return the ``~/...`` form of ``path``.

    Args:
        path: Rooted virtual path
        app_root: Explicit application root (ambient root when omitted)
        null_if_not_in_app: Return None instead of the absolute path when ``path``
            lies outside the application root
        ignore_case: Compare the root prefix ignoring case; defaults to
            ``settings.case_insensitive``

    Raises:
        UnrootedPathError: If ``path`` has neither marker
        PathEscapesRootError: If normalizing ``path`` escapes the top directory
    """
    vp = VirtualPath.parse(path, app_root)
    if vp.is_app_relative:
        return str(vp)

    relative = vp.to_app_relative(app_root, ignore_case=ignore_case)
    if relative is not None:
        return str(relative)

    logger.debug("%s is outside the application root", vp)
    if null_if_not_in_app:
        return None
    return str(vp)


# ---------- Components ----------


def get_file_name(path: str, app_root: AppRootLike = None) -> str:
    return VirtualPath.parse(path, app_root).file_name


def get_directory(path: str, app_root: AppRootLike = None) -> Optional[str]:
    """Return the containing directory with a trailing slash, or None for ``/`` and ``~``."""
    parent = VirtualPath.parse(path, app_root).parent
    return str(parent) if parent is not None else None


def get_extension(path: str) -> str:
    """Return the extension of the last segment, including its dot. Unrooted paths are allowed."""
    name = canonize(path).rsplit("/", 1)[-1]
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def append_trailing_slash(path: str) -> str:
    if not path or path.endswith("/"):
        return path
    return path + "/"


def remove_trailing_slash(path: str) -> str:
    if len(path) <= 1 or not path.endswith("/"):
        return path
    return path[:-1]


# ---------- Composition ----------


def combine(base: str, relative: str, app_root: AppRootLike = None) -> str:
    """Resolve ``relative`` against the directory of ``base``.

    A rooted ``relative`` replaces ``base``; an empty one returns ``base`` unchanged.
    """
    if not is_rooted(base):
        raise UnrootedPathError(base)
    if not relative:
        return base
    return str(VirtualPath.parse(base, app_root).joinpath(relative, app_root))


def make_relative(from_path: str, to_path: str, app_root: AppRootLike = None) -> str:
    """Return the ``../``-style path leading from ``from_path`` to ``to_path``.

    Raises:
        KindMismatchError: If one path is app-relative and the other absolute
    """
    source = VirtualPath.parse(from_path, app_root)
    target = VirtualPath.parse(to_path, app_root)
    if source.kind is not target.kind:
        raise KindMismatchError(
            f"cannot relate {source.kind.value} path '{source}' to {target.kind.value} path '{target}'"
        )
    return target.relative_to(source)


__all__ = [
    "to_absolute",
    "to_app_relative",
    "get_file_name",
    "get_directory",
    "get_extension",
    "append_trailing_slash",
    "remove_trailing_slash",
    "combine",
    "make_relative",
]

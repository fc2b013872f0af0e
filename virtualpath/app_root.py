"""Application root value and the ambient application root.

The ambient root is installed once at application start and only read after
that. Every operation also accepts an explicit root, which always wins.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from virtualpath import config
from virtualpath.canonical import PathKind, canonize, classify
from virtualpath.errors import (
    AppRootAlreadyInstalledError,
    InvalidAppRootError,
    PathEscapesRootError,
    UnrootedPathError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AppRoot:
    """Normalized absolute application root, always ending in ``/``.

    Build with :meth:`from_string`; the constructor does not validate.
    """

    path: str
    segments: Tuple[str, ...]

    @classmethod
    def from_string(cls, raw: str) -> "AppRoot":
        kind = classify(raw)
        if kind is PathKind.UNROOTED:
            raise UnrootedPathError(raw)
        if kind is PathKind.APP_RELATIVE:
            raise InvalidAppRootError(f"application root must be an absolute virtual path: '{raw}'")

        segments = []
        for seg in canonize(raw).split("/"):
            if not seg or seg == ".":
                continue
            if seg == "..":
                if not segments:
                    raise PathEscapesRootError(raw)
                segments.pop()
                continue
            segments.append(seg)

        path = "/" + "".join(seg + "/" for seg in segments)
        return cls(path=path, segments=tuple(segments))

    @property
    def depth(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return self.path


AppRootLike = Union[AppRoot, str, None]

_lock = threading.Lock()
_installed: Optional[AppRoot] = None


def install_app_root(raw: Union[AppRoot, str]) -> AppRoot:
    """Install the ambient application root.

    Installing the same root again is a no-op; a different root raises
    ``AppRootAlreadyInstalledError``.
    """
    global _installed
    root = raw if isinstance(raw, AppRoot) else AppRoot.from_string(raw)
    with _lock:
        if _installed is not None:
            if _installed == root:
                return _installed
            raise AppRootAlreadyInstalledError(
                f"application root already installed as '{_installed.path}', refusing '{root.path}'"
            )
        _installed = root
    logger.debug("installed ambient application root %s", root.path)
    return root


def current_app_root() -> AppRoot:
    """Return the ambient root, installing ``settings.app_root`` on first use."""
    root = _installed
    if root is not None:
        return root
    return install_app_root(config.settings.app_root)


def resolve_app_root(app_root: AppRootLike = None) -> AppRoot:
    if app_root is None:
        return current_app_root()
    if isinstance(app_root, AppRoot):
        return app_root
    return AppRoot.from_string(app_root)


__all__ = [
    "AppRoot",
    "AppRootLike",
    "install_app_root",
    "current_app_root",
    "resolve_app_root",
]

"""Typed failures raised by the virtual path engine."""

from __future__ import annotations


class VirtualPathError(ValueError):
    """Base class for every virtual path failure."""


class UnrootedPathError(VirtualPathError):
    """Raised when an operation that needs ``~/...`` or ``/...`` gets neither."""

    def __init__(self, path: str) -> None:
        super().__init__(f"the relative virtual path '{path}' is not allowed here")
        self.path = path


class PathEscapesRootError(VirtualPathError):
    """Raised when ``..`` resolution would exit above the top directory."""

    def __init__(self, path: str) -> None:
        super().__init__(f"cannot use a leading .. to exit above the top directory: '{path}'")
        self.path = path


class KindMismatchError(VirtualPathError):
    """Raised when two paths of different kinds cannot be related."""


class InvalidSegmentError(VirtualPathError):
    """Raised when a segment is empty, a dot segment, or contains a separator."""


class InvalidAppRootError(VirtualPathError):
    """Raised when the application root is not an absolute virtual path."""


class AppRootAlreadyInstalledError(VirtualPathError, RuntimeError):
    """Raised when the ambient application root is installed twice with different values."""


__all__ = [
    "VirtualPathError",
    "UnrootedPathError",
    "PathEscapesRootError",
    "KindMismatchError",
    "InvalidSegmentError",
    "InvalidAppRootError",
    "AppRootAlreadyInstalledError",
]

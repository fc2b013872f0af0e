"""Virtual path algebra for ``~/``-relative and site-absolute web application paths."""

from .app_root import AppRoot, current_app_root, install_app_root
from .canonical import canonize, classify, is_absolute, is_app_relative, is_rooted
from .errors import (
    AppRootAlreadyInstalledError,
    InvalidAppRootError,
    InvalidSegmentError,
    KindMismatchError,
    PathEscapesRootError,
    UnrootedPathError,
    VirtualPathError,
)
from .normalize import normalize
from .types import PathKind, VirtualPath
from .utility import (
    append_trailing_slash,
    combine,
    get_directory,
    get_extension,
    get_file_name,
    make_relative,
    remove_trailing_slash,
    to_absolute,
    to_app_relative,
)

__all__ = [
    "AppRoot",
    "current_app_root",
    "install_app_root",
    "canonize",
    "classify",
    "is_absolute",
    "is_app_relative",
    "is_rooted",
    "normalize",
    "PathKind",
    "VirtualPath",
    "append_trailing_slash",
    "combine",
    "get_directory",
    "get_extension",
    "get_file_name",
    "make_relative",
    "remove_trailing_slash",
    "to_absolute",
    "to_app_relative",
    "VirtualPathError",
    "UnrootedPathError",
    "PathEscapesRootError",
    "KindMismatchError",
    "InvalidSegmentError",
    "InvalidAppRootError",
    "AppRootAlreadyInstalledError",
]

"""Immutable tagged value for normalized rooted virtual paths."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from virtualpath import config
from virtualpath.app_root import AppRootLike, resolve_app_root
from virtualpath.canonical import APP_RELATIVE_MARKER, PathKind, classify
from virtualpath.errors import InvalidSegmentError, UnrootedPathError
from virtualpath.normalize import normalize


def _check_segment(seg: str) -> None:
    if not seg:
        raise InvalidSegmentError("empty segment")
    if seg in (".", ".."):
        raise InvalidSegmentError(f"dot segment '{seg}' is not allowed in a normalized path")
    if "/" in seg or "\\" in seg:
        raise InvalidSegmentError(f"segment '{seg}' contains a path separator")


@dataclass(frozen=True, slots=True)
class VirtualPath:
    """
    Normalized rooted virtual path: ``~/...`` (app-relative) or ``/...`` (absolute).
    Build with :meth:`parse`; every transformation returns a new value.
    """

    kind: PathKind
    segments: Tuple[str, ...] = ()
    trailing_slash: bool = False

    @classmethod
    def parse(cls, raw: str, app_root: AppRootLike = None) -> "VirtualPath":
        """Normalize ``raw`` and split it into kind, segments and trailing slash."""
        normalized = normalize(raw, app_root)
        kind = classify(normalized)
        body = normalized[1:] if kind is PathKind.APP_RELATIVE else normalized
        segments = tuple(seg for seg in body.split("/") if seg)
        return cls(kind=kind, segments=segments, trailing_slash=body.endswith("/"))

    def __post_init__(self) -> None:
        if self.kind is PathKind.UNROOTED:
            raise UnrootedPathError("/".join(self.segments))
        for seg in self.segments:
            _check_segment(seg)

    def __str__(self) -> str:
        marker = APP_RELATIVE_MARKER if self.is_app_relative else ""
        body = "".join("/" + seg for seg in self.segments)
        if self.trailing_slash and (self.segments or self.is_app_relative):
            body += "/"
        return (marker + body) or "/"

    # --- classification ---

    @property
    def is_app_relative(self) -> bool:
        return self.kind is PathKind.APP_RELATIVE

    @property
    def is_absolute(self) -> bool:
        return self.kind is PathKind.ABSOLUTE

    # --- components ---

    @property
    def file_name(self) -> str:
        if self.trailing_slash or not self.segments:
            return ""
        return self.segments[-1]

    @property
    def extension(self) -> str:
        name = self.file_name
        dot = name.rfind(".")
        return name[dot:] if dot >= 0 else ""

    @property
    def parent(self) -> Optional["VirtualPath"]:
        """Directory containing this path, with a trailing slash; None for ``/`` and ``~``."""
        if not self.segments:
            return None
        return replace(self, segments=self.segments[:-1], trailing_slash=True)

    @property
    def directory(self) -> "VirtualPath":
        """This path if it names a directory, otherwise its parent."""
        if self.trailing_slash or not self.segments:
            return self
        return replace(self, segments=self.segments[:-1], trailing_slash=True)

    # --- transformations ---

    def with_trailing_slash(self) -> "VirtualPath":
        return self if self.trailing_slash else replace(self, trailing_slash=True)

    def without_trailing_slash(self) -> "VirtualPath":
        return replace(self, trailing_slash=False) if self.trailing_slash else self

    def joinpath(self, relative: str, app_root: AppRootLike = None) -> "VirtualPath":
        """Resolve ``relative`` against this path's directory; a rooted ``relative`` wins."""
        if not relative:
            return self
        if classify(relative) is not PathKind.UNROOTED:
            return VirtualPath.parse(relative, app_root)
        return VirtualPath.parse(str(self.directory).rstrip("/") + "/" + relative, app_root)

    def to_absolute(self, app_root: AppRootLike = None) -> "VirtualPath":
        if self.is_absolute:
            return self
        root = resolve_app_root(app_root)
        return replace(
            self,
            kind=PathKind.ABSOLUTE,
            segments=root.segments + self.segments,
            trailing_slash=self.trailing_slash or not self.segments,
        )

    def to_app_relative(
        self, app_root: AppRootLike = None, *, ignore_case: Optional[bool] = None
    ) -> Optional["VirtualPath"]:
        """Return the ``~/...`` form of this path, or None when it lies outside the application root.

        ``ignore_case`` defaults to ``settings.case_insensitive``.
        """
        if self.is_app_relative:
            return self
        root = resolve_app_root(app_root)
        if len(self.segments) < root.depth:
            return None
        head = self.segments[: root.depth]
        fold = config.settings.case_insensitive if ignore_case is None else ignore_case
        if fold:
            matches = [a.casefold() for a in head] == [b.casefold() for b in root.segments]
        else:
            matches = head == root.segments
        if not matches:
            return None
        rest = self.segments[root.depth :]
        # "/app" and "/app/" both name the application root itself
        return replace(
            self,
            kind=PathKind.APP_RELATIVE,
            segments=rest,
            trailing_slash=self.trailing_slash or not rest,
        )

    def relative_to(self, other: "VirtualPath") -> str:
        """Return the ``../``-style path that leads from ``other`` to this path."""
        common = 0
        for mine, theirs in zip(self.segments, other.segments):
            if mine != theirs:
                break
            common += 1
        ups = [".."] * (len(other.segments) - common)
        return "/".join(ups + list(self.segments[common:]))


__all__ = ["PathKind", "VirtualPath"]

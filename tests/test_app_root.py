"""Tests for the application root value and ambient root lifecycle."""

from __future__ import annotations

import pytest

from virtualpath import (
    AppRoot,
    AppRootAlreadyInstalledError,
    InvalidAppRootError,
    PathEscapesRootError,
    UnrootedPathError,
    current_app_root,
    install_app_root,
)
from virtualpath import config
from virtualpath.app_root import resolve_app_root


class TestAppRootFromString:
    def test_trailing_slash_added(self):
        root = AppRoot.from_string("/app")
        assert root.path == "/app/"
        assert root.segments == ("app",)
        assert root.depth == 1

    def test_canonized_and_normalized(self):
        root = AppRoot.from_string("/a//b\\c/./d/../")
        assert root.path == "/a/b/c/"
        assert str(root) == "/a/b/c/"

    def test_site_root(self):
        root = AppRoot.from_string("/")
        assert root.path == "/"
        assert root.segments == ()

    def test_app_relative_rejected(self):
        with pytest.raises(InvalidAppRootError):
            AppRoot.from_string("~/app/")

    def test_unrooted_rejected(self):
        with pytest.raises(UnrootedPathError):
            AppRoot.from_string("app/")

    def test_escape_rejected(self):
        with pytest.raises(PathEscapesRootError):
            AppRoot.from_string("/../app/")


class TestAmbientRoot:
    def test_install_once(self):
        root = install_app_root("/app/")
        assert current_app_root() is root

    def test_reinstall_same_root_is_noop(self):
        first = install_app_root("/app/")
        assert install_app_root("/app") == first

    def test_reinstall_different_root_raises(self):
        install_app_root("/app/")
        with pytest.raises(AppRootAlreadyInstalledError) as excinfo:
            install_app_root("/other/")
        assert isinstance(excinfo.value, RuntimeError)
        assert current_app_root().path == "/app/"

    def test_falls_back_to_settings(self, monkeypatch):
        monkeypatch.setattr(config, "settings", config.Settings(app_root="/from-env"))
        assert current_app_root().path == "/from-env/"
        # first read installs it
        with pytest.raises(AppRootAlreadyInstalledError):
            install_app_root("/something-else/")

    def test_resolve_prefers_explicit_root(self):
        install_app_root("/app/")
        assert resolve_app_root("/explicit").path == "/explicit/"
        given = AppRoot.from_string("/given/")
        assert resolve_app_root(given) is given
        assert resolve_app_root(None).path == "/app/"

# tests/conftest.py
# Give every test a fresh ambient application root.

from __future__ import annotations

import pytest

import virtualpath.app_root as app_root_mod


@pytest.fixture(autouse=True)
def _fresh_ambient_app_root(monkeypatch):
    """The ambient root is install-once, so clear it around each test."""
    monkeypatch.setattr(app_root_mod, "_installed", None)
    yield

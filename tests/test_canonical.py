"""Tests for classification and canonicalization."""

import pytest

from virtualpath import PathKind, canonize, classify, is_absolute, is_app_relative, is_rooted


class TestClassify:
    """Test classify and its boolean projections."""

    @pytest.mark.parametrize(
        "raw,kind",
        [
            ("~", PathKind.APP_RELATIVE),
            ("~/", PathKind.APP_RELATIVE),
            ("~/a/b", PathKind.APP_RELATIVE),
            ("~\\a", PathKind.APP_RELATIVE),
            ("/", PathKind.ABSOLUTE),
            ("/a/b.aspx", PathKind.ABSOLUTE),
            ("~a", PathKind.UNROOTED),
            ("a/b", PathKind.UNROOTED),
            ("../a", PathKind.UNROOTED),
            ("\\a", PathKind.UNROOTED),
            ("", PathKind.UNROOTED),
        ],
    )
    def test_classify(self, raw, kind):
        assert classify(raw) is kind

    def test_projections(self):
        assert is_absolute("/a")
        assert not is_absolute("~/a")
        assert is_app_relative("~/a")
        assert not is_app_relative("/a")
        assert is_rooted("~")
        assert is_rooted("/")
        assert not is_rooted("a")
        assert not is_rooted("")


class TestCanonize:
    """Test canonize separator handling."""

    def test_mixed_separators_collapse(self):
        assert canonize("a\\\\b//c") == "a/b/c"

    def test_clean_path_unchanged(self):
        assert canonize("/a/b/c.aspx") == "/a/b/c.aspx"
        assert canonize("~/a/") == "~/a/"

    def test_marker_preserved(self):
        assert canonize("~//a\\\\b/") == "~/a/b/"
        assert canonize("~\\a") == "~/a"

    def test_dot_segments_untouched(self):
        assert canonize("/a//../b") == "/a/../b"

    def test_collapse_starts_at_first_irregular_separator(self):
        assert canonize("/a/b//c///d") == "/a/b/c/d"
        assert canonize("//") == "/"

    @pytest.mark.parametrize(
        "raw", ["a\\\\b//c", "~//x\\y", "/", "", "\\\\server\\share", "/a/./b//", "plain"]
    )
    def test_idempotent(self, raw):
        once = canonize(raw)
        assert canonize(once) == once
        assert "\\" not in once
        assert "//" not in once

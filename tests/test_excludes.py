"""Tests for excludes.py — sidecar name matching."""
from pathlib import Path

from excludes import DEFAULT_EXCLUDES, EXCLUDED_FILES, Excludes


class TestExcludesEmpty:
    def test_no_names_matches_nothing(self):
        assert not Excludes([]).matches(Path("ComicInfo.xml"))

    def test_blank_names_ignored(self):
        ex = Excludes(["", "  ", "\t"])
        assert ex.describe() == "none"
        assert not ex.matches(Path(" "))


class TestMatches:
    def test_default_list(self):
        assert EXCLUDED_FILES == ["ComicInfo.xml"]
        assert DEFAULT_EXCLUDES.matches(Path("/comics/Vol 01/ComicInfo.xml"))

    def test_exact_name_only(self):
        assert not DEFAULT_EXCLUDES.matches(Path("ComicInfo.xml.bak"))
        assert not DEFAULT_EXCLUDES.matches(Path("MyComicInfo.xml"))

    def test_case_sensitive(self):
        assert not DEFAULT_EXCLUDES.matches(Path("comicinfo.xml"))

    def test_matches_on_name_not_parent(self):
        assert not DEFAULT_EXCLUDES.matches(Path("ComicInfo.xml/page.png"))

    def test_custom_names(self):
        ex = Excludes(["ComicInfo.xml", "cover.txt"])
        assert ex.matches(Path("cover.txt"))
        assert not ex.matches(Path("page.png"))


class TestDescribe:
    def test_empty(self):
        assert Excludes([]).describe() == "none"

    def test_lists_names_without_duplicates(self):
        assert Excludes(["a.xml", "b.xml", "a.xml"]).describe() == "a.xml, b.xml"

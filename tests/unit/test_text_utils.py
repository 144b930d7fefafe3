"""Unit tests for the string helpers."""

import pytest

from assetfs.core.text_utils import (
    extension_of,
    is_alphanumeric,
    is_empty_or_whitespace,
    normalize_separators,
    split_name,
    string_after,
    string_before,
    string_between,
)


class TestStringBetween:
    def test_first_start_next_end(self):
        assert string_between("The quick brown fox", "The ", " brown") == "quick"

    def test_end_is_searched_after_start(self):
        assert string_between('"a" #include "b.hlsl" "c"', '#include "', '"') == "b.hlsl"

    def test_missing_start(self):
        assert string_between("no marker here", "#include", '"') is None

    def test_missing_end(self):
        assert string_between('#include "open', '#include "', '"') is None

    def test_adjacent_markers_give_empty_string(self):
        assert string_between('#include ""', '#include "', '"') == ""


class TestStringAroundMarker:
    def test_string_before(self):
        assert string_before("The quick brown fox", "brown") == "The quick "

    def test_string_after(self):
        assert string_after("The quick brown fox", "brown") == " fox"

    def test_first_occurrence_wins(self):
        assert string_before("a.b.c", ".") == "a"
        assert string_after("a.b.c", ".") == "b.c"

    def test_missing_marker(self):
        assert string_before("The quick brown fox", "red") is None
        assert string_after("The quick brown fox", "red") is None

    def test_marker_at_edges(self):
        assert string_before("brown fox", "brown") == ""
        assert string_after("quick brown", "brown") == ""


class TestNameHelpers:
    @pytest.mark.parametrize(
        "path, name",
        [
            ("a/b/c.png", "c.png"),
            ("a\\b\\c.png", "c.png"),
            ("a/b\\c.png", "c.png"),
            ("c.png", "c.png"),
            ("dir/", ""),
        ],
    )
    def test_split_name(self, path, name):
        assert split_name(path) == name

    @pytest.mark.parametrize(
        "name, ext",
        [
            ("wall.png", ".png"),
            ("archive.tar.gz", ".gz"),
            (".gitignore", ""),
            ("Makefile", ""),
            (".", ""),
            ("..", ""),
        ],
    )
    def test_extension_of(self, name, ext):
        assert extension_of(name) == ext

    def test_normalize_separators(self):
        assert normalize_separators("C:\\game\\assets/wall.png") == "C:/game/assets/wall.png"


def test_is_empty_or_whitespace():
    assert is_empty_or_whitespace("")
    assert is_empty_or_whitespace(" \t\n")
    assert not is_empty_or_whitespace(" x ")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Texture01", True),
        ("42", True),
        ("", False),
        ("   ", False),
        ("wall_01", False),
        ("wall 01", False),
        ("café", False),
    ],
)
def test_is_alphanumeric(value, expected):
    assert is_alphanumeric(value) is expected

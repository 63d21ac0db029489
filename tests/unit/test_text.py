"""Unit tests for string helpers."""

import pytest

from anyconv.text import dedupe, has, matched, position, replace_smart, slash, yes_no


class TestSearch:
    """Test position and has."""

    @pytest.mark.parametrize("needle,expected", [("c", 2), ("a", 0), ("d", 3), ("g", -1)])
    def test_position_in_list(self, needle, expected):
        """Test lookup in a list haystack."""
        haystack = ["a", "b", "c", "d"]

        assert position(needle, haystack) == expected
        assert has(needle, haystack) is (expected >= 0)

    def test_position_in_delimited_string(self):
        """Test a single string haystack is split on the delimiter."""
        assert position("b", "a,b,c") == 1
        assert position("b", ["a,b,c"]) == 1
        assert position("b", "a;b;c", delim=";") == 1
        assert position("a,b", "a,b", delim="") == 0

    def test_single_value_haystack(self):
        """Test a haystack without delimiters."""
        assert position("abc", "abc") == 0
        assert has("ab", "abc") is False


class TestDedupe:
    """Test dedupe."""

    def test_keeps_first_occurrence(self):
        """Test order of first appearance is kept."""
        assert dedupe(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]

    def test_sorted(self):
        """Test sorting of the result."""
        assert dedupe(["b", "a", "b", "c", "a"], sort=True) == ["a", "b", "c"]


class TestMatched:
    """Test matched."""

    def test_outermost_pair(self):
        """Test nested delimiters."""
        assert matched("f(a, g(b), c) + d", "(", ")") == "a, g(b), c"

    def test_no_start(self):
        """Test text without the start character."""
        assert matched("no parens", "(", ")") == ""

    def test_unbalanced(self):
        """Test an unclosed start character."""
        with pytest.raises(ValueError):
            matched("f(a, g(b)", "(", ")")

    def test_end_before_start(self):
        """Test a stray end character unbalances the pairs."""
        with pytest.raises(ValueError):
            matched("a)b(c)", "(", ")")


class TestYesNo:
    """Test yes_no."""

    def test_values(self):
        """Test accepted answers."""
        assert yes_no("yes") is True
        assert yes_no("no") is False
        assert yes_no("") is False

    def test_invalid(self):
        """Test anything else is an error."""
        with pytest.raises(ValueError):
            yes_no("maybe")


class TestReplaceSmart:
    """Test replace_smart."""

    def test_skips_delimited_spans(self):
        """Test replacement outside quotes only."""
        assert replace_smart("a,'b,c',d", ",", ";", "'") == "a;'b,c';d"

    def test_delete_character(self):
        """Test replacing with an empty string removes the character."""
        assert replace_smart("a b 'c d'", " ", "", "'") == "ab'c d'"

    def test_multi_character_arguments(self):
        """Test that only single characters are accepted."""
        with pytest.raises(ValueError):
            replace_smart("abc", "ab", "x", "'")


class TestSlash:
    """Test slash."""

    def test_adds_once(self):
        """Test a trailing slash is added only when missing."""
        assert slash("/tmp") == "/tmp/"
        assert slash("/tmp/") == "/tmp/"

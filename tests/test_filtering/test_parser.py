"""Tests for search query parsing."""

import pytest

from greppy_filters.filtering.parser import parse_int, parse_query
from greppy_filters.filtering.spec import FilterSpec


class TestParseQuery:
    """Tests for parse_query."""

    def test_kind_and_state(self):
        """Test kind and state prefixes."""
        spec = parse_query("kind:function state:dead")

        assert spec.kind == "function"
        assert spec.state == "dead"
        assert spec.search == ""

    def test_invalid_kind_is_dropped(self):
        """Test that an unknown kind is discarded, not merged into search."""
        spec = parse_query("foo kind:bogus")

        assert spec.search == "foo"
        assert spec.kind == "all"

    def test_invalid_state_is_dropped(self):
        """Test that an unknown state is discarded."""
        spec = parse_query("state:zombie bar")

        assert spec.state == "all"
        assert spec.search == "bar"

    def test_kind_value_is_case_sensitive(self):
        """Test that only the prefix is case-insensitive."""
        assert parse_query("KIND:function").kind == "function"
        assert parse_query("kind:Function").kind == "all"

    def test_file_is_unconditional(self):
        """Test that any file value becomes the glob."""
        assert parse_query("file:src/trace/*").file == "src/trace/*"
        assert parse_query("FILE:[weird").file == "[weird"

    def test_refs_exact(self):
        """Test exact refs sets both bounds."""
        spec = parse_query("refs:10")

        assert spec.min_refs == 10
        assert spec.max_refs == 10

    def test_refs_greater(self):
        """Test refs:> sets the lower bound only."""
        spec = parse_query("refs:>5")

        assert spec.min_refs == 5
        assert spec.max_refs is None

    def test_refs_less(self):
        """Test refs:< sets the upper bound only."""
        spec = parse_query("refs:<5")

        assert spec.min_refs is None
        assert spec.max_refs == 5

    def test_refs_both_bounds_from_two_tokens(self):
        """Test that > and < tokens combine."""
        spec = parse_query("refs:>2 refs:<9")

        assert (spec.min_refs, spec.max_refs) == (2, 9)

    def test_refs_unparseable_leaves_field_unset(self):
        """Test that garbage refs values are ignored."""
        spec = parse_query("refs:>abc refs:lots")

        assert spec.min_refs is None
        assert spec.max_refs is None
        assert spec.search == ""

    def test_refs_leading_integer(self):
        """Test that trailing garbage after the number is ignored."""
        assert parse_query("refs:12abc").min_refs == 12

    def test_has_callers(self):
        """Test has:callers."""
        assert parse_query("has:callers").has_callers is True

    def test_has_callees(self):
        """Test has:callees."""
        assert parse_query("has:CALLEES").has_callees is True

    def test_has_unknown_is_ignored(self):
        """Test has: with another value."""
        spec = parse_query("has:friends")

        assert spec == FilterSpec()

    @pytest.mark.parametrize("token,expected", [
        ("callers:0", False),
        ("callers:00", False),
        ("callers:>3", True),
        ("callers:>", True),
        ("callers:4", True),
        ("callers:none", None),
        ("callers:-2", None),
    ])
    def test_callers_values(self, token, expected):
        """Test callers: value handling."""
        assert parse_query(token).has_callers is expected

    def test_callees_zero(self):
        """Test callees:0."""
        assert parse_query("callees:0").has_callees is False

    def test_entry(self):
        """Test entry:true and entry:false."""
        assert parse_query("entry:TRUE").entry is True
        assert parse_query("entry:false").entry is False
        assert parse_query("entry:yes").entry is False

    def test_last_write_wins(self):
        """Test repeated tokens overwrite earlier ones."""
        spec = parse_query("kind:struct kind:method has:callers callers:0")

        assert spec.kind == "method"
        assert spec.has_callers is False

    def test_free_text_keeps_order_and_single_spaces(self):
        """Test free-text accumulation."""
        spec = parse_query("  trace   kind:function   runner  ")

        assert spec.search == "trace runner"
        assert spec.kind == "function"

    @pytest.mark.parametrize("query", ["", None, 42, "   "])
    def test_empty_or_non_string(self, query):
        """Test that non-queries give the default spec."""
        assert parse_query(query) == FilterSpec()


class TestParseInt:
    """Tests for leading-integer parsing."""

    def test_values(self):
        """Test typical inputs."""
        assert parse_int("10") == 10
        assert parse_int(" 7x") == 7
        assert parse_int("-3") == -3
        assert parse_int("") is None
        assert parse_int("x1") is None

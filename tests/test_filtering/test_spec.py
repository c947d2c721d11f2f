"""Tests for the FilterSpec data model."""

from greppy_filters.filtering.spec import FilterSpec


class TestFilterSpec:
    """Tests for FilterSpec."""

    def test_defaults_are_empty(self):
        """Test default sentinels."""
        spec = FilterSpec()

        assert spec.is_empty
        assert spec.active_filter_count == 0
        assert spec.to_dict() == {
            "search": "",
            "kind": "all",
            "state": "all",
            "file": "",
            "minRefs": None,
            "maxRefs": None,
            "hasCallers": None,
            "hasCallees": None,
            "entry": None,
        }

    def test_from_dict_accepts_wire_and_attribute_names(self):
        """Test both naming styles and unknown keys."""
        spec = FilterSpec.from_dict({"minRefs": 2, "has_callees": True, "bogus": 1})

        assert spec.min_refs == 2
        assert spec.has_callees is True
        assert spec.active_filter_count == 2

    def test_copy_is_independent(self):
        """Test that copies do not share state."""
        spec = FilterSpec(kind="enum")
        clone = spec.copy()
        clone.kind = "type"

        assert spec.kind == "enum"

    def test_durable_dict(self):
        """Test the persisted subset."""
        spec = FilterSpec(search="x", kind="type", min_refs=4)

        assert spec.durable_dict() == {"search": "x", "kind": "type", "state": "all", "file": ""}

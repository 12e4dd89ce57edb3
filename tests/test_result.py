"""Tests for validation result types."""

import pytest

from adventure_schema.validation import SchemaValidationResult, Violation, format_path


class TestFormatPath:
    """Test field path rendering."""

    def test_single_field(self):
        assert format_path(["hook"]) == "hook"

    def test_nested_with_indices(self):
        assert format_path(["acts", 0, "scenes", 2, "title"]) == "acts[0].scenes[2].title"

    def test_index_at_end(self):
        assert format_path(("encounters", 1)) == "encounters[1]"


class TestViolation:
    """Test Violation."""

    def test_str_renders_location_and_message(self):
        violation = Violation(("acts", 0, "title"), "Act title is required")
        assert violation.location == "acts[0].title"
        assert str(violation) == "acts[0].title: Act title is required"

    def test_empty_path_rejected(self):
        with pytest.raises(ValueError):
            Violation((), "message")

    def test_prefixed(self):
        violation = Violation(("title",), "too long").prefixed("acts", 3)
        assert violation.path == ("acts", 3, "title")
        assert violation.message == "too long"

    def test_is_immutable(self):
        violation = Violation(("title",), "x")
        with pytest.raises(AttributeError):
            violation.message = "y"


class TestSchemaValidationResult:
    """Test SchemaValidationResult."""

    def test_success(self):
        result = SchemaValidationResult.success()
        assert result.is_valid
        assert result
        assert result.errors == []

    def test_failure(self):
        result = SchemaValidationResult.failure("JSON error: bad")
        assert not result.is_valid
        assert not result
        assert result.errors == ["JSON error: bad"]

    def test_failure_needs_errors(self):
        with pytest.raises(ValueError):
            SchemaValidationResult.failure()

    def test_errors_keep_insertion_order(self):
        result = SchemaValidationResult.from_violations([Violation(("hook",), "bad hook")])
        result.add_error("Round-trip mismatch at title")
        assert result.errors == ["hook: bad hook", "Round-trip mismatch at title"]

    def test_validity_tracks_errors(self):
        result = SchemaValidationResult()
        assert result.is_valid
        result.add_violation(Violation(("x",), "bad"))
        assert not result.is_valid
        assert len(result.errors) == 1

    def test_fluent_api(self):
        result = SchemaValidationResult()
        returned = result.add_error("a").add_violation(Violation(("b",), "c"))
        assert returned is result
        assert result.errors == ["a", "b: c"]

    def test_merge_keeps_discovery_order_across_kinds(self):
        first = SchemaValidationResult.failure("Round-trip mismatch at title")
        second = SchemaValidationResult.from_violations([Violation(("hook",), "bad hook")])
        merged = first.merge(second)
        assert merged.errors == ["Round-trip mismatch at title", "hook: bad hook"]
        assert merged.violations == [Violation(("hook",), "bad hook")]
        assert merged.messages == ["Round-trip mismatch at title"]

    def test_merge_keeps_order(self):
        first = SchemaValidationResult.from_violations([Violation(("a",), "1")])
        second = SchemaValidationResult.from_violations([Violation(("b",), "2")])
        merged = first.merge(second)
        assert merged.errors == ["a: 1", "b: 2"]
        assert first.errors == ["a: 1"]

    def test_to_dict(self):
        result = SchemaValidationResult.failure("Failed to deserialize JSON")
        assert result.to_dict() == {"isValid": False, "errors": ["Failed to deserialize JSON"]}
        assert SchemaValidationResult.success().to_dict() == {"isValid": True, "errors": []}

"""Unit tests for check-in field specs and typed parsers."""

import math

import pytest

from trainer.services.checkin.field_specs import (
    FieldSpecRegistry,
    parse_integer,
    parse_number,
    parse_string_list,
)


class TestParsers:
    def test_number_accepts_float_in_range(self):
        result = parse_number(7.5, 0, 24)
        assert result.ok
        assert result.value == 7.5

    def test_number_rejects_bool(self):
        assert not parse_number(True, 0, 24).ok

    def test_number_rejects_numeric_string(self):
        assert not parse_number("7", 0, 24).ok

    def test_number_rejects_non_finite(self):
        assert not parse_number(math.nan, 0, 24).ok
        assert not parse_number(math.inf, 0, 24).ok

    def test_number_range_is_inclusive(self):
        assert parse_number(0, 0, 24).ok
        assert parse_number(24, 0, 24).ok
        assert not parse_number(24.01, 0, 24).ok

    def test_integer_accepts_integral_float(self):
        result = parse_integer(7.0, 1, 10)
        assert result.ok
        assert result.value == 7
        assert isinstance(result.value, int)

    def test_integer_rejects_fraction(self):
        result = parse_integer(6.5, 1, 10)
        assert not result.ok
        assert result.error == "must be an integer"

    def test_integer_out_of_range_message(self):
        result = parse_integer(11, 1, 10)
        assert result.error == "must be between 1 and 10"

    def test_integer_too_large_for_float_is_out_of_range(self):
        result = parse_integer(10**400, 1, 10)
        assert result.error == "must be between 1 and 10"

        assert parse_number(-(10**400), 0, 24).error == "must be between 0 and 24"

    def test_string_list_rejects_mixed_items(self):
        assert not parse_string_list(["legs", 3]).ok
        assert parse_string_list(["legs", "back"]).value == ["legs", "back"]


class TestRegistry:
    def test_required_in_declaration_order(self, registry):
        assert registry.required_names == [
            "sleepHours", "sleepQuality", "energy", "soreness", "stress",
        ]

    def test_prompt_labels(self, registry):
        assert registry.get("sleepHours").prompt_label == "hours of sleep (0-24)"
        assert registry.get("soreness").prompt_label == "soreness (0-10)"
        assert registry.get("notes").prompt_label == "notes"

    def test_sleep_quality_bound_is_configurable(self):
        registry = FieldSpecRegistry.default(sleep_quality_max=5)

        assert registry.get("sleepQuality").prompt_label == "sleep quality (1-5)"
        assert not registry.get("sleepQuality").parse(7).ok

    def test_duplicate_specs_rejected(self, registry):
        spec = registry.get("energy")
        with pytest.raises(ValueError):
            FieldSpecRegistry([spec, spec])

    def test_normalize_record_reports_null_and_unknown(self, registry):
        normalized, violations = registry.normalize_record(
            {"energy": 6.0, "stress": None, "mood": 3}
        )

        assert normalized == {"energy": 6}
        assert {"field": "stress", "message": "must not be null"} in violations
        assert {"field": "mood", "message": "unknown field"} in violations

    def test_normalize_record_reports_huge_integer(self, registry):
        normalized, violations = registry.normalize_record({"energy": 10**400, "stress": 3})

        assert normalized == {"stress": 3}
        assert violations == [{"field": "energy", "message": "must be between 1 and 10"}]

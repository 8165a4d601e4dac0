"""Tests for model classes."""

from datetime import datetime, timedelta, timezone

import pytest

from time_calculator.exceptions import RestoreFailure
from time_calculator.models import (
    CalculationStep,
    ColorScheme,
    ColorTag,
    HistoryEntry,
    Operator,
    decode_steps,
    encode_steps,
    resolve_entry_color,
)


class TestOperator:
    """Tests for Operator."""

    def test_symbols(self):
        assert [op.symbol for op in Operator] == ["+", "-", "×", "÷"]

    def test_from_symbol(self):
        assert Operator.from_symbol("×") is Operator.MULTIPLY
        assert Operator.from_symbol("*") is None


class TestCalculationStep:
    """Tests for CalculationStep."""

    def test_to_dict(self):
        step = CalculationStep(7200, Operator.DIVIDE)
        assert step.to_dict() == {"valueSeconds": 7200, "operator": "÷"}

    def test_to_dict_without_operator(self):
        assert CalculationStep(-30).to_dict() == {"valueSeconds": -30, "operator": None}

    def test_from_dict_missing_operator_key(self):
        assert CalculationStep.from_dict({"valueSeconds": 5}) == CalculationStep(5, None)

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"operator": "+"},
            {"valueSeconds": "60", "operator": "+"},
            {"valueSeconds": True, "operator": None},
            {"valueSeconds": 60, "operator": "*"},
            {"valueSeconds": 60, "operator": 1},
        ],
    )
    def test_from_dict_rejects_bad_shapes(self, data):
        with pytest.raises(RestoreFailure):
            CalculationStep.from_dict(data)


class TestStepsCodec:
    """Tests for encode_steps / decode_steps."""

    def test_encoding_is_compact(self):
        steps = (CalculationStep(7200, Operator.MULTIPLY), CalculationStep(7200, None))
        assert encode_steps(steps) == (
            '[{"valueSeconds":7200,"operator":"×"},{"valueSeconds":7200,"operator":null}]'
        )

    def test_reencoding_is_byte_identical(self):
        """Decoding a payload and encoding it again should give the same text."""
        payload = (
            '[{"valueSeconds":60,"operator":"-"},{"valueSeconds":-3600,"operator":"÷"},'
            '{"valueSeconds":0,"operator":null}]'
        )
        assert encode_steps(decode_steps(payload)) == payload

    def test_decode_accepts_bytes(self):
        payload = encode_steps([CalculationStep(1, Operator.ADD)]).encode("utf-8")
        assert decode_steps(payload) == (CalculationStep(1, Operator.ADD),)

    def test_decode_empty_list(self):
        assert decode_steps("[]") == ()

    @pytest.mark.parametrize("payload", ["", "{not json", "{}", '"steps"', "[1, 2]"])
    def test_decode_failure(self, payload):
        with pytest.raises(RestoreFailure):
            decode_steps(payload)


class TestHistoryEntry:
    """Tests for HistoryEntry."""

    def test_display_properties(self, make_entry):
        entry = make_entry(result_seconds=5430)
        assert entry.display_string == "01:30:30"
        assert entry.summary == "1h 30m"
        assert entry.total_hours == pytest.approx(1.5083, abs=1e-4)

    def test_expression(self, make_entry):
        entry = make_entry()
        assert entry.expression == "02:00:00 + 01:00:00 = 03:00:00"

    def test_with_details_keeps_result(self, make_entry):
        entry = make_entry()
        later = entry.created_at + timedelta(hours=1)
        updated = entry.with_details(later, label="Project A")

        assert updated.label == "Project A"
        assert updated.color_tag == entry.color_tag
        assert updated.result_seconds == entry.result_seconds
        assert updated.steps == entry.steps
        assert updated.created_at == entry.created_at
        assert updated.last_modified == later

    def test_dict_round_trip(self, make_entry):
        entry = make_entry(color_tag="teal")
        assert HistoryEntry.from_dict(entry.to_dict()) == entry

    def test_to_dict_keys(self, make_entry):
        data = make_entry().to_dict()
        assert set(data) == {
            "id",
            "resultSeconds",
            "label",
            "colorTag",
            "createdAt",
            "lastModified",
            "steps",
        }

    def test_from_dict_missing_field(self):
        with pytest.raises(RestoreFailure):
            HistoryEntry.from_dict({"id": "x", "resultSeconds": 1})

    def test_from_dict_bad_timestamp(self, make_entry):
        data = make_entry().to_dict()
        data["createdAt"] = "yesterday"
        with pytest.raises(RestoreFailure):
            HistoryEntry.from_dict(data)

    def test_str(self):
        now = datetime(2025, 1, 1, tzinfo=timezone.utc)
        entry = HistoryEntry("a", 60, "Lunch", "red", now, now)
        assert str(entry) == "HistoryEntry('Lunch', 00:01:00)"


class TestColors:
    """Tests for color schemes and entry color resolution."""

    def test_scheme_from_name(self):
        assert ColorScheme.from_name("Orange") is ColorScheme.ORANGE
        assert ColorScheme.from_name(" red ") is ColorScheme.RED
        assert ColorScheme.from_name("green") is None
        assert ColorScheme.from_name(None) is None

    def test_tag_matching_scheme_uses_accent(self):
        assert resolve_entry_color("blue", ColorScheme.ORANGE) == "#007AFF"
        assert resolve_entry_color("orange", ColorScheme.ORANGE) == ColorScheme.ORANGE.accent

    def test_known_tag_uses_own_color(self):
        assert resolve_entry_color("purple", ColorScheme.BLUE) == "#AF52DE"

    def test_unknown_tag_falls_back_to_accent(self):
        assert resolve_entry_color("chartreuse", ColorScheme.RED) == ColorScheme.RED.accent
        assert resolve_entry_color("", ColorScheme.BLUE) == ColorScheme.BLUE.accent

    def test_tags_are_lowercase_names(self):
        assert [tag.value for tag in ColorTag] == [
            "blue",
            "red",
            "orange",
            "purple",
            "teal",
            "green",
            "magenta",
        ]

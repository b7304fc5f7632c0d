"""Tests for worksheet/display name conversion."""

from __future__ import annotations

import pytest

from cmadash.services.names import normalize, parse_worksheet_name, to_display, to_worksheet_format


class TestToDisplay:
    def test_converts_worksheet_name(self):
        assert to_display("I/GONZALES/ANALYN/D@") == "ANALYN D. GONZALES"

    def test_omits_empty_initial(self):
        assert to_display("I/AGUA/MARIBEL/@") == "MARIBEL AGUA"

    def test_trailing_at_is_optional(self):
        assert to_display("I/GONZALES/ANALYN/D") == "ANALYN D. GONZALES"

    @pytest.mark.parametrize("value", [
        "ANALYN D. GONZALES",
        "I/GONZALES/ANALYN",
        "X/GONZALES/ANALYN/D@",
        "",
    ])
    def test_non_conforming_input_returned_unchanged(self, value):
        assert to_display(value) == value

    def test_display_output_is_a_fixed_point(self):
        display = to_display("I/GONZALES/ANALYN/D@")
        assert to_display(display) == display


class TestToWorksheetFormat:
    def test_inverts_simple_name(self):
        assert to_worksheet_format("ANALYN D. GONZALES") == "I/GONZALES/ANALYN/D@"

    def test_uppercases_and_handles_missing_initial(self):
        assert to_worksheet_format("Maribel Agua") == "I/AGUA/MARIBEL/@"

    def test_single_token_unchanged(self):
        assert to_worksheet_format("MADONNA") == "MADONNA"

    def test_empty(self):
        assert to_worksheet_format("") == ""

    def test_multi_word_names_are_lossy(self):
        # First token is the first name, last token the last name.
        assert to_worksheet_format("MA EMELYN D. TAN") == "I/TAN/MA/D@"


class TestParseWorksheetName:
    def test_parts(self):
        parsed = parse_worksheet_name("I/GONZALES/ANALYN/D@")
        assert parsed is not None
        assert parsed.last_name == "GONZALES"
        assert parsed.first_name == "ANALYN"
        assert parsed.initial == "D"
        assert parsed.display_name == "ANALYN D. GONZALES"

    def test_rejects_plain_name(self):
        assert parse_worksheet_name("ANALYN GONZALES") is None


class TestNormalize:
    def test_trims_uppercases_and_collapses_whitespace(self):
        assert normalize("  analyn   d.\tgonzales ") == "ANALYN D. GONZALES"

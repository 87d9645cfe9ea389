"""
test_templates.py
-----------------
Unit tests for paste_renamer.utils.templates.

Tests moment-style date formatting and placeholder substitution.
"""
from datetime import datetime

import pytest

from paste_renamer.utils.templates import (
    format_date,
    render_template,
    substitute_variables,
)

MORNING = datetime(2024, 1, 5, 9, 3, 7, 45000)
EVENING = datetime(2022, 10, 26, 17, 27, 52)


class TestFormatDate:
    """Test format_date tokens."""

    def test_default_pattern_tokens(self):
        assert format_date(EVENING, "YYYY.MM.DD-HHmmss") == "2022.10.26-172752"

    def test_twelve_hour_clock(self):
        assert format_date(EVENING, "hh:mm A") == "05:27 PM"
        assert format_date(MORNING, "h a") == "9 am"

    def test_noon_and_midnight(self):
        assert format_date(datetime(2024, 1, 1, 0, 0), "hh A") == "12 AM"
        assert format_date(datetime(2024, 1, 1, 12, 0), "hh A") == "12 PM"

    def test_unpadded_tokens(self):
        assert format_date(MORNING, "YY-M-D H:m:s") == "24-1-5 9:3:7"

    def test_padded_tokens(self):
        assert format_date(MORNING, "MM/DD HH:mm:ss") == "01/05 09:03:07"

    def test_milliseconds(self):
        assert format_date(MORNING, "ss.SSS") == "07.045"

    def test_month_and_day_names(self):
        assert format_date(MORNING, "MMMM MMM") == "January Jan"
        assert format_date(MORNING, "dddd ddd") == "Friday Fri"

    def test_bracketed_literal(self):
        assert format_date(MORNING, "[Day] DD") == "Day 05"

    def test_non_token_characters_pass_through(self):
        assert format_date(MORNING, "YYYY_pic") == "2024_pic"


class TestSubstituteVariables:
    """Test placeholder substitution."""

    def test_date_placeholder(self):
        assert substitute_variables("{{DATE:YYYYMMDD}}", {}, EVENING) == "20221026"

    def test_date_without_format(self):
        assert substitute_variables("{{DATE}}", {}, EVENING) == "2022-10-26"

    def test_variables(self):
        result = substitute_variables(
            "{{fileName}}-{{imageNameKey}}",
            {"fileName": "Trip", "imageNameKey": "lisbon"},
            EVENING,
        )
        assert result == "Trip-lisbon"

    def test_none_value_is_empty(self):
        assert substitute_variables("a{{key}}b", {"key": None}, EVENING) == "ab"

    def test_unknown_placeholder_kept(self):
        assert substitute_variables("{{title}}-x", {}, EVENING) == "{{title}}-x"

    def test_variable_with_format_kept(self):
        assert (
            substitute_variables("{{fileName:upper}}", {"fileName": "Trip"}, EVENING)
            == "{{fileName:upper}}"
        )

    def test_literal_text_only(self):
        assert substitute_variables("cover", {"fileName": "Trip"}, EVENING) == "cover"

    def test_multiple_dates(self):
        result = substitute_variables("{{DATE:YYYY}}/{{DATE:MM}}", {}, EVENING)
        assert result == "2022/10"


class TestRenderTemplate:
    """Test render_template clock handling."""

    def test_fixed_time_is_deterministic(self):
        first = render_template("{{DATE:YYYYMMDDHHmmss}}", {}, EVENING)
        second = render_template("{{DATE:YYYYMMDDHHmmss}}", {}, EVENING)
        assert first == second == "20221026172752"

    def test_defaults_to_now(self):
        year = str(datetime.now().year)
        assert render_template("{{DATE:YYYY}}", {}) in {year, str(int(year) + 1)}

"""Unit tests for the resolver families and the rule dispatcher.

Reference time throughout is Wednesday 2024-01-17 10:30.
"""

import re
from datetime import datetime, timedelta

import pytest

from smartdate.parsing.resolvers import (
    MONTH_ABBREVIATIONS,
    extract_time,
    month_index,
    resolve_fallback,
    resolve_month_day,
    resolve_relative,
    resolve_weekday,
)
from smartdate.parsing.rules import Rule, first_match


# ---------------------------------------------------------------------------
# Rule dispatcher
# ---------------------------------------------------------------------------


class TestFirstMatch:
    """First-match-wins evaluation of rule tables."""

    def _rules(self):
        return (
            Rule("reject", re.compile(r"\d+"), 0.1, lambda match, now: None),
            Rule("accept", re.compile(r"\d+"), 0.2, lambda match, now: int(match.group(0))),
        )

    def test_falls_through_rejected_rule(self, reference_time):
        found = first_match(self._rules(), "abc 42", reference_time)

        assert found is not None
        assert found.rule.name == "accept"
        assert found.value == 42
        assert found.text == "42"
        assert found.span == (4, 6)
        assert found.weight == 0.2

    def test_stops_on_rejection_without_fall_through(self, reference_time):
        assert first_match(self._rules(), "abc 42", reference_time, fall_through=False) is None

    def test_no_pattern_matches(self, reference_time):
        assert first_match(self._rules(), "no digits", reference_time) is None


# ---------------------------------------------------------------------------
# Time extractor
# ---------------------------------------------------------------------------


class TestTimeExtractor:
    """Time-of-day extraction and removal."""

    def test_strips_time_from_text(self, reference_time):
        found, remainder = extract_time("tomorrow 7am", reference_time)

        assert found.value == (7, 0)
        assert found.text == "7am"
        assert remainder == "tomorrow"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("3:30pm", (15, 30)),
            ("3:30 pm", (15, 30)),
            ("12pm", (12, 0)),
            ("12am", (0, 0)),
            ("11 am", (11, 0)),
            ("14:30", (14, 30)),
            ("0:05", (0, 5)),
        ],
    )
    def test_clock_values(self, reference_time, text, expected):
        found, _ = extract_time(text, reference_time)

        assert found.value == expected

    def test_twelve_hour_pattern_wins_over_24_hour(self, reference_time):
        found, _ = extract_time("9:15pm", reference_time)

        assert found.rule.name == "clock_12h"
        assert found.text == "9:15pm"

    def test_out_of_range_hour_is_no_match(self, reference_time):
        found, remainder = extract_time("tomorrow 13pm", reference_time)

        assert found is None
        assert remainder == "tomorrow 13pm"

    def test_out_of_range_minute_is_no_match(self, reference_time):
        found, remainder = extract_time("friday 10:75", reference_time)

        assert found is None
        assert remainder == "friday 10:75"

    def test_no_time_token(self, reference_time):
        found, remainder = extract_time("next week", reference_time)

        assert found is None
        assert remainder == "next week"


# ---------------------------------------------------------------------------
# Relative resolver
# ---------------------------------------------------------------------------


class TestRelativeResolver:
    """Whole-phrase relative expressions."""

    @pytest.mark.parametrize(
        "text,offset_days,weight",
        [
            ("today", 0, 0.9),
            ("now", 0, 0.9),
            ("tomorrow", 1, 0.9),
            ("yesterday", -1, 0.9),
            ("next week", 7, 0.8),
            ("in a week", 7, 0.8),
            ("last week", -7, 0.8),
            ("a week ago", -7, 0.8),
            ("in 3 days", 3, 0.85),
            ("in 1 day", 1, 0.85),
            ("10 days ago", -10, 0.85),
        ],
    )
    def test_day_offsets(self, reference_time, text, offset_days, weight):
        found = resolve_relative(text, reference_time)

        assert found.value == reference_time + timedelta(days=offset_days)
        assert found.weight == weight
        assert found.text == text

    def test_next_month(self, reference_time):
        found = resolve_relative("next month", reference_time)

        assert found.value == datetime(2024, 2, 17, 10, 30)

    def test_month_offset_clamps_to_month_end(self):
        found = resolve_relative("in a month", datetime(2024, 1, 31, 9, 0))

        assert found.value == datetime(2024, 2, 29, 9, 0)

    def test_last_month(self, reference_time):
        found = resolve_relative("a month ago", reference_time)

        assert found.value == datetime(2023, 12, 17, 10, 30)

    def test_end_of_day(self, reference_time):
        found = resolve_relative("eod", reference_time)

        assert found.value == datetime(2024, 1, 17, 23, 59, 59, 999999)
        assert found.weight == 0.7

    def test_start_of_day(self, reference_time):
        found = resolve_relative("beginning of day", reference_time)

        assert found.value == datetime(2024, 1, 17)

    def test_phrase_must_span_whole_text(self, reference_time):
        assert resolve_relative("tomorrow at", reference_time) is None
        assert resolve_relative("the day after tomorrow", reference_time) is None

    def test_overflowing_offset_is_rejected(self, reference_time):
        assert resolve_relative("in 99999999999 days", reference_time) is None
        assert resolve_relative("in 9999999 days", reference_time) is None


# ---------------------------------------------------------------------------
# Weekday resolver
# ---------------------------------------------------------------------------


class TestWeekdayResolver:
    """Weekday names, optionally prefixed with "next"."""

    def test_later_this_week(self, reference_time):
        found = resolve_weekday("friday", reference_time)

        assert found.value.date() == datetime(2024, 1, 19).date()
        assert found.weight == 0.8

    def test_next_prefix_adds_a_week(self, reference_time):
        found = resolve_weekday("next friday", reference_time)

        assert found.value.date() == datetime(2024, 1, 26).date()
        assert found.weight == 0.85
        assert found.rule.name == "next_weekday"

    def test_same_weekday_means_next_week(self, reference_time):
        found = resolve_weekday("wednesday", reference_time)

        assert found.value.date() == datetime(2024, 1, 24).date()

    def test_earlier_weekday_rolls_forward(self, reference_time):
        bare = resolve_weekday("monday", reference_time)
        prefixed = resolve_weekday("next monday", reference_time)

        assert bare.value.date() == datetime(2024, 1, 22).date()
        assert prefixed.value.date() == datetime(2024, 1, 22).date()

    def test_sunday_reference(self):
        sunday = datetime(2024, 1, 21, 8, 0)

        found = resolve_weekday("sunday", sunday)

        assert found.value.date() == datetime(2024, 1, 28).date()

    def test_keeps_time_of_day(self, reference_time):
        found = resolve_weekday("friday", reference_time)

        assert (found.value.hour, found.value.minute) == (10, 30)

    def test_abbreviation_does_not_match(self, reference_time):
        assert resolve_weekday("fri", reference_time) is None


# ---------------------------------------------------------------------------
# Month/day resolver
# ---------------------------------------------------------------------------


class TestMonthDayResolver:
    """Month names and numeric month/day forms."""

    def test_month_name_then_day(self, reference_time):
        found = resolve_month_day("oct 15", reference_time)

        assert found.value == datetime(2024, 10, 15)
        assert found.weight == 0.75
        assert found.rule.name == "month_name_day"

    def test_long_month_name_with_at(self, reference_time):
        found = resolve_month_day("december 25 at", reference_time)

        assert found.value == datetime(2024, 12, 25)
        assert found.text == "december 25 at"

    def test_day_then_month_name(self, reference_time):
        found = resolve_month_day("15 october", reference_time)

        assert found.value == datetime(2024, 10, 15)
        assert found.rule.name == "day_month_name"

    def test_numeric_is_month_first(self, reference_time):
        found = resolve_month_day("12/25", reference_time)

        assert found.value == datetime(2024, 12, 25)
        assert found.rule.name == "numeric_month_day"

    def test_past_date_rolls_to_next_year(self, reference_time):
        found = resolve_month_day("jan 10", reference_time)

        assert found.value == datetime(2025, 1, 10)

    def test_today_at_midnight_is_already_past(self, reference_time):
        found = resolve_month_day("jan 17", reference_time)

        assert found.value == datetime(2025, 1, 17)

    @pytest.mark.parametrize("text", ["13/25", "12/32", "2/30", "feb 30", "0/10"])
    def test_invalid_dates_are_rejected(self, reference_time, text):
        assert resolve_month_day(text, reference_time) is None

    @pytest.mark.parametrize("text", ["2024-03-05", "12/25/2026"])
    def test_full_numeric_dates_are_left_to_fallback(self, reference_time, text):
        assert resolve_month_day(text, reference_time) is None

    def test_month_index_uses_three_letter_prefix(self):
        assert month_index("sept") == 8
        assert month_index("January") == 0
        assert month_index("may") == 4
        assert month_index("dec") == 11
        assert month_index("xyz") == -1

    def test_month_abbreviations(self):
        assert MONTH_ABBREVIATIONS[0] == "jan"
        assert MONTH_ABBREVIATIONS[-1] == "dec"
        assert len(MONTH_ABBREVIATIONS) == 12


# ---------------------------------------------------------------------------
# Fallback resolver
# ---------------------------------------------------------------------------


class TestFallbackResolver:
    """Generic parse of the untouched input."""

    def test_iso_date(self, reference_time):
        assert resolve_fallback("2024-03-05", reference_time) == datetime(2024, 3, 5)

    def test_full_us_date(self, reference_time):
        assert resolve_fallback("12/25/2026", reference_time) == datetime(2026, 12, 25)

    def test_timezone_is_ignored(self, reference_time):
        parsed = resolve_fallback("2024-03-05T14:30:00Z", reference_time)

        assert parsed == datetime(2024, 3, 5, 14, 30)
        assert parsed.tzinfo is None

    @pytest.mark.parametrize("text", ["gibberish", "tomorrow at"])
    def test_unparseable_input(self, reference_time, text):
        assert resolve_fallback(text, reference_time) is None

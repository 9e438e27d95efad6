"""Tests for SmartDateParser: aggregation, precedence and thresholds."""

from datetime import datetime

import pytest

from smartdate.configuration.settings import EngineSettings
from smartdate.display.formatters import format_for_editing
from smartdate.parsing.clock import FixedClock, resolve_now
from smartdate.parsing.models import ParsedComponents
from smartdate.parsing.parser import SmartDateParser, parse, parse_date_string


class TestParseExamples:
    """Worked examples against Wednesday 2024-01-17 10:30."""

    def test_tomorrow(self, parser, reference_time):
        result = parser.parse("tomorrow", reference_time)

        assert result.date == datetime(2024, 1, 18, 10, 30)
        assert result.confidence == pytest.approx(0.9)
        assert result.original_input == "tomorrow"
        assert result.parsed_components == ParsedComponents(relative="tomorrow")

    def test_next_weekday_with_time(self, parser, reference_time):
        result = parser.parse("next friday 2pm", reference_time)

        assert result.date == datetime(2024, 1, 26, 14, 0)
        assert result.confidence == 1.0
        assert result.parsed_components.weekday == "next friday"
        assert result.parsed_components.time == "2pm"
        assert result.parsed_components.modifiers == ("next",)

    def test_bare_weekday_has_no_modifier(self, parser, reference_time):
        result = parser.parse("friday", reference_time)

        assert result.date == datetime(2024, 1, 19, 10, 30)
        assert result.confidence == pytest.approx(0.8)
        assert result.parsed_components.modifiers == ()

    def test_in_n_days(self, parser, reference_time):
        result = parser.parse("in 3 days", reference_time)

        assert result.date == datetime(2024, 1, 20, 10, 30)
        assert result.confidence == pytest.approx(0.85)

    def test_month_day_with_time(self, parser, reference_time):
        result = parser.parse("oct 15 at 3pm", reference_time)

        assert result.date == datetime(2024, 10, 15, 15, 0)
        assert result.confidence == 1.0
        assert result.parsed_components.date == "oct 15 at"
        assert result.parsed_components.time == "3pm"

    def test_numeric_month_day(self, parser, reference_time):
        result = parser.parse("12/25", reference_time)

        assert result.date == datetime(2024, 12, 25)
        assert result.confidence == pytest.approx(0.75)

    def test_time_only_applies_to_today(self, parser, reference_time):
        result = parser.parse("7am", reference_time)

        assert result.date == datetime(2024, 1, 17, 7, 0)
        assert result.confidence == pytest.approx(0.8)
        assert result.parsed_components.time == "7am"
        assert result.parsed_components.relative is None

    def test_fallback_iso_date(self, parser, reference_time):
        result = parser.parse("2024-03-05", reference_time)

        assert result.date == datetime(2024, 3, 5)
        assert result.confidence == pytest.approx(0.5)
        assert result.parsed_components == ParsedComponents()

    def test_end_of_day(self, parser, reference_time):
        result = parser.parse("end of day", reference_time)

        assert result.date == datetime(2024, 1, 17, 23, 59, 59, 999999)
        assert result.confidence == pytest.approx(0.7)


class TestParseNormalization:
    """Case, whitespace and time-of-day handling."""

    def test_case_and_whitespace_insensitive(self, parser, reference_time):
        result = parser.parse("  TOMORROW  ", reference_time)

        assert result.date == datetime(2024, 1, 18, 10, 30)
        assert result.original_input == "  TOMORROW  "

    def test_extracted_time_resets_seconds(self, parser):
        now = datetime(2024, 1, 17, 10, 30, 45, 123456)

        result = parser.parse("tomorrow 9:15am", now)

        assert result.date == datetime(2024, 1, 18, 9, 15)

    def test_time_before_date(self, parser, reference_time):
        result = parser.parse("5pm tomorrow", reference_time)

        assert result.date == datetime(2024, 1, 18, 17, 0)
        assert result.confidence == pytest.approx(1.0)

    def test_out_of_range_time_blocks_relative_phrase(self, parser, reference_time):
        assert parser.parse("tomorrow 13pm", reference_time) is None

    def test_relative_takes_precedence_over_weekday(self, parser, reference_time):
        result = parser.parse("today", reference_time)

        assert result.parsed_components.relative == "today"
        assert result.parsed_components.weekday is None

    def test_full_year_date_uses_fallback(self, parser, reference_time):
        result = parser.parse("12/25/2026", reference_time)

        assert result.date == datetime(2026, 12, 25)
        assert result.confidence == pytest.approx(0.5)


class TestParseRejections:
    """Inputs that produce no result."""

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_empty_input(self, parser, reference_time, text):
        assert parser.parse(text, reference_time) is None

    @pytest.mark.parametrize("text", ["gibberish", "13/25", "feb 30", "tomorrow at"])
    def test_unparseable_input(self, parser, reference_time, text):
        assert parser.parse(text, reference_time) is None

    def test_min_confidence_threshold(self, reference_time):
        strict = SmartDateParser(EngineSettings(min_confidence=0.8))

        assert strict.parse("12/25", reference_time) is None
        assert strict.parse("2024-03-05", reference_time) is None
        assert strict.parse("tomorrow", reference_time) is not None

    def test_confidence_stays_within_bounds(self, parser, reference_time):
        for text in ("tomorrow 7am", "next monday 9:30am", "in 2 days 5pm", "dec 25 10am", "3pm"):
            result = parser.parse(text, reference_time)
            assert 0.3 <= result.confidence <= 1.0


class TestClock:
    """Reference time resolution."""

    def test_clock_used_when_no_reference_time(self):
        parser = SmartDateParser(clock=FixedClock(datetime(2024, 6, 1, 8, 0)))

        assert parser.parse_date("tomorrow") == datetime(2024, 6, 2, 8, 0)

    def test_reference_time_overrides_clock(self, reference_time):
        parser = SmartDateParser(clock=FixedClock(datetime(2024, 6, 1, 8, 0)))

        assert parser.parse_date("tomorrow", reference_time) == datetime(2024, 1, 18, 10, 30)

    def test_resolve_now(self, reference_time):
        clock = FixedClock(datetime(2020, 1, 1))

        assert resolve_now(reference_time, clock) == reference_time
        assert resolve_now(None, clock) == datetime(2020, 1, 1)

    def test_parse_is_deterministic(self, parser, reference_time):
        first = parser.parse("next friday 2pm", reference_time)
        second = parser.parse("next friday 2pm", reference_time)

        assert first == second


class TestModuleHelpers:
    """Module-level convenience functions."""

    def test_parse(self, reference_time):
        result = parse("in 3 days", reference_time)

        assert result.date == datetime(2024, 1, 20, 10, 30)

    def test_parse_date_string(self, reference_time):
        assert parse_date_string("next week", reference_time) == datetime(2024, 1, 24, 10, 30)
        assert parse_date_string("gibberish", reference_time) is None
        assert parse_date_string(None, reference_time) is None

    def test_editing_text_parses_back_to_same_day(self, parser, reference_time):
        resolved = parser.parse_date("tomorrow", reference_time)

        reparsed = parser.parse_date(format_for_editing(resolved), reference_time)

        assert reparsed.date() == resolved.date()

    def test_to_dict(self, parser, reference_time):
        data = parser.parse("next friday 2pm", reference_time).to_dict()

        assert data == {
            "date": "2024-01-26T14:00:00",
            "confidence": 1.0,
            "original_input": "next friday 2pm",
            "parsed_components": {
                "time": "2pm",
                "weekday": "next friday",
                "modifiers": ["next"],
            },
        }

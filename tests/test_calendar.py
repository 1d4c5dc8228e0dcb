"""Tests for the working-day calendar."""

from datetime import date, datetime, timedelta, timezone

import pytest

from gantt_mcp import config
from gantt_mcp.core.calendar import (
    add_calendar_days,
    advance_working_days,
    count_working_days,
    days_between,
    effective_work_days,
    enumerate_days,
    format_date,
    holiday_dates,
    is_working_day,
    month_start,
    next_working_day,
    parse_date,
    reference_tz,
    to_date,
)
from gantt_mcp.models.reference import Holiday


class TestParsing:
    """Tests for date parsing and normalisation."""

    def test_parse_iso(self):
        assert parse_date("2025-02-03") == date(2025, 2, 3)

    def test_parse_slashes(self):
        assert parse_date("2025/02/03") == date(2025, 2, 3)

    def test_parse_strips_whitespace(self):
        assert parse_date(" 2025-02-03 ") == date(2025, 2, 3)

    def test_parse_invalid_day(self):
        with pytest.raises(ValueError, match="Invalid date"):
            parse_date("2025-02-30")

    def test_parse_garbage(self):
        with pytest.raises(ValueError):
            parse_date("next friday")

    def test_format_pads(self):
        assert format_date(date(2025, 1, 2)) == "2025-01-02"

    def test_to_date_passes_dates_through(self):
        d = date(2025, 2, 3)
        assert to_date(d) is d

    def test_to_date_drops_time_of_naive_datetime(self):
        assert to_date(datetime(2025, 2, 3, 23, 59)) == date(2025, 2, 3)

    def test_to_date_converts_aware_datetime(self, monkeypatch):
        """An instant late on the 3rd at UTC-5 is already the 4th in UTC."""
        monkeypatch.setattr(config, "TIMEZONE", "UTC")
        value = datetime(2025, 2, 3, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
        assert to_date(value) == date(2025, 2, 4)

    def test_to_date_rejects_numbers(self):
        with pytest.raises(TypeError):
            to_date(20250203)

    def test_reference_tz_utc(self, monkeypatch):
        monkeypatch.setattr(config, "TIMEZONE", "utc")
        assert reference_tz() is timezone.utc


class TestDayArithmetic:
    """Tests for calendar-day helpers."""

    def test_add_calendar_days(self):
        assert add_calendar_days("2025-02-28", 1) == date(2025, 3, 1)
        assert add_calendar_days(date(2025, 3, 1), -1) == date(2025, 2, 28)

    def test_days_between_is_signed(self):
        assert days_between("2025-02-01", "2025-02-03") == 2
        assert days_between("2025-02-03", "2025-02-01") == -2

    def test_enumerate_days_inclusive(self):
        days = enumerate_days("2025-01-30", "2025-02-02")
        assert days == [date(2025, 1, 30), date(2025, 1, 31), date(2025, 2, 1), date(2025, 2, 2)]

    def test_enumerate_days_reversed_is_empty(self):
        assert enumerate_days("2025-02-02", "2025-02-01") == []

    def test_month_start(self):
        assert month_start(date(2025, 2, 17)) == date(2025, 2, 1)


class TestWorkingDays:
    """Tests for weekend and holiday handling."""

    def test_weekends_are_not_working_days(self):
        assert is_working_day("2025-02-03")
        assert not is_working_day("2025-02-01")
        assert not is_working_day("2025-02-02")

    def test_holiday_is_not_a_working_day(self, holidays):
        assert is_working_day("2025-01-01")
        assert not is_working_day("2025-01-01", holidays)

    def test_holiday_dates_accepts_mixed_inputs(self):
        hset = holiday_dates([Holiday(date="2025-01-01"), date(2025, 12, 25), "2025-12-26"])
        assert hset == frozenset({date(2025, 1, 1), date(2025, 12, 25), date(2025, 12, 26)})

    def test_holiday_dates_empty(self):
        assert holiday_dates(None) == frozenset()
        assert holiday_dates([]) == frozenset()

    def test_next_working_day(self):
        assert next_working_day("2025-02-01") == date(2025, 2, 3)
        assert next_working_day("2025-02-03") == date(2025, 2, 3)

    def test_next_working_day_skips_holiday(self, holidays):
        assert next_working_day("2025-01-01", holidays) == date(2025, 1, 2)

    def test_effective_work_days(self):
        assert effective_work_days(None) == 1
        assert effective_work_days(0) == 1
        assert effective_work_days(0.5) == 1
        assert effective_work_days(2.2) == 3
        assert effective_work_days(5) == 5


class TestAdvanceWorkingDays:
    """Tests for advance_working_days."""

    def test_over_new_year(self, holidays):
        """Monday 2024-12-30 plus 3 working days skips the holiday on Wednesday."""
        assert advance_working_days("2024-12-30", 3, holidays) == date(2025, 1, 2)

    def test_single_day_is_the_start(self):
        assert advance_working_days("2025-02-03", 1) == date(2025, 2, 3)

    def test_weekend_start_counts_from_monday(self):
        assert advance_working_days("2025-02-01", 1) == date(2025, 2, 3)
        assert advance_working_days("2025-02-01", 3) == date(2025, 2, 5)

    def test_crosses_weekend(self):
        assert advance_working_days("2025-02-06", 3) == date(2025, 2, 10)

    def test_fractional_rounds_up(self):
        assert advance_working_days("2025-02-03", 1.5) == date(2025, 2, 4)

    def test_zero_clamps_to_one_day(self):
        assert advance_working_days("2025-02-03", 0) == date(2025, 2, 3)

    def test_weekend_holiday_is_not_counted_twice(self):
        """A holiday on a Saturday changes nothing."""
        saturday = [Holiday(date="2025-02-01", name="Founders Day")]
        assert advance_working_days("2025-01-31", 2, saturday) == advance_working_days("2025-01-31", 2)
        assert count_working_days("2025-01-27", "2025-02-02", saturday) == 5

    @pytest.mark.parametrize("start", ["2024-12-28", "2024-12-30", "2025-01-01"])
    def test_monotonic_and_agrees_with_count(self, start, holidays):
        previous = None
        for n in range(1, 16):
            end = advance_working_days(start, n, holidays)
            assert is_working_day(end, holidays)
            assert count_working_days(start, end, holidays) == n
            if previous is not None:
                assert end > previous
            previous = end


class TestCountWorkingDays:
    """Tests for count_working_days."""

    def test_full_week(self):
        assert count_working_days("2025-02-03", "2025-02-09") == 5

    def test_with_holiday(self, holidays):
        assert count_working_days("2024-12-30", "2025-01-05", holidays) == 4

    def test_weekend_only(self):
        assert count_working_days("2025-02-01", "2025-02-02") == 0

    def test_reversed_range(self):
        assert count_working_days("2025-02-07", "2025-02-03") == 0

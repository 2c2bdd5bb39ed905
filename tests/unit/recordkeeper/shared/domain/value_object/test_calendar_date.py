from datetime import date, datetime

import pytest

from recordkeeper.shared.domain import CalendarDate


class TestCalendarDate:
    def test_from_string(self):
        assert CalendarDate.from_string("2026-10-16").value == date(2026, 10, 16)

    def test_str_is_iso_format(self):
        assert str(CalendarDate(date(2026, 1, 5))) == "2026-01-05"

    def test_datetime_is_truncated_to_date(self):
        calendar_date = CalendarDate(datetime(2026, 10, 16, 13, 45))
        assert calendar_date.value == date(2026, 10, 16)
        assert calendar_date == CalendarDate(date(2026, 10, 16))

    def test_invalid_string_raises_error(self):
        with pytest.raises(ValueError, match="Invalid ISO 8601 date"):
            CalendarDate.from_string("16/10/2026")

    def test_non_date_raises_error(self):
        with pytest.raises(ValueError, match="Invalid calendar date"):
            CalendarDate("2026-10-16")

    def test_is_before(self):
        earlier = CalendarDate(date(2026, 1, 1))
        later = CalendarDate(date(2026, 1, 2))
        assert earlier.is_before(later)
        assert not later.is_before(earlier)

    def test_add_months(self):
        assert CalendarDate(date(2026, 10, 16)).add_months(8) == CalendarDate(
            date(2027, 6, 16)
        )

    def test_add_months_clamps_to_month_end(self):
        assert CalendarDate(date(2026, 1, 31)).add_months(1) == CalendarDate(
            date(2026, 2, 28)
        )

    def test_add_zero_months(self):
        assert CalendarDate(date(2026, 10, 16)).add_months(0) == CalendarDate(
            date(2026, 10, 16)
        )

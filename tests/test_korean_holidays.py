"""
Tests für korean_holidays – feste Feiertagstabelle, extra-Tabellen, workalendar.
"""
from datetime import date, datetime

from laborcalc.utils.korean_holidays import (
    FIXED_HOLIDAYS,
    HolidayInfo,
    get_fixed_holidays,
    get_holiday_name,
    get_kr_holidays,
    is_holiday,
)


def test_childrens_day_is_holiday():
    assert is_holiday(date(2025, 5, 5))


def test_day_after_childrens_day_is_not_holiday():
    assert not is_holiday(date(2025, 5, 6))


def test_fixed_holidays_independent_of_year():
    for year in (2024, 2025, 2030):
        assert is_holiday(date(year, 12, 25))
        assert is_holiday(date(year, 10, 9))


def test_holiday_name():
    assert get_holiday_name(date(2025, 8, 15)) == "광복절"
    assert get_holiday_name(date(2025, 8, 16)) is None


def test_lunar_holiday_not_in_fixed_table():
    """Chuseok 2025 (06.10.) ist beweglich und fehlt in der festen Tabelle."""
    assert not is_holiday(date(2025, 10, 6))


def test_extra_table_supplies_movable_holidays():
    extra = {date(2025, 10, 6): "추석"}
    assert is_holiday(date(2025, 10, 6), extra=extra)
    assert get_holiday_name(date(2025, 10, 6), extra=extra) == "추석"


def test_replaced_table():
    table = (HolidayInfo(7, 17, "제헌절"),)
    assert is_holiday(date(2025, 7, 17), table)
    assert not is_holiday(date(2025, 5, 5), table)


def test_get_fixed_holidays_for_year():
    holidays = get_fixed_holidays(2026)
    assert len(holidays) == len(FIXED_HOLIDAYS) == 8
    assert holidays[date(2026, 3, 1)] == "삼일절"


def test_get_kr_holidays_includes_fixed_and_movable():
    holidays = get_kr_holidays(2025)
    assert date(2025, 1, 1) in holidays
    assert date(2025, 5, 5) in holidays
    assert len(holidays) > len(FIXED_HOLIDAYS)


def test_timestamp_matches_extra_table():
    """Ein datetime (z. B. Schichtbeginn) findet auch Einträge der extra-Tabelle."""
    extra = {date(2025, 10, 6): "추석"}
    assert is_holiday(datetime(2025, 10, 6, 9, 0), extra=extra)
    assert get_holiday_name(datetime(2025, 10, 6, 23, 30), extra=extra) == "추석"
    assert is_holiday(datetime(2025, 5, 5, 22, 0))
    assert not is_holiday(datetime(2025, 10, 7, 9, 0), extra=extra)

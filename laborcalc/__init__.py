"""
laborcalc – Arbeitszeit- und Lohnkennzahlen für Schichtabrechnungen.
"""
from laborcalc.core.exceptions import LaborCalcError, MalformedTimeError
from laborcalc.core.rules import LaborRules, get_default_rules
from laborcalc.schemas.worktime import DailyHoursRecord, WeeklyAggregate
from laborcalc.services.weekly_service import aggregate_weeks, group_by_week, weekly_hours
from laborcalc.services.worktime_service import (
    build_daily_record,
    night_hours,
    night_minutes,
    overtime_hours,
    work_hours,
    work_minutes,
)
from laborcalc.utils.calendar_utils import day_name, day_of_week, days_between, month_range
from laborcalc.utils.korean_holidays import is_holiday
from laborcalc.utils.time_utils import from_minutes, normalize_to_timeline, to_minutes

__version__ = "1.0.0"

__all__ = [
    "LaborCalcError", "MalformedTimeError",
    "LaborRules", "get_default_rules",
    "DailyHoursRecord", "WeeklyAggregate",
    "to_minutes", "from_minutes", "normalize_to_timeline",
    "work_minutes", "work_hours", "night_minutes", "night_hours", "overtime_hours",
    "build_daily_record",
    "weekly_hours", "group_by_week", "aggregate_weeks",
    "is_holiday", "day_of_week", "day_name", "month_range", "days_between",
]

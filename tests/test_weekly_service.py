"""
Tests für weekly_service – Wochensumme, 40h-Norm, 52h-Höchstgrenze, ISO-Wochen.
"""
from datetime import date

import pytest

from laborcalc.core.rules import LaborRules
from laborcalc.services.weekly_service import aggregate_weeks, group_by_week, weekly_hours


def test_weekly_standard_week(rules):
    week = weekly_hours([8, 8, 8, 8, 8], rules)
    assert week.model_dump() == {"total": 40, "overtime": 0, "is_over_limit": False}


def test_weekly_over_limit(rules):
    week = weekly_hours([10, 10, 10, 10, 10, 10], rules)
    assert week.total == 60
    assert week.overtime == 20
    assert week.is_over_limit is True


def test_weekly_exactly_at_limit_is_not_over(rules):
    """52h ist erlaubt, erst > 52h wird gemeldet."""
    week = weekly_hours([10.4] * 5, rules)
    assert week.total == 52.0
    assert week.is_over_limit is False


def test_weekly_empty_week(rules):
    week = weekly_hours([], rules)
    assert week.total == 0
    assert week.overtime == 0
    assert week.is_over_limit is False


def test_weekly_no_floating_drift(rules):
    """0.1 * 10 als float-Summe ergibt 0.9999999999999999."""
    week = weekly_hours([0.1] * 10, rules)
    assert week.total == 1.0


def test_weekly_order_independent(rules):
    hours = [7.5, 9.25, 8.33, 11.0, 6.67]
    assert weekly_hours(hours, rules) == weekly_hours(list(reversed(hours)), rules)


def test_weekly_custom_thresholds():
    rules = LaborRules(weekly_standard_hours=35, weekly_limit_hours=48)
    week = weekly_hours([10, 10, 10, 10, 9], rules)
    assert week.overtime == 14
    assert week.is_over_limit is True


# ── group_by_week / aggregate_weeks ──────────────────────────────────────────

def test_group_by_iso_week(make_record):
    records = [
        make_record("09:00", "18:00", 60, date(2025, 9, 1)),   # Mo, KW36
        make_record("09:00", "18:00", 60, date(2025, 9, 7)),   # So, KW36
        make_record("09:00", "18:00", 60, date(2025, 9, 8)),   # Mo, KW37
    ]
    weeks = group_by_week(records)
    assert list(weeks) == ["2025-W36", "2025-W37"]
    assert len(weeks["2025-W36"]) == 2


def test_group_by_week_requires_date(make_record):
    with pytest.raises(ValueError):
        group_by_week([make_record("09:00", "17:00")])


def test_aggregate_weeks(make_record, rules):
    records = [make_record("08:00", "20:00", 60, date(2025, 9, d)) for d in range(1, 6)]
    weeks = aggregate_weeks(records, rules)
    week = weeks["2025-W36"]
    assert week.total == 55.0
    assert week.overtime == 15.0
    assert week.is_over_limit is True

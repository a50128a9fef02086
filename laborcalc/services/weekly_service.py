"""
Wochenaggregation: Summe der Tagesstunden gegen 40h-Norm und 52h-Höchstgrenze.
"""
from collections import defaultdict
from collections.abc import Iterable
from decimal import Decimal

from laborcalc.core.rules import LaborRules, get_default_rules
from laborcalc.schemas.worktime import DailyHoursRecord, WeeklyAggregate
from laborcalc.utils.calendar_utils import iso_week_key
from laborcalc.utils.time_utils import round_hours


def weekly_hours(daily_hours: Iterable[float], rules: LaborRules | None = None) -> WeeklyAggregate:
    """
    total: Summe (Festkomma, einmal am Ende gerundet)
    overtime: Anteil über weekly_standard_hours
    is_over_limit: total > weekly_limit_hours – nur Signal, kein Fehler
    """
    rules = rules or get_default_rules()
    total = sum((Decimal(str(h)) for h in daily_hours), Decimal(0))
    overtime = max(Decimal(0), total - Decimal(str(rules.weekly_standard_hours)))
    return WeeklyAggregate(
        total=round_hours(total),
        overtime=round_hours(overtime),
        is_over_limit=total > Decimal(str(rules.weekly_limit_hours)),
    )


def group_by_week(records: Iterable[DailyHoursRecord]) -> dict[str, list[DailyHoursRecord]]:
    """Gruppiert datierte Records nach ISO-Woche ("YYYY-Www")."""
    weeks: dict[str, list[DailyHoursRecord]] = defaultdict(list)
    for record in records:
        if record.work_date is None:
            raise ValueError("Cannot group a record without work_date by week")
        weeks[iso_week_key(record.work_date)].append(record)
    return dict(sorted(weeks.items()))


def aggregate_weeks(
    records: Iterable[DailyHoursRecord], rules: LaborRules | None = None
) -> dict[str, WeeklyAggregate]:
    return {
        week: weekly_hours((r.hours for r in week_records), rules)
        for week, week_records in group_by_week(records).items()
    }

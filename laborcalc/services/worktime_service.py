"""
Arbeitszeit-Berechnung pro Schicht: Netto-Minuten, Nachtstunden, Überstunden.
Alle Funktionen sind rein; Konfiguration kommt ausschließlich über LaborRules.
"""
import logging
from datetime import date, time
from decimal import Decimal

from laborcalc.core.rules import LaborRules, get_default_rules
from laborcalc.schemas.worktime import DailyHoursRecord
from laborcalc.utils.korean_holidays import is_holiday
from laborcalc.utils.time_utils import (
    MINUTES_PER_DAY,
    minutes_to_hours,
    normalize_to_timeline,
    round_hours,
)

logger = logging.getLogger(__name__)


def work_minutes(start: str | time, end: str | time, break_minutes: int = 0) -> int:
    """Netto-Arbeitsminuten; Mitternachtsübergang wenn end < start, nie negativ."""
    if isinstance(break_minutes, bool) or not isinstance(break_minutes, int):
        raise ValueError(f"break_minutes must be a whole number of minutes, got {break_minutes!r}")
    if break_minutes < 0:
        raise ValueError(f"break_minutes must not be negative, got {break_minutes}")
    start_min, end_min = normalize_to_timeline(start, end)
    return max(0, end_min - start_min - break_minutes)


def work_hours(start: str | time, end: str | time, break_minutes: int = 0) -> float:
    return minutes_to_hours(work_minutes(start, end, break_minutes))


def night_minutes(start: str | time, end: str | time, rules: LaborRules | None = None) -> int:
    """
    Minuten der Schicht im Nachtfenster (Standard 22:00–06:00).

    Gemessen am Brutto-Intervall; die Pause wird nicht herausgerechnet.
    Zwei Abschnitte:
      1. [night_start, 24:00) des ersten Tages
      2. [24:00, 24:00 + night_end) wenn die Schicht über Mitternacht geht,
         sonst [00:00, night_end) desselben Tages
    """
    rules = rules or get_default_rules()
    night_start, night_end = rules.night_window
    start_min, end_min = normalize_to_timeline(start, end)

    total = _overlap(start_min, end_min, night_start, MINUTES_PER_DAY)
    if end_min > MINUTES_PER_DAY:
        total += _overlap(start_min, end_min, MINUTES_PER_DAY, MINUTES_PER_DAY + night_end)
    else:
        total += _overlap(start_min, end_min, 0, night_end)
    return total


def night_hours(start: str | time, end: str | time, rules: LaborRules | None = None) -> float:
    return minutes_to_hours(night_minutes(start, end, rules))


def overtime_hours(
    hours: float,
    standard_hours: float | None = None,
    rules: LaborRules | None = None,
) -> float:
    """Stunden über der Tagesnorm (Standard 8h), nie negativ."""
    if standard_hours is None:
        standard_hours = (rules or get_default_rules()).standard_daily_hours
    diff = Decimal(str(hours)) - Decimal(str(standard_hours))
    return round_hours(max(Decimal(0), diff))


def build_daily_record(
    start: str | time,
    end: str | time,
    break_minutes: int = 0,
    work_date: date | None = None,
    rules: LaborRules | None = None,
) -> DailyHoursRecord:
    """Berechnet alle Kennzahlen einer Schicht in einem unveränderlichen Record."""
    rules = rules or get_default_rules()
    minutes = work_minutes(start, end, break_minutes)
    hours = minutes_to_hours(minutes)
    holiday = work_date is not None and is_holiday(work_date, rules.holidays)

    record = DailyHoursRecord(
        work_date=work_date,
        start=_as_hhmm(start),
        end=_as_hhmm(end),
        break_minutes=break_minutes,
        work_minutes=minutes,
        hours=hours,
        overtime_hours=overtime_hours(hours, rules=rules),
        night_hours=night_hours(start, end, rules),
        is_holiday=holiday,
    )
    logger.debug(
        "Shift %s–%s (break %d) on %s → %.2fh (OT %.2fh, night %.2fh)",
        record.start, record.end, break_minutes, work_date,
        record.hours, record.overtime_hours, record.night_hours,
    )
    return record


# ── Hilfsfunktionen ──────────────────────────────────────────────────────────

def _overlap(start: int, end: int, lower: int, upper: int) -> int:
    return max(0, min(end, upper) - max(start, lower))


def _as_hhmm(value: str | time) -> str:
    if isinstance(value, time):
        return f"{value.hour:02d}:{value.minute:02d}"
    return value

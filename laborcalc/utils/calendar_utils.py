"""
Kalender-Hilfen für Abrechnungszeiträume: Wochentage, Monatsgrenzen,
Tagesabstände und Formatierung.
"""
import calendar
from datetime import date, datetime, time
from typing import NamedTuple

# 0=So ... 6=Sa
DAY_NAMES: tuple[str, ...] = ("일", "월", "화", "수", "목", "금", "토")


class MonthRange(NamedTuple):
    start: date
    end: date


def day_of_week(d: date) -> int:
    """Wochentag-Index mit 0=Sonntag, 1=Montag, ..., 6=Samstag."""
    return d.isoweekday() % 7


def day_name(index: int, labels: tuple[str, ...] | None = None) -> str:
    names = DAY_NAMES if labels is None else labels
    if len(names) != 7:
        raise ValueError(f"Expected 7 day labels, got {len(names)}")
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index <= 6:
        raise ValueError(f"Day index must be 0-6, got {index!r}")
    return names[index]


def month_range(year: int, month: int) -> MonthRange:
    """Erster und letzter Kalendertag eines Monats."""
    _, last_day = calendar.monthrange(year, month)
    return MonthRange(date(year, month, 1), date(year, month, last_day))


def days_between(a: date | datetime, b: date | datetime) -> int:
    """Abstand in ganzen Tagen, unabhängig von der Reihenfolge."""
    if isinstance(a, datetime) or isinstance(b, datetime):
        a, b = _as_datetime(a), _as_datetime(b)
        return int(abs((b - a).total_seconds()) / 86400 + 0.5)
    return abs((b - a).days)


def _as_datetime(d: date | datetime) -> datetime:
    if isinstance(d, datetime):
        return d
    return datetime.combine(d, time.min)


def format_date(d: date) -> str:
    """YYYY-MM-DD"""
    return d.strftime("%Y-%m-%d")


def format_datetime(dt: datetime) -> str:
    """YYYY-MM-DD HH:MM"""
    return dt.strftime("%Y-%m-%d %H:%M")


def iso_week_key(d: date) -> str:
    """ISO-Woche als "YYYY-Www" (Woche beginnt Montag)."""
    iso_year, iso_week, _ = d.isocalendar()
    return f"{iso_year}-W{iso_week:02d}"

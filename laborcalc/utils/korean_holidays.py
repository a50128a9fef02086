"""
Gesetzliche Feiertage in Südkorea.

Die feste Tabelle kennt nur datumsfeste Feiertage. Bewegliche Feiertage nach
dem Mondkalender (Seollal, Chuseok, Buddhas Geburtstag) fehlen darin und
müssen als externe Tabelle mitgegeben werden, z. B. aus get_kr_holidays().
"""
from collections.abc import Iterable
from datetime import date, datetime
from typing import NamedTuple


class HolidayInfo(NamedTuple):
    month: int
    day: int
    name: str


# Datumsfeste Feiertage (jährlich prüfen)
FIXED_HOLIDAYS: tuple[HolidayInfo, ...] = (
    HolidayInfo(1, 1,   "신정"),      # New Year's Day
    HolidayInfo(3, 1,   "삼일절"),    # Independence Movement Day
    HolidayInfo(5, 5,   "어린이날"),  # Children's Day
    HolidayInfo(6, 6,   "현충일"),    # Memorial Day
    HolidayInfo(8, 15,  "광복절"),    # Liberation Day
    HolidayInfo(10, 3,  "개천절"),    # National Foundation Day
    HolidayInfo(10, 9,  "한글날"),    # Hangul Day
    HolidayInfo(12, 25, "성탄절"),    # Christmas
)


def get_fixed_holidays(year: int, table: Iterable[HolidayInfo] | None = None) -> dict[date, str]:
    """Gibt die datumsfesten Feiertage eines Jahres zurück."""
    holidays = FIXED_HOLIDAYS if table is None else table
    return {date(year, h.month, h.day): h.name for h in holidays}


def get_kr_holidays(year: int) -> dict[date, str]:
    """
    Alle gesetzlichen Feiertage eines Jahres inkl. Mondkalender-Feiertage.
    Verwendet workalendar; gedacht als extra-Tabelle für is_holiday().
    """
    from workalendar.asia import SouthKorea

    cal = SouthKorea()
    return {d: name for d, name in cal.holidays(year)}


def get_holiday_name(
    d: date | datetime,
    table: Iterable[HolidayInfo] | None = None,
    extra: dict[date, str] | None = None,
) -> str | None:
    """Name des Feiertags oder None. Die feste Tabelle gewinnt vor extra."""
    if isinstance(d, datetime):
        d = d.date()
    holidays = FIXED_HOLIDAYS if table is None else table
    for h in holidays:
        if h.month == d.month and h.day == d.day:
            return h.name

    if extra:
        return extra.get(d)
    return None


def is_holiday(
    d: date | datetime,
    table: Iterable[HolidayInfo] | None = None,
    extra: dict[date, str] | None = None,
) -> bool:
    """Prüft ob ein Datum ein Feiertag ist. Unbekannte Daten sind kein Feiertag."""
    return get_holiday_name(d, table, extra) is not None

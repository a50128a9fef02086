"""
Time handling: 24-hour HH:MM format, minute arithmetic, midnight crossover.
"""
import logging
import re
from datetime import time
from decimal import Decimal, ROUND_HALF_UP

from laborcalc.core.exceptions import MalformedTimeError

logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 24 * 60

# Time format: HH:MM 24-hour, zero-padded, ASCII digits only
TIME_RE = re.compile(r"^([0-9]{2}):([0-9]{2})$")

_TWO_PLACES = Decimal("0.01")


def to_minutes(value: str | time) -> int:
    """Parse "HH:MM" (or a datetime.time) to minutes since midnight."""
    if isinstance(value, time):
        return value.hour * 60 + value.minute

    if not isinstance(value, str):
        logger.warning("Unsupported time type: %s (%r)", type(value).__name__, value)
        raise MalformedTimeError(value, f"unsupported type {type(value).__name__}")

    m = TIME_RE.fullmatch(value)
    if not m:
        logger.warning("Time string does not match HH:MM: %r", value)
        raise MalformedTimeError(value)

    h, mn = int(m.group(1)), int(m.group(2))
    if h > 23 or mn > 59:
        logger.warning("Time out of range: %r", value)
        raise MalformedTimeError(value, "hours must be 00-23 and minutes 00-59")
    return h * 60 + mn


def from_minutes(offset: int) -> str:
    """Minutes since midnight to HH:MM. Next-day offsets wrap (24*60+30 -> 00:30)."""
    if isinstance(offset, bool) or not isinstance(offset, int):
        raise ValueError(f"Minute offset must be an integer, got {offset!r}")
    if offset < 0:
        raise ValueError(f"Minute offset must not be negative, got {offset}")
    h, mn = divmod(offset % MINUTES_PER_DAY, 60)
    return f"{h:02d}:{mn:02d}"


def normalize_to_timeline(start: str | time, end: str | time) -> tuple[int, int]:
    """
    Both boundaries as minute offsets on one timeline.

    end < start means the shift runs into the next day, so end is moved by
    24h. start == end stays a zero-length interval.
    """
    start_min = to_minutes(start)
    end_min = to_minutes(end)
    if end_min < start_min:
        end_min += MINUTES_PER_DAY
    return start_min, end_min


def round_hours(value: float | int | Decimal) -> float:
    """Round half-up to 2 decimals (Python's round() would round half-even)."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return float(value.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def minutes_to_hours(minutes: int) -> float:
    return round_hours(Decimal(minutes) / Decimal(60))

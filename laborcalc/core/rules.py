"""
Arbeitsrechtliche Kennzahlen als unveränderliche, injizierbare Konfiguration.
Jahreswechsel (Mindestlohn, Feiertage) → neue LaborRules-Instanz, nie mutieren.
"""
from functools import lru_cache

from pydantic import BaseModel, Field, field_validator, model_validator

from laborcalc.utils.korean_holidays import FIXED_HOLIDAYS, HolidayInfo
from laborcalc.utils.time_utils import to_minutes


class LaborRules(BaseModel):
    # Schwellen (근로기준법)
    standard_daily_hours: float = Field(8, ge=0)
    weekly_standard_hours: float = Field(40, ge=0)
    weekly_limit_hours: float = Field(52, ge=0)

    # Nachtarbeit 22:00–06:00
    night_start: str = "22:00"
    night_end: str = "06:00"

    holidays: tuple[HolidayInfo, ...] = FIXED_HOLIDAYS

    # Mindestlohn 2025, jährlich aktualisieren
    minimum_wage_hourly: int = Field(10030, ge=0)

    # Zuschlagsfaktoren
    overtime_rate: float = 1.5
    night_rate: float = 0.5
    holiday_rate: float = 1.5

    # Wochenruhetagsgeld (주휴수당) ab 15h/Woche
    weekly_holiday_min_hours: float = 15

    # Pausen: 30 Min ab 4h, 60 Min ab 8h
    break_4h_minutes: int = 30
    break_8h_minutes: int = 60

    model_config = {"frozen": True}

    @field_validator("night_start", "night_end")
    @classmethod
    def _valid_time(cls, v: str) -> str:
        to_minutes(v)
        return v

    @model_validator(mode="after")
    def _night_window_crosses_midnight(self) -> "LaborRules":
        if to_minutes(self.night_end) >= to_minutes(self.night_start):
            raise ValueError("night window must cross midnight (night_end < night_start)")
        if self.weekly_limit_hours < self.weekly_standard_hours:
            raise ValueError("weekly_limit_hours must not be below weekly_standard_hours")
        return self

    @property
    def night_window(self) -> tuple[int, int]:
        """(start, end) als Minuten-Offsets; end liegt am Folgetag."""
        return to_minutes(self.night_start), to_minutes(self.night_end)


@lru_cache(maxsize=1)
def get_default_rules() -> LaborRules:
    """Aus den Settings abgeleitete Standardregeln (einmal pro Prozess)."""
    from laborcalc.core.config import settings

    return settings.labor_rules()

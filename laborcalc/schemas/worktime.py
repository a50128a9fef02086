from datetime import date

from pydantic import BaseModel, Field


class DailyHoursRecord(BaseModel):
    """Ergebnis einer Schichtberechnung. Unveränderlich; neue Eingaben → neuer Record."""
    work_date: date | None = None
    start: str
    end: str
    break_minutes: int = Field(0, ge=0)
    work_minutes: int = Field(ge=0)
    hours: float = Field(ge=0)
    overtime_hours: float = Field(0, ge=0)
    night_hours: float = Field(0, ge=0)
    is_holiday: bool = False

    model_config = {"frozen": True}


class WeeklyAggregate(BaseModel):
    total: float
    overtime: float = Field(ge=0)
    is_over_limit: bool

    model_config = {"frozen": True}

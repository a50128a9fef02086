"""
Shared pytest fixtures for laborcalc tests.

Every test gets its own LaborRules instance instead of the process-wide
defaults, so environment variables (.env) cannot change expected figures.
"""
from datetime import date

import pytest

from laborcalc.core.rules import LaborRules
from laborcalc.services.worktime_service import build_daily_record


@pytest.fixture
def rules() -> LaborRules:
    return LaborRules()


@pytest.fixture
def make_record(rules):
    """Factory: make_record("09:00", "18:00", 60, date(2025, 9, 1))."""
    def _make(start: str, end: str, break_minutes: int = 0, work_date: date | None = None):
        return build_daily_record(start, end, break_minutes, work_date=work_date, rules=rules)
    return _make

"""
Tests für Settings / LaborRules / Logging-Setup.
"""
import logging

import pytest
from pydantic import ValidationError

from laborcalc.core.config import Settings
from laborcalc.core.logging_config import setup_logging
from laborcalc.core.rules import LaborRules, get_default_rules


def test_default_rules():
    rules = LaborRules()
    assert rules.standard_daily_hours == 8
    assert rules.weekly_standard_hours == 40
    assert rules.weekly_limit_hours == 52
    assert rules.night_window == (22 * 60, 6 * 60)


def test_rules_are_frozen():
    rules = LaborRules()
    with pytest.raises(ValidationError):
        rules.weekly_limit_hours = 60


def test_rules_reject_malformed_night_time():
    with pytest.raises(ValidationError):
        LaborRules(night_start="22h")


def test_rules_reject_night_window_not_crossing_midnight():
    with pytest.raises(ValidationError):
        LaborRules(night_start="01:00", night_end="05:00")


def test_rules_reject_limit_below_standard():
    with pytest.raises(ValidationError):
        LaborRules(weekly_standard_hours=40, weekly_limit_hours=30)


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("WEEKLY_LIMIT_HOURS", "60")
    monkeypatch.setenv("NIGHT_START", "23:00")
    rules = Settings().labor_rules()
    assert rules.weekly_limit_hours == 60
    assert rules.night_start == "23:00"


def test_default_rules_cached():
    assert get_default_rules() is get_default_rules()


def test_setup_logging_is_idempotent():
    logger = setup_logging("DEBUG")
    setup_logging("DEBUG")
    own = [h for h in logger.handlers if getattr(h, "_laborcalc", False)]
    assert len(own) == 1
    assert logger.level == logging.DEBUG

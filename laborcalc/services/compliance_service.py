"""
Compliance-Service: Prüfungen nach dem koreanischen Arbeitsstandardgesetz.
Prüft Wochenhöchstarbeitszeit, Pausen und Mindestlohn. Meldet nur, wirft nie.
"""
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from laborcalc.core.rules import LaborRules, get_default_rules
from laborcalc.schemas.worktime import DailyHoursRecord
from laborcalc.services.weekly_service import weekly_hours
from laborcalc.services.worktime_service import work_minutes
from laborcalc.utils.korean_holidays import get_holiday_name

logger = logging.getLogger(__name__)


@dataclass
class ComplianceResult:
    violations: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_ok(self) -> bool:
        return len(self.violations) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0


class ComplianceService:

    def __init__(self, rules: LaborRules | None = None):
        self.rules = rules or get_default_rules()

    def check_week(self, daily_hours: Iterable[float]) -> ComplianceResult:
        result = ComplianceResult()
        week = weekly_hours(daily_hours, self.rules)

        # 1. Höchstarbeitszeit (52h)
        if week.is_over_limit:
            result.violations.append(
                f"Weekly limit exceeded: {week.total:.2f}h (max. {self.rules.weekly_limit_hours:g}h)"
            )
            logger.info("Weekly limit exceeded: total=%.2f limit=%s", week.total, self.rules.weekly_limit_hours)

        # 2. Wöchentliche Überstunden (über 40h)
        if week.overtime > 0:
            result.warnings.append(
                f"Weekly overtime: {week.overtime:.2f}h over {self.rules.weekly_standard_hours:g}h"
            )

        return result

    def check_shift(self, record: DailyHoursRecord) -> ComplianceResult:
        result = ComplianceResult()

        # 1. Pausenpflicht
        self._check_break(record, result)

        # 2. Tägliche Überstunden
        if record.overtime_hours > 0:
            result.warnings.append(
                f"Daily overtime: {record.overtime_hours:.2f}h over {self.rules.standard_daily_hours:g}h"
            )

        # 3. Feiertag-Info
        if record.work_date is not None:
            holiday_name = get_holiday_name(record.work_date, self.rules.holidays)
            if holiday_name is not None:
                result.warnings.append(f"Holiday: {holiday_name}")

        return result

    def check_minimum_wage(self, hourly_rate: float) -> ComplianceResult:
        result = ComplianceResult()
        difference = hourly_rate - self.rules.minimum_wage_hourly
        if difference < 0:
            result.violations.append(
                f"Below minimum wage: {hourly_rate:g} < {self.rules.minimum_wage_hourly} ({-difference:g} short)"
            )
            logger.info("Hourly rate %s below minimum wage %s", hourly_rate, self.rules.minimum_wage_hourly)
        return result

    def _check_break(self, record: DailyHoursRecord, result: ComplianceResult) -> None:
        gross_minutes = work_minutes(record.start, record.end)

        if gross_minutes >= 8 * 60 and record.break_minutes < self.rules.break_8h_minutes:
            result.violations.append(
                f"After 8h of work: at least {self.rules.break_8h_minutes} min break required"
            )
        elif gross_minutes >= 4 * 60 and record.break_minutes < self.rules.break_4h_minutes:
            result.violations.append(
                f"After 4h of work: at least {self.rules.break_4h_minutes} min break required"
            )

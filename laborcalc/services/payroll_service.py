"""
PayrollService: Zuschläge auf Basis der berechneten Arbeitszeiten, Abzüge und Abfindung.
Zuschlagsätze gemäß Arbeitsstandardgesetz (연장 150%, 야간 +50%, 휴일 150%).
Sozialversicherung und Lohnsteuer vereinfacht (Stand 2025, jährlich prüfen).
"""
import logging
from collections import defaultdict
from collections.abc import Iterable
from decimal import Decimal, ROUND_HALF_UP

from laborcalc.core.rules import LaborRules, get_default_rules
from laborcalc.schemas.payroll import Deductions, NetPay, PeriodPayroll, ShiftPay
from laborcalc.schemas.worktime import DailyHoursRecord
from laborcalc.services.weekly_service import group_by_week
from laborcalc.utils.time_utils import round_hours

logger = logging.getLogger(__name__)


INSURANCE_RATES = {
    "national_pension":     Decimal("0.045"),    # 국민연금 4.5%
    "health_insurance":     Decimal("0.03545"),  # 건강보험 3.545%
    "long_term_care":       Decimal("0.1281"),   # 장기요양 12.81% vom Krankenversicherungsbeitrag
    "employment_insurance": Decimal("0.009"),    # 고용보험 0.9%
}

# (Obergrenze Brutto, Steuersatz), Näherung an die vereinfachte Lohnsteuertabelle
INCOME_TAX_BRACKETS: tuple[tuple[int | None, Decimal], ...] = (
    (1_060_000, Decimal("0")),
    (1_500_000, Decimal("0.06")),
    (3_000_000, Decimal("0.15")),
    (4_500_000, Decimal("0.24")),
    (None,      Decimal("0.35")),
)
DEPENDENT_DEDUCTION = 150_000
LOCAL_INCOME_TAX_RATE = Decimal("0.1")
SEVERANCE_MIN_DAYS = 365


def _won(value: Decimal) -> int:
    """Auf ganze Währungseinheiten runden (half-up)."""
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _d(value: float) -> Decimal:
    return Decimal(str(value))


class PayrollService:

    def __init__(self, rules: LaborRules | None = None):
        self.rules = rules or get_default_rules()

    def calculate_shift_pay(self, record: DailyHoursRecord, hourly_rate: float) -> ShiftPay:
        rate = _d(hourly_rate)
        base_pay = _won(rate * _d(record.hours))
        overtime_pay = _won(rate * _d(self.rules.overtime_rate) * _d(record.overtime_hours))
        night_pay = _won(rate * _d(self.rules.night_rate) * _d(record.night_hours))
        holiday_pay = (
            _won(rate * _d(self.rules.holiday_rate) * _d(record.hours)) if record.is_holiday else 0
        )
        return ShiftPay(
            base_pay=base_pay,
            overtime_pay=overtime_pay,
            night_pay=night_pay,
            holiday_pay=holiday_pay,
            total=base_pay + overtime_pay + night_pay + holiday_pay,
        )

    def weekly_holiday_pay(self, hourly_rate: float, weekly_hours: float) -> int:
        """
        Wochenruhetagsgeld (주휴수당): ab weekly_holiday_min_hours pro Woche ein
        Tageslohn, anteilig bei weniger als weekly_standard_hours.
        """
        if weekly_hours < self.rules.weekly_holiday_min_hours:
            return 0
        ratio = min(_d(weekly_hours) / _d(self.rules.weekly_standard_hours), Decimal(1))
        return _won(_d(hourly_rate) * _d(self.rules.standard_daily_hours) * ratio)

    def calculate_period(self, records: Iterable[DailyHoursRecord], hourly_rate: float) -> PeriodPayroll:
        """Summiert einen Abrechnungszeitraum; Wochenruhetagsgeld je ISO-Woche."""
        records = list(records)
        hours_by_type: dict[str, Decimal] = defaultdict(Decimal)
        pay_by_type: dict[str, int] = defaultdict(int)

        for record in records:
            pay = self.calculate_shift_pay(record, hourly_rate)
            hours_by_type["total"] += _d(record.hours)
            hours_by_type["overtime"] += _d(record.overtime_hours)
            hours_by_type["night"] += _d(record.night_hours)
            if record.is_holiday:
                hours_by_type["holiday"] += _d(record.hours)

            pay_by_type["base"] += pay.base_pay
            pay_by_type["overtime"] += pay.overtime_pay
            pay_by_type["night"] += pay.night_pay
            pay_by_type["holiday"] += pay.holiday_pay

        weekly_holiday = 0
        for week, week_records in group_by_week(records).items():
            week_total = float(sum((_d(r.hours) for r in week_records), Decimal(0)))
            weekly_holiday += self.weekly_holiday_pay(hourly_rate, week_total)
            logger.debug("Week %s: %.2fh", week, week_total)

        total_gross = sum(pay_by_type.values()) + weekly_holiday
        work_days = len({r.work_date for r in records})

        return PeriodPayroll(
            work_days=work_days,
            total_hours=round_hours(hours_by_type["total"]),
            overtime_hours=round_hours(hours_by_type["overtime"]),
            night_hours=round_hours(hours_by_type["night"]),
            holiday_hours=round_hours(hours_by_type["holiday"]),
            base_pay=pay_by_type["base"],
            overtime_pay=pay_by_type["overtime"],
            night_pay=pay_by_type["night"],
            holiday_pay=pay_by_type["holiday"],
            weekly_holiday_pay=weekly_holiday,
            total_gross=total_gross,
        )

    # ── Abzüge ───────────────────────────────────────────────────────────────

    def insurance_deductions(self, gross_pay: int) -> Deductions:
        """Arbeitnehmeranteile der vier Sozialversicherungen."""
        gross = Decimal(gross_pay)
        pension = _won(gross * INSURANCE_RATES["national_pension"])
        health = _won(gross * INSURANCE_RATES["health_insurance"])
        care = _won(Decimal(health) * INSURANCE_RATES["long_term_care"])
        employment = _won(gross * INSURANCE_RATES["employment_insurance"])
        return Deductions(
            national_pension=pension,
            health_insurance=health,
            long_term_care=care,
            employment_insurance=employment,
            total=pension + health + care + employment,
        )

    def income_tax(self, gross_pay: int, dependents: int = 1) -> Deductions:
        """Lohnsteuer + 10% Kommunalsteuer. Satz nach Brutto, Basis nach Familienabzug."""
        if dependents < 0:
            raise ValueError(f"dependents must not be negative, got {dependents}")
        rate = next(r for limit, r in INCOME_TAX_BRACKETS if limit is None or gross_pay <= limit)
        taxable = max(0, gross_pay - dependents * DEPENDENT_DEDUCTION)
        tax = _won(Decimal(taxable) * rate)
        local_tax = _won(Decimal(tax) * LOCAL_INCOME_TAX_RATE)
        return Deductions(income_tax=tax, local_income_tax=local_tax, total=tax + local_tax)

    def total_deductions(
        self,
        gross_pay: int,
        national_pension: bool = True,
        health_insurance: bool = True,
        employment_insurance: bool = True,
        income_tax: bool = True,
        dependents: int = 1,
        other_deductions: int = 0,
    ) -> Deductions:
        """Alle Abzüge; abgewählte Posten zählen 0."""
        insurance = self.insurance_deductions(gross_pay)
        tax = self.income_tax(gross_pay, dependents)

        pension = insurance.national_pension if national_pension else 0
        health = insurance.health_insurance if health_insurance else 0
        care = insurance.long_term_care if health_insurance else 0
        employment = insurance.employment_insurance if employment_insurance else 0
        income = tax.income_tax if income_tax else 0
        local = tax.local_income_tax if income_tax else 0

        return Deductions(
            national_pension=pension,
            health_insurance=health,
            long_term_care=care,
            employment_insurance=employment,
            income_tax=income,
            local_income_tax=local,
            other_deductions=other_deductions,
            total=pension + health + care + employment + income + local + other_deductions,
        )

    def net_pay(self, gross_pay: int, **deduction_options) -> NetPay:
        deductions = self.total_deductions(gross_pay, **deduction_options)
        return NetPay(
            gross_pay=gross_pay,
            deductions=deductions,
            net_pay=gross_pay - deductions.total,
        )

    def severance_pay(self, average_monthly_pay: int, total_work_days: int) -> int:
        """Abfindung (퇴직금): 30 Tageslöhne pro Dienstjahr, erst ab einem Jahr."""
        if total_work_days < SEVERANCE_MIN_DAYS:
            return 0
        daily_pay = Decimal(average_monthly_pay) / Decimal(30)
        years = Decimal(total_work_days) / Decimal(365)
        return _won(daily_pay * 30 * years)

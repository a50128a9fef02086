from laborcalc.schemas.worktime import DailyHoursRecord, WeeklyAggregate
from laborcalc.schemas.payroll import Deductions, NetPay, ShiftPay, PeriodPayroll

__all__ = [
    "DailyHoursRecord", "WeeklyAggregate",
    "ShiftPay", "PeriodPayroll", "Deductions", "NetPay",
]

from pydantic import BaseModel


class ShiftPay(BaseModel):
    base_pay: int
    overtime_pay: int
    night_pay: int
    holiday_pay: int
    total: int

    model_config = {"frozen": True}


class PeriodPayroll(BaseModel):
    work_days: int
    total_hours: float
    overtime_hours: float
    night_hours: float
    holiday_hours: float
    base_pay: int
    overtime_pay: int
    night_pay: int
    holiday_pay: int
    weekly_holiday_pay: int
    total_gross: int

    model_config = {"frozen": True}


class Deductions(BaseModel):
    national_pension: int = 0
    health_insurance: int = 0
    long_term_care: int = 0
    employment_insurance: int = 0
    income_tax: int = 0
    local_income_tax: int = 0
    other_deductions: int = 0
    total: int = 0

    model_config = {"frozen": True}


class NetPay(BaseModel):
    gross_pay: int
    deductions: Deductions
    net_pay: int

    model_config = {"frozen": True}

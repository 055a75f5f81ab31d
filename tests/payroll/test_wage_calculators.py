from src.payroll_engine.payroll_engine.core.enums import WageType
from src.payroll_engine.payroll_engine.payroll.aggregation import AttendanceAggregate
from src.payroll_engine.payroll_engine.payroll.calculator.base import WageInputs
from src.payroll_engine.payroll_engine.payroll.calculator.daily_calculator import DailyWageCalculator
from src.payroll_engine.payroll_engine.payroll.calculator.factory import WageCalculatorFactory
from src.payroll_engine.payroll_engine.payroll.calculator.flat_calculator import FlatWageCalculator
from src.payroll_engine.payroll_engine.payroll.calculator.monthly_calculator import MonthlyWageCalculator


def _totals(present_days=0.0, regular_minutes=0, overtime_hours=0) -> AttendanceAggregate:
    return AttendanceAggregate(
        present_days=present_days,
        present_shifts=0,
        total_shifts=0,
        regular_minutes=regular_minutes,
        overtime_hours=overtime_hours,
    )


def test_factory_selects_by_wage_type():
    factory = WageCalculatorFactory()

    assert isinstance(factory.for_wage_type(WageType.MONTHLY), MonthlyWageCalculator)
    assert isinstance(factory.for_wage_type(WageType.DAILY), DailyWageCalculator)
    assert isinstance(factory.for_wage_type(WageType.HOURLY), FlatWageCalculator)
    assert isinstance(factory.for_wage_type(None), FlatWageCalculator)


def test_monthly_pays_per_credited_day():
    calc = MonthlyWageCalculator().calculate(
        WageInputs(salary=30000, shift_hours=9, period_days=30, attendance=_totals(present_days=27.5))
    )

    assert calc.pay_per_day == 1000
    assert calc.base_pay == 27500
    assert round(calc.hourly_rate, 2) == 111.11


def test_daily_pays_regular_minutes_at_hourly_rate():
    calc = DailyWageCalculator().calculate(
        WageInputs(salary=800, shift_hours=8, period_days=1, attendance=_totals(regular_minutes=435))
    )

    assert calc.hourly_rate == 100
    assert calc.base_pay == 725


def test_non_positive_shift_hours_give_no_hourly_rate():
    calc = DailyWageCalculator().calculate(
        WageInputs(salary=800, shift_hours=0, period_days=1, attendance=_totals(regular_minutes=480))
    )

    assert calc.hourly_rate == 0
    assert calc.base_pay == 0


def test_flat_passes_salary_through():
    calc = FlatWageCalculator().calculate(
        WageInputs(salary=12000, shift_hours=8, period_days=1, attendance=_totals(regular_minutes=60))
    )

    assert calc.base_pay == 12000
    assert calc.hourly_rate == 0

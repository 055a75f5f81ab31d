from __future__ import annotations

import calendar
import logging
from datetime import date
from typing import Iterable, List, Mapping, Optional, Sequence

from ..advances.model import ApprovedAdvance
from ..attendance.generator import AttendanceHistoryGenerator
from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import today_local
from ..common.money import round_half_up, round_to
from ..core.constants import ADVANCE_DEDUCTION_LABEL, OT_MULTIPLIER, STANDARD_DAYS_IN_MONTH
from ..core.enums import AdjustmentType, AttendanceStatus, CalculationMethod, WageType
from ..employees.model import Employee
from ..shifts.model import Shift
from .aggregation import aggregate, resolve_shift_minutes, select_window
from .calculator.base import WageInputs
from .calculator.factory import WageCalculatorFactory
from .model import CalculationStats, PayrollAdjustment, PayrollEntry
from .payment import resolve_payment_mode, resolve_readiness

logger = logging.getLogger(__name__)


def period_days(
    method: CalculationMethod,
    *,
    today: date,
    history: Sequence[AttendanceRecord] = (),
) -> int:
    """Number of days a monthly salary is spread over."""
    if method == CalculationMethod.CALENDAR_MONTH:
        return calendar.monthrange(today.year, today.month)[1]
    if method == CalculationMethod.EXCLUDE_WEEKLY_OFFS:
        working = sum(1 for r in history if r.status != AttendanceStatus.WEEK_OFF)
        return max(1, working)
    return STANDARD_DAYS_IN_MONTH


class PayrollDraftBuilder:
    """Turns employees, their shifts and open advances into payroll entries.

    Pure over its inputs: nothing is read from or written to storage here, and
    each employee is computed independently of the others.
    """

    def __init__(
        self,
        *,
        generator: AttendanceHistoryGenerator | None = None,
        calculators: WageCalculatorFactory | None = None,
        calculation_method: CalculationMethod = CalculationMethod.FIXED_30_DAYS,
    ):
        self._generator = generator or AttendanceHistoryGenerator()
        self._calculators = calculators or WageCalculatorFactory()
        self._method = CalculationMethod(calculation_method)

    def build(
        self,
        employees: Iterable[Employee],
        shift_lookup: Mapping[str, Shift],
        open_advances_by_employee: Mapping[str, Sequence[ApprovedAdvance]],
        *,
        today: Optional[date] = None,
    ) -> List[PayrollEntry]:
        today = today or today_local()
        entries = []
        for emp in employees:
            shift = shift_lookup.get(emp.shift_id) if emp.shift_id else None
            advances = open_advances_by_employee.get(emp.employee_id, ())
            entries.append(self.build_entry(emp, shift, advances, today=today))
        return entries

    def build_entry(
        self,
        employee: Employee,
        shift: Optional[Shift],
        advances: Sequence[ApprovedAdvance],
        *,
        today: date,
    ) -> PayrollEntry:
        shift_minutes = resolve_shift_minutes(shift)
        shift_hours = round_to(shift_minutes / 60, 2)

        history = self._generator.generate(employee, shift, today=today)
        window = select_window(history, employee.wage_type)
        totals = aggregate(window, shift_minutes)

        is_daily = employee.wage_type in (WageType.DAILY, WageType.HOURLY)
        days = 1 if is_daily else period_days(self._method, today=today, history=history)

        salary = float(employee.salary_amount or 0)
        calc = self._calculators.for_wage_type(employee.wage_type).calculate(
            WageInputs(salary=salary, shift_hours=shift_hours, period_days=days, attendance=totals)
        )

        overtime_pay = round_half_up(totals.overtime_hours * calc.hourly_rate * OT_MULTIPLIER)

        adjustments: list[PayrollAdjustment] = []
        if overtime_pay > 0:
            adjustments.append(
                PayrollAdjustment(
                    adjustment_id="auto-overtime",
                    type=AdjustmentType.ADDITION,
                    label=f"Overtime ({totals.overtime_hours} hrs)",
                    amount=overtime_pay,
                )
            )

        open_advances = [a for a in advances if a.is_open and a.employee_id == employee.employee_id]
        pending_advance = sum(float(a.amount) for a in open_advances)
        if pending_advance > 0:
            adjustments.append(
                PayrollAdjustment(
                    adjustment_id="auto-advance-deduction",
                    type=AdjustmentType.DEDUCTION,
                    label=ADVANCE_DEDUCTION_LABEL,
                    amount=pending_advance,
                )
            )

        additions = sum(a.amount for a in adjustments if a.type == AdjustmentType.ADDITION)
        deductions = sum(a.amount for a in adjustments if a.type == AdjustmentType.DEDUCTION)
        net_pay = max(0, calc.base_pay + additions - deductions)

        has_rate = employee.wage_type in (WageType.MONTHLY, WageType.DAILY)
        stats = CalculationStats(
            total_days=days,
            shift_hours=shift_hours,
            calculation_method=self._method.value,
            working_days=totals.present_days if employee.wage_type == WageType.MONTHLY else None,
            present_shifts=totals.present_shifts,
            total_shifts=totals.total_shifts,
            pay_per_day=round_to(calc.pay_per_day, 2) if calc.pay_per_day is not None else None,
            hourly_rate=round_to(calc.hourly_rate, 2) if has_rate else None,
            total_hours_worked=round_to((totals.regular_minutes + totals.overtime_hours * 60) / 60, 1),
            regular_hours=round_to(totals.regular_minutes / 60, 1),
            overtime_hours=totals.overtime_hours,
            overtime_amount=overtime_pay,
            pending_advance=pending_advance,
        )

        entry = PayrollEntry(
            employee_id=employee.employee_id,
            employee_name=employee.full_name,
            wage_type=employee.wage_type or WageType.MONTHLY,
            base_amount=calc.base_pay,
            adjustments=tuple(adjustments),
            net_pay=net_pay,
            payment_mode=resolve_payment_mode(employee.payment_details),
            status=resolve_readiness(employee.payment_details),
            calculation_stats=stats,
            advance_ids=tuple(a.advance_id for a in open_advances),
        )
        logger.debug(
            "Payroll entry %s: base=%s net=%s mode=%s status=%s",
            employee.employee_id,
            entry.base_amount,
            entry.net_pay,
            entry.payment_mode.value,
            entry.status.value,
        )
        return entry


def build_draft(
    employees: Iterable[Employee],
    shift_lookup: Mapping[str, Shift],
    open_advances_by_employee: Mapping[str, Sequence[ApprovedAdvance]],
    *,
    today: Optional[date] = None,
    generator: AttendanceHistoryGenerator | None = None,
    calculation_method: CalculationMethod = CalculationMethod.FIXED_30_DAYS,
) -> List[PayrollEntry]:
    """One payroll entry per employee, in input order."""
    builder = PayrollDraftBuilder(generator=generator, calculation_method=calculation_method)
    return builder.build(employees, shift_lookup, open_advances_by_employee, today=today)

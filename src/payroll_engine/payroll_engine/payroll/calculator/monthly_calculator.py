from __future__ import annotations

from ...common.money import round_half_up
from .base import WageCalculation, WageCalculator, WageInputs


class MonthlyWageCalculator(WageCalculator):
    """Salary / period days, paid per credited present day."""

    def calculate(self, inputs: WageInputs) -> WageCalculation:
        per_day = inputs.salary / max(1, inputs.period_days)
        return WageCalculation(
            base_pay=round_half_up(per_day * inputs.attendance.present_days),
            hourly_rate=self.hourly_from(per_day, inputs.shift_hours),
            pay_per_day=per_day,
        )

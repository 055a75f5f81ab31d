from __future__ import annotations

from ...common.money import round_half_up
from .base import WageCalculation, WageCalculator, WageInputs


class DailyWageCalculator(WageCalculator):
    """Day rate converted to an hourly rate and paid on regular minutes only."""

    def calculate(self, inputs: WageInputs) -> WageCalculation:
        hourly = self.hourly_from(inputs.salary, inputs.shift_hours)
        return WageCalculation(
            base_pay=round_half_up(inputs.attendance.regular_minutes / 60 * hourly),
            hourly_rate=hourly,
            pay_per_day=inputs.salary,
        )

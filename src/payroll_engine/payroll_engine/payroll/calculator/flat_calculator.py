from __future__ import annotations

from .base import WageCalculation, WageCalculator, WageInputs


class FlatWageCalculator(WageCalculator):
    """Hourly or unspecified wage type: the salary amount is passed through as is."""

    def calculate(self, inputs: WageInputs) -> WageCalculation:
        return WageCalculation(base_pay=inputs.salary, hourly_rate=0.0)

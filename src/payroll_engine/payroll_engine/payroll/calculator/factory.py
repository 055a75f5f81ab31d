from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...core.enums import WageType
from .base import WageCalculator
from .daily_calculator import DailyWageCalculator
from .flat_calculator import FlatWageCalculator
from .monthly_calculator import MonthlyWageCalculator


@dataclass
class WageCalculatorFactory:
    """Factory Pattern: pick the wage formula for an employee's wage type."""

    def for_wage_type(self, wage_type: Optional[WageType]) -> WageCalculator:
        if wage_type == WageType.MONTHLY:
            return MonthlyWageCalculator()
        if wage_type == WageType.DAILY:
            return DailyWageCalculator()
        return FlatWageCalculator()

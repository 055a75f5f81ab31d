from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..aggregation import AttendanceAggregate


@dataclass(frozen=True)
class WageInputs:
    salary: float
    shift_hours: float
    period_days: int
    attendance: AttendanceAggregate


@dataclass(frozen=True)
class WageCalculation:
    base_pay: float
    hourly_rate: float
    pay_per_day: Optional[float] = None


class WageCalculator(ABC):
    """Calculator interface (Strategy Pattern for wage types)."""

    @abstractmethod
    def calculate(self, inputs: WageInputs) -> WageCalculation:
        raise NotImplementedError

    @staticmethod
    def hourly_from(amount: float, shift_hours: float) -> float:
        if shift_hours <= 0:
            return 0.0
        return amount / shift_hours

from __future__ import annotations

from dataclasses import dataclass

from .seed import scenario_bucket
from .strategies.base import VarianceStrategy
from .strategies.normal_strategy import NormalDayVariance
from .strategies.overtime_strategy import LargeOvertimeVariance, SmallOvertimeVariance
from .strategies.undertime_strategy import UndertimeVariance


@dataclass
class VarianceStrategyFactory:
    """Factory Pattern: choose the punch variance pattern from the day's seed."""

    def for_seed(self, seed_value: int) -> VarianceStrategy:
        bucket = scenario_bucket(seed_value)
        if bucket < 4:
            return NormalDayVariance()
        if bucket < 7:
            return UndertimeVariance()
        if bucket < 8:
            return SmallOvertimeVariance()
        return LargeOvertimeVariance()

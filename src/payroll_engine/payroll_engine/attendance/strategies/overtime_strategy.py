from __future__ import annotations

from .base import PunchVariance, VarianceStrategy


class SmallOvertimeVariance(VarianceStrategy):
    """Stays back 45 minutes: overtime below the paid threshold."""

    def variance(self, seed_value: int) -> PunchVariance:
        return PunchVariance(out_minutes=45)


class LargeOvertimeVariance(VarianceStrategy):
    """Stays back 90 minutes."""

    def variance(self, seed_value: int) -> PunchVariance:
        return PunchVariance(out_minutes=90)

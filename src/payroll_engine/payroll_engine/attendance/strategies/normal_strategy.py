from __future__ import annotations

from .base import PunchVariance, VarianceStrategy


class NormalDayVariance(VarianceStrategy):
    """Punches a few minutes either side of the shift, inside the grace buffer."""

    def variance(self, seed_value: int) -> PunchVariance:
        return PunchVariance(in_minutes=(seed_value % 15) - 5, out_minutes=(seed_value % 10) - 5)

from __future__ import annotations

from .base import PunchVariance, VarianceStrategy

UNDERTIME_MINUTES = 45


class UndertimeVariance(VarianceStrategy):
    """Late arrival on even seeds, early departure on odd ones."""

    def variance(self, seed_value: int) -> PunchVariance:
        if seed_value % 2 == 0:
            return PunchVariance(in_minutes=UNDERTIME_MINUTES)
        return PunchVariance(out_minutes=-UNDERTIME_MINUTES)

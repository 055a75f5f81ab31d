from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class PunchVariance:
    """Minute offsets applied to the nominal shift start and end."""

    in_minutes: int = 0
    out_minutes: int = 0


class VarianceStrategy(ABC):
    """Strategy Pattern: encapsulate how a present day deviates from its shift."""

    @abstractmethod
    def variance(self, seed_value: int) -> PunchVariance:
        raise NotImplementedError

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Protocol, Sequence

from .model import ApprovedAdvance


class AdvanceRepository(Protocol):
    def list_open(self) -> Sequence[ApprovedAdvance]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[ApprovedAdvance]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: str,
        amount: float,
        approved_on: date,
        reason: Optional[str] = None,
    ) -> ApprovedAdvance:
        raise NotImplementedError

    def mark_deducted(self, advance_ids: Iterable[str]) -> int:
        """Flip still-open advances to deducted; returns how many rows changed."""

        raise NotImplementedError

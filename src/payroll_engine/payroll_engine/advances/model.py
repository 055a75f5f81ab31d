from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AdvanceStatus


@dataclass(frozen=True)
class ApprovedAdvance:
    """Domain entity: a salary advance awaiting recovery from a future payroll."""

    advance_id: str
    employee_id: str
    amount: float
    approved_on: date
    status: AdvanceStatus = AdvanceStatus.OPEN
    reason: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.status == AdvanceStatus.OPEN

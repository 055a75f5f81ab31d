from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List, Optional

from ..common.datetime_utils import today_local
from ..common.validators import require_non_empty, require_positive_amount
from .model import ApprovedAdvance
from .repository import AdvanceRepository

logger = logging.getLogger(__name__)


class AdvanceService:
    """Advance ledger: approves advances, serves the open ones, settles them.

    Recovery is once per advance. `settle` marks the advances deducted by a
    finalized draft, so a later draft will not deduct them again.
    """

    def __init__(self, advances: AdvanceRepository):
        self._advances = advances

    def approve(
        self,
        *,
        employee_id: str,
        amount,
        reason: str = "",
        today: Optional[date] = None,
    ) -> ApprovedAdvance:
        employee_id = require_non_empty(employee_id, "Employee")
        value = require_positive_amount(amount, "Advance amount")
        advance = self._advances.create(
            employee_id=employee_id,
            amount=value,
            approved_on=today or today_local(),
            reason=(reason or "").strip() or None,
        )
        logger.info("Approved advance %s of %s for employee %s", advance.advance_id, value, employee_id)
        return advance

    def open_advances_by_employee(self) -> Dict[str, List[ApprovedAdvance]]:
        grouped: Dict[str, List[ApprovedAdvance]] = defaultdict(list)
        for a in self._advances.list_open():
            if a.is_open:
                grouped[a.employee_id].append(a)
        return dict(grouped)

    def pending_total(self, employee_id: str) -> float:
        return sum(float(a.amount) for a in self._advances.list_for_employee(employee_id) if a.is_open)

    def settle(self, entries: Iterable) -> int:
        """Mark every advance deducted in `entries` (payroll entries) as deducted."""
        ids = [advance_id for e in entries for advance_id in e.advance_ids]
        if not ids:
            return 0
        changed = self._advances.mark_deducted(ids)
        logger.info("Settled %d of %d advances", changed, len(ids))
        return changed

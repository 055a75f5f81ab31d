from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from ..advances.service import AdvanceService
from ..common.datetime_utils import today_local
from ..core.exceptions import DataAccessError
from ..employees.repository import EmployeeRepository
from ..shifts.repository import ShiftRepository
from .draft import PayrollDraftBuilder
from .model import PayrollEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DraftSummary:
    entries: List[PayrollEntry]
    total_net_pay: float
    ready_count: int
    missing_details_count: int


class PayrollDraftService:
    """Fetches everything a draft needs, then hands it to the pure builder.

    A data-access failure while fetching aborts the whole draft; no partial list
    of entries is ever returned.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        shifts: ShiftRepository,
        advances: AdvanceService,
        *,
        builder: Optional[PayrollDraftBuilder] = None,
    ):
        self._employees = employees
        self._shifts = shifts
        self._advances = advances
        self._builder = builder or PayrollDraftBuilder()

    def build_draft(self, *, today: Optional[date] = None) -> List[PayrollEntry]:
        today = today or today_local()
        try:
            employees = list(self._employees.list_all())
            shift_lookup = {s.shift_id: s for s in self._shifts.list_all()}
            open_advances = self._advances.open_advances_by_employee()
        except DataAccessError:
            logger.exception("Payroll draft aborted: could not load employees, shifts or advances")
            raise

        entries = self._builder.build(employees, shift_lookup, open_advances, today=today)
        logger.info(
            "Built payroll draft for %s: %d entries, %d missing payment details",
            today.isoformat(),
            len(entries),
            sum(1 for e in entries if not e.is_payable),
        )
        return entries

    def summarize(self, *, today: Optional[date] = None) -> DraftSummary:
        entries = self.build_draft(today=today)
        ready = [e for e in entries if e.is_payable]
        return DraftSummary(
            entries=entries,
            total_net_pay=sum(e.net_pay for e in ready),
            ready_count=len(ready),
            missing_details_count=len(entries) - len(ready),
        )

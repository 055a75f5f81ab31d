from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from ..core.enums import WageType


@dataclass(frozen=True)
class PaymentDetails:
    """Payout destination captured for an employee.

    `payment_mode` is the explicit preference (NEFT, IMPS, Cash or UPI), if any.
    """

    upi_id: Optional[str] = None
    account_holder_name: Optional[str] = None
    ifsc: Optional[str] = None
    account_number: Optional[str] = None
    payment_mode: Optional[str] = None

    @property
    def prefers_cash(self) -> bool:
        return (self.payment_mode or "").strip().lower() == "cash"


@dataclass(frozen=True)
class Employee:
    """Domain entity: a staff member as seen by the payroll engine.

    Note: Plain data object, no storage access.
    """

    employee_id: str
    full_name: str
    wage_type: Optional[WageType] = None
    salary_amount: Optional[float] = None
    weekly_offs: FrozenSet[str] = field(default_factory=frozenset)
    shift_id: Optional[str] = None
    payment_details: Optional[PaymentDetails] = None

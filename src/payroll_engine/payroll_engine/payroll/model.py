from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Optional, Tuple

from ..core.enums import AdjustmentType, EntryStatus, PaymentMode, WageType


@dataclass(frozen=True)
class PayrollAdjustment:
    adjustment_id: str
    type: AdjustmentType
    label: str
    amount: float


@dataclass(frozen=True)
class CalculationStats:
    """Every intermediate value behind an entry, for an audit trail in the UI."""

    total_days: int
    shift_hours: float
    calculation_method: str
    working_days: Optional[float] = None
    present_shifts: Optional[int] = None
    total_shifts: Optional[int] = None
    pay_per_day: Optional[float] = None
    hourly_rate: Optional[float] = None
    total_hours_worked: float = 0.0
    regular_hours: float = 0.0
    overtime_hours: int = 0
    overtime_amount: int = 0
    pending_advance: float = 0.0


@dataclass(frozen=True)
class PayrollEntry:
    """One employee's line in a payroll draft. Transient, never persisted."""

    employee_id: str
    employee_name: str
    wage_type: WageType
    base_amount: float
    adjustments: Tuple[PayrollAdjustment, ...]
    net_pay: float
    payment_mode: PaymentMode
    status: EntryStatus
    calculation_stats: CalculationStats
    advance_ids: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_payable(self) -> bool:
        return self.status == EntryStatus.READY

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "wage_type": self.wage_type.value,
            "base_amount": self.base_amount,
            "adjustments": [
                {"id": a.adjustment_id, "type": a.type.value, "label": a.label, "amount": a.amount}
                for a in self.adjustments
            ],
            "net_pay": self.net_pay,
            "payment_mode": self.payment_mode.value,
            "status": self.status.value,
            "calculation_stats": asdict(self.calculation_stats),
            "advance_ids": list(self.advance_ids),
        }

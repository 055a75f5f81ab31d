from __future__ import annotations

from typing import Optional

from ..core.enums import EntryStatus, PaymentMode
from ..employees.model import PaymentDetails


def resolve_payment_mode(details: Optional[PaymentDetails]) -> PaymentMode:
    """Explicit cash preference wins, then UPI, then bank transfer; Cash otherwise."""
    if details is None:
        return PaymentMode.CASH
    if details.prefers_cash:
        return PaymentMode.CASH
    if details.upi_id:
        return PaymentMode.UPI
    if details.account_number:
        return PaymentMode.BANK
    return PaymentMode.CASH


def resolve_readiness(details: Optional[PaymentDetails]) -> EntryStatus:
    if details and (details.prefers_cash or details.upi_id or details.account_number):
        return EntryStatus.READY
    return EntryStatus.MISSING_DETAILS

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.enums import WageType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, split_csv, to_float
from .model import Employee, PaymentDetails
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_SELECT = """
    SELECT employee_id, full_name, wage_type, salary_amount, weekly_offs, shift_id,
           upi_id, account_holder_name, ifsc, account_number, payment_mode
    FROM employees
"""


def _parse_wage_type(employee_id: str, value) -> Optional[WageType]:
    """Stored wage type, or None when unset or unknown (treated as Monthly later)."""
    if not value:
        return None
    try:
        return WageType(value)
    except ValueError:
        logger.warning("Unknown wage type %r for employee %s; treating as unset", value, employee_id)
        return None


def _row_to_employee(r: dict) -> Employee:
    employee_id = str(r["employee_id"])
    details = None
    if any(r.get(k) for k in ("upi_id", "account_holder_name", "ifsc", "account_number", "payment_mode")):
        details = PaymentDetails(
            upi_id=r.get("upi_id") or None,
            account_holder_name=r.get("account_holder_name") or None,
            ifsc=r.get("ifsc") or None,
            account_number=r.get("account_number") or None,
            payment_mode=r.get("payment_mode") or None,
        )
    return Employee(
        employee_id=employee_id,
        full_name=r["full_name"],
        wage_type=_parse_wage_type(employee_id, r.get("wage_type")),
        salary_amount=to_float(r.get("salary_amount")),
        weekly_offs=split_csv(r.get("weekly_offs")),
        shift_id=str(r["shift_id"]) if r.get("shift_id") else None,
        payment_details=details,
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY created_at, employee_id")
            return [_row_to_employee(r) for r in fetchall(cur)]

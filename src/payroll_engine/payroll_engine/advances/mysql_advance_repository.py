from __future__ import annotations

import uuid
from datetime import date
from typing import Iterable, Optional, Sequence

from ..core.enums import AdvanceStatus
from ..core.exceptions import DataAccessError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, to_float
from .model import ApprovedAdvance
from .repository import AdvanceRepository


def _row_to_advance(r: dict) -> ApprovedAdvance:
    try:
        status = AdvanceStatus(r["status"])
    except ValueError as e:
        raise DataAccessError(f"Advance {r['advance_id']} has unknown status {r['status']!r}") from e
    return ApprovedAdvance(
        advance_id=str(r["advance_id"]),
        employee_id=str(r["employee_id"]),
        amount=to_float(r["amount"]) or 0.0,
        approved_on=r["approved_on"],
        status=status,
        reason=r.get("reason"),
    )


class MySQLAdvanceRepository(AdvanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_open(self) -> Sequence[ApprovedAdvance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT advance_id, employee_id, amount, reason, approved_on, status
                FROM approved_advances
                WHERE status=%s
                ORDER BY approved_on, advance_id
                """,
                (AdvanceStatus.OPEN.value,),
            )
            return [_row_to_advance(r) for r in fetchall(cur)]

    def list_for_employee(self, employee_id: str) -> Sequence[ApprovedAdvance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT advance_id, employee_id, amount, reason, approved_on, status
                FROM approved_advances
                WHERE employee_id=%s
                ORDER BY approved_on DESC, advance_id
                """,
                (employee_id,),
            )
            return [_row_to_advance(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        employee_id: str,
        amount: float,
        approved_on: date,
        reason: Optional[str] = None,
    ) -> ApprovedAdvance:
        advance_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO approved_advances (advance_id, employee_id, amount, reason, approved_on, status)
                VALUES (%s, %s, %s, %s, %s, %s)
                """,
                (advance_id, employee_id, amount, reason, approved_on, AdvanceStatus.OPEN.value),
            )
        return ApprovedAdvance(
            advance_id=advance_id,
            employee_id=employee_id,
            amount=amount,
            approved_on=approved_on,
            status=AdvanceStatus.OPEN,
            reason=reason,
        )

    def mark_deducted(self, advance_ids: Iterable[str]) -> int:
        ids = list(dict.fromkeys(advance_ids))
        if not ids:
            return 0
        placeholders = ", ".join(["%s"] * len(ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                UPDATE approved_advances
                SET status=%s
                WHERE status=%s AND advance_id IN ({placeholders})
                """,
                (AdvanceStatus.DEDUCTED.value, AdvanceStatus.OPEN.value, *ids),
            )
            return int(cur.rowcount or 0)

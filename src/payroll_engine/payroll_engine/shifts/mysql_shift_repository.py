from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Shift
from .repository import ShiftRepository


def _row_to_shift(r: dict) -> Shift:
    return Shift(
        shift_id=str(r["shift_id"]),
        shift_name=r["shift_name"],
        start_time=r["start_time"],
        end_time=r["end_time"],
        break_minutes=int(r.get("break_minutes") or 0),
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT shift_id, shift_name, start_time, end_time, break_minutes
                FROM shifts
                ORDER BY shift_name
                """
            )
            return [_row_to_shift(r) for r in fetchall(cur)]

from __future__ import annotations

from contextlib import contextmanager
from decimal import Decimal
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import DataAccessError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (connection, cursor); commit on success, roll back on error.

    Driver errors surface as DataAccessError so callers never see mysql types.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise DataAccessError(f"Database unreachable: {e}") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        raise DataAccessError(f"Database query failed: {e}") from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def to_float(value: Any) -> Optional[float]:
    """Normalize DECIMAL / numeric string columns to float (None stays None)."""
    if value is None or value == "":
        return None
    if isinstance(value, Decimal):
        return float(value)
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def split_csv(value: Any) -> frozenset:
    """Comma-separated VARCHAR column ("Saturday,Sunday") into a set of names."""
    if not value:
        return frozenset()
    return frozenset(p.strip() for p in str(value).split(",") if p.strip())

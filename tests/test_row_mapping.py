from __future__ import annotations

from datetime import date

import pytest

from src.payroll_engine.payroll_engine.advances.mysql_advance_repository import _row_to_advance
from src.payroll_engine.payroll_engine.core.enums import AdvanceStatus, WageType
from src.payroll_engine.payroll_engine.core.exceptions import DataAccessError
from src.payroll_engine.payroll_engine.employees.mysql_employee_repository import _row_to_employee


def _employee_row(**overrides):
    row = {"employee_id": "emp-1", "full_name": "Asha Nair", "wage_type": "Monthly", "salary_amount": "30000.00"}
    row.update(overrides)
    return row


def _advance_row(**overrides):
    row = {
        "advance_id": "adv-1",
        "employee_id": "emp-1",
        "amount": "500.00",
        "reason": "Medical",
        "approved_on": date(2026, 10, 1),
        "status": "open",
    }
    row.update(overrides)
    return row


@pytest.mark.parametrize("stored", ["monthly", "MONTHLY", " Monthly "])
def test_wage_type_is_matched_case_insensitively(stored):
    assert _row_to_employee(_employee_row(wage_type=stored)).wage_type == WageType.MONTHLY


def test_unknown_wage_type_reads_as_unset():
    emp = _row_to_employee(_employee_row(wage_type="Weekly"))

    assert emp.wage_type is None
    assert emp.salary_amount == 30000.0


def test_missing_wage_type_reads_as_unset():
    assert _row_to_employee(_employee_row(wage_type=None)).wage_type is None


def test_advance_status_is_matched_case_insensitively():
    assert _row_to_advance(_advance_row(status="OPEN")).status == AdvanceStatus.OPEN
    assert _row_to_advance(_advance_row(status="Deducted")).status == AdvanceStatus.DEDUCTED


def test_unknown_advance_status_is_a_data_access_error():
    with pytest.raises(DataAccessError, match="adv-1"):
        _row_to_advance(_advance_row(status="cancelled"))

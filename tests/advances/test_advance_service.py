from __future__ import annotations

from dataclasses import replace
from datetime import date

import pytest

from src.payroll_engine.payroll_engine.advances.model import ApprovedAdvance
from src.payroll_engine.payroll_engine.advances.service import AdvanceService
from src.payroll_engine.payroll_engine.core.enums import AdvanceStatus
from src.payroll_engine.payroll_engine.core.exceptions import ValidationError

TODAY = date(2026, 10, 19)


class InMemoryAdvances:
    def __init__(self):
        self.by_id: dict[str, ApprovedAdvance] = {}
        self._next_id = 1

    def list_open(self):
        return [a for a in self.by_id.values() if a.status == AdvanceStatus.OPEN]

    def list_for_employee(self, employee_id: str):
        return [a for a in self.by_id.values() if a.employee_id == employee_id]

    def create(self, *, employee_id, amount, approved_on, reason=None):
        advance = ApprovedAdvance(
            advance_id=f"adv-{self._next_id}",
            employee_id=employee_id,
            amount=amount,
            approved_on=approved_on,
            reason=reason,
        )
        self._next_id += 1
        self.by_id[advance.advance_id] = advance
        return advance

    def mark_deducted(self, advance_ids):
        changed = 0
        for advance_id in set(advance_ids):
            a = self.by_id.get(advance_id)
            if a and a.status == AdvanceStatus.OPEN:
                self.by_id[advance_id] = replace(a, status=AdvanceStatus.DEDUCTED)
                changed += 1
        return changed


class _Entry:
    def __init__(self, *advance_ids):
        self.advance_ids = tuple(advance_ids)


def test_approve_creates_open_advance():
    repo = InMemoryAdvances()
    svc = AdvanceService(repo)

    advance = svc.approve(employee_id=" e1 ", amount="2500", reason=" Rent ", today=TODAY)

    assert advance.employee_id == "e1"
    assert advance.amount == 2500
    assert advance.reason == "Rent"
    assert advance.status == AdvanceStatus.OPEN
    assert advance.approved_on == TODAY


@pytest.mark.parametrize("amount", [0, -10, "abc", None])
def test_approve_rejects_bad_amounts(amount):
    svc = AdvanceService(InMemoryAdvances())

    with pytest.raises(ValidationError):
        svc.approve(employee_id="e1", amount=amount)


def test_approve_requires_employee():
    with pytest.raises(ValidationError):
        AdvanceService(InMemoryAdvances()).approve(employee_id="  ", amount=100)


def test_open_advances_grouped_by_employee():
    repo = InMemoryAdvances()
    svc = AdvanceService(repo)
    svc.approve(employee_id="e1", amount=100, today=TODAY)
    svc.approve(employee_id="e1", amount=200, today=TODAY)
    svc.approve(employee_id="e2", amount=300, today=TODAY)

    grouped = svc.open_advances_by_employee()

    assert sorted(grouped) == ["e1", "e2"]
    assert [a.amount for a in grouped["e1"]] == [100, 200]
    assert svc.pending_total("e1") == 300


def test_settle_deducts_each_advance_once():
    repo = InMemoryAdvances()
    svc = AdvanceService(repo)
    a1 = svc.approve(employee_id="e1", amount=100, today=TODAY)
    a2 = svc.approve(employee_id="e2", amount=300, today=TODAY)

    assert svc.settle([_Entry(a1.advance_id), _Entry()]) == 1
    assert svc.settle([_Entry(a1.advance_id)]) == 0

    assert repo.by_id[a1.advance_id].status == AdvanceStatus.DEDUCTED
    assert svc.open_advances_by_employee() == {"e2": [a2]}
    assert svc.pending_total("e1") == 0


def test_settle_without_advances_does_not_touch_repository():
    assert AdvanceService(InMemoryAdvances()).settle([_Entry(), _Entry()]) == 0

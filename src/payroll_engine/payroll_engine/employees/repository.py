from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for employees.

    Note (DIP): the payroll service depends on this interface, never on a concrete store.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

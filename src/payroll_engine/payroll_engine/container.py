from __future__ import annotations

from dataclasses import dataclass

from .advances.mysql_advance_repository import MySQLAdvanceRepository
from .advances.service import AdvanceService
from .attendance.generator import AttendanceHistoryGenerator
from .core.enums import CalculationMethod
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .payroll.draft import PayrollDraftBuilder
from .payroll.service import PayrollDraftService
from .shifts.mysql_shift_repository import MySQLShiftRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    shifts_repo: MySQLShiftRepository
    advances_repo: MySQLAdvanceRepository

    attendance_generator: AttendanceHistoryGenerator
    advance_service: AdvanceService
    payroll_draft_service: PayrollDraftService


def build_container(
    *,
    db_config: dict,
    calculation_method: str | CalculationMethod = CalculationMethod.FIXED_30_DAYS,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    shifts_repo = MySQLShiftRepository(conn)
    advances_repo = MySQLAdvanceRepository(conn)

    attendance_generator = AttendanceHistoryGenerator()
    advance_service = AdvanceService(advances_repo)
    payroll_draft_service = PayrollDraftService(
        employees_repo,
        shifts_repo,
        advance_service,
        builder=PayrollDraftBuilder(
            generator=attendance_generator,
            calculation_method=CalculationMethod(calculation_method),
        ),
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        shifts_repo=shifts_repo,
        advances_repo=advances_repo,
        attendance_generator=attendance_generator,
        advance_service=advance_service,
        payroll_draft_service=payroll_draft_service,
    )

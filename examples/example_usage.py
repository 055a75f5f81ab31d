"""Example: build a payroll draft through the service layer.

Reads employees, shifts and open advances from the configured database and
prints one line per employee.
"""

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from src.payroll_engine.payroll_engine.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        calculation_method=settings.PAYROLL_CALCULATION_METHOD,
    )
    for entry in container.payroll_draft_service.build_draft():
        print(
            f"{entry.employee_name:<20} {entry.wage_type.value:<8} base={entry.base_amount:>8} "
            f"net={entry.net_pay:>8} {entry.payment_mode.value:<5} {entry.status.value}"
        )


if __name__ == "__main__":
    main()

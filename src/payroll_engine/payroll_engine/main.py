from __future__ import annotations

import argparse
import importlib
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

from config import get_settings_module

from .container import build_container
from .core.exceptions import DataAccessError
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compute a payroll draft and print it as JSON.")
    parser.add_argument("--settle", action="store_true", help="mark the advances deducted by this draft")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    db_config = getattr(settings, "DB_CONFIG")

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if getattr(settings, "AUTO_INIT_DB", False):
        apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
        logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
    if getattr(settings, "AUTO_SEED_DB", False):
        apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")

    container = build_container(
        db_config=db_config,
        calculation_method=getattr(settings, "PAYROLL_CALCULATION_METHOD", "fixed_30_days"),
    )

    try:
        summary = container.payroll_draft_service.summarize()
    except DataAccessError as e:
        logger.error("Could not build payroll draft: %s", e)
        return 1

    print(
        json.dumps(
            {
                "entries": [e.to_dict() for e in summary.entries],
                "total_net_pay": summary.total_net_pay,
                "ready": summary.ready_count,
                "missing_details": summary.missing_details_count,
            },
            indent=2,
        )
    )

    if args.settle:
        settled = container.advance_service.settle(e for e in summary.entries if e.is_payable)
        logger.info("Marked %d advances as deducted", settled)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

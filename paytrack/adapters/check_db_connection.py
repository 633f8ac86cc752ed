"""CLI to validate the finance database connection and its tables."""

from paytrack.infrastructure.container import build_database_adapter
from paytrack.infrastructure.logging.logger import get_app_logger
from paytrack.infrastructure.schema import missing_tables


def main() -> int:
    """Run SELECT 1 and report any finance table that is missing.

    Returns:
        int: 0 when every table exists, 1 otherwise.
    """
    adapter = build_database_adapter()
    logger = get_app_logger()

    engine = adapter.get_engine()
    logger.info(f"Finance DB: {engine.url}")
    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")
    logger.info("Connection is working.")

    missing = missing_tables(adapter)
    if missing:
        logger.warning(
            f"Missing tables: {', '.join(missing)}. "
            f"Run paytrack-init-schema to create them."
        )
        return 1
    logger.info("All finance tables are present.")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

"""CLI adapter to create the finance tables in the hosted database."""

from paytrack.infrastructure.container import build_database_adapter
from paytrack.infrastructure.logging.logger import get_app_logger
from paytrack.infrastructure.schema import ensure_schema


def main() -> None:
    """Create any missing finance table."""
    logger = get_app_logger()
    executed = ensure_schema(build_database_adapter(), logger=logger)
    print(f"Ensured {executed} tables in the finance database.")


if __name__ == "__main__":  # pragma: no cover
    main()

"""Simple CLI to validate the reporting database connection.

This adapter is meant for local operations: it instantiates the concrete
database adapter from the infrastructure layer and runs a basic health
check against the reporting database.
"""

from fintree.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from fintree.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a basic connectivity check against the configured database."""
    adapter = SqlAlchemyDatabaseEngineAdapter()
    logger = get_app_logger()

    engine = adapter.get_finance_engine()
    logger.info(f"Reporting DB: {engine.url}")

    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")

    logger.info("Connection is working.")


if __name__ == "__main__":  # pragma: no cover
    main()

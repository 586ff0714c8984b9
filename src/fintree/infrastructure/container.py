"""Composition root for wiring infrastructure adapters."""

from fintree.application.ports.balance_repository import BalanceRepositoryPort
from fintree.application.ports.category_repository import (
    CategoryRepositoryPort,
)
from fintree.application.ports.database import DatabaseEnginePort
from fintree.application.use_cases import (
    GetBalanceSheetUseCase,
    GetCashFlowStatementUseCase,
    GetDashboardSummaryUseCase,
)
from fintree.infrastructure.balance_repository import (
    SqlAlchemyBalanceRepository,
)
from fintree.infrastructure.category_repository import (
    SqlAlchemyCategoryRepository,
)
from fintree.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from fintree.infrastructure.logging.logger import get_app_logger
from fintree.infrastructure.settings import ReportSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_category_repository(
    db_port: DatabaseEnginePort | None = None,
) -> CategoryRepositoryPort:
    """Return the category registry repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyCategoryRepository(resolved_db)


def build_balance_repository(
    db_port: DatabaseEnginePort | None = None,
) -> BalanceRepositoryPort:
    """Return the per-category balance repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyBalanceRepository(resolved_db)


def build_balance_sheet_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: ReportSettings | None = None,
) -> GetBalanceSheetUseCase:
    """Return a balance sheet use case wired to SQL repositories."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or ReportSettings.from_env()
    return GetBalanceSheetUseCase(
        category_repository=build_category_repository(resolved_db),
        balance_repository=build_balance_repository(resolved_db),
        logger=get_app_logger(),
        base_currency=resolved_settings.base_currency,
    )


def build_cash_flow_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: ReportSettings | None = None,
) -> GetCashFlowStatementUseCase:
    """Return a cash flow use case wired to SQL repositories."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or ReportSettings.from_env()
    return GetCashFlowStatementUseCase(
        category_repository=build_category_repository(resolved_db),
        balance_repository=build_balance_repository(resolved_db),
        logger=get_app_logger(),
        base_currency=resolved_settings.base_currency,
    )


def build_dashboard_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: ReportSettings | None = None,
) -> GetDashboardSummaryUseCase:
    """Return a dashboard summary use case wired to SQL repositories."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or ReportSettings.from_env()
    return GetDashboardSummaryUseCase(
        category_repository=build_category_repository(resolved_db),
        balance_repository=build_balance_repository(resolved_db),
        logger=get_app_logger(),
        base_currency=resolved_settings.base_currency,
    )


__all__ = [
    "build_database_adapter",
    "build_category_repository",
    "build_balance_repository",
    "build_balance_sheet_use_case",
    "build_cash_flow_use_case",
    "build_dashboard_use_case",
]

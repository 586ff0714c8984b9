"""Use case to compute the dashboard headline figures."""

from datetime import date, timedelta

from fintree.application.ports.balance_repository import BalanceRepositoryPort
from fintree.application.ports.category_repository import (
    CategoryRepositoryPort,
)
from fintree.application.use_cases.report_helpers import build_report_forests
from fintree.domain.constants import (
    ASSET,
    DEFAULT_PERIOD_DAYS,
    EXPENSE,
    INCOME,
    LIABILITY,
)
from fintree.domain.models import Currency, DashboardSummary
from fintree.domain.services import summarize_balance_sheet, summarize_cash_flow
from fintree.infrastructure.logging.logger import get_app_logger
from fintree.infrastructure.settings import ReportSettings


class GetDashboardSummaryUseCase:
    """Compute net worth and recent cash flow from the category forests."""

    def __init__(
        self,
        category_repository: CategoryRepositoryPort,
        balance_repository: BalanceRepositoryPort,
        logger=None,
        base_currency: Currency | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            category_repository: Port providing the category registry.
            balance_repository: Port providing balances and flows.
            logger: Optional logger compatible with logging.Logger-like API.
            base_currency: Optional base currency; defaults to settings.
        """
        self._category_repository = category_repository
        self._balance_repository = balance_repository
        self._logger = logger or get_app_logger()
        self._base_currency = (
            base_currency or ReportSettings.from_env().base_currency
        )

    def execute(
        self,
        as_of_date: date | None = None,
        period_days: int = DEFAULT_PERIOD_DAYS,
    ) -> DashboardSummary:
        """Return the dashboard summary.

        Args:
            as_of_date: Date of the balance snapshot; today when omitted.
            period_days: Number of days of cash flow ending at as_of_date.

        Returns:
            DashboardSummary: Net worth and cash flow figures.

        Raises:
            ValueError: If ``period_days`` is lower than one.
        """
        if period_days < 1:
            raise ValueError(f"period_days must be positive, got {period_days}")
        resolved_date = as_of_date or date.today()
        period_start = resolved_date - timedelta(days=period_days - 1)

        categories = self._category_repository.fetch_categories()
        stock_forests, stock_issues = build_report_forests(
            categories,
            self._balance_repository.fetch_stock_aggregates(resolved_date),
            (ASSET, LIABILITY),
            self._logger,
        )
        flow_forests, flow_issues = build_report_forests(
            categories,
            self._balance_repository.fetch_flow_aggregates(
                period_start,
                resolved_date,
            ),
            (INCOME, EXPENSE),
            self._logger,
        )

        balance = summarize_balance_sheet(
            stock_forests[ASSET],
            stock_forests[LIABILITY],
        )
        cash_flow = summarize_cash_flow(
            flow_forests[INCOME],
            flow_forests[EXPENSE],
        )
        has_conversion_errors = any(
            issue.kind == "missing_conversion"
            for issue in stock_issues + flow_issues
        )
        if has_conversion_errors:
            self._logger.warning(
                "Dashboard totals exclude accounts without "
                f"{self._base_currency.code} conversion"
            )
        return DashboardSummary(
            as_of_date=resolved_date,
            period_start=period_start,
            base_currency=self._base_currency,
            total_assets=balance.total_assets,
            total_liabilities=balance.total_liabilities,
            net_worth=balance.net_worth,
            period_income=cash_flow.total_income,
            period_expense=cash_flow.total_expense,
            has_conversion_errors=has_conversion_errors,
        )


__all__ = ["GetDashboardSummaryUseCase", "DashboardSummary"]

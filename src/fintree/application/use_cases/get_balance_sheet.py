"""Use case to build the balance sheet as of a date."""

from datetime import date

from fintree.application.ports.balance_repository import BalanceRepositoryPort
from fintree.application.ports.category_repository import (
    CategoryRepositoryPort,
)
from fintree.application.use_cases.report_helpers import build_report_forests
from fintree.domain.constants import ASSET, LIABILITY
from fintree.domain.models import BalanceSheet, Currency
from fintree.domain.services import summarize_balance_sheet
from fintree.infrastructure.logging.logger import get_app_logger
from fintree.infrastructure.settings import ReportSettings


class GetBalanceSheetUseCase:
    """Build asset and liability trees with net worth totals."""

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
            balance_repository: Port providing per-category balances.
            logger: Optional logger compatible with logging.Logger-like API.
            base_currency: Optional base currency; defaults to settings.
        """
        self._category_repository = category_repository
        self._balance_repository = balance_repository
        self._logger = logger or get_app_logger()
        self._base_currency = (
            base_currency or ReportSettings.from_env().base_currency
        )

    def execute(self, as_of_date: date | None = None) -> BalanceSheet:
        """Return the balance sheet.

        Args:
            as_of_date: Date of the balance snapshot; today when omitted.

        Returns:
            BalanceSheet: Sorted forests, summary and data-quality issues.
        """
        resolved_date = as_of_date or date.today()
        categories = self._category_repository.fetch_categories()
        aggregates = self._balance_repository.fetch_stock_aggregates(
            resolved_date
        )
        forests, issues = build_report_forests(
            categories,
            aggregates,
            (ASSET, LIABILITY),
            self._logger,
        )
        summary = summarize_balance_sheet(forests[ASSET], forests[LIABILITY])
        self._logger.info(
            f"Balance sheet computed for {resolved_date}: "
            f"assets={summary.total_assets}, "
            f"liabilities={summary.total_liabilities}, "
            f"net_worth={summary.net_worth}, "
            f"currency={self._base_currency.code}"
        )
        return BalanceSheet(
            as_of_date=resolved_date,
            base_currency=self._base_currency,
            assets=forests[ASSET],
            liabilities=forests[LIABILITY],
            summary=summary,
            issues=issues,
        )


__all__ = ["GetBalanceSheetUseCase", "BalanceSheet"]

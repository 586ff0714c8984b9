"""Use case to build the cash flow statement for a period."""

from datetime import date, timedelta

from fintree.application.ports.balance_repository import BalanceRepositoryPort
from fintree.application.ports.category_repository import (
    CategoryRepositoryPort,
)
from fintree.application.use_cases.report_helpers import build_report_forests
from fintree.domain.constants import DEFAULT_PERIOD_DAYS, EXPENSE, INCOME
from fintree.domain.models import CashFlowStatement, Currency
from fintree.domain.services import summarize_cash_flow
from fintree.infrastructure.logging.logger import get_app_logger
from fintree.infrastructure.settings import ReportSettings


class GetCashFlowStatementUseCase:
    """Build income and expense trees with net cash flow totals."""

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
            balance_repository: Port providing per-category flows.
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
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> CashFlowStatement:
        """Return the cash flow statement.

        Args:
            start_date: First day of the period; defaults to 30 days
                before ``end_date``.
            end_date: Last day of the period; today when omitted.

        Returns:
            CashFlowStatement: Sorted forests, summary and issues.

        Raises:
            ValueError: If ``start_date`` is after ``end_date``.
        """
        resolved_end = end_date or date.today()
        resolved_start = start_date or (
            resolved_end - timedelta(days=DEFAULT_PERIOD_DAYS - 1)
        )
        if resolved_start > resolved_end:
            raise ValueError(
                f"Start date {resolved_start} is after end date {resolved_end}"
            )

        categories = self._category_repository.fetch_categories()
        aggregates = self._balance_repository.fetch_flow_aggregates(
            resolved_start,
            resolved_end,
        )
        forests, issues = build_report_forests(
            categories,
            aggregates,
            (INCOME, EXPENSE),
            self._logger,
        )
        summary = summarize_cash_flow(forests[INCOME], forests[EXPENSE])
        self._logger.info(
            f"Cash flow computed for {resolved_start}..{resolved_end}: "
            f"income={summary.total_income}, "
            f"expense={summary.total_expense}, "
            f"currency={self._base_currency.code}"
        )
        return CashFlowStatement(
            start_date=resolved_start,
            end_date=resolved_end,
            base_currency=self._base_currency,
            income=forests[INCOME],
            expense=forests[EXPENSE],
            summary=summary,
            issues=issues,
        )


__all__ = ["GetCashFlowStatementUseCase", "CashFlowStatement"]

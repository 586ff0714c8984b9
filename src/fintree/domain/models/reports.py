"""Domain models for generated reports."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from fintree.domain.models.balances import Currency
from fintree.domain.models.tree import CategoryNode


@dataclass(frozen=True)
class DataQualityIssue:
    """Data problem found in report inputs.

    Attributes:
        kind: missing_type, dangling_parent, cross_type_parent,
            missing_conversion or unknown_category.
        message: Human readable description.
        category_id: Category concerned by the issue.
        account_id: Account concerned by the issue, when relevant.
    """

    kind: str
    message: str
    category_id: str | None = None
    account_id: str | None = None


@dataclass(frozen=True)
class BalanceSheetSummary:
    """Top-line totals of a balance sheet.

    Attributes:
        total_assets: Sum of asset roots in base currency.
        total_liabilities: Absolute sum of liability roots in base currency.
        net_worth: Assets minus liabilities.
    """

    total_assets: Decimal
    total_liabilities: Decimal
    net_worth: Decimal
    assets_by_currency: dict[str, Decimal] = field(default_factory=dict)
    liabilities_by_currency: dict[str, Decimal] = field(default_factory=dict)
    net_worth_by_currency: dict[str, Decimal] = field(default_factory=dict)


@dataclass(frozen=True)
class BalanceSheet:
    """Asset and liability forests as of a date."""

    as_of_date: date
    base_currency: Currency
    assets: list[CategoryNode]
    liabilities: list[CategoryNode]
    summary: BalanceSheetSummary
    issues: list[DataQualityIssue] = field(default_factory=list)


@dataclass(frozen=True)
class CurrencyCashFlow:
    """Income and expense totals for one native currency."""

    currency_code: str
    total_income: Decimal
    total_expense: Decimal

    @property
    def net_cash_flow(self) -> Decimal:
        """Return total_income minus total_expense."""
        return self.total_income - self.total_expense


@dataclass(frozen=True)
class CashFlowSummary:
    """Summary of cash flow totals in base currency and per currency."""

    total_income: Decimal
    total_expense: Decimal
    currency_totals: list[CurrencyCashFlow] = field(default_factory=list)

    @property
    def net_cash_flow(self) -> Decimal:
        """Return total_income minus total_expense."""
        return self.total_income - self.total_expense


@dataclass(frozen=True)
class CashFlowStatement:
    """Income and expense forests for a period."""

    start_date: date
    end_date: date
    base_currency: Currency
    income: list[CategoryNode]
    expense: list[CategoryNode]
    summary: CashFlowSummary
    issues: list[DataQualityIssue] = field(default_factory=list)


@dataclass(frozen=True)
class DashboardSummary:
    """Headline figures shown on the dashboard."""

    as_of_date: date
    period_start: date
    base_currency: Currency
    total_assets: Decimal
    total_liabilities: Decimal
    net_worth: Decimal
    period_income: Decimal
    period_expense: Decimal
    has_conversion_errors: bool = False

    @property
    def net_cash_flow(self) -> Decimal:
        """Return period_income minus period_expense."""
        return self.period_income - self.period_expense


__all__ = [
    "DataQualityIssue",
    "BalanceSheetSummary",
    "BalanceSheet",
    "CurrencyCashFlow",
    "CashFlowSummary",
    "CashFlowStatement",
    "DashboardSummary",
]

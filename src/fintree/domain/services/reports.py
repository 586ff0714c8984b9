"""Summary arithmetic over root-level report totals."""

from decimal import Decimal

from fintree.domain.models import (
    BalanceSheetSummary,
    CashFlowSummary,
    CategoryNode,
    CurrencyCashFlow,
)
from fintree.domain.services.aggregation import (
    forest_total_by_currency,
    forest_total_in_base_currency,
)


def summarize_balance_sheet(
    assets: list[CategoryNode],
    liabilities: list[CategoryNode],
) -> BalanceSheetSummary:
    """Compute net worth figures from asset and liability forests.

    Args:
        assets: Aggregated ASSET forest.
        liabilities: Aggregated LIABILITY forest.

    Returns:
        BalanceSheetSummary: Totals with liabilities as positive values.
    """
    total_assets = forest_total_in_base_currency(assets)
    total_liabilities = abs(forest_total_in_base_currency(liabilities))
    assets_by_currency = forest_total_by_currency(assets)
    liabilities_by_currency = {
        currency: abs(amount)
        for currency, amount in forest_total_by_currency(liabilities).items()
    }
    net_worth_by_currency = {
        currency: assets_by_currency.get(currency, Decimal("0"))
        - liabilities_by_currency.get(currency, Decimal("0"))
        for currency in sorted(
            set(assets_by_currency) | set(liabilities_by_currency)
        )
    }
    return BalanceSheetSummary(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=total_assets - total_liabilities,
        assets_by_currency=assets_by_currency,
        liabilities_by_currency=liabilities_by_currency,
        net_worth_by_currency=net_worth_by_currency,
    )


def summarize_cash_flow(
    income: list[CategoryNode],
    expense: list[CategoryNode],
) -> CashFlowSummary:
    """Compute income, expense and net cash flow totals.

    Args:
        income: Aggregated INCOME forest.
        expense: Aggregated EXPENSE forest.

    Returns:
        CashFlowSummary: Base currency totals and per-currency rows.
    """
    income_by_currency = forest_total_by_currency(income)
    expense_by_currency = forest_total_by_currency(expense)
    currency_totals = [
        CurrencyCashFlow(
            currency_code=currency,
            total_income=abs(income_by_currency.get(currency, Decimal("0"))),
            total_expense=abs(
                expense_by_currency.get(currency, Decimal("0"))
            ),
        )
        for currency in sorted(
            set(income_by_currency) | set(expense_by_currency)
        )
    ]
    return CashFlowSummary(
        total_income=abs(forest_total_in_base_currency(income)),
        total_expense=abs(forest_total_in_base_currency(expense)),
        currency_totals=currency_totals,
    )


__all__ = ["summarize_balance_sheet", "summarize_cash_flow"]

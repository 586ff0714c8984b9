"""Tests for report summaries and data-quality checks."""

from decimal import Decimal

import pytest

from fintree.domain.constants import ASSET, EXPENSE, INCOME, LIABILITY
from fintree.domain.errors import InvalidAggregateError
from fintree.domain.models import (
    AccountBalance,
    Category,
    CategoryAggregate,
    Currency,
)
from fintree.domain.services import (
    build_aggregated_tree,
    find_data_quality_issues,
    normalize_category_type,
    normalize_currency_code,
    summarize_balance_sheet,
    summarize_cash_flow,
    validate_category_aggregate,
)

USD = Currency("USD", "$")
EUR = Currency("EUR", "€")


def _aggregate(*rows: tuple[str, Currency, str, str | None]) -> CategoryAggregate:
    return CategoryAggregate.from_accounts(
        AccountBalance(
            account_id=account_id,
            name=account_id,
            currency=currency,
            amount=Decimal(amount),
            amount_in_base_currency=Decimal(base) if base else None,
        )
        for account_id, currency, amount, base in rows
    )


def test_summarize_balance_sheet_computes_net_worth() -> None:
    """Net worth should subtract absolute liabilities from assets."""
    categories = [
        Category(id="cash", name="Cash", type=ASSET),
        Category(id="card", name="Card", type=LIABILITY),
    ]
    aggregates = {
        "cash": _aggregate(
            ("wallet", USD, "500.00", "500.00"),
            ("euro", EUR, "100.00", "110.00"),
        ),
        "card": _aggregate(("visa", USD, "-150.00", "-150.00")),
    }
    assets = build_aggregated_tree(categories, aggregates, ASSET)
    liabilities = build_aggregated_tree(categories, aggregates, LIABILITY)

    summary = summarize_balance_sheet(assets, liabilities)

    assert summary.total_assets == Decimal("610.00")
    assert summary.total_liabilities == Decimal("150.00")
    assert summary.net_worth == Decimal("460.00")
    assert summary.liabilities_by_currency == {"USD": Decimal("150.00")}
    assert summary.net_worth_by_currency == {
        "EUR": Decimal("100.00"),
        "USD": Decimal("350.00"),
    }


def test_summarize_cash_flow_builds_currency_rows() -> None:
    """Cash flow summary should report net flow overall and per currency."""
    categories = [
        Category(id="salary", name="Salary", type=INCOME),
        Category(id="food", name="Food", type=EXPENSE),
    ]
    aggregates = {
        "salary": _aggregate(("payroll", USD, "3000.00", "3000.00")),
        "food": _aggregate(
            ("groceries", USD, "400.00", "400.00"),
            ("market", EUR, "50.00", "55.00"),
        ),
    }
    income = build_aggregated_tree(categories, aggregates, INCOME)
    expense = build_aggregated_tree(categories, aggregates, EXPENSE)

    summary = summarize_cash_flow(income, expense)

    assert summary.total_income == Decimal("3000.00")
    assert summary.total_expense == Decimal("455.00")
    assert summary.net_cash_flow == Decimal("2545.00")
    assert [row.currency_code for row in summary.currency_totals] == [
        "EUR",
        "USD",
    ]
    assert summary.currency_totals[0].net_cash_flow == Decimal("-50.00")
    assert summary.currency_totals[1].net_cash_flow == Decimal("2600.00")


def test_summaries_of_empty_forests_are_zero() -> None:
    """Empty forests should produce zero totals."""
    balance = summarize_balance_sheet([], [])
    cash_flow = summarize_cash_flow([], [])

    assert balance.net_worth == Decimal("0")
    assert balance.net_worth_by_currency == {}
    assert cash_flow.net_cash_flow == Decimal("0")
    assert cash_flow.currency_totals == []


def test_find_data_quality_issues_reports_each_kind() -> None:
    """Checker should flag untyped, orphaned and unconverted data."""
    categories = [
        Category(id="untyped", name="Untyped", type=None),
        Category(id="orphan", name="Orphan", type=ASSET, parent_id="gone"),
    ]
    aggregates = {
        "orphan": _aggregate(("yen", Currency("JPY"), "200", None)),
        "ghost": _aggregate(("lost", USD, "1.00", "1.00")),
    }

    issues = find_data_quality_issues(categories, aggregates)

    assert [(issue.kind, issue.category_id) for issue in issues] == [
        ("missing_type", "untyped"),
        ("dangling_parent", "orphan"),
        ("missing_conversion", "orphan"),
        ("unknown_category", "ghost"),
    ]
    assert issues[2].account_id == "yen"


def test_find_data_quality_issues_flags_parent_of_another_type() -> None:
    """A typed child under a parent of another type is flagged."""
    categories = [
        Category(id="loans", name="Loans", type=LIABILITY),
        Category(id="lent", name="Lent money", type=ASSET, parent_id="loans"),
        Category(id="misc", name="Misc", type=None),
        Category(id="stray", name="Stray", type=None, parent_id="loans"),
    ]

    issues = find_data_quality_issues(categories, {})

    assert [(issue.kind, issue.category_id) for issue in issues] == [
        ("cross_type_parent", "lent"),
        ("missing_type", "misc"),
        ("missing_type", "stray"),
    ]
    assert "loans" in issues[0].message


def test_find_data_quality_issues_accepts_clean_input() -> None:
    """Clean input should produce no issues."""
    categories = [Category(id="cash", name="Cash", type=ASSET)]
    aggregates = {"cash": _aggregate(("wallet", USD, "1.00", "1.00"))}

    assert find_data_quality_issues(categories, aggregates) == []


def test_validate_category_aggregate_rejects_synthetic_currency() -> None:
    """Totals for currencies without accounts break the contract."""
    aggregate = CategoryAggregate(
        accounts=[],
        total_by_currency={"USD": Decimal("0")},
    )

    with pytest.raises(InvalidAggregateError) as excinfo:
        validate_category_aggregate("cash", aggregate)

    assert excinfo.value.category_id == "cash"


def test_validate_category_aggregate_rejects_float_amounts() -> None:
    """Binary floats are not accepted as amounts."""
    aggregate = CategoryAggregate(
        accounts=[
            AccountBalance(
                account_id="wallet",
                name="Wallet",
                currency=USD,
                amount=0.1,
            )
        ]
    )

    with pytest.raises(InvalidAggregateError):
        validate_category_aggregate("cash", aggregate)


def test_validate_category_aggregate_accepts_provider_output() -> None:
    """Aggregates built from accounts satisfy the contract."""
    validate_category_aggregate(
        "cash",
        _aggregate(("wallet", USD, "1.00", None)),
    )


def test_normalization_helpers() -> None:
    """Normalization should clean codes and reject unknown types."""
    assert normalize_currency_code(" usd ") == "USD"
    assert normalize_currency_code("  ") is None
    assert normalize_currency_code(None) is None
    assert normalize_category_type("asset") == "ASSET"
    assert normalize_category_type("equity") is None
    assert normalize_category_type(None) is None

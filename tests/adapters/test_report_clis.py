"""Tests for the report CLI adapters."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from fintree.adapters import balance_sheet_cli, cash_flow_cli, dashboard_cli
from fintree.domain.errors import InvalidAggregateError
from fintree.domain.models import (
    BalanceSheet,
    BalanceSheetSummary,
    CashFlowStatement,
    CashFlowSummary,
    CategoryNode,
    Currency,
    CurrencyCashFlow,
    DashboardSummary,
    DataQualityIssue,
)
from fintree.infrastructure import settings as settings_module

USD = Currency("USD", "$")


def _node(node_id: str, name: str, category_type: str, base: str):
    return CategoryNode(
        id=node_id,
        name=name,
        type=category_type,
        parent_id=None,
        order=0,
        total_by_currency={"USD": Decimal(base)},
        total_in_base_currency=Decimal(base),
    )


class _FakeUseCase:
    def __init__(self, result=None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[dict] = []

    def execute(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fake_logger(monkeypatch) -> MagicMock:
    logger = MagicMock()
    for module in (balance_sheet_cli, cash_flow_cli, dashboard_cli):
        monkeypatch.setattr(module, "get_app_logger", lambda: logger)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    return logger


def test_balance_sheet_cli_prints_tree(monkeypatch, capsys, fake_logger):
    report = BalanceSheet(
        as_of_date=date(2024, 3, 31),
        base_currency=USD,
        assets=[_node("bank", "Bank", "ASSET", "1200")],
        liabilities=[_node("card", "Card", "LIABILITY", "-300")],
        summary=BalanceSheetSummary(
            total_assets=Decimal("1200"),
            total_liabilities=Decimal("300"),
            net_worth=Decimal("900"),
        ),
        issues=[DataQualityIssue(kind="missing_type", message="x")],
    )
    use_case = _FakeUseCase(result=report)
    monkeypatch.setenv("REPORT_AS_OF_DATE", "2024-03-31")
    monkeypatch.setattr(
        balance_sheet_cli,
        "build_balance_sheet_use_case",
        lambda: use_case,
    )

    balance_sheet_cli.main()

    out = capsys.readouterr().out
    assert use_case.calls == [{"as_of_date": date(2024, 3, 31)}]
    assert "Balance sheet as of 2024-03-31" in out
    assert "  Bank: 1,200.00 USD" in out
    assert "  Card: -300.00 USD" in out
    assert "net worth: 900.00 USD" in out
    assert "1 data quality issue(s)" in out


def test_balance_sheet_cli_logs_runtime_errors(monkeypatch, capsys, fake_logger):
    monkeypatch.delenv("REPORT_AS_OF_DATE", raising=False)
    monkeypatch.setattr(
        balance_sheet_cli,
        "build_balance_sheet_use_case",
        lambda: _FakeUseCase(error=RuntimeError("Missing environment variable")),
    )

    balance_sheet_cli.main()

    assert capsys.readouterr().out == ""
    fake_logger.error.assert_called_once_with("Missing environment variable")


@pytest.mark.parametrize(
    ("module", "builder_name"),
    [
        (balance_sheet_cli, "build_balance_sheet_use_case"),
        (dashboard_cli, "build_dashboard_use_case"),
    ],
)
def test_stock_clis_log_invalid_aggregates(
    monkeypatch,
    capsys,
    fake_logger,
    module,
    builder_name,
):
    error = InvalidAggregateError("bank", "total for EUR has no matching account")
    monkeypatch.delenv("REPORT_AS_OF_DATE", raising=False)
    monkeypatch.delenv("DASHBOARD_PERIOD_DAYS", raising=False)
    monkeypatch.setattr(
        module,
        builder_name,
        lambda **_kwargs: _FakeUseCase(error=error),
    )

    module.main()

    assert capsys.readouterr().out == ""
    fake_logger.error.assert_called_once_with(str(error))


def test_cash_flow_cli_prints_currency_rows(monkeypatch, capsys, fake_logger):
    report = CashFlowStatement(
        start_date=date(2024, 3, 1),
        end_date=date(2024, 3, 31),
        base_currency=USD,
        income=[_node("salary", "Salary", "INCOME", "4000")],
        expense=[_node("rent", "Rent", "EXPENSE", "1500")],
        summary=CashFlowSummary(
            total_income=Decimal("4000"),
            total_expense=Decimal("1500"),
            currency_totals=[
                CurrencyCashFlow(
                    currency_code="USD",
                    total_income=Decimal("4000"),
                    total_expense=Decimal("1500"),
                )
            ],
        ),
    )
    use_case = _FakeUseCase(result=report)
    monkeypatch.setenv("REPORT_START_DATE", "2024-03-01")
    monkeypatch.setenv("REPORT_END_DATE", "2024-03-31")
    monkeypatch.setattr(
        cash_flow_cli,
        "build_cash_flow_use_case",
        lambda: use_case,
    )

    cash_flow_cli.main()

    out = capsys.readouterr().out
    assert use_case.calls == [
        {"start_date": date(2024, 3, 1), "end_date": date(2024, 3, 31)}
    ]
    assert "Cash flow from 2024-03-01 to 2024-03-31" in out
    assert "USD: in=4,000.00, out=1,500.00, net=2,500.00" in out
    assert "net: 2,500.00 USD" in out
    assert "data quality" not in out


def test_cash_flow_cli_logs_invalid_period(monkeypatch, capsys, fake_logger):
    monkeypatch.setenv("REPORT_START_DATE", "2024-04-01")
    monkeypatch.setenv("REPORT_END_DATE", "2024-03-01")
    monkeypatch.setattr(
        cash_flow_cli,
        "build_cash_flow_use_case",
        lambda: _FakeUseCase(error=ValueError("start after end")),
    )

    cash_flow_cli.main()

    assert capsys.readouterr().out == ""
    fake_logger.error.assert_called_once_with("start after end")


def test_dashboard_cli_uses_configured_period(monkeypatch, capsys, fake_logger):
    summary = DashboardSummary(
        as_of_date=date(2024, 3, 31),
        period_start=date(2024, 3, 25),
        base_currency=USD,
        total_assets=Decimal("1220"),
        total_liabilities=Decimal("300"),
        net_worth=Decimal("920"),
        period_income=Decimal("4000"),
        period_expense=Decimal("1500"),
        has_conversion_errors=True,
    )
    use_case = _FakeUseCase(result=summary)
    captured_settings = []

    def fake_builder(settings=None):
        captured_settings.append(settings)
        return use_case

    monkeypatch.setenv("REPORT_AS_OF_DATE", "2024-03-31")
    monkeypatch.setenv("DASHBOARD_PERIOD_DAYS", "7")
    monkeypatch.delenv("BASE_CURRENCY", raising=False)
    monkeypatch.delenv("BASE_CURRENCY_SYMBOL", raising=False)
    monkeypatch.setattr(dashboard_cli, "build_dashboard_use_case", fake_builder)

    dashboard_cli.main()

    out = capsys.readouterr().out
    assert captured_settings[0].period_days == 7
    assert use_case.calls == [
        {"as_of_date": date(2024, 3, 31), "period_days": 7}
    ]
    assert "Net worth: 920.00 USD" in out
    assert "Cash flow since 2024-03-25" in out
    assert "net=2,500.00 USD" in out
    assert "missing a base currency conversion" in out

"""Application use cases package."""

from .get_balance_sheet import BalanceSheet, GetBalanceSheetUseCase
from .get_cash_flow_statement import (
    CashFlowStatement,
    GetCashFlowStatementUseCase,
)
from .get_dashboard_summary import (
    DashboardSummary,
    GetDashboardSummaryUseCase,
)

__all__ = [
    "GetBalanceSheetUseCase",
    "BalanceSheet",
    "GetCashFlowStatementUseCase",
    "CashFlowStatement",
    "GetDashboardSummaryUseCase",
    "DashboardSummary",
]

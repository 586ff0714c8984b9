"""Domain models package."""

from .balances import AccountBalance, CategoryAggregate, Currency
from .categories import Category
from .reports import (
    BalanceSheet,
    BalanceSheetSummary,
    CashFlowStatement,
    CashFlowSummary,
    CurrencyCashFlow,
    DashboardSummary,
    DataQualityIssue,
)
from .tree import CategoryNode, CategoryTree

__all__ = [
    "AccountBalance",
    "CategoryAggregate",
    "Currency",
    "Category",
    "CategoryNode",
    "CategoryTree",
    "BalanceSheet",
    "BalanceSheetSummary",
    "CashFlowStatement",
    "CashFlowSummary",
    "CurrencyCashFlow",
    "DashboardSummary",
    "DataQualityIssue",
]

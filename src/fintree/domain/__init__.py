"""Domain package for business rules and core models."""

from .constants import (
    ASSET,
    CATEGORY_TYPES,
    EXPENSE,
    FLOW_CATEGORY_TYPES,
    INCOME,
    LIABILITY,
    STOCK_CATEGORY_TYPES,
)
from .errors import CategoryCycleError, InvalidAggregateError
from .models import (
    AccountBalance,
    Category,
    CategoryAggregate,
    CategoryNode,
    Currency,
)
from .services import build_aggregated_forests, build_aggregated_tree

__all__ = [
    "ASSET",
    "LIABILITY",
    "INCOME",
    "EXPENSE",
    "CATEGORY_TYPES",
    "STOCK_CATEGORY_TYPES",
    "FLOW_CATEGORY_TYPES",
    "CategoryCycleError",
    "InvalidAggregateError",
    "AccountBalance",
    "Category",
    "CategoryAggregate",
    "CategoryNode",
    "Currency",
    "build_aggregated_forests",
    "build_aggregated_tree",
]

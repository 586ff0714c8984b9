"""Domain services package."""

from .aggregation import (
    attach_aggregates,
    forest_total_by_currency,
    forest_total_in_base_currency,
    rollup_tree,
)
from .engine import build_aggregated_forests, build_aggregated_tree
from .normalization import normalize_category_type, normalize_currency_code
from .reports import summarize_balance_sheet, summarize_cash_flow
from .sorting import sort_category_tree
from .tree_builder import build_category_tree
from .validation import find_data_quality_issues, validate_category_aggregate

__all__ = [
    "attach_aggregates",
    "build_aggregated_forests",
    "build_aggregated_tree",
    "build_category_tree",
    "find_data_quality_issues",
    "forest_total_by_currency",
    "forest_total_in_base_currency",
    "normalize_category_type",
    "normalize_currency_code",
    "rollup_tree",
    "sort_category_tree",
    "summarize_balance_sheet",
    "summarize_cash_flow",
    "validate_category_aggregate",
]

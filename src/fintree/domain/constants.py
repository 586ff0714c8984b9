"""Domain constants for category aggregation."""

ASSET = "ASSET"
LIABILITY = "LIABILITY"
INCOME = "INCOME"
EXPENSE = "EXPENSE"

STOCK_CATEGORY_TYPES = (ASSET, LIABILITY)

FLOW_CATEGORY_TYPES = (INCOME, EXPENSE)

CATEGORY_TYPES = STOCK_CATEGORY_TYPES + FLOW_CATEGORY_TYPES

DEFAULT_PERIOD_DAYS = 30


__all__ = [
    "ASSET",
    "LIABILITY",
    "INCOME",
    "EXPENSE",
    "STOCK_CATEGORY_TYPES",
    "FLOW_CATEGORY_TYPES",
    "CATEGORY_TYPES",
    "DEFAULT_PERIOD_DAYS",
]

"""Port for reading per-category account aggregates."""

from datetime import date
from typing import Protocol

from fintree.domain.models import CategoryAggregate


class BalanceRepositoryPort(Protocol):
    """Port exposing own-account aggregates with base amounts resolved."""

    def fetch_stock_aggregates(
        self,
        as_of_date: date,
    ) -> dict[str, CategoryAggregate]:
        """Return balances as of a date, indexed by category id."""

    def fetch_flow_aggregates(
        self,
        start_date: date,
        end_date: date,
    ) -> dict[str, CategoryAggregate]:
        """Return period totals between two dates, indexed by category id."""


__all__ = ["BalanceRepositoryPort"]

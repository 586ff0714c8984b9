"""SQLAlchemy-backed repository for per-category account aggregates."""

from collections.abc import Iterable
from datetime import date

from sqlalchemy import Date, bindparam, text

from fintree.application.ports.balance_repository import BalanceRepositoryPort
from fintree.application.ports.database import DatabaseEnginePort
from fintree.domain.models import AccountBalance, CategoryAggregate, Currency
from fintree.domain.services.normalization import normalize_currency_code
from fintree.utils.decimal_utils import coerce_decimal, coerce_optional_decimal


class SqlAlchemyBalanceRepository(BalanceRepositoryPort):
    """Repository reading precomputed balances and flows.

    Base currency amounts are read as stored; this repository never
    converts currencies.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the reporting engine.
        """
        self._db_port = db_port

    def fetch_stock_aggregates(
        self,
        as_of_date: date,
    ) -> dict[str, CategoryAggregate]:
        """Return each account's latest balance on or before ``as_of_date``.

        Snapshots sharing the latest date yield a single row per account.
        """
        query = text(
            """
            SELECT account_id,
                   account_name,
                   category_id,
                   currency_code,
                   currency_symbol,
                   amount,
                   amount_in_base_currency
            FROM (
                SELECT b.*,
                       ROW_NUMBER() OVER (
                           PARTITION BY b.account_id
                           ORDER BY b.as_of_date DESC, b.amount DESC
                       ) AS snapshot_rank
                FROM account_balances b
                WHERE b.as_of_date <= :as_of_date
            ) latest
            WHERE latest.snapshot_rank = 1
              AND latest.category_id IS NOT NULL
            """
        ).bindparams(bindparam("as_of_date", type_=Date))
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, {"as_of_date": as_of_date}).all()
        return self._group_by_category(rows)

    def fetch_flow_aggregates(
        self,
        start_date: date,
        end_date: date,
    ) -> dict[str, CategoryAggregate]:
        query = text(
            """
            SELECT account_id,
                   MAX(account_name) AS account_name,
                   category_id,
                   currency_code,
                   MAX(currency_symbol) AS currency_symbol,
                   SUM(amount) AS amount,
                   CASE
                       WHEN COUNT(amount_in_base_currency) = COUNT(*)
                           THEN SUM(amount_in_base_currency)
                       ELSE NULL
                   END AS amount_in_base_currency
            FROM account_flows
            WHERE category_id IS NOT NULL
              AND flow_date >= :start_date
              AND flow_date <= :end_date
            GROUP BY account_id, category_id, currency_code
            """
        ).bindparams(
            bindparam("start_date", type_=Date),
            bindparam("end_date", type_=Date),
        )
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                query,
                {"start_date": start_date, "end_date": end_date},
            ).all()
        return self._group_by_category(rows)

    @staticmethod
    def _group_by_category(rows: Iterable) -> dict[str, CategoryAggregate]:
        accounts_by_category: dict[str, list[AccountBalance]] = {}
        for row in rows:
            code = normalize_currency_code(row.currency_code) or ""
            account = AccountBalance(
                account_id=str(row.account_id),
                name=row.account_name,
                currency=Currency(code=code, symbol=row.currency_symbol or ""),
                amount=coerce_decimal(row.amount),
                amount_in_base_currency=coerce_optional_decimal(
                    row.amount_in_base_currency
                ),
            )
            accounts_by_category.setdefault(str(row.category_id), []).append(
                account
            )
        return {
            category_id: CategoryAggregate.from_accounts(
                sorted(
                    accounts,
                    key=lambda item: (item.name.lower(), item.account_id),
                )
            )
            for category_id, accounts in sorted(accounts_by_category.items())
        }


__all__ = ["SqlAlchemyBalanceRepository"]

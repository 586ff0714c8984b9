"""Domain models for per-account balances attached to categories."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class Currency:
    """Currency descriptor used for native and base amounts."""

    code: str
    symbol: str = ""


@dataclass(frozen=True)
class AccountBalance:
    """Single account contribution to a category for one period.

    For stock reports ``amount`` is the balance as of a date; for flow
    reports it is the total over the period.

    Attributes:
        account_id: Account identifier.
        name: Account display name.
        currency: Native currency of the account.
        amount: Amount in the native currency.
        amount_in_base_currency: Same amount converted upstream into the
            report base currency, None when no conversion was available.
    """

    account_id: str
    name: str
    currency: Currency
    amount: Decimal
    amount_in_base_currency: Decimal | None = None


@dataclass(frozen=True)
class CategoryAggregate:
    """Own-account totals for a category as produced by the balance provider.

    Attributes:
        accounts: Accounts directly attached to the category.
        total_by_currency: Native sums of those accounts, keyed by code.
        total_in_base_currency: Base currency sum of those accounts, None
            when the provider did not supply it.
    """

    accounts: list[AccountBalance] = field(default_factory=list)
    total_by_currency: dict[str, Decimal] = field(default_factory=dict)
    total_in_base_currency: Decimal | None = None

    @classmethod
    def from_accounts(
        cls,
        accounts: Iterable[AccountBalance],
    ) -> "CategoryAggregate":
        """Build an aggregate whose totals are the sums of ``accounts``.

        Args:
            accounts: Accounts directly attached to a category.

        Returns:
            CategoryAggregate: Aggregate with native and base sums.
        """
        items = list(accounts)
        return cls(
            accounts=items,
            total_by_currency=native_totals(items),
            total_in_base_currency=base_total(items),
        )


def native_totals(accounts: Iterable[AccountBalance]) -> dict[str, Decimal]:
    """Sum account amounts per native currency code."""
    totals: dict[str, Decimal] = {}
    for account in accounts:
        code = account.currency.code
        totals[code] = totals.get(code, Decimal("0")) + account.amount
    return totals


def base_total(accounts: Iterable[AccountBalance]) -> Decimal:
    """Sum base currency amounts, counting unconverted accounts as zero."""
    return sum(
        (
            account.amount_in_base_currency
            for account in accounts
            if account.amount_in_base_currency is not None
        ),
        Decimal("0"),
    )


__all__ = [
    "Currency",
    "AccountBalance",
    "CategoryAggregate",
    "native_totals",
    "base_total",
]

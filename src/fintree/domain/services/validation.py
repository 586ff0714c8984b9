"""Data-quality checks for report inputs."""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from fintree.domain.errors import InvalidAggregateError
from fintree.domain.models import Category, CategoryAggregate, DataQualityIssue


def validate_category_aggregate(
    category_id: str,
    aggregate: CategoryAggregate,
) -> None:
    """Check that an aggregate honors the balance provider contract.

    Args:
        category_id: Category the aggregate belongs to.
        aggregate: Aggregate received from the balance provider.

    Raises:
        InvalidAggregateError: If an amount is not a Decimal or a currency
            total has no account reporting that currency.
    """
    reported = set()
    for account in aggregate.accounts:
        if not isinstance(account.amount, Decimal):
            raise InvalidAggregateError(
                category_id,
                f"account {account.account_id} amount is not a Decimal",
            )
        if account.amount_in_base_currency is not None and not isinstance(
            account.amount_in_base_currency, Decimal
        ):
            raise InvalidAggregateError(
                category_id,
                f"account {account.account_id} base amount is not a Decimal",
            )
        reported.add(account.currency.code)

    for currency, amount in aggregate.total_by_currency.items():
        if currency not in reported:
            raise InvalidAggregateError(
                category_id,
                f"total for {currency} has no matching account",
            )
        if not isinstance(amount, Decimal):
            raise InvalidAggregateError(
                category_id,
                f"total for {currency} is not a Decimal",
            )


def find_data_quality_issues(
    categories: Iterable[Category],
    aggregates: Mapping[str, CategoryAggregate],
) -> list[DataQualityIssue]:
    """List problems the engine absorbs silently.

    Args:
        categories: Flat category registry.
        aggregates: Own-account aggregates indexed by category id.

    Returns:
        list[DataQualityIssue]: Issues in category, then aggregate order.
    """
    items = list(categories)
    types_by_id: dict[str, str | None] = {}
    for category in items:
        types_by_id.setdefault(category.id, category.type)
    issues: list[DataQualityIssue] = []

    for category in items:
        if category.type is None:
            issues.append(
                DataQualityIssue(
                    kind="missing_type",
                    message=f"Category '{category.name}' has no type",
                    category_id=category.id,
                )
            )
        if not category.parent_id:
            continue
        if category.parent_id not in types_by_id:
            issues.append(
                DataQualityIssue(
                    kind="dangling_parent",
                    message=(
                        f"Category '{category.name}' references missing "
                        f"parent {category.parent_id}"
                    ),
                    category_id=category.id,
                )
            )
        elif (
            category.type is not None
            and types_by_id[category.parent_id] != category.type
        ):
            issues.append(
                DataQualityIssue(
                    kind="cross_type_parent",
                    message=(
                        f"Category '{category.name}' is shown as a root: "
                        f"parent {category.parent_id} is not {category.type}"
                    ),
                    category_id=category.id,
                )
            )

    for category_id, aggregate in aggregates.items():
        if category_id not in types_by_id:
            issues.append(
                DataQualityIssue(
                    kind="unknown_category",
                    message=f"Balances reported for unknown category {category_id}",
                    category_id=category_id,
                )
            )
        for account in aggregate.accounts:
            if account.amount_in_base_currency is None:
                issues.append(
                    DataQualityIssue(
                        kind="missing_conversion",
                        message=(
                            f"Account '{account.name}' has no base currency "
                            f"amount for {account.currency.code}"
                        ),
                        category_id=category_id,
                        account_id=account.account_id,
                    )
                )
    return issues


__all__ = ["validate_category_aggregate", "find_data_quality_issues"]

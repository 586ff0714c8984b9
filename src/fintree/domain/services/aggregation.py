"""Attach provider aggregates to category nodes and roll totals up."""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from fintree.domain.errors import CategoryCycleError
from fintree.domain.models import CategoryAggregate, CategoryNode
from fintree.domain.models.balances import base_total, native_totals


def attach_aggregates(
    node_map: Mapping[str, CategoryNode],
    aggregates: Mapping[str, CategoryAggregate],
) -> None:
    """Seed nodes with the own-account data of their aggregates.

    Aggregates for ids missing from ``node_map`` are ignored. Nodes
    without an aggregate keep empty accounts and zero totals. The
    aggregates themselves are never modified.

    Args:
        node_map: Freshly built nodes indexed by category id.
        aggregates: Own-account aggregates indexed by category id.
    """
    for category_id, aggregate in aggregates.items():
        node = node_map.get(category_id)
        if node is None:
            continue
        node.accounts = list(aggregate.accounts)
        if aggregate.total_by_currency:
            node.total_by_currency = dict(aggregate.total_by_currency)
        else:
            node.total_by_currency = native_totals(aggregate.accounts)
        if aggregate.total_in_base_currency is None:
            node.total_in_base_currency = base_total(aggregate.accounts)
        else:
            node.total_in_base_currency = aggregate.total_in_base_currency


def rollup_tree(root: CategoryNode) -> set[str]:
    """Aggregate children totals into their parents, bottom-up.

    Args:
        root: Root of a freshly built and seeded tree.

    Returns:
        set[str]: Ids of every node reached from ``root``.

    Raises:
        CategoryCycleError: If a node is reached twice.
    """
    seen: set[str] = set()
    stack: list[tuple[CategoryNode, bool]] = [(root, False)]
    while stack:
        node, children_done = stack.pop()
        if children_done:
            _absorb_children(node)
            continue
        if node.id in seen:
            raise CategoryCycleError([node.id])
        seen.add(node.id)
        stack.append((node, True))
        stack.extend((child, False) for child in node.children)
    return seen


def _absorb_children(node: CategoryNode) -> None:
    seed = node.total_in_base_currency
    for child in node.children:
        for currency, amount in child.total_by_currency.items():
            node.total_by_currency[currency] = (
                node.total_by_currency.get(currency, Decimal("0")) + amount
            )
        node.total_in_base_currency += child.total_in_base_currency

    # Seed may be zero or missing while the accounts carry base amounts.
    if node.total_in_base_currency == seed and node.accounts:
        node.total_in_base_currency = base_total(node.accounts)


def forest_total_in_base_currency(roots: Iterable[CategoryNode]) -> Decimal:
    """Return the base currency total of a forest's roots."""
    return sum(
        (root.total_in_base_currency for root in roots),
        Decimal("0"),
    )


def forest_total_by_currency(
    roots: Iterable[CategoryNode],
) -> dict[str, Decimal]:
    """Return native totals per currency across a forest's roots."""
    totals: dict[str, Decimal] = {}
    for root in roots:
        for currency, amount in root.total_by_currency.items():
            totals[currency] = totals.get(currency, Decimal("0")) + amount
    return totals


__all__ = [
    "attach_aggregates",
    "rollup_tree",
    "forest_total_in_base_currency",
    "forest_total_by_currency",
]

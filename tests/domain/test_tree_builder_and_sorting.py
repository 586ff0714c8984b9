"""Tests for tree building, rollup and sorting building blocks."""

from decimal import Decimal

import pytest

from fintree.domain.constants import ASSET
from fintree.domain.errors import CategoryCycleError
from fintree.domain.models import (
    AccountBalance,
    Category,
    CategoryAggregate,
    CategoryNode,
    Currency,
)
from fintree.domain.services.aggregation import attach_aggregates, rollup_tree
from fintree.domain.services.sorting import sort_category_tree
from fintree.domain.services.tree_builder import build_category_tree


def test_build_category_tree_indexes_nodes_and_links_children() -> None:
    """Builder should index every retained node and keep input order."""
    categories = [
        Category(id="root", name="Root", type=ASSET),
        Category(id="b", name="B", type=ASSET, parent_id="root", order=2),
        Category(id="a", name="A", type=ASSET, parent_id="root", order=1),
    ]

    tree = build_category_tree(categories, ASSET)

    assert set(tree.node_map) == {"root", "b", "a"}
    assert [root.id for root in tree.roots] == ["root"]
    assert [child.id for child in tree.node_map["root"].children] == ["b", "a"]
    assert tree.node_map["a"].total_in_base_currency == Decimal("0")


def test_attach_aggregates_copies_accounts_without_sharing() -> None:
    """Attached accounts and totals should be copies of the aggregate."""
    account = AccountBalance(
        account_id="wallet",
        name="Wallet",
        currency=Currency("USD"),
        amount=Decimal("3.00"),
        amount_in_base_currency=Decimal("3.00"),
    )
    aggregate = CategoryAggregate.from_accounts([account])
    tree = build_category_tree([Category(id="cash", name="Cash", type=ASSET)], ASSET)

    attach_aggregates(tree.node_map, {"cash": aggregate, "other": aggregate})

    node = tree.node_map["cash"]
    assert node.accounts == [account]
    assert node.accounts is not aggregate.accounts
    assert node.total_by_currency is not aggregate.total_by_currency
    assert node.total_in_base_currency == Decimal("3.00")


def test_rollup_tree_rejects_nodes_reached_twice() -> None:
    """Rollup should stop instead of looping on a cyclic structure."""
    node = CategoryNode(id="loop", name="Loop", type=ASSET, parent_id="loop", order=0)
    node.children.append(node)

    with pytest.raises(CategoryCycleError):
        rollup_tree(node)


def test_rollup_tree_returns_reached_ids() -> None:
    """Rollup should report every node it aggregated."""
    tree = build_category_tree(
        [
            Category(id="root", name="Root", type=ASSET),
            Category(id="leaf", name="Leaf", type=ASSET, parent_id="root"),
        ],
        ASSET,
    )

    assert rollup_tree(tree.roots[0]) == {"root", "leaf"}


def test_sort_category_tree_handles_empty_forest() -> None:
    """Sorting an empty forest returns an empty list."""
    assert sort_category_tree([]) == []

"""Category tree nodes produced by the aggregation engine."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from decimal import Decimal

from fintree.domain.models.balances import AccountBalance
from fintree.domain.models.categories import Category


@dataclass
class CategoryNode:
    """Category with its children, own accounts and rolled-up totals.

    Nodes are created fresh for every report request and are only mutated
    while the engine builds the forest that contains them.
    """

    id: str
    name: str
    type: str
    parent_id: str | None
    order: int
    children: list["CategoryNode"] = field(default_factory=list)
    accounts: list[AccountBalance] = field(default_factory=list)
    total_by_currency: dict[str, Decimal] = field(default_factory=dict)
    total_in_base_currency: Decimal = Decimal("0")

    @classmethod
    def from_category(cls, category: Category) -> "CategoryNode":
        """Return an empty node for ``category``."""
        return cls(
            id=category.id,
            name=category.name,
            type=category.type,
            parent_id=category.parent_id,
            order=category.order,
        )

    def walk(self) -> Iterator["CategoryNode"]:
        """Yield this node and its descendants in depth-first pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


@dataclass
class CategoryTree:
    """Index of freshly built nodes together with the root list."""

    node_map: dict[str, CategoryNode]
    roots: list[CategoryNode]


__all__ = ["CategoryNode", "CategoryTree"]

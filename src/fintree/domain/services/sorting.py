"""Deterministic ordering of category trees."""

from collections.abc import Iterable
from operator import attrgetter

from fintree.domain.models import CategoryNode

_BY_ORDER = attrgetter("order")


def sort_category_tree(nodes: Iterable[CategoryNode]) -> list[CategoryNode]:
    """Sort nodes and every children list by ascending ``order``.

    The sort is stable: siblings sharing an ``order`` keep their input
    order.

    Args:
        nodes: Root nodes of a forest.

    Returns:
        list[CategoryNode]: Sorted roots; children are sorted in place.
    """
    ordered = sorted(nodes, key=_BY_ORDER)
    pending = list(ordered)
    while pending:
        node = pending.pop()
        node.children = sorted(node.children, key=_BY_ORDER)
        pending.extend(node.children)
    return ordered


__all__ = ["sort_category_tree"]

"""Aggregation engine shared by every category report."""

from collections.abc import Iterable, Mapping

from fintree.domain.errors import CategoryCycleError
from fintree.domain.models import Category, CategoryAggregate, CategoryNode
from fintree.domain.services.aggregation import attach_aggregates, rollup_tree
from fintree.domain.services.sorting import sort_category_tree
from fintree.domain.services.tree_builder import build_category_tree


def build_aggregated_tree(
    categories: Iterable[Category],
    aggregates: Mapping[str, CategoryAggregate],
    category_type: str,
) -> list[CategoryNode]:
    """Return the sorted, fully rolled-up forest for one category type.

    The function has no side effects on its inputs and returns a new
    forest on every call.

    Args:
        categories: Flat category registry, any mix of types.
        aggregates: Own-account aggregates indexed by category id.
        category_type: Partition to build (ASSET, LIABILITY, ...).

    Returns:
        list[CategoryNode]: Root nodes sorted by ``order``.

    Raises:
        CategoryCycleError: If parent links loop back on themselves.
    """
    tree = build_category_tree(categories, category_type)
    attach_aggregates(tree.node_map, aggregates)

    reached: set[str] = set()
    for root in tree.roots:
        reached |= rollup_tree(root)
    # Categories on a parent loop never hang below a root.
    unreached = set(tree.node_map) - reached
    if unreached:
        raise CategoryCycleError(unreached)

    return sort_category_tree(tree.roots)


def build_aggregated_forests(
    categories: Iterable[Category],
    aggregates: Mapping[str, CategoryAggregate],
    category_types: Iterable[str],
) -> dict[str, list[CategoryNode]]:
    """Build one independent forest per requested category type.

    Args:
        categories: Flat category registry.
        aggregates: Own-account aggregates indexed by category id.
        category_types: Partitions to build.

    Returns:
        dict[str, list[CategoryNode]]: Forest per category type.
    """
    items = list(categories)
    return {
        category_type: build_aggregated_tree(items, aggregates, category_type)
        for category_type in category_types
    }


__all__ = ["build_aggregated_tree", "build_aggregated_forests"]

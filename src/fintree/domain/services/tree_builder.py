"""Build category trees from the flat category registry."""

from collections.abc import Iterable

from fintree.domain.models import Category, CategoryNode, CategoryTree
from fintree.domain.policies import belongs_to_partition


def build_category_tree(
    categories: Iterable[Category],
    category_type: str,
) -> CategoryTree:
    """Link the categories of one type into parent/child nodes.

    Categories of other types, or without a type, are left out. A category
    whose parent is not part of the partition becomes a root instead of
    being dropped. When an id repeats, the first occurrence wins.

    Args:
        categories: Flat category list, any mix of types.
        category_type: Type of the partition to build.

    Returns:
        CategoryTree: Node index and the roots in input order.
    """
    retained: list[Category] = []
    node_map: dict[str, CategoryNode] = {}
    for category in categories:
        if not belongs_to_partition(category, category_type):
            continue
        if category.id in node_map:
            continue
        node_map[category.id] = CategoryNode.from_category(category)
        retained.append(category)

    roots: list[CategoryNode] = []
    for category in retained:
        node = node_map[category.id]
        parent = (
            node_map.get(category.parent_id)
            if category.parent_id
            else None
        )
        if parent is None:
            roots.append(node)
        else:
            parent.children.append(node)

    return CategoryTree(node_map=node_map, roots=roots)


__all__ = ["build_category_tree"]

"""Category filtering rules for type partitions."""

from fintree.domain.models import Category


def belongs_to_partition(category: Category, category_type: str) -> bool:
    """Return True when the category belongs to the requested partition.

    Args:
        category: Category from the registry.
        category_type: Partition type being built (e.g., ASSET).

    Returns:
        bool: True when the category has a type and it matches.
    """
    if category.type is None:
        return False
    return category.type == category_type


__all__ = ["belongs_to_partition"]

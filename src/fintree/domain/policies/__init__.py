"""Domain policies package."""

from .category_filters import belongs_to_partition

__all__ = ["belongs_to_partition"]

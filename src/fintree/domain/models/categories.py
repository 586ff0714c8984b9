"""Domain models for the category registry."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    """Flat category row as supplied by the category source.

    Attributes:
        id: Unique category identifier.
        name: Display label.
        type: ASSET, LIABILITY, INCOME or EXPENSE; None when unset.
        parent_id: Identifier of the parent category, None for roots.
        order: Sibling ordering key.
    """

    id: str
    name: str
    type: str | None
    parent_id: str | None = None
    order: int = 0


__all__ = ["Category"]

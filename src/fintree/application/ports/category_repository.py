"""Port for reading the category registry."""

from typing import Protocol

from fintree.domain.models import Category


class CategoryRepositoryPort(Protocol):
    """Port exposing the flat category list."""

    def fetch_categories(self) -> list[Category]:
        """Return every category, any type, in registry order."""


__all__ = ["CategoryRepositoryPort"]

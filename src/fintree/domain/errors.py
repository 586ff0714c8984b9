"""Domain errors raised by the aggregation engine."""

from collections.abc import Iterable


class CategoryCycleError(RuntimeError):
    """Raised when category parent links form a loop.

    Attributes:
        category_ids: Ids of the categories on or below the loop.
    """

    def __init__(self, category_ids: Iterable[str]) -> None:
        self.category_ids = tuple(sorted(category_ids))
        super().__init__(
            "Category hierarchy contains a cycle through: "
            + ", ".join(self.category_ids)
        )


class InvalidAggregateError(ValueError):
    """Raised when a category aggregate breaks the input contract."""

    def __init__(self, category_id: str, reason: str) -> None:
        self.category_id = category_id
        self.reason = reason
        super().__init__(f"Invalid aggregate for category {category_id}: {reason}")


__all__ = ["CategoryCycleError", "InvalidAggregateError"]

"""SQLAlchemy-backed repository for the category registry."""

from sqlalchemy import text

from fintree.application.ports.category_repository import (
    CategoryRepositoryPort,
)
from fintree.application.ports.database import DatabaseEnginePort
from fintree.domain.models import Category
from fintree.domain.services.normalization import normalize_category_type


class SqlAlchemyCategoryRepository(CategoryRepositoryPort):
    """Repository backed by SQLAlchemy for the categories table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the reporting engine.
        """
        self._db_port = db_port

    def fetch_categories(self) -> list[Category]:
        """Return every category ordered by sort order then name."""
        query = text(
            """
            SELECT id, name, type, parent_id, sort_order
            FROM categories
            ORDER BY sort_order, name, id
            """
        )
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [
            Category(
                id=str(row.id),
                name=row.name,
                type=normalize_category_type(row.type),
                parent_id=(
                    str(row.parent_id) if row.parent_id is not None else None
                ),
                order=int(row.sort_order or 0),
            )
            for row in rows
        ]


__all__ = ["SqlAlchemyCategoryRepository"]

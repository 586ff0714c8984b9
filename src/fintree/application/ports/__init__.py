"""Application ports package."""

from .balance_repository import BalanceRepositoryPort
from .category_repository import CategoryRepositoryPort
from .database import DatabaseEnginePort

__all__ = [
    "BalanceRepositoryPort",
    "CategoryRepositoryPort",
    "DatabaseEnginePort",
]

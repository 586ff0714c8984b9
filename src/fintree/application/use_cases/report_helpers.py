"""Shared helpers for report use cases."""

from collections.abc import Iterable, Mapping
from logging import Logger

from fintree.domain.models import (
    Category,
    CategoryAggregate,
    CategoryNode,
    DataQualityIssue,
)
from fintree.domain.services import (
    build_aggregated_forests,
    find_data_quality_issues,
    validate_category_aggregate,
)


def build_report_forests(
    categories: list[Category],
    aggregates: Mapping[str, CategoryAggregate],
    category_types: Iterable[str],
    logger: Logger,
) -> tuple[dict[str, list[CategoryNode]], list[DataQualityIssue]]:
    """Validate report inputs, log data issues and build the forests.

    Args:
        categories: Flat category registry.
        aggregates: Own-account aggregates indexed by category id.
        category_types: Partitions to build.
        logger: Logger used for data-quality warnings.

    Returns:
        tuple: Forest per category type and the data-quality issues found.

    Raises:
        InvalidAggregateError: If an aggregate breaks the input contract.
        CategoryCycleError: If category parent links loop.
    """
    for category_id, aggregate in aggregates.items():
        validate_category_aggregate(category_id, aggregate)

    issues = find_data_quality_issues(categories, aggregates)
    for issue in issues:
        logger.warning(f"Data quality [{issue.kind}]: {issue.message}")

    forests = build_aggregated_forests(categories, aggregates, category_types)
    return forests, issues


__all__ = ["build_report_forests"]

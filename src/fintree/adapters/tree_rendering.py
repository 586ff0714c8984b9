"""Plain-text rendering of aggregated category forests for CLIs."""

from datetime import date
from decimal import Decimal

from fintree.domain.models import CategoryNode, Currency


def parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when missing or invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def format_amount(amount: Decimal, currency: Currency) -> str:
    """Format an amount with two decimals and the currency code."""
    return f"{amount:,.2f} {currency.code}"


def render_forest(
    roots: list[CategoryNode],
    base_currency: Currency,
    indent: str = "  ",
) -> list[str]:
    """Render a forest as indented lines, one per category.

    Each line shows the base currency total followed by native totals
    when the category holds more than the base currency.

    Args:
        roots: Sorted root nodes.
        base_currency: Report base currency.
        indent: Indentation added per depth level.

    Returns:
        list[str]: Lines in display order.
    """
    lines: list[str] = []
    stack = [(root, 0) for root in reversed(roots)]
    while stack:
        node, depth = stack.pop()
        line = (
            f"{indent * depth}{node.name}: "
            f"{format_amount(node.total_in_base_currency, base_currency)}"
        )
        foreign = {
            code: amount
            for code, amount in sorted(node.total_by_currency.items())
            if code != base_currency.code
        }
        if foreign:
            natives = ", ".join(
                f"{amount:,.2f} {code}"
                for code, amount in sorted(node.total_by_currency.items())
            )
            line += f" ({natives})"
        lines.append(line)
        stack.extend((child, depth + 1) for child in reversed(node.children))
    return lines


__all__ = ["parse_date", "format_amount", "render_forest"]

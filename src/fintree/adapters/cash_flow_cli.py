"""CLI adapter printing the cash flow statement as an indented tree.

Reads REPORT_START_DATE and REPORT_END_DATE (YYYY-MM-DD) from the
environment; the period defaults to the last 30 days.
"""

import os

from fintree.adapters.tree_rendering import (
    format_amount,
    parse_date,
    render_forest,
)
from fintree.infrastructure.container import build_cash_flow_use_case
from fintree.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the cash flow use case and print the result."""
    logger = get_app_logger()
    start_date = parse_date(os.getenv("REPORT_START_DATE"), logger)
    end_date = parse_date(os.getenv("REPORT_END_DATE"), logger)
    try:
        use_case = build_cash_flow_use_case()
        report = use_case.execute(start_date=start_date, end_date=end_date)
    except (RuntimeError, ValueError) as exc:
        logger.error(str(exc))
        return

    currency = report.base_currency
    print(f"Cash flow from {report.start_date} to {report.end_date}")
    print("Income")
    for line in render_forest(report.income, currency):
        print(f"  {line}")
    print("Expense")
    for line in render_forest(report.expense, currency):
        print(f"  {line}")
    summary = report.summary
    for row in summary.currency_totals:
        print(
            f"{row.currency_code}: in={row.total_income:,.2f}, "
            f"out={row.total_expense:,.2f}, net={row.net_cash_flow:,.2f}"
        )
    print(
        f"Total income: {format_amount(summary.total_income, currency)}, "
        f"total expense: {format_amount(summary.total_expense, currency)}, "
        f"net: {format_amount(summary.net_cash_flow, currency)}"
    )
    if report.issues:
        print(f"{len(report.issues)} data quality issue(s), see logs.")


if __name__ == "__main__":  # pragma: no cover
    main()

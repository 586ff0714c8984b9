"""CLI adapter printing the balance sheet as an indented tree.

Reads REPORT_AS_OF_DATE (YYYY-MM-DD, defaults to today) from the
environment.
"""

import os

from fintree.adapters.tree_rendering import (
    format_amount,
    parse_date,
    render_forest,
)
from fintree.infrastructure.container import build_balance_sheet_use_case
from fintree.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the balance sheet use case and print the result."""
    logger = get_app_logger()
    as_of_date = parse_date(os.getenv("REPORT_AS_OF_DATE"), logger)
    try:
        use_case = build_balance_sheet_use_case()
        report = use_case.execute(as_of_date=as_of_date)
    except (RuntimeError, ValueError) as exc:
        logger.error(str(exc))
        return

    currency = report.base_currency
    print(f"Balance sheet as of {report.as_of_date}")
    print("Assets")
    for line in render_forest(report.assets, currency):
        print(f"  {line}")
    print("Liabilities")
    for line in render_forest(report.liabilities, currency):
        print(f"  {line}")
    summary = report.summary
    print(
        f"Total assets: {format_amount(summary.total_assets, currency)}, "
        f"total liabilities: {format_amount(summary.total_liabilities, currency)}, "
        f"net worth: {format_amount(summary.net_worth, currency)}"
    )
    if report.issues:
        print(f"{len(report.issues)} data quality issue(s), see logs.")


if __name__ == "__main__":  # pragma: no cover
    main()

"""CLI adapter printing the dashboard headline figures."""

import os

from fintree.adapters.tree_rendering import format_amount, parse_date
from fintree.infrastructure.container import build_dashboard_use_case
from fintree.infrastructure.logging.logger import get_app_logger
from fintree.infrastructure.settings import ReportSettings


def main() -> None:
    """Run the dashboard summary use case and print the result."""
    logger = get_app_logger()
    as_of_date = parse_date(os.getenv("REPORT_AS_OF_DATE"), logger)
    settings = ReportSettings.from_env()
    try:
        use_case = build_dashboard_use_case(settings=settings)
        summary = use_case.execute(
            as_of_date=as_of_date,
            period_days=settings.period_days,
        )
    except (RuntimeError, ValueError) as exc:
        logger.error(str(exc))
        return

    currency = summary.base_currency
    print(f"Dashboard as of {summary.as_of_date}")
    print(f"Net worth: {format_amount(summary.net_worth, currency)}")
    print(
        f"Assets: {format_amount(summary.total_assets, currency)}, "
        f"liabilities: {format_amount(summary.total_liabilities, currency)}"
    )
    print(
        f"Cash flow since {summary.period_start}: "
        f"in={format_amount(summary.period_income, currency)}, "
        f"out={format_amount(summary.period_expense, currency)}, "
        f"net={format_amount(summary.net_cash_flow, currency)}"
    )
    if summary.has_conversion_errors:
        print("Some accounts are missing a base currency conversion.")


if __name__ == "__main__":  # pragma: no cover
    main()

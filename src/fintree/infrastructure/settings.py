"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

from fintree.domain.constants import DEFAULT_PERIOD_DAYS
from fintree.domain.models import Currency
from fintree.domain.services.normalization import normalize_currency_code
from fintree.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ReportSettings:
    """Settings shared by report use cases.

    Attributes:
        base_currency_code: Currency every report consolidates into.
        base_currency_symbol: Display symbol of the base currency.
        period_days: Length of the dashboard cash flow window.
    """

    base_currency_code: str = "USD"
    base_currency_symbol: str = "$"
    period_days: int = DEFAULT_PERIOD_DAYS

    @property
    def base_currency(self) -> Currency:
        """Return the base currency descriptor."""
        return Currency(
            code=self.base_currency_code,
            symbol=self.base_currency_symbol,
        )

    @classmethod
    def from_env(cls) -> "ReportSettings":
        """Build settings from environment variables.

        Returns:
            ReportSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        code = normalize_currency_code(os.getenv("BASE_CURRENCY"))
        symbol = os.getenv("BASE_CURRENCY_SYMBOL")
        period_days = cls._parse_period_days(
            os.getenv("DASHBOARD_PERIOD_DAYS"),
            logger=logger,
        )
        return cls(
            base_currency_code=code or cls.base_currency_code,
            base_currency_symbol=(
                symbol.strip() if symbol else cls.base_currency_symbol
            ),
            period_days=period_days,
        )

    @staticmethod
    def _parse_period_days(raw_value: str | None, logger) -> int:
        """Parse the dashboard window length.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: Parsed number of days, or the default when invalid.
        """
        if not raw_value:
            return DEFAULT_PERIOD_DAYS
        try:
            days = int(raw_value.strip())
        except ValueError:
            logger.warning(
                f"Invalid DASHBOARD_PERIOD_DAYS '{raw_value}'. "
                f"Using {DEFAULT_PERIOD_DAYS}."
            )
            return DEFAULT_PERIOD_DAYS
        if days < 1:
            logger.warning(
                f"DASHBOARD_PERIOD_DAYS must be positive, got {days}. "
                f"Using {DEFAULT_PERIOD_DAYS}."
            )
            return DEFAULT_PERIOD_DAYS
        return days


__all__ = ["ReportSettings"]

"""Domain normalization helpers."""

from fintree.domain.constants import CATEGORY_TYPES


def normalize_currency_code(code: str | None) -> str | None:
    """Normalize currency code values.

    Args:
        code: Raw currency code from a repository.

    Returns:
        str | None: Upper-cased code, or None when blank.
    """
    if not code:
        return None
    cleaned = code.strip()
    return cleaned.upper() if cleaned else None


def normalize_category_type(category_type: str | None) -> str | None:
    """Normalize category type values.

    Args:
        category_type: Raw category type from a repository.

    Returns:
        str | None: Known upper-cased type, or None when blank or unknown.
    """
    if not category_type:
        return None
    cleaned = category_type.strip().upper()
    return cleaned if cleaned in CATEGORY_TYPES else None


__all__ = ["normalize_currency_code", "normalize_category_type"]

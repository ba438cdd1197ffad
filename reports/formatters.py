"""
Display formatters for MetricsJSON figures.
Deterministic string formatting for percentages, currency, and ratios.
"""

import math
from datetime import date
from typing import Optional, Union

NOT_AVAILABLE = "Not available"


class FormatterError(Exception):
    """Raised when formatter input validation fails."""
    pass


def _check_numeric(value, kind: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise FormatterError(f"{kind} value must be numeric, got {type(value)}")


def format_percentage(value: Optional[float], decimal_places: int = 1) -> str:
    """
    Format decimal as percentage with specified precision.

    Args:
        value: Decimal value (0.0845 = 8.45%)
        decimal_places: Number of decimal places (default: 1)

    Returns:
        Formatted percentage string (e.g., "8.5%"), or "Not available" for
        None and non-finite values
    """
    if value is None:
        return NOT_AVAILABLE

    _check_numeric(value, "Percentage")

    if not math.isfinite(value):
        return NOT_AVAILABLE

    return f"{value * 100:.{decimal_places}f}%"


def format_currency(value: Optional[float]) -> str:
    """
    Format a per-share or position dollar amount.

    Args:
        value: Dollar amount

    Returns:
        Formatted currency string (e.g., "$1,234.56", "-$12.30")
    """
    if value is None:
        return NOT_AVAILABLE

    _check_numeric(value, "Currency")

    if not math.isfinite(value):
        return NOT_AVAILABLE

    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_ratio(value: Optional[float], decimal_places: int = 2) -> str:
    """Format a unitless ratio such as the Sharpe ratio."""
    if value is None:
        return NOT_AVAILABLE

    _check_numeric(value, "Ratio")

    if not math.isfinite(value):
        return NOT_AVAILABLE

    return f"{value:.{decimal_places}f}"


def format_signed_percent(value: Optional[float], decimal_places: int = 2) -> str:
    """Format a value already in percent units with an explicit sign (e.g., "+1.25%")."""
    if value is None:
        return NOT_AVAILABLE

    _check_numeric(value, "Percentage")

    if not math.isfinite(value):
        return NOT_AVAILABLE

    return f"{value:+.{decimal_places}f}%"


def format_date_display(date_input: Union[str, date]) -> str:
    """
    Format date as "Month DD, YYYY".

    Args:
        date_input: ISO date string or date object

    Returns:
        Formatted date string (e.g., "July 15, 2025")
    """
    if date_input is None:
        return NOT_AVAILABLE

    if isinstance(date_input, str):
        try:
            date_obj = date.fromisoformat(date_input)
        except ValueError:
            raise FormatterError(f"Invalid date string: {date_input}")
    elif isinstance(date_input, date):
        date_obj = date_input
    else:
        raise FormatterError(f"Date must be string or date, got {type(date_input)}")

    return date_obj.strftime("%B %d, %Y")

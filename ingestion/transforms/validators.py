"""
Core validators for price series.
Pure functions - no IO, network, or side effects.
"""

import math
from datetime import date
from typing import Sequence

from analysis.models import PricePoint, PointKind


class ValidationError(ValueError):
    """Raised when data validation fails."""
    pass


def validate_price_point(point: PricePoint) -> None:
    """
    Validate a single historical price point.

    Args:
        point: PricePoint to check

    Raises:
        ValidationError: If validation fails
    """
    if not isinstance(point, PricePoint):
        raise ValidationError(f"expected PricePoint, got {type(point)}")

    if not isinstance(point.date, date):
        raise ValidationError(f"date must be date, got {type(point.date)}")

    close = point.close
    if isinstance(close, bool) or not isinstance(close, (int, float)):
        raise ValidationError(f"close must be numeric, got {type(close)}")

    if not math.isfinite(close):
        raise ValidationError(f"close must be finite, got {close}")

    if close <= 0:
        raise ValidationError(f"close must be positive, got {close}")

    # Volume validation
    volume = point.volume
    if isinstance(volume, bool) or not isinstance(volume, int):
        raise ValidationError(f"volume must be integer, got {type(volume)}")

    if volume < 0:
        raise ValidationError(f"volume must be non-negative, got {volume}")

    if point.kind != PointKind.HISTORICAL:
        raise ValidationError(f"kind must be historical, got {point.kind}")


def validate_series(series: Sequence[PricePoint]) -> None:
    """
    Validate a full series: non-empty, every point valid, dates strictly increasing.

    Args:
        series: PricePoints in chronological order

    Raises:
        ValidationError: If validation fails
    """
    if not series:
        raise ValidationError("Series must contain at least one point")

    for point in series:
        validate_price_point(point)

    dates = [p.date for p in series]

    # Check for duplicates
    if len(dates) != len(set(dates)):
        raise ValidationError("Duplicate date found in series")

    # Check monotonicity
    for i in range(1, len(dates)):
        if dates[i] <= dates[i-1]:
            raise ValidationError(
                f"Dates not strictly increasing: {dates[i-1]} followed by {dates[i]}"
            )

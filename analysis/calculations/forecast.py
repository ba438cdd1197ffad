"""
Short-horizon price projection with volatility-scaled confidence bands.

Every step is anchored on the last observed close, not on the previous
forecast step, so the output is a fan of one-step biases rather than a
compounding random walk.
"""

import logging
import math
import numpy as np
from datetime import date, timedelta
from typing import List, Optional, Sequence

from analysis.calculations.volatility import estimate_volatility
from analysis.guardrails import ContractViolation, validate_rng, validate_window, validate_volatility
from analysis.models import ForecastPoint, PricePoint

logger = logging.getLogger(__name__)

DEFAULT_ANCHOR_PRICE = 100.0
TREND_AMPLITUDE = 0.02
TREND_FREQUENCY = 0.5
NOISE_AMPLITUDE = 0.02
CONFIDENCE_START = 0.95
CONFIDENCE_DECAY = 0.05
CONFIDENCE_FLOOR = 0.6
BAND_WIDTH = 0.5


class ForecastError(ContractViolation):
    """Raised when forecast arguments are malformed."""
    pass


def confidence_at(step: int) -> float:
    """Confidence for the step-th forecast day (1-based), floored at 0.6."""
    return max(CONFIDENCE_FLOOR, CONFIDENCE_START - CONFIDENCE_DECAY * step)


def forecast(
    series: Sequence[PricePoint],
    horizon_days: int = 7,
    *,
    rng: np.random.Generator,
    as_of: date,
    volatility: Optional[float] = None
) -> List[ForecastPoint]:
    """
    Project horizon_days future points from the last observed close.

    For step i = 1..horizon_days:
        trend_i = 0.02 * sin(0.5 * i) + U(-0.02, 0.02)
        price_i = last_close * (1 + trend_i)
        confidence_i = max(0.6, 0.95 - 0.05 * i)
        bounds_i = price_i * (1 ± 0.5 * volatility)
        date_i = as_of + i days

    Args:
        series: Historical PricePoints, oldest first. An empty series anchors on 100.
        horizon_days: Number of days to project (0 gives an empty list)
        rng: Injected random source for the stochastic component
        as_of: Reference day the forecast starts after
        volatility: Precomputed estimate for this series; estimated once here if omitted

    Returns:
        ForecastPoints in strictly increasing date order, length horizon_days

    Raises:
        ForecastError: If horizon_days is not a non-negative integer
        ContractViolation: If rng is not a numpy Generator or volatility is invalid
    """
    try:
        horizon_days = validate_window(horizon_days, 'horizon_days')
    except ContractViolation as e:
        raise ForecastError(str(e)) from e
    validate_rng(rng)

    if series:
        last_price = series[-1].close
    else:
        logger.debug("Empty series; anchoring forecast on %.1f", DEFAULT_ANCHOR_PRICE)
        last_price = DEFAULT_ANCHOR_PRICE

    # One volatility figure shared by every step
    if volatility is None:
        volatility = estimate_volatility(series)
    else:
        volatility = validate_volatility(volatility)

    predictions = []
    for i in range(1, horizon_days + 1):
        deterministic = TREND_AMPLITUDE * math.sin(TREND_FREQUENCY * i)
        stochastic = rng.uniform(-NOISE_AMPLITUDE, NOISE_AMPLITUDE)
        trend = deterministic + stochastic

        price = last_price * (1 + trend)

        predictions.append(ForecastPoint(
            date=as_of + timedelta(days=i),
            price=price,
            confidence=confidence_at(i),
            upper_bound=price * (1 + BAND_WIDTH * volatility),
            lower_bound=price * (1 - BAND_WIDTH * volatility),
            volatility_pct=volatility * 100
        ))

    return predictions

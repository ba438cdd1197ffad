"""
Volatility calculation utilities.
Pure functions for log returns and the per-step volatility used by forecast and risk.
"""

import logging
import numpy as np
from typing import List, Sequence, Union

from analysis.models import PricePoint

logger = logging.getLogger(__name__)

# Used whenever fewer than two observations are available
DEFAULT_VOLATILITY = 0.02


class VolatilityError(Exception):
    """Raised when volatility calculation fails."""
    pass


def log_returns(prices: Sequence[float]) -> np.ndarray:
    """
    Calculate log returns from price series.

    Formula: r_t = ln(P_t) - ln(P_{t-1}) = ln(P_t / P_{t-1})

    Args:
        prices: Prices in chronological order

    Returns:
        Numpy array of log returns (length = len(prices) - 1)

    Raises:
        VolatilityError: If insufficient data or invalid prices
    """
    if len(prices) < 2:
        raise VolatilityError("Insufficient data: need at least 2 prices")

    # Check for invalid prices
    if any(p <= 0 for p in prices):
        raise VolatilityError("Zero or negative prices not allowed")

    price_array = np.asarray(prices, dtype=np.float64)

    # Calculate log returns: ln(P_t / P_{t-1})
    return np.diff(np.log(price_array))


def estimate_volatility(series: Sequence[Union[PricePoint, float]]) -> float:
    """
    Estimate per-step volatility of a price series.

    Formula: σ = sqrt(mean((r_i - μ)²)) over log returns r_i

    The variance is the population variance (ddof=0): the denominator is the
    number of returns, not Bessel-corrected. A series with fewer than two
    points resolves to DEFAULT_VOLATILITY rather than failing.

    Args:
        series: PricePoints (or bare closes) in chronological order

    Returns:
        Volatility as decimal (0.02 = 2% per step), always >= 0

    Raises:
        VolatilityError: If any close is zero or negative
    """
    if len(series) < 2:
        logger.debug("Series has %d point(s); using default volatility %.2f",
                     len(series), DEFAULT_VOLATILITY)
        return DEFAULT_VOLATILITY

    closes = _closes(series)
    log_ret = log_returns(closes)

    # Population standard deviation (ddof=0)
    return float(np.std(log_ret, ddof=0))


def _closes(series: Sequence[Union[PricePoint, float]]) -> List[float]:
    """Extract closing prices from points or pass plain numbers through."""
    return [p.close if isinstance(p, PricePoint) else float(p) for p in series]

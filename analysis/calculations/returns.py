"""
Returns calculation utilities.
Pure functions for step-by-step simple returns and forecast price change.
"""

import numpy as np
from typing import Dict, Optional, Sequence


class ReturnsError(Exception):
    """Raised when returns calculation fails."""
    pass


def simple_returns_series(prices: Sequence[float]) -> np.ndarray:
    """
    Calculate one-step simple returns for consecutive prices.

    Formula: R_t = (P_t - P_{t-1}) / P_{t-1}

    Args:
        prices: Prices in chronological order

    Returns:
        Numpy array of returns (length = len(prices) - 1, empty if fewer than 2)

    Raises:
        ReturnsError: If any price is zero or negative

    Example:
        prices = [100, 110, 99]
        Returns: [0.10, -0.10]
    """
    if len(prices) < 2:
        return np.array([], dtype=np.float64)

    # Check for invalid prices
    if any(p <= 0 for p in prices):
        raise ReturnsError("Zero or negative prices not allowed")

    prices_array = np.asarray(prices, dtype=np.float64)

    return np.diff(prices_array) / prices_array[:-1]


def price_change(current_price: float, predicted_price: float) -> Dict[str, Optional[float]]:
    """
    Calculate absolute and percentage change from current to predicted price.

    Args:
        current_price: Last observed close
        predicted_price: First forecast price

    Returns:
        Dictionary with 'change' and 'change_pct' (percent units, 1.5 = 1.5%).
        change_pct is None when current_price is zero.
    """
    change = predicted_price - current_price

    # Zero denominator: percentage is undefined
    if current_price == 0:
        return {'change': change, 'change_pct': None}

    return {
        'change': change,
        'change_pct': change / current_price * 100
    }

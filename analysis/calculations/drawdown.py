"""
Drawdown calculation utilities.
Pure functions for maximum peak-to-trough decline.
"""

import numpy as np
from typing import Sequence


class DrawdownError(Exception):
    """Raised when drawdown calculation fails."""
    pass


def max_drawdown(prices: Sequence[float]) -> float:
    """
    Calculate the largest peak-to-trough decline of a price series.

    Formula: max over t of (peak_t - P_t) / peak_t, with peak_t = max(P_0..P_t)

    Args:
        prices: Prices in chronological order

    Returns:
        Maximum drawdown as a positive decimal in [0, 1) (0.25 = 25% decline).
        0.0 for a series of one price or none.

    Raises:
        DrawdownError: If any price is zero or negative

    Example:
        [100, 110, 90, 120, 80] -> (120 - 80) / 120 = 0.3333
    """
    if len(prices) <= 1:
        return 0.0

    if any(p <= 0 for p in prices):
        raise DrawdownError("Zero or negative prices not allowed")

    prices_array = np.asarray(prices, dtype=np.float64)

    # Track running maximum (peak)
    running_max = np.maximum.accumulate(prices_array)

    # Drawdown at each point, as a positive fraction of the peak
    drawdowns = (running_max - prices_array) / running_max

    return float(drawdowns.max())

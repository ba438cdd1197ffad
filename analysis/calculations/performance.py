"""
Performance calculation utilities.
Sharpe ratio over step returns and the combined performance summary.
"""

import logging
import numpy as np
from typing import Sequence

from analysis.calculations.drawdown import max_drawdown
from analysis.calculations.returns import simple_returns_series
from analysis.models import PerformanceSummary, PricePoint

logger = logging.getLogger(__name__)

TRADING_DAYS_PER_YEAR = 252


def sharpe_ratio(returns: Sequence[float], risk_free_rate: float = 0.02) -> float:
    """
    Calculate the Sharpe ratio of a return series.

    Formula: (mean(R) - rf / 252) / std(R), population std (ddof=0)

    A zero-variance or empty series has no defined ratio: the result is
    inf, -inf or nan and is returned as-is. Callers check with
    guardrails.is_displayable before rendering.

    Args:
        returns: Per-step returns as decimals
        risk_free_rate: Annual risk-free rate as decimal

    Returns:
        Sharpe ratio, possibly non-finite
    """
    returns_array = np.asarray(returns, dtype=np.float64)

    # Degenerate inputs divide by zero; numpy would warn, we only want the value
    with np.errstate(divide='ignore', invalid='ignore'):
        if returns_array.size == 0:
            return float('nan')

        mean_return = returns_array.mean()

        # Identical returns have zero spread; the float mean may not reproduce them exactly
        if np.ptp(returns_array) == 0:
            std_dev = 0.0
        else:
            std_dev = returns_array.std(ddof=0)
        excess = mean_return - risk_free_rate / TRADING_DAYS_PER_YEAR

        return float(np.float64(excess) / np.float64(std_dev))


def performance_summary(
    series: Sequence[PricePoint],
    risk_free_rate: float = 0.02
) -> PerformanceSummary:
    """
    Summarize a historical series: Sharpe over simple returns, max drawdown over closes.

    Args:
        series: Non-empty PricePoints in chronological order
        risk_free_rate: Annual risk-free rate as decimal

    Returns:
        PerformanceSummary (sharpe_ratio may be non-finite)
    """
    closes = [p.close for p in series]
    returns = simple_returns_series(closes)

    sharpe = sharpe_ratio(returns, risk_free_rate=risk_free_rate)
    if not np.isfinite(sharpe):
        logger.warning("Sharpe ratio is undefined for %d return(s) with zero variance",
                       len(returns))

    return PerformanceSummary(
        sharpe_ratio=sharpe,
        max_drawdown=max_drawdown(closes)
    )

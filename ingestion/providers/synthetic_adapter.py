"""
Synthetic price adapter - generates a pseudo-historical daily series.
Stands in for a market-data provider behind the same contract; no network IO.
"""

import logging
import math
import numpy as np
from datetime import date, timedelta
from typing import Mapping, Optional

from analysis.guardrails import ContractViolation, validate_rng, validate_window
from analysis.models import PricePoint, PointKind, Series
from ingestion.instrument_config import DEFAULT_BASE_PRICE

logger = logging.getLogger(__name__)

NOISE_AMPLITUDE = 0.05
CYCLE_AMPLITUDE = 0.05
CYCLE_FREQUENCY = 0.2
VOLUME_LOW = 500_000
VOLUME_HIGH = 1_500_000


class SynthesisError(ContractViolation):
    """Raised when synthesis arguments are malformed."""
    pass


def resolve_base_price(
    symbol: str,
    base_prices: Mapping[str, float],
    default_base_price: float = DEFAULT_BASE_PRICE
) -> float:
    """
    Look up the base price for a symbol.

    Unknown symbols are expected input and resolve to default_base_price.
    """
    key = symbol.strip()
    if key in base_prices:
        return float(base_prices[key])

    logger.debug("Unknown symbol %r; using default base price %.2f", symbol, default_base_price)
    return float(default_base_price)


def synthesize(
    symbol: str,
    lookback_days: int = 90,
    *,
    rng: np.random.Generator,
    as_of: date,
    base_prices: Optional[Mapping[str, float]] = None,
    default_base_price: float = DEFAULT_BASE_PRICE
) -> Series:
    """
    Generate a daily series ending on as_of.

    For each offset i from lookback_days down to 0:
        close = base * (1 + U(-0.05, 0.05) + 0.05 * sin(0.2 * i))
        volume = integer U[500000, 1500000)
        date = as_of - i days

    Args:
        symbol: Instrument symbol (e.g., 'AAPL')
        lookback_days: Days before as_of to include (series length is lookback_days + 1)
        rng: Injected random source
        as_of: Reference day, the date of the newest point
        base_prices: Symbol -> base price table (empty table when omitted)
        default_base_price: Base price for symbols not in the table

    Returns:
        PricePoints ordered oldest -> newest

    Raises:
        SynthesisError: If symbol is not a string or lookback_days is malformed
        ContractViolation: If rng is not a numpy Generator
    """
    if not isinstance(symbol, str):
        raise SynthesisError(f"symbol must be a string, got {type(symbol).__name__}")

    try:
        lookback_days = validate_window(lookback_days, 'lookback_days')
    except ContractViolation as e:
        raise SynthesisError(str(e)) from e
    validate_rng(rng)

    base_price = resolve_base_price(symbol, base_prices or {}, default_base_price)

    series = []
    for i in range(lookback_days, -1, -1):
        noise = rng.uniform(-NOISE_AMPLITUDE, NOISE_AMPLITUDE)
        close = base_price * (1 + noise + CYCLE_AMPLITUDE * math.sin(CYCLE_FREQUENCY * i))
        volume = int(rng.integers(VOLUME_LOW, VOLUME_HIGH))

        series.append(PricePoint(
            date=as_of - timedelta(days=i),
            close=close,
            volume=volume,
            kind=PointKind.HISTORICAL
        ))

    return series

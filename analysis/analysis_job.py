"""
Orchestrated analysis job - symbol to MetricsJSON pipeline.
Synthesizes a series, estimates volatility once, forecasts, and composes metrics.
"""

import logging
import numpy as np
from datetime import date, datetime
from typing import Dict, Any, Mapping, Optional

from analysis.calculations.forecast import forecast
from analysis.calculations.volatility import estimate_volatility
from analysis.guardrails import ContractViolation, validate_rng, validate_window
from analysis.metrics_aggregator import compose_metrics, count_calculated_metrics
from ingestion.instrument_config import DEFAULT_BASE_PRICE
from ingestion.providers.synthetic_adapter import synthesize
from ingestion.transforms.validators import validate_series

logger = logging.getLogger(__name__)


def run_analysis(
    symbol: str,
    *,
    rng: np.random.Generator,
    as_of: Optional[date] = None,
    base_prices: Optional[Mapping[str, float]] = None,
    default_base_price: float = DEFAULT_BASE_PRICE,
    lookback_days: int = 90,
    horizon_days: int = 7
) -> Dict[str, Any]:
    """
    Run complete analysis for a symbol.

    Args:
        symbol: Instrument symbol to analyze
        rng: Injected random source shared by synthesis and forecast
        as_of: Reference day (defaults to today)
        base_prices: Symbol -> base price table
        default_base_price: Base price for unknown symbols
        lookback_days: Days of history before as_of
        horizon_days: Days to forecast after as_of

    Returns:
        Dictionary with job results: status, metrics, counts and duration

    Raises:
        ContractViolation: If windows or rng are malformed. These are caller
            mistakes and are not folded into a failed status.
    """
    # Validate structure up front so contract violations surface to the caller
    validate_window(lookback_days, 'lookback_days')
    validate_window(horizon_days, 'horizon_days')
    validate_rng(rng)

    if as_of is None:
        as_of = date.today()

    start_time = datetime.now()
    logger.info("Starting analysis for %s as of %s (lookback=%d, horizon=%d)",
                symbol, as_of, lookback_days, horizon_days)

    try:
        series = synthesize(
            symbol,
            lookback_days,
            rng=rng,
            as_of=as_of,
            base_prices=base_prices,
            default_base_price=default_base_price
        )
        validate_series(series)

        # Computed once and shared by forecast and risk
        volatility = estimate_volatility(series)

        forecast_points = forecast(
            series,
            horizon_days,
            rng=rng,
            as_of=as_of,
            volatility=volatility
        )

        metrics_json = compose_metrics(
            series=series,
            forecast_points=forecast_points,
            symbol=symbol,
            as_of_date=as_of,
            volatility=volatility
        )

    except ContractViolation:
        raise
    except Exception as e:
        logger.error("Analysis failed for %s: %s", symbol, e)
        return {
            'symbol': symbol,
            'status': 'failed',
            'error_message': str(e),
            'metrics': None,
            'metrics_calculated': 0,
            'duration_seconds': (datetime.now() - start_time).total_seconds()
        }

    duration = (datetime.now() - start_time).total_seconds()
    logger.info("Completed analysis for %s in %.3fs", symbol, duration)

    return {
        'symbol': symbol,
        'status': 'completed',
        'metrics': metrics_json,
        'metrics_calculated': count_calculated_metrics(metrics_json),
        'price_data_points': len(series),
        'forecast_points': len(forecast_points),
        'duration_seconds': duration
    }

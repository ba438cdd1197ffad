"""
Metrics aggregator - composes all forecast and risk calculations into MetricsJSON.
Pure function over an already synthesized series and its forecast.
"""

import logging
import math
from datetime import date, datetime
from typing import Dict, Any, Optional, Sequence

from analysis.calculations.performance import performance_summary
from analysis.calculations.returns import price_change
from analysis.calculations.risk import classify
from analysis.calculations.scenarios import (
    investment_scenarios,
    return_scenarios,
    price_levels,
    ScenarioError
)
from analysis.guardrails import is_displayable
from analysis.models import ForecastPoint, PricePoint
from ingestion.transforms.normalizers import series_to_frame

logger = logging.getLogger(__name__)

CALCULATION_VERSION = '1.0.0'


class MetricsAggregatorError(Exception):
    """Raised when metrics aggregation fails."""
    pass


def compose_metrics(
    series: Sequence[PricePoint],
    forecast_points: Sequence[ForecastPoint],
    symbol: str,
    as_of_date: date,
    volatility: float,
    data_source: str = 'synthetic'
) -> Dict[str, Any]:
    """
    Compose all metrics into standardized JSON format.

    Args:
        series: Historical PricePoints for symbol, oldest first
        forecast_points: Forecast produced from the same series
        symbol: Instrument symbol
        as_of_date: Reference day of the analysis
        volatility: The single volatility estimate shared with the forecast
        data_source: Label for the series origin

    Returns:
        Complete MetricsJSON dictionary. Non-finite figures are stored as None
        and flagged False under 'display_flags'.

    Raises:
        MetricsAggregatorError: If the series is empty
    """
    if not series:
        raise MetricsAggregatorError("Empty price series provided")

    price_df = series_to_frame(series)

    data_period = {
        'start_date': price_df['date'].iloc[0].isoformat(),
        'end_date': price_df['date'].iloc[-1].isoformat(),
        'points': len(price_df),
        'average_volume': float(price_df['volume'].mean())
    }

    current_price = float(price_df['close'].iloc[-1])
    predicted_price = forecast_points[0].price if forecast_points else None

    price_block = _calculate_price_block(current_price, predicted_price)

    performance = performance_summary(series)
    risk = classify(volatility, current_price=current_price)

    sharpe = performance.sharpe_ratio if is_displayable(performance.sharpe_ratio) else None

    scenarios = _calculate_scenarios(
        current_price, predicted_price, price_block['change_pct'], sharpe
    )

    return {
        'symbol': symbol,
        'as_of_date': as_of_date.isoformat(),
        'data_period': data_period,
        'price': price_block,
        'volatility': {
            'value': volatility,
            'pct': volatility * 100
        },
        'forecast': [p.to_dict() for p in forecast_points],
        'performance': {
            'sharpe_ratio': sharpe,
            'max_drawdown': performance.max_drawdown
        },
        'risk': risk.to_dict(),
        'scenarios': scenarios,
        'display_flags': {
            'sharpe_ratio': sharpe is not None,
            'change_pct': price_block['change_pct'] is not None,
            'forecast': bool(forecast_points)
        },
        'metadata': {
            'calculated_at': datetime.now().isoformat(),
            'calculation_version': CALCULATION_VERSION,
            'data_source': data_source
        }
    }


def _calculate_price_block(current_price: float, predicted_price: Optional[float]) -> Dict[str, Any]:
    """Current/predicted price and the change between them."""
    if predicted_price is None:
        return {
            'current': current_price,
            'predicted': None,
            'change': None,
            'change_pct': None
        }

    change = price_change(current_price, predicted_price)
    return {
        'current': current_price,
        'predicted': predicted_price,
        'change': change['change'],
        'change_pct': change['change_pct']
    }


def _calculate_scenarios(
    current_price: float,
    predicted_price: Optional[float],
    change_pct: Optional[float],
    sharpe: Optional[float]
) -> Dict[str, Any]:
    """Investment, return and price level scenarios; missing inputs leave sections empty."""
    investments = []
    if predicted_price is not None:
        try:
            investments = investment_scenarios(current_price, predicted_price)
        except ScenarioError as e:
            logger.warning("Skipping investment scenarios: %s", e)

    return {
        'investments': investments,
        'returns': return_scenarios(change_pct, sharpe),
        'levels': price_levels(current_price)
    }


def count_calculated_metrics(metrics: Dict[str, Any]) -> int:
    """Count leaf numeric figures that are present and finite."""
    count = 0

    def _walk(node):
        nonlocal count
        if isinstance(node, dict):
            for value in node.values():
                _walk(value)
        elif isinstance(node, list):
            for value in node:
                _walk(value)
        elif isinstance(node, (int, float)) and not isinstance(node, bool):
            if math.isfinite(node):
                count += 1

    _walk({k: v for k, v in metrics.items() if k != 'metadata'})
    return count

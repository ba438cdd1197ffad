"""
Value types shared by the forecasting pipeline.
Immutable records for price points, forecast points, and derived summaries.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Dict, Any, List


class PointKind(str, Enum):
    """Enumeration of point origins."""
    HISTORICAL = 'historical'
    PREDICTED = 'predicted'


class RiskTier(str, Enum):
    """Enumeration of volatility risk tiers."""
    LOW = 'Low'
    MEDIUM = 'Medium'
    HIGH = 'High'


@dataclass(frozen=True)
class PricePoint:
    """One observed trading day."""
    date: date
    close: float
    volume: int
    kind: PointKind = PointKind.HISTORICAL

    def to_dict(self) -> Dict[str, Any]:
        return {
            'date': self.date.isoformat(),
            'close': self.close,
            'volume': self.volume,
            'kind': self.kind.value
        }


@dataclass(frozen=True)
class ForecastPoint:
    """One projected day with its confidence band."""
    date: date
    price: float
    confidence: float
    upper_bound: float
    lower_bound: float
    volatility_pct: float
    kind: PointKind = PointKind.PREDICTED

    def to_dict(self) -> Dict[str, Any]:
        return {
            'date': self.date.isoformat(),
            'price': self.price,
            'confidence': self.confidence,
            'upper_bound': self.upper_bound,
            'lower_bound': self.lower_bound,
            'volatility_pct': self.volatility_pct,
            'kind': self.kind.value
        }


@dataclass(frozen=True)
class RiskProfile:
    """Risk figures derived from a single volatility value."""
    volatility: float
    tier: RiskTier
    value_at_risk_95: float
    risk_score: int
    downside_deviation: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'volatility': self.volatility,
            'tier': self.tier.value,
            'value_at_risk_95': self.value_at_risk_95,
            'risk_score': self.risk_score,
            'downside_deviation': self.downside_deviation
        }


@dataclass(frozen=True)
class PerformanceSummary:
    """Risk-adjusted performance of a historical series."""
    sharpe_ratio: float
    max_drawdown: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'sharpe_ratio': self.sharpe_ratio,
            'max_drawdown': self.max_drawdown
        }


# Ordered oldest -> newest, one point per calendar day
Series = List[PricePoint]

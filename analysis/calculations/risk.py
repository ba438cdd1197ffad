"""
Risk classification for a per-step volatility figure.
Deterministic threshold tiers plus value-at-risk and a 0-10 risk score.

Tiers:
- Low: volatility <= 2%
- Medium: 2% < volatility <= 3%
- High: volatility > 3%
"""

import math
from typing import Optional

from analysis.guardrails import ContractViolation, validate_volatility
from analysis.models import RiskProfile, RiskTier

HIGH_THRESHOLD = 0.03
MEDIUM_THRESHOLD = 0.02

# One-sided 95% z-score under a normal approximation
Z_SCORE_95 = 1.65

DOWNSIDE_RATIO = 0.7
RISK_SCORE_SCALE = 200
RISK_SCORE_MAX = 10


class RiskError(ContractViolation):
    """Raised when risk inputs are invalid."""
    pass


def risk_tier(volatility: float) -> RiskTier:
    """Map volatility to its tier using the fixed thresholds."""
    if volatility > HIGH_THRESHOLD:
        return RiskTier.HIGH
    elif volatility > MEDIUM_THRESHOLD:
        return RiskTier.MEDIUM
    else:
        return RiskTier.LOW


def value_at_risk_95(current_price: float, volatility: float) -> float:
    """
    One-period value at risk at 95% confidence.

    Formula: VaR = price × σ × 1.65

    Raises:
        RiskError: If current_price is negative
    """
    if current_price < 0:
        raise RiskError(f"current_price must be non-negative, got {current_price}")
    return current_price * volatility * Z_SCORE_95


def risk_score(volatility: float) -> int:
    """Integer score min(10, round(σ × 200)), rounding halves up."""
    return int(min(RISK_SCORE_MAX, math.floor(volatility * RISK_SCORE_SCALE + 0.5)))


def downside_deviation(volatility: float) -> float:
    """Downside deviation approximated as 70% of total volatility."""
    return volatility * DOWNSIDE_RATIO


def classify(volatility: float, current_price: Optional[float] = None) -> RiskProfile:
    """
    Classify a volatility value into a RiskProfile.

    Args:
        volatility: Per-step volatility as decimal, >= 0
        current_price: Latest close for value at risk; VaR is 0.0 when omitted

    Returns:
        RiskProfile with tier, VaR, score and downside deviation

    Raises:
        RiskError: If volatility is negative, non-finite or non-numeric
    """
    try:
        volatility = validate_volatility(volatility)
    except ContractViolation as e:
        raise RiskError(str(e)) from e

    var_95 = 0.0
    if current_price is not None:
        var_95 = value_at_risk_95(current_price, volatility)

    return RiskProfile(
        volatility=volatility,
        tier=risk_tier(volatility),
        value_at_risk_95=var_95,
        risk_score=risk_score(volatility),
        downside_deviation=downside_deviation(volatility)
    )

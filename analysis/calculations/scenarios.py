"""
Investment and return scenarios derived from current and predicted prices.
"""

from typing import Dict, Any, List, Optional, Sequence

DEFAULT_INVESTMENT_AMOUNTS = (1000, 5000, 10000, 25000)

BEAR_CASE_RETURN_PCT = -15.0
BEAR_PROBABILITY = 20
BASE_PROBABILITY = 60
BULL_PROBABILITY = 20
BULL_MULTIPLIER = 2
MONTHS_PER_YEAR = 12

STOP_LOSS_RATIO = 0.95
RESISTANCE_RATIO = 1.05


class ScenarioError(Exception):
    """Raised when scenarios cannot be computed."""
    pass


def investment_scenarios(
    current_price: float,
    predicted_price: float,
    amounts: Sequence[float] = DEFAULT_INVESTMENT_AMOUNTS
) -> List[Dict[str, Any]]:
    """
    Profit/loss of buying at current_price and marking at predicted_price.

    current_value is the position marked at the current price, which equals
    the principal by construction.

    Args:
        current_price: Last observed close, must be > 0
        predicted_price: First forecast price
        amounts: Principal amounts to evaluate

    Returns:
        One dictionary per amount with shares, current_value, predicted_value,
        profit and profit_pct (percent units)

    Raises:
        ScenarioError: If current_price is not positive
    """
    if current_price <= 0:
        raise ScenarioError(f"current_price must be positive, got {current_price}")

    change_pct = (predicted_price - current_price) / current_price * 100

    scenarios = []
    for amount in amounts:
        shares = amount / current_price
        scenarios.append({
            'investment': amount,
            'shares': shares,
            'current_value': shares * current_price,
            'predicted_value': shares * predicted_price,
            'profit': shares * (predicted_price - current_price),
            'profit_pct': change_pct
        })

    return scenarios


def return_scenarios(change_pct: Optional[float], sharpe: Optional[float]) -> Dict[str, Any]:
    """
    Probability-weighted bear/base/bull outcomes.

    Args:
        change_pct: Forecast price change in percent units (None if undefined)
        sharpe: Sharpe ratio (None if undefined)

    Returns:
        Dictionary with 'cases' list, 'expected_annual_return_pct' and
        'risk_adjusted_return_pct'. Figures that depend on an undefined
        input are None.
    """
    base = change_pct
    bull = change_pct * BULL_MULTIPLIER if change_pct is not None else None

    return {
        'cases': [
            {'scenario': 'Bear Case', 'probability': BEAR_PROBABILITY, 'return_pct': BEAR_CASE_RETURN_PCT},
            {'scenario': 'Base Case', 'probability': BASE_PROBABILITY, 'return_pct': base},
            {'scenario': 'Bull Case', 'probability': BULL_PROBABILITY, 'return_pct': bull},
        ],
        'expected_annual_return_pct': change_pct * MONTHS_PER_YEAR if change_pct is not None else None,
        'risk_adjusted_return_pct': sharpe * 100 if sharpe is not None else None
    }


def price_levels(current_price: float) -> Dict[str, float]:
    """Stop-loss, support, resistance and break-even around the current price."""
    return {
        'stop_loss': current_price * STOP_LOSS_RATIO,
        'support': current_price * STOP_LOSS_RATIO,
        'resistance': current_price * RESISTANCE_RATIO,
        'break_even': current_price
    }

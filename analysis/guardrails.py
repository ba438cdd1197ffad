"""
Guardrails for the forecasting pipeline - call-boundary validation and display checks.
Structural mistakes fail loudly here; data-dependent degeneracies are left to
the calculation modules, which resolve them to defined fallbacks.
"""

import math
import numbers
from typing import Any, Optional

import numpy as np


class ContractViolation(ValueError):
    """Raised when a caller passes structurally malformed input."""
    pass


def validate_window(value: Any, name: str) -> int:
    """
    Validate a day-count argument such as lookback_days or horizon_days.

    Zero is allowed (empty forecast, single-point series).

    Args:
        value: Candidate window length
        name: Argument name used in the error message

    Returns:
        The window as a plain int

    Raises:
        ContractViolation: If value is not an integer or is negative
    """
    # bool is an Integral, but True days is never meant
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ContractViolation(f"{name} must be an integer, got {type(value).__name__}")

    if value < 0:
        raise ContractViolation(f"{name} must be non-negative, got {value}")

    return int(value)


def validate_rng(rng: Any) -> np.random.Generator:
    """
    Ensure the injected random source is a numpy Generator.

    Raises:
        ContractViolation: If rng is missing or of the wrong type
    """
    if not isinstance(rng, np.random.Generator):
        raise ContractViolation(
            f"rng must be a numpy.random.Generator, got {type(rng).__name__}. "
            f"Use numpy.random.default_rng(seed)."
        )
    return rng


def validate_volatility(volatility: Any) -> float:
    """
    Validate a volatility figure handed to downstream consumers.

    Raises:
        ContractViolation: If volatility is not a finite non-negative number
    """
    if isinstance(volatility, bool) or not isinstance(volatility, numbers.Real):
        raise ContractViolation(f"volatility must be numeric, got {type(volatility).__name__}")

    if not math.isfinite(volatility):
        raise ContractViolation(f"volatility must be finite, got {volatility}")

    if volatility < 0:
        raise ContractViolation(f"volatility must be non-negative, got {volatility}")

    return float(volatility)


def is_displayable(value: Optional[float]) -> bool:
    """True when value is a finite number a consumer can safely render."""
    if value is None or isinstance(value, bool):
        return False
    if not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)

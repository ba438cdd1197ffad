"""
Instrument configuration - symbol to base price table.
Loaded from YAML so a quote source can replace it without touching the pipeline.
"""

import os
import logging
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = './config/instruments.yml'
DEFAULT_BASE_PRICE = 100.0


class InstrumentConfigError(Exception):
    """Raised when the instrument configuration is missing or malformed."""
    pass


def load_instrument_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load instrument base prices from a YAML file.

    Expected layout:
        default_base_price: 100     # optional
        instruments:
          AAPL: 150
          MSFT: 300

    Args:
        config_path: Path to config file (defaults to $INSTRUMENTS_CONFIG,
            then ./config/instruments.yml)

    Returns:
        Dictionary with 'instruments' (symbol -> float) and 'default_base_price'

    Raises:
        InstrumentConfigError: If the file is missing, unreadable or invalid
    """
    if config_path is None:
        config_path = os.getenv('INSTRUMENTS_CONFIG', DEFAULT_CONFIG_PATH)

    config_file = Path(config_path)
    if not config_file.exists():
        raise InstrumentConfigError(f"Instrument config file not found: {config_path}")

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InstrumentConfigError(f"Failed to parse instrument config: {e}") from e

    if not isinstance(raw, dict) or 'instruments' not in raw:
        raise InstrumentConfigError("Instrument config missing 'instruments' section")

    instruments = raw['instruments'] or {}
    if not isinstance(instruments, dict):
        raise InstrumentConfigError("'instruments' must be a mapping of symbol to base price")

    base_prices = {}
    for symbol, price in instruments.items():
        base_prices[str(symbol).strip()] = _validate_price(price, f"instruments.{symbol}")

    default_price = _validate_price(
        raw.get('default_base_price', DEFAULT_BASE_PRICE), 'default_base_price'
    )

    logger.debug("Loaded %d instruments from %s", len(base_prices), config_path)

    return {
        'instruments': base_prices,
        'default_base_price': default_price
    }


def load_base_prices(config_path: Optional[str] = None) -> Dict[str, float]:
    """Shortcut returning only the symbol -> base price mapping."""
    return load_instrument_config(config_path)['instruments']


def _validate_price(value: Any, field: str) -> float:
    """Validate a single configured price."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InstrumentConfigError(f"{field} must be numeric, got {value!r}")

    if value <= 0:
        raise InstrumentConfigError(f"{field} must be positive, got {value}")

    return float(value)

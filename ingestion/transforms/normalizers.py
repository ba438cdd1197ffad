"""
Normalizers for turning pipeline records into tabular shape.
Pure functions - no IO, network, or side effects.
"""

import pandas as pd
from typing import Sequence

from analysis.models import PricePoint

SERIES_COLUMNS = ['date', 'close', 'volume', 'kind']


def series_to_frame(series: Sequence[PricePoint]) -> pd.DataFrame:
    """
    Transform a price series into a DataFrame.

    Dates stay as datetime.date objects; kind is the enum's string value.

    Args:
        series: PricePoints in chronological order

    Returns:
        DataFrame with columns date, close, volume, kind (empty frame keeps columns)
    """
    if not series:
        return pd.DataFrame(columns=SERIES_COLUMNS)

    rows = [
        {
            'date': p.date,
            'close': p.close,
            'volume': p.volume,
            'kind': p.kind.value
        }
        for p in series
    ]
    return pd.DataFrame(rows, columns=SERIES_COLUMNS)


"""
Tests for series normalization to DataFrame.
"""

import pandas as pd
from datetime import date, timedelta

from analysis.models import PricePoint
from ingestion.transforms.normalizers import series_to_frame, SERIES_COLUMNS


class TestSeriesToFrame:

    def test_columns_and_rows(self):
        series = [
            PricePoint(date=date(2025, 8, 1) + timedelta(days=i), close=100.0 + i, volume=1_000 * i)
            for i in range(3)
        ]

        df = series_to_frame(series)

        assert list(df.columns) == SERIES_COLUMNS
        assert len(df) == 3
        assert df['close'].tolist() == [100.0, 101.0, 102.0]
        assert df['date'].iloc[0] == date(2025, 8, 1)
        assert (df['kind'] == 'historical').all()

    def test_empty_series(self):
        df = series_to_frame([])

        assert isinstance(df, pd.DataFrame)
        assert df.empty
        assert list(df.columns) == SERIES_COLUMNS

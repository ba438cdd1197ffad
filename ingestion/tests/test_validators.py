"""
Tests for series validators.
"""

import pytest
from datetime import date, timedelta

from analysis.models import PricePoint, PointKind
from ingestion.transforms.validators import (
    validate_price_point,
    validate_series,
    ValidationError
)


def _point(day=1, close=100.0, volume=1_000_000, kind=PointKind.HISTORICAL):
    return PricePoint(date=date(2025, 8, day), close=close, volume=volume, kind=kind)


class TestValidatePricePoint:

    def test_valid(self):
        validate_price_point(_point())

    @pytest.mark.parametrize("close", [0.0, -1.0])
    def test_non_positive_close(self, close):
        with pytest.raises(ValidationError, match="close must be positive"):
            validate_price_point(_point(close=close))

    def test_non_finite_close(self):
        with pytest.raises(ValidationError, match="close must be finite"):
            validate_price_point(_point(close=float('inf')))

    def test_float_volume(self):
        with pytest.raises(ValidationError, match="volume must be integer"):
            validate_price_point(_point(volume=10.5))

    def test_negative_volume(self):
        with pytest.raises(ValidationError, match="volume must be non-negative"):
            validate_price_point(_point(volume=-1))

    def test_predicted_kind_rejected(self):
        with pytest.raises(ValidationError, match="kind must be historical"):
            validate_price_point(_point(kind=PointKind.PREDICTED))

    def test_wrong_type(self):
        with pytest.raises(ValidationError, match="expected PricePoint"):
            validate_price_point({'close': 100.0})


class TestValidateSeries:

    def test_valid(self):
        validate_series([_point(1), _point(2), _point(5)])

    def test_empty(self):
        with pytest.raises(ValidationError, match="at least one point"):
            validate_series([])

    def test_duplicate_dates(self):
        with pytest.raises(ValidationError, match="Duplicate date"):
            validate_series([_point(1), _point(1)])

    def test_out_of_order(self):
        with pytest.raises(ValidationError, match="not strictly increasing"):
            validate_series([_point(3), _point(2)])

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            validate_series([])

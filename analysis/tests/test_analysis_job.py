"""
Tests for orchestrated analysis job - symbol to MetricsJSON pipeline.
"""

import pytest
import numpy as np
from datetime import date
from unittest.mock import patch

from analysis.analysis_job import run_analysis
from analysis.guardrails import ContractViolation

AS_OF = date(2025, 8, 15)
BASE_PRICES = {'AAPL': 150.0, 'GOOGL': 2800.0}


class TestRunAnalysis:
    """Tests for run_analysis."""

    def test_completed_result(self):
        result = run_analysis('AAPL', rng=np.random.default_rng(42), as_of=AS_OF,
                              base_prices=BASE_PRICES)

        assert result['status'] == 'completed'
        assert result['symbol'] == 'AAPL'
        assert result['price_data_points'] == 91
        assert result['forecast_points'] == 7
        assert result['metrics_calculated'] > 0
        assert result['duration_seconds'] >= 0

    def test_metrics_reflect_windows(self):
        result = run_analysis('GOOGL', rng=np.random.default_rng(1), as_of=AS_OF,
                              base_prices=BASE_PRICES, lookback_days=30, horizon_days=3)
        metrics = result['metrics']

        assert metrics['data_period']['points'] == 31
        assert metrics['data_period']['end_date'] == '2025-08-15'
        assert len(metrics['forecast']) == 3
        assert metrics['forecast'][0]['date'] == '2025-08-16'

    def test_base_price_drives_level(self):
        result = run_analysis('GOOGL', rng=np.random.default_rng(5), as_of=AS_OF,
                              base_prices=BASE_PRICES)

        # base * (1 ± 0.05 ± 0.05)
        assert 2800 * 0.9 <= result['metrics']['price']['current'] <= 2800 * 1.1

    def test_unknown_symbol_uses_default(self):
        result = run_analysis('ZZZZ', rng=np.random.default_rng(5), as_of=AS_OF,
                              base_prices=BASE_PRICES)

        assert result['status'] == 'completed'
        assert 90 <= result['metrics']['price']['current'] <= 110

    def test_deterministic_under_seed(self):
        first = run_analysis('AAPL', rng=np.random.default_rng(9), as_of=AS_OF,
                             base_prices=BASE_PRICES)
        second = run_analysis('AAPL', rng=np.random.default_rng(9), as_of=AS_OF,
                              base_prices=BASE_PRICES)

        for key in ['price', 'forecast', 'performance', 'risk', 'volatility']:
            assert first['metrics'][key] == second['metrics'][key]

    def test_zero_windows(self):
        result = run_analysis('AAPL', rng=np.random.default_rng(2), as_of=AS_OF,
                              base_prices=BASE_PRICES, lookback_days=0, horizon_days=0)
        metrics = result['metrics']

        assert result['status'] == 'completed'
        assert metrics['data_period']['points'] == 1
        assert metrics['forecast'] == []
        assert metrics['volatility']['value'] == 0.02
        assert metrics['performance']['max_drawdown'] == 0.0
        assert metrics['performance']['sharpe_ratio'] is None

    def test_negative_lookback_raises(self):
        with pytest.raises(ContractViolation, match="lookback_days"):
            run_analysis('AAPL', rng=np.random.default_rng(0), as_of=AS_OF, lookback_days=-1)

    def test_negative_horizon_raises(self):
        with pytest.raises(ContractViolation, match="horizon_days"):
            run_analysis('AAPL', rng=np.random.default_rng(0), as_of=AS_OF, horizon_days=-7)

    def test_bad_rng_raises(self):
        with pytest.raises(ContractViolation):
            run_analysis('AAPL', rng=42, as_of=AS_OF)

    def test_defaults_to_today(self):
        result = run_analysis('AAPL', rng=np.random.default_rng(0), base_prices=BASE_PRICES,
                              lookback_days=5, horizon_days=1)

        assert result['metrics']['as_of_date'] == date.today().isoformat()

    def test_unexpected_failure_reported(self):
        """Errors past the call boundary become a failed status."""
        with patch('analysis.analysis_job.compose_metrics', side_effect=RuntimeError("boom")):
            result = run_analysis('AAPL', rng=np.random.default_rng(0), as_of=AS_OF,
                                  base_prices=BASE_PRICES)

        assert result['status'] == 'failed'
        assert result['error_message'] == 'boom'
        assert result['metrics'] is None

    def test_logs_progress(self, caplog):
        with caplog.at_level('INFO', logger='analysis.analysis_job'):
            run_analysis('AAPL', rng=np.random.default_rng(0), as_of=AS_OF,
                         base_prices=BASE_PRICES, lookback_days=10)

        assert "Starting analysis for AAPL" in caplog.text
        assert "Completed analysis for AAPL" in caplog.text

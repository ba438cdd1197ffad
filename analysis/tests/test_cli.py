"""
Tests for the analyze_ticker CLI.
"""

import pytest
import json
import yaml
from pathlib import Path

from analysis.analyze_ticker import main, build_parser

REPO_CONFIG = Path(__file__).resolve().parents[2] / 'config' / 'instruments.yml'


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / 'instruments.yml'
    path.write_text(yaml.dump({'instruments': {'AAPL': 150, 'MSFT': 300}}))
    return str(path)


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args(['AAPL'])

        assert args.symbol == 'AAPL'
        assert args.lookback == 90
        assert args.horizon == 7
        assert args.seed is None
        assert args.json is False

    def test_as_of_parsed(self):
        args = build_parser().parse_args(['AAPL', '--as-of', '2025-08-01'])

        assert args.as_of.isoformat() == '2025-08-01'


class TestMain:
    """Tests for main."""

    def test_summary_output(self, config_path, capsys):
        code = main(['AAPL', '--seed', '1', '--as-of', '2025-08-15', '--config', config_path])
        out = capsys.readouterr().out

        assert code == 0
        assert "Quick Summary for AAPL" in out
        assert "Sharpe Ratio" in out
        assert "Forecast:" in out

    def test_json_output(self, config_path, capsys):
        code = main(['MSFT', '--seed', '1', '--as-of', '2025-08-15',
                     '--horizon', '3', '--config', config_path, '--json'])
        metrics = json.loads(capsys.readouterr().out)

        assert code == 0
        assert metrics['symbol'] == 'MSFT'
        assert len(metrics['forecast']) == 3

    def test_seed_reproducible(self, config_path, capsys):
        argv = ['AAPL', '--seed', '7', '--as-of', '2025-08-15', '--config', config_path, '--json']

        main(argv)
        first = json.loads(capsys.readouterr().out)
        main(argv)
        second = json.loads(capsys.readouterr().out)

        assert first['forecast'] == second['forecast']
        assert first['price'] == second['price']

    def test_quiet_output(self, config_path, capsys):
        code = main(['AAPL', '--seed', '1', '--config', config_path, '--quiet'])

        assert code == 0
        assert "AAPL analysis complete" in capsys.readouterr().out

    def test_negative_horizon(self, config_path, capsys):
        code = main(['AAPL', '--horizon', '-1', '--config', config_path])

        assert code == 2
        assert "horizon_days must be non-negative" in capsys.readouterr().err

    def test_missing_config(self, capsys):
        code = main(['AAPL', '--config', '/nonexistent/instruments.yml'])

        assert code == 1
        assert "not found" in capsys.readouterr().err

    def test_repo_config(self, capsys):
        code = main(['NVDA', '--seed', '3', '--config', str(REPO_CONFIG), '--json'])
        metrics = json.loads(capsys.readouterr().out)

        assert code == 0
        assert 800 * 0.9 <= metrics['price']['current'] <= 800 * 1.1

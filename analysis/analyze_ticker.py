#!/usr/bin/env python3
"""
CLI tool for analyzing individual symbols.
Usage: python analysis/analyze_ticker.py SYMBOL [options]
"""

import sys
import json
import logging
import argparse
from datetime import date
from pathlib import Path

import numpy as np

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from analysis.analysis_job import run_analysis
from analysis.guardrails import ContractViolation
from ingestion.instrument_config import load_instrument_config, InstrumentConfigError
from reports.formatters import (
    format_currency,
    format_percentage,
    format_ratio,
    format_signed_percent,
    format_date_display
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Forecast and risk metrics for a symbol',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python analysis/analyze_ticker.py AAPL
  python analysis/analyze_ticker.py MSFT --seed 42 --as-of 2025-08-01
  python analysis/analyze_ticker.py TSLA --lookback 180 --horizon 14 --json
        """
    )

    parser.add_argument('symbol', help='Instrument symbol (e.g., AAPL)')
    parser.add_argument('--lookback',
                        type=int,
                        default=90,
                        help='Days of history to synthesize (default: 90)')
    parser.add_argument('--horizon',
                        type=int,
                        default=7,
                        help='Days to forecast (default: 7)')
    parser.add_argument('--seed',
                        type=int,
                        help='Random seed for reproducible output')
    parser.add_argument('--as-of',
                        type=date.fromisoformat,
                        default=date.today(),
                        help='Reference date (YYYY-MM-DD, default: today)')
    parser.add_argument('--config',
                        help='Instrument config YAML (default: $INSTRUMENTS_CONFIG or ./config/instruments.yml)')
    parser.add_argument('--json',
                        action='store_true',
                        help='Print full MetricsJSON instead of the summary')
    parser.add_argument('--quiet', '-q',
                        action='store_true',
                        help='Minimal output (just success/failure)')
    parser.add_argument('--log-level',
                        default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: WARNING)')
    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    try:
        config = load_instrument_config(args.config)
    except InstrumentConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    rng = np.random.default_rng(args.seed)

    try:
        result = run_analysis(
            args.symbol,
            rng=rng,
            as_of=args.as_of,
            base_prices=config['instruments'],
            default_base_price=config['default_base_price'],
            lookback_days=args.lookback,
            horizon_days=args.horizon
        )
    except ContractViolation as e:
        print(f"ERROR: Invalid arguments: {e}", file=sys.stderr)
        return 2

    if result['status'] != 'completed':
        print(f"ERROR: Analysis failed for {args.symbol}: {result['error_message']}", file=sys.stderr)
        return 1

    metrics = result['metrics']

    if args.json:
        print(json.dumps(metrics, indent=2, default=str))
    elif args.quiet:
        print(f"{args.symbol} analysis complete ({result['metrics_calculated']} metrics)")
    else:
        print(render_summary(metrics))

    return 0


def render_summary(metrics: dict) -> str:
    """Plain-text quick summary of a MetricsJSON dictionary."""
    price = metrics['price']
    perf = metrics['performance']
    risk = metrics['risk']
    period = metrics['data_period']

    lines = [
        f"Quick Summary for {metrics['symbol']} ({format_date_display(metrics['as_of_date'])}):",
        f"   History: {period['start_date']} to {period['end_date']} ({period['points']} days)",
        f"   Current Price: {format_currency(price['current'])}",
        f"   Predicted Price: {format_currency(price['predicted'])} "
        f"({format_signed_percent(price['change_pct'])})",
        f"   Volatility: {format_percentage(metrics['volatility']['value'])} ({risk['tier']} risk)",
        f"   Value at Risk (95%): {format_currency(risk['value_at_risk_95'])}",
        f"   Risk Score: {risk['risk_score']}/10",
        f"   Sharpe Ratio: {format_ratio(perf['sharpe_ratio'])}",
        f"   Max Drawdown: -{format_percentage(perf['max_drawdown'])}",
    ]

    if metrics['forecast']:
        lines.append("")
        lines.append("   Forecast:")
        for point in metrics['forecast']:
            lines.append(
                f"     {point['date']}  {format_currency(point['price'])}  "
                f"[{format_currency(point['lower_bound'])} - {format_currency(point['upper_bound'])}]  "
                f"{format_percentage(point['confidence'], 0)} confidence"
            )

    return '\n'.join(lines)


if __name__ == '__main__':
    sys.exit(main())

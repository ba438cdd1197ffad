"""
Analysis Engine Module

Calculates forecast and risk metrics from a daily price series:
- Volatility (log-return standard deviation)
- Short-horizon forecast with confidence bands
- Sharpe ratio and maximum drawdown
- Risk tier, value at risk, and investment scenarios
"""

__version__ = "0.1.0"

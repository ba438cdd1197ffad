"""
Data Ingestion Module

Produces price series for the analysis engine:
- Synthetic daily series seeded from an instrument base price table
- Series validation and tabular normalization
"""

__version__ = "0.1.0"

"""
Bitcoin/cash threshold-rebalancing backtester.

Simulates a two-asset portfolio that is reset to a target allocation whenever
the Bitcoin weight drifts outside a threshold band, and compares it with a
buy-and-hold baseline.
"""

__version__ = "1.0.0"

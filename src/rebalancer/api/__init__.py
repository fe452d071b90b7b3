"""
HTTP API for running rebalancing backtests.
"""

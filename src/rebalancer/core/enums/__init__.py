"""
Core enumerations for the rebalancing backtester.

This module provides centralized enumerations for domain concepts
like rebalance actions, quote currencies and price source kinds.
"""

from .actions import RebalanceAction
from .currencies import Currency
from .sources import PriceSourceKind

__all__ = ["RebalanceAction", "Currency", "PriceSourceKind"]

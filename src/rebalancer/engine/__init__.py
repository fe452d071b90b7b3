"""
Backtest engine for the threshold-rebalancing strategy.
"""

from .session import SimulationSession
from .simulator import simulate

__all__ = ["SimulationSession", "simulate"]

"""
Abstract interfaces implemented by the infrastructure layer.
"""

from .price_source import IPriceSource

__all__ = ["IPriceSource"]

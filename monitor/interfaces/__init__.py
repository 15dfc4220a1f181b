"""
Monitor interfaces module.
Observer and subject contracts shared by the hub and its observers.
"""

from .observer_interfaces import (
    IStockObserver,
    IStockSubject,
    TradeDecision,
    BroadcastResult
)

__all__ = [
    "IStockObserver",
    "IStockSubject",
    "TradeDecision",
    "BroadcastResult"
]

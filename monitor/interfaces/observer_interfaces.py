"""
Observer interfaces - the only contracts that cross component boundaries.
CRITICAL: percent changes are Decimal, subjects never know concrete observer types!
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, List, Tuple

from ..stock import Stock


class TradeDecision(Enum):
    """Trading bot decision"""
    BUY = "buy"
    SELL = "sell"
    HOLD = "hold"


@dataclass
class BroadcastResult:
    """Outcome of one broadcast pass"""
    symbol: str
    percent_change: Decimal
    notified: int = 0
    failures: List[Tuple[Any, Exception]] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.failures


class IStockObserver(ABC):
    """Interface for anything that wants to hear about price changes"""

    @abstractmethod
    def on_change(self, stock: Stock, percent_change: Decimal) -> None:
        """Handle a price change of stock by percent_change percent"""
        pass


class IStockSubject(ABC):
    """Interface for broadcasting price changes to observers"""

    @abstractmethod
    def subscribe(self, observer: IStockObserver) -> bool:
        """Register observer, returns False if it was already registered"""
        pass

    @abstractmethod
    def unsubscribe(self, observer: IStockObserver) -> bool:
        """Remove observer, returns False if it was not registered"""
        pass

    @abstractmethod
    def notify_all(self, stock: Stock, percent_change: Decimal) -> BroadcastResult:
        """Call on_change on every registered observer"""
        pass

# monitor/notification_hub.py
"""
Notification hub for decoupled price change broadcasting.
CRITICAL: broadcast only on real changes, snapshot iteration, isolated observer faults.
"""
import threading
from decimal import Decimal
from typing import Any, List, Optional, Set

from .interfaces.observer_interfaces import IStockObserver, IStockSubject, BroadcastResult
from .exceptions.monitor_exceptions import ReentrantUpdateError, ZeroBasePriceError
from .stock import Stock, to_price
from utils.logger import get_market_logger, get_system_logger, log_price_event, log_error_with_context

logger = get_market_logger()
system_logger = get_system_logger()

HUNDRED = Decimal('100')


def calculate_percent_change(old_price: Decimal, new_price: Decimal, symbol: str = "") -> Decimal:
    """Percent change from old_price to new_price, raises ZeroBasePriceError on a zero base"""
    if old_price == 0:
        raise ZeroBasePriceError(symbol, new_price)
    return (new_price - old_price) / old_price * HUNDRED


class StockNotificationHub(IStockSubject):
    """
    Subject for a single monitored stock.

    Observers are kept in registration order, unique by identity: subscribing
    the same object twice is a no-op. Every operation takes the hub lock, so
    calls from different threads are serialized. Observers may (un)subscribe
    from inside on_change; the running broadcast keeps its snapshot.
    """

    def __init__(self, stock: Stock):
        self.stock = stock
        self._observers: List[IStockObserver] = []
        self._observer_ids: Set[int] = set()
        self._lock = threading.RLock()
        self._broadcasting = False

    @property
    def observers(self) -> List[IStockObserver]:
        """Copy of the current subscription list"""
        with self._lock:
            return list(self._observers)

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)

    def __contains__(self, observer: object) -> bool:
        with self._lock:
            return id(observer) in self._observer_ids

    def subscribe(self, observer: IStockObserver) -> bool:
        """Subscribe observer to price changes of the monitored stock"""
        with self._lock:
            if id(observer) in self._observer_ids:
                logger.debug(f"{type(observer).__name__} already subscribed to {self.stock.symbol}")
                return False
            self._observers.append(observer)
            self._observer_ids.add(id(observer))

        logger.debug(f"{type(observer).__name__} subscribed to {self.stock.symbol}")
        return True

    def unsubscribe(self, observer: IStockObserver) -> bool:
        """Unsubscribe observer; unknown observers are ignored"""
        with self._lock:
            if id(observer) not in self._observer_ids:
                return False
            self._observer_ids.discard(id(observer))
            self._observers = [o for o in self._observers if o is not observer]

        logger.debug(f"{type(observer).__name__} unsubscribed from {self.stock.symbol}")
        return True

    def update_price(self, new_price: Any) -> Optional[BroadcastResult]:
        """
        Apply a new price to the monitored stock and broadcast the change.

        Returns None when the price did not change. Invalid prices and zero
        base prices raise before the stock is touched, and nobody is notified.
        """
        with self._lock:
            if self._broadcasting:
                raise ReentrantUpdateError(self.stock.symbol)

            symbol = self.stock.symbol
            price = to_price(new_price, symbol)
            old_price = self.stock.price

            if price == old_price:
                logger.debug(f"Price for {symbol} unchanged at {price}, nothing to broadcast")
                return None

            percent_change = calculate_percent_change(old_price, price, symbol)
            self.stock.update_price(price)

            log_price_event(logger, symbol, "PRICE_UPDATED",
                            old_price=old_price, new_price=price,
                            percent_change=f"{percent_change:+.2f}")

            return self.notify_all(self.stock, percent_change)

    def notify_all(self, stock: Stock, percent_change: Decimal) -> BroadcastResult:
        """Notify every observer subscribed at the start of the call, in order"""
        with self._lock:
            snapshot = list(self._observers)
            result = BroadcastResult(symbol=stock.symbol, percent_change=percent_change)

            was_broadcasting = self._broadcasting
            self._broadcasting = True
            try:
                for observer in snapshot:
                    try:
                        observer.on_change(stock, percent_change)
                        result.notified += 1
                    except Exception as e:
                        # One faulty observer must not starve the rest
                        result.failures.append((observer, e))
                        log_error_with_context(system_logger, e, {
                            "symbol": stock.symbol,
                            "observer": type(observer).__name__,
                            "percent_change": percent_change
                        })
            finally:
                self._broadcasting = was_broadcasting

        if result.failures:
            logger.warning(
                f"Broadcast for {stock.symbol} finished with {len(result.failures)} failed observer(s)")
        logger.debug(f"Broadcast for {stock.symbol} delivered to {result.notified}/{len(snapshot)} observers")
        return result


# monitor/stock.py
"""
Stock entity - the monitored price holder.
CRITICAL: all prices ONLY through Decimal, exact comparison, no epsilon!
"""
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Optional

from .exceptions.monitor_exceptions import InvalidPriceError


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(moment: datetime) -> datetime:
    """Naive datetimes are taken to be UTC"""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def to_price(value: Any, symbol: str = "") -> Decimal:
    """Coerce value to a finite, non-negative Decimal or raise InvalidPriceError"""
    if isinstance(value, bool):
        raise InvalidPriceError(value, symbol)

    try:
        # str() keeps float inputs at their printed precision
        price = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidPriceError(value, symbol) from None

    if not price.is_finite() or price < 0:
        raise InvalidPriceError(value, symbol)

    return price


class Stock:
    """
    Symbol with a current price and the time of its last change.

    The price is only ever mutated through update_price(); last_update moves
    forward together with it and never backwards.
    """

    def __init__(self, symbol: str, price: Any, last_update: Optional[datetime] = None,
                 clock: Callable[[], datetime] = utc_now):
        if not symbol:
            raise ValueError("Stock symbol is required")

        self._symbol = symbol
        self._price = to_price(price, symbol)
        self._clock = clock
        self._last_update = as_utc(last_update or clock())

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def last_update(self) -> datetime:
        return self._last_update

    def update_price(self, new_price: Any) -> bool:
        """Set a new price. Returns True only if the price actually changed."""
        price = to_price(new_price, self._symbol)

        if price == self._price:
            return False

        # Timestamp first: the price must not change if the clock fails
        last_update = max(as_utc(self._clock()), self._last_update)
        self._price = price
        self._last_update = last_update
        return True

    def __repr__(self) -> str:
        return f"Stock(symbol={self._symbol!r}, price={self._price}, last_update={self._last_update.isoformat()})"

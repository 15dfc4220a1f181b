"""
Monitor exceptions - all custom exceptions for price monitoring operations.
CRITICAL: a rejected update never leaves the stock half-mutated.
"""
from datetime import datetime, timezone
from typing import Dict, Any, Optional


class MonitorError(Exception):
    """Base exception for all price monitoring errors"""

    def __init__(self, message: str, error_code: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.context = context or {}
        self.timestamp = datetime.now(timezone.utc)

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.error_code:
            return f"[{self.error_code}] {base_msg}"
        return base_msg


class InvalidPriceError(MonitorError, ValueError):
    """Raised when a price is negative, non-finite or not a number"""

    def __init__(self, price: Any, symbol: str = ""):
        message = f"Invalid price for {symbol or 'stock'}: {price!r}"
        super().__init__(message, error_code="INVALID_PRICE",
                         context={"symbol": symbol, "price": str(price)})
        self.price = price
        self.symbol = symbol


class ZeroBasePriceError(MonitorError, ZeroDivisionError):
    """Raised when a percent change is requested against a zero prior price"""

    def __init__(self, symbol: str, new_price: Any):
        message = f"Cannot compute percent change for {symbol}: previous price is zero"
        super().__init__(message, error_code="ZERO_BASE_PRICE",
                         context={"symbol": symbol, "new_price": str(new_price)})
        self.symbol = symbol
        self.new_price = new_price


class ReentrantUpdateError(MonitorError):
    """Raised when an observer updates the price of the stock being broadcast"""

    def __init__(self, symbol: str):
        message = f"Price update for {symbol} requested during its own broadcast"
        super().__init__(message, error_code="REENTRANT_UPDATE",
                         context={"symbol": symbol})
        self.symbol = symbol


class ConfigurationError(MonitorError):
    """Raised when configuration is invalid"""

    def __init__(self, message: str, config_key: str = ""):
        super().__init__(message, error_code="CONFIGURATION_ERROR")
        self.config_key = config_key

# observers/thresholds.py
"""
Threshold parsing shared by the observers.
Alert, buy and sell thresholds are percentages with the same rules as prices.
"""
from decimal import Decimal
from typing import Any

from monitor.exceptions.monitor_exceptions import InvalidPriceError
from monitor.stock import to_price


def to_threshold(value: Any, label: str) -> Decimal:
    """Percentage thresholds follow the same rules as prices: finite and non-negative"""
    try:
        return to_price(value)
    except InvalidPriceError:
        raise ValueError(f"{label} must be a finite, non-negative percentage, got {value!r}") from None

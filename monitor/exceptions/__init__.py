"""
Monitor exceptions module.
All custom exceptions for price monitoring operations.
"""

from .monitor_exceptions import (
    MonitorError,
    InvalidPriceError,
    ZeroBasePriceError,
    ReentrantUpdateError,
    ConfigurationError
)

__all__ = [
    "MonitorError",
    "InvalidPriceError",
    "ZeroBasePriceError",
    "ReentrantUpdateError",
    "ConfigurationError"
]

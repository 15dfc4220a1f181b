"""
Observers module.
Concrete IStockObserver implementations.
"""

from .investor_alert import Investor, InvestorAlertObserver
from .push_notification import PushNotificationObserver, format_push_message
from .trading_bot import TradingBotObserver

__all__ = [
    "Investor",
    "InvestorAlertObserver",
    "PushNotificationObserver",
    "format_push_message",
    "TradingBotObserver"
]

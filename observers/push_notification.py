# observers/push_notification.py
"""
Push notification channel - sends a price message to a user's device.
CRITICAL: delivery problems are logged, never raised back into the broadcast.
"""
from decimal import Decimal
from typing import Callable, Optional

from monitor.interfaces.observer_interfaces import IStockObserver
from monitor.stock import Stock
from utils.logger import get_notification_logger

logger = get_notification_logger()

# sender(user_id, message) -> delivered
MessageSender = Callable[[str, str], bool]


def format_push_message(stock: Stock, percent_change: Decimal) -> str:
    return f"Push: {stock.symbol} now at {stock.price:,.2f} ({percent_change:+.2f}%)"


class PushNotificationObserver(IStockObserver):
    """Push channel for one user/device"""

    def __init__(self, user_id: str, sender: Optional[MessageSender] = None):
        if not user_id:
            raise ValueError("Push channel user id is required")
        self.user_id = user_id
        self.sender = sender or self._log_sender
        self.enabled = True

    def on_change(self, stock: Stock, percent_change: Decimal) -> None:
        if not self.enabled:
            logger.debug(f"Push disabled for {self.user_id}, skipping {stock.symbol}")
            return

        self.send(format_push_message(stock, percent_change))

    def send(self, message: str) -> bool:
        """Deliver message to the device"""
        try:
            success = self.sender(self.user_id, message)
        except Exception as e:
            logger.error(f"Push to {self.user_id} failed: {e}")
            return False

        if not success:
            logger.error(f"Push to {self.user_id} was not delivered")
        return success

    def disable_notifications(self):
        """Disable pushes for this device"""
        self.enabled = False
        logger.info(f"Push notifications disabled for {self.user_id}")

    def enable_notifications(self):
        """Enable pushes for this device"""
        self.enabled = True
        logger.info(f"Push notifications enabled for {self.user_id}")

    @staticmethod
    def _log_sender(user_id: str, message: str) -> bool:
        logger.info(f"[Mobile App {user_id}] {message}")
        return True

    def __repr__(self) -> str:
        return f"PushNotificationObserver({self.user_id!r}, enabled={self.enabled})"

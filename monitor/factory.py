# monitor/factory.py
"""
Monitor Factory - builds a notification hub and its observers from configuration.
CRITICAL: observers are subscribed in watchlist order (investors, push, bots).
"""
from typing import List, Optional

from config.watchlist import WatchlistConfig
from observers import InvestorAlertObserver, Investor, PushNotificationObserver, TradingBotObserver
from observers.push_notification import MessageSender
from .interfaces.observer_interfaces import IStockObserver
from .notification_hub import StockNotificationHub
from .stock import Stock
from .exceptions.monitor_exceptions import ConfigurationError, MonitorError
from utils.logger import get_system_logger

logger = get_system_logger()


class MonitorFactory:
    """Factory for creating a fully wired notification hub"""

    def __init__(self, push_sender: Optional[MessageSender] = None):
        self.push_sender = push_sender

    def create_hub(self, watchlist: WatchlistConfig) -> StockNotificationHub:
        """Create hub for the watchlist stock with all configured observers"""
        try:
            logger.info(f"Creating notification hub for {watchlist.symbol}")

            stock = Stock(watchlist.symbol, watchlist.initial_price)
            hub = StockNotificationHub(stock)

            for observer in self.create_observers(watchlist):
                hub.subscribe(observer)

            logger.info(f"Notification hub for {watchlist.symbol} created with {len(hub)} observers")
            return hub

        except (MonitorError, ValueError) as e:
            logger.error(f"Failed to create notification hub: {e}")
            raise ConfigurationError(f"Notification hub creation failed: {e}") from e

    def create_observers(self, watchlist: WatchlistConfig) -> List[IStockObserver]:
        """Create observers in subscription order"""
        observers: List[IStockObserver] = []

        for investor in watchlist.investors:
            observers.append(InvestorAlertObserver(
                Investor(investor.name, investor.alert_threshold)))

        for channel in watchlist.push_channels:
            observers.append(PushNotificationObserver(channel.user_id, sender=self.push_sender))

        for bot in watchlist.trading_bots:
            observers.append(TradingBotObserver(bot.name, bot.buy_threshold, bot.sell_threshold))

        logger.debug(f"Created {len(observers)} observers for {watchlist.symbol}")
        return observers


def create_hub(watchlist: WatchlistConfig) -> StockNotificationHub:
    """Create hub with the default factory"""
    return MonitorFactory().create_hub(watchlist)

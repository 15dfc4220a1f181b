# observers/investor_alert.py
"""
Investor alerts - tells an investor when a move crosses their personal threshold.
"""
from dataclasses import dataclass
from decimal import Decimal

from monitor.interfaces.observer_interfaces import IStockObserver
from monitor.stock import Stock
from .thresholds import to_threshold
from utils.logger import get_notification_logger

logger = get_notification_logger()


@dataclass
class Investor:
    """Investor with an alert threshold in percent"""
    name: str
    alert_threshold: Decimal

    def __post_init__(self):
        if not self.name:
            raise ValueError("Investor name is required")
        self.alert_threshold = to_threshold(self.alert_threshold, "alert_threshold")


class InvestorAlertObserver(IStockObserver):
    """Alerts a single investor about large price moves"""

    def __init__(self, investor: Investor):
        self.investor = investor

    def should_alert(self, percent_change: Decimal) -> bool:
        return abs(percent_change) >= self.investor.alert_threshold

    def on_change(self, stock: Stock, percent_change: Decimal) -> None:
        name = self.investor.name
        logger.info(f"[Investor {name}] Notified about {stock.symbol}",
                    extra={'symbol': stock.symbol})

        if self.should_alert(percent_change):
            logger.warning(
                f"[Investor {name}] ALERT! Change of {percent_change:+.2f}% "
                f"exceeded limit of {self.investor.alert_threshold}%",
                extra={'symbol': stock.symbol})

    def __repr__(self) -> str:
        return f"InvestorAlertObserver({self.investor.name!r}, threshold={self.investor.alert_threshold})"

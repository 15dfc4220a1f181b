# observers/trading_bot.py
"""
Trading bot observer - turns each price move into a buy/sell/hold decision.
Decisions depend only on the current move; nothing is remembered between calls.
"""
from decimal import Decimal
from typing import Any

from monitor.interfaces.observer_interfaces import IStockObserver, TradeDecision
from monitor.stock import Stock
from .thresholds import to_threshold
from utils.logger import get_strategy_logger, log_price_event

logger = get_strategy_logger()


class TradingBotObserver(IStockObserver):
    """
    Threshold bot: buys on drops of at least buy_threshold percent and sells
    on rises of at least sell_threshold percent.
    """

    def __init__(self, name: str, buy_threshold: Any, sell_threshold: Any):
        if not name:
            raise ValueError("Bot name is required")
        self.name = name
        self.buy_threshold = to_threshold(buy_threshold, "buy_threshold")
        self.sell_threshold = to_threshold(sell_threshold, "sell_threshold")

    def decide(self, percent_change: Decimal) -> TradeDecision:
        """Buy is checked before sell"""
        if percent_change <= -self.buy_threshold:
            return TradeDecision.BUY
        if percent_change >= self.sell_threshold:
            return TradeDecision.SELL
        return TradeDecision.HOLD

    def on_change(self, stock: Stock, percent_change: Decimal) -> None:
        logger.debug(f"[Bot {self.name}] Analyzing {stock.symbol}...")

        decision = self.decide(percent_change)
        if decision is TradeDecision.HOLD:
            return

        action = "BUYING" if decision is TradeDecision.BUY else "SELLING"
        logger.info(f"[Bot {self.name}] {action} {stock.symbol} at {stock.price:,.2f}",
                    extra={'symbol': stock.symbol})
        log_price_event(logger, stock.symbol, "BOT_DECISION",
                        bot=self.name, decision=decision.value,
                        price=stock.price, percent_change=percent_change)

    def __repr__(self) -> str:
        return f"TradingBotObserver({self.name!r}, buy={self.buy_threshold}, sell={self.sell_threshold})"

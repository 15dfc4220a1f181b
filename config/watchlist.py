# config/watchlist.py
"""
Watchlist configuration - the monitored stock and who listens to it.
Loaded from JSON so that no sample investors or bots live in the code.
"""
import json
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List

from monitor.exceptions.monitor_exceptions import ConfigurationError, InvalidPriceError
from monitor.stock import to_price


@dataclass
class InvestorConfig:
    name: str
    alert_threshold: Decimal


@dataclass
class PushChannelConfig:
    user_id: str


@dataclass
class TradingBotConfig:
    name: str
    buy_threshold: Decimal
    sell_threshold: Decimal


@dataclass
class WatchlistConfig:
    """Monitored stock plus its observers"""
    symbol: str
    initial_price: Decimal
    investors: List[InvestorConfig] = field(default_factory=list)
    push_channels: List[PushChannelConfig] = field(default_factory=list)
    trading_bots: List[TradingBotConfig] = field(default_factory=list)
    price_moves: List[Decimal] = field(default_factory=list)


def _require(data: Dict[str, Any], key: str, where: str) -> Any:
    if key not in data:
        raise ConfigurationError(f"Missing '{key}' in {where}", config_key=f"{where}.{key}")
    return data[key]


def _decimal(value: Any, config_key: str) -> Decimal:
    try:
        return to_price(value)
    except InvalidPriceError:
        raise ConfigurationError(f"Invalid number for {config_key}: {value!r}", config_key=config_key) from None


def _entries(data: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    entries = data.get(key, [])
    if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
        raise ConfigurationError(f"'{key}' must be a list of objects", config_key=key)
    return entries


def parse_watchlist(data: Dict[str, Any]) -> WatchlistConfig:
    """Build a WatchlistConfig from an already decoded JSON document"""
    if not isinstance(data, dict):
        raise ConfigurationError("Watchlist must be a JSON object")

    symbol = _require(data, "symbol", "watchlist")
    if not isinstance(symbol, str) or not symbol:
        raise ConfigurationError("Watchlist symbol must be a non-empty string", config_key="symbol")

    investors = [
        InvestorConfig(
            name=_require(entry, "name", "investors"),
            alert_threshold=_decimal(_require(entry, "alert_threshold", "investors"),
                                     "investors.alert_threshold")
        )
        for entry in _entries(data, "investors")
    ]

    push_channels = [
        PushChannelConfig(user_id=_require(entry, "user_id", "push_channels"))
        for entry in _entries(data, "push_channels")
    ]

    trading_bots = [
        TradingBotConfig(
            name=_require(entry, "name", "trading_bots"),
            buy_threshold=_decimal(_require(entry, "buy_threshold", "trading_bots"),
                                   "trading_bots.buy_threshold"),
            sell_threshold=_decimal(_require(entry, "sell_threshold", "trading_bots"),
                                    "trading_bots.sell_threshold")
        )
        for entry in _entries(data, "trading_bots")
    ]

    price_moves = data.get("price_moves", [])
    if not isinstance(price_moves, list):
        raise ConfigurationError("'price_moves' must be a list", config_key="price_moves")

    return WatchlistConfig(
        symbol=symbol,
        initial_price=_decimal(_require(data, "initial_price", "watchlist"), "initial_price"),
        investors=investors,
        push_channels=push_channels,
        trading_bots=trading_bots,
        price_moves=[_decimal(move, "price_moves") for move in price_moves]
    )


def load_watchlist(path: str) -> WatchlistConfig:
    """Load watchlist from a JSON file"""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Watchlist file not found: {path}", config_key="WATCHLIST_FILE") from None
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Watchlist file {path} is not valid JSON: {e}",
                                 config_key="WATCHLIST_FILE") from None

    return parse_watchlist(data)

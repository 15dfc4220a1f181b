# tests/test_watchlist_and_factory.py
"""
Tests for watchlist loading, hub construction from configuration and the CLI.
"""
import json
import pytest
from decimal import Decimal
from unittest.mock import Mock

from config.settings import DEFAULT_WATCHLIST, LoggingConfig, MonitorConfig
from config.watchlist import InvestorConfig, load_watchlist, parse_watchlist, WatchlistConfig
from monitor.factory import MonitorFactory, create_hub
from monitor.exceptions.monitor_exceptions import ConfigurationError
from observers import InvestorAlertObserver, PushNotificationObserver, TradingBotObserver


def write_watchlist(tmp_path, data):
    path = tmp_path / "watchlist.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


@pytest.fixture
def watchlist_data():
    return {
        "symbol": "VALE3",
        "initial_price": "60.00",
        "investors": [{"name": "Ana", "alert_threshold": 4}],
        "push_channels": [{"user_id": "device-1"}],
        "trading_bots": [{"name": "Scalper", "buy_threshold": "1", "sell_threshold": "1.5"}],
        "price_moves": ["61.00", "59.00"]
    }


class TestSettings:
    """Test configuration sections"""

    def test_default_watchlist_path(self):
        assert MonitorConfig().watchlist_path == DEFAULT_WATCHLIST

    def test_log_level_is_validated(self):
        assert LoggingConfig(level="debug").level == "DEBUG"
        with pytest.raises(ValueError):
            LoggingConfig(level="LOUD")


class TestWatchlist:
    """Test watchlist parsing"""

    def test_bundled_watchlist_loads(self):
        watchlist = load_watchlist(DEFAULT_WATCHLIST)

        assert watchlist.symbol == "PETR4"
        assert watchlist.initial_price == Decimal("35.50")
        assert [i.name for i in watchlist.investors] == ["João Silva", "Maria Santos"]
        assert watchlist.push_channels[0].user_id == "user123"
        assert watchlist.trading_bots[0].sell_threshold == Decimal("2.5")
        assert watchlist.price_moves == [Decimal("36.20"), Decimal("37.50"), Decimal("35.00")]

    def test_load_from_file(self, tmp_path, watchlist_data):
        watchlist = load_watchlist(write_watchlist(tmp_path, watchlist_data))

        assert isinstance(watchlist, WatchlistConfig)
        assert watchlist.investors[0].alert_threshold == Decimal("4")

    def test_observer_sections_are_optional(self):
        watchlist = parse_watchlist({"symbol": "ITUB4", "initial_price": 30})
        assert watchlist.investors == []
        assert watchlist.price_moves == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            load_watchlist(str(tmp_path / "missing.json"))
        assert exc_info.value.config_key == "WATCHLIST_FILE"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_watchlist(str(path))

    def test_missing_symbol(self, watchlist_data):
        del watchlist_data["symbol"]
        with pytest.raises(ConfigurationError) as exc_info:
            parse_watchlist(watchlist_data)
        assert exc_info.value.config_key == "watchlist.symbol"

    def test_negative_threshold(self, watchlist_data):
        watchlist_data["trading_bots"][0]["buy_threshold"] = "-1"
        with pytest.raises(ConfigurationError):
            parse_watchlist(watchlist_data)

    def test_investors_must_be_list_of_objects(self, watchlist_data):
        watchlist_data["investors"] = "Ana"
        with pytest.raises(ConfigurationError):
            parse_watchlist(watchlist_data)


class TestMonitorFactory:
    """Test hub wiring from a watchlist"""

    def test_observers_subscribed_in_order(self, watchlist_data):
        hub = create_hub(parse_watchlist(watchlist_data))

        assert hub.stock.symbol == "VALE3"
        assert hub.stock.price == Decimal("60.00")
        assert [type(o) for o in hub.observers] == [
            InvestorAlertObserver, PushNotificationObserver, TradingBotObserver]

    def test_push_sender_is_injected(self, watchlist_data):
        sender = Mock(return_value=True)
        hub = MonitorFactory(push_sender=sender).create_hub(parse_watchlist(watchlist_data))

        result = hub.update_price("61.00")

        assert result.notified == 3
        sender.assert_called_once()
        assert sender.call_args[0][0] == "device-1"

    def test_invalid_observer_config_raises_configuration_error(self):
        watchlist = WatchlistConfig(
            symbol="VALE3",
            initial_price=Decimal("60"),
            investors=[InvestorConfig(name="", alert_threshold=Decimal("1"))]
        )

        with pytest.raises(ConfigurationError):
            create_hub(watchlist)


class TestMain:
    """Test the command line entry point"""

    def test_replays_watchlist_moves(self, tmp_path, watchlist_data):
        from main import main

        assert main(["--watchlist", write_watchlist(tmp_path, watchlist_data)]) == 0

    def test_explicit_prices(self, tmp_path, watchlist_data):
        from main import main, replay_prices

        hub = create_hub(parse_watchlist(watchlist_data))
        assert replay_prices(hub, ["60.00", "62", "62.0", "58"]) == 2
        assert main(["--watchlist", write_watchlist(tmp_path, watchlist_data), "65", "66"]) == 0

    def test_invalid_price_exit_code(self, tmp_path, watchlist_data):
        from main import main

        assert main(["--watchlist", write_watchlist(tmp_path, watchlist_data), "-5"]) == 1

    def test_zero_base_price_exit_code(self, tmp_path, watchlist_data):
        from main import main

        watchlist_data["initial_price"] = "0"
        assert main(["--watchlist", write_watchlist(tmp_path, watchlist_data), "50"]) == 1

    def test_missing_watchlist_exit_code(self, tmp_path):
        from main import main

        assert main(["--watchlist", str(tmp_path / "nope.json")]) == 1

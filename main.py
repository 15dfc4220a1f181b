"""
Main entry point for the stock price monitor.
Loads a watchlist, wires the notification hub and replays price moves through it.
"""
import argparse
import sys
from typing import Any, List, Optional

from config.settings import settings
from config.watchlist import load_watchlist
from monitor.factory import create_hub
from monitor.notification_hub import StockNotificationHub
from monitor.exceptions.monitor_exceptions import ConfigurationError, MonitorError
from utils.logger import get_system_logger

logger = get_system_logger()


def replay_prices(hub: StockNotificationHub, prices: List[Any]) -> int:
    """Feed prices into the hub, returns number of broadcasts"""
    broadcasts = 0

    for price in prices:
        result = hub.update_price(price)
        if result is None:
            logger.info(f"{hub.stock.symbol} unchanged at {price}")
            continue

        broadcasts += 1
        if not result.succeeded:
            logger.warning(f"{len(result.failures)} observer(s) failed for {hub.stock.symbol} at {price}")

    return broadcasts


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Stock price monitor")
    parser.add_argument("--watchlist", type=str, default=settings.monitor.watchlist_path,
                        help="Path to watchlist JSON")
    parser.add_argument("prices", nargs="*", type=str,
                        help="Prices to apply (defaults to the watchlist price_moves)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with proper error handling"""
    args = parse_args(argv)

    try:
        watchlist = load_watchlist(args.watchlist)
        hub = create_hub(watchlist)

        prices = args.prices or watchlist.price_moves
        logger.info(f"Monitoring {watchlist.symbol} from {hub.stock.price}, {len(prices)} price move(s)")

        broadcasts = replay_prices(hub, prices)
        logger.info(f"Done: {broadcasts} broadcast(s), final {watchlist.symbol} price {hub.stock.price}")
        return 0

    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except MonitorError as e:
        logger.error(f"Price update rejected: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

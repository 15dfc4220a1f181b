# utils/logger.py
"""
Logging system with structured output.
This module provides a custom logging setup for the price monitor, including:
- Custom formatter with per-symbol columns for market events
- Console and rotating file handlers
"""
import logging
import sys
import os
from logging.handlers import RotatingFileHandler
from typing import Optional
from datetime import datetime, timezone
import json

from config.settings import settings


class CustomFormatter(logging.Formatter):
    """Custom formatter with colors and structured output"""

    # Color codes for console output
    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m'      # Reset
    }

    def format(self, record):
        """Format log record with colors and structure"""
        timestamp = datetime.now(timezone.utc).isoformat()

        if getattr(record, 'symbol', None):
            # Market-specific logs
            base_format = "{timestamp} | {levelname:8} | {symbol:8} | {message}"
        else:
            # System logs
            base_format = "{timestamp} | {levelname:8} | {name:15} | {message}"

        if self._is_console_handler(record):
            color = self.COLORS.get(record.levelname, '')
            reset = self.COLORS['RESET']
            base_format = f"{color}{base_format}{reset}"

        formatted = base_format.format(
            timestamp=timestamp,
            levelname=record.levelname,
            name=record.name,
            symbol=getattr(record, 'symbol', ''),
            message=record.getMessage()
        )

        if record.exc_info:
            formatted += f"\n{self.formatException(record.exc_info)}"

        return formatted

    def _is_console_handler(self, record):
        """Check if this is being formatted for console output"""
        return getattr(record, '_console_output', False)


class _ConsoleMarker(logging.Filter):
    """Marks records for console-specific formatting"""

    def filter(self, record):
        record._console_output = True
        return True


def setup_logger(
    name: str,
    log_file: Optional[str] = None,
    level: str = "INFO",
    include_console: bool = True
) -> logging.Logger:
    """
    Setup logger with file and console output.

    Args:
        name: Logger name (e.g., 'market', 'system')
        log_file: Log file path (optional)
        level: Log level
        include_console: Add console handler
    """
    logger = logging.getLogger(name)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, level.upper()))

    # File handler with rotation
    if log_file:
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=settings.logging.max_file_size,
            backupCount=settings.logging.backup_count,
            encoding='utf-8'
        )
        file_handler.setFormatter(CustomFormatter())
        logger.addHandler(file_handler)

    if include_console and settings.logging.console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(CustomFormatter())
        # No ANSI colours in production
        if not settings.is_production():
            console_handler.addFilter(_ConsoleMarker())
        logger.addHandler(console_handler)

    return logger


def _log_file(name: str) -> Optional[str]:
    if not settings.logging.log_to_file:
        return None
    return os.path.join(settings.logging.file_path, f"{name}.log")


# Pre-configured loggers
def get_system_logger() -> logging.Logger:
    """Get system logger for application events"""
    return setup_logger(
        name="system",
        log_file=_log_file("system"),
        level=settings.get_log_level()
    )


def get_market_logger() -> logging.Logger:
    """Get market logger for price updates and broadcasts"""
    return setup_logger(
        name="market",
        log_file=_log_file("market"),
        level=settings.get_log_level()
    )


def get_notification_logger() -> logging.Logger:
    """Get notification logger for investor alerts and push messages"""
    return setup_logger(
        name="notifications",
        log_file=_log_file("notifications"),
        level=settings.get_log_level()
    )


def get_strategy_logger() -> logging.Logger:
    """Get strategy logger for trading bot decisions"""
    return setup_logger(
        name="strategy",
        log_file=_log_file("strategy"),
        level=settings.get_log_level()
    )


# Utility functions for structured logging
def log_price_event(logger: logging.Logger, symbol: str, event: str, **kwargs):
    """Log market event with structured data"""
    extra = {'symbol': symbol}
    data = json.dumps(kwargs, default=str)
    logger.info(f"{event}: {data}", extra=extra)


def log_error_with_context(logger: logging.Logger, error: Exception, context: dict):
    """Log error with full context information"""
    context_data = json.dumps(context, default=str)
    logger.error(
        f"Error: {str(error)} | Context: {context_data}", exc_info=True)

# config/settings.py
"""
Application configuration with validation and environment support.
This module defines the settings for the price monitor: logging output and
where the watchlist (monitored stock and its observers) is loaded from.
"""
import os
from typing import Optional
from dataclasses import dataclass
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_WATCHLIST = os.path.join(os.path.dirname(__file__), "watchlist.json")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    file_path: str = "logs"
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5
    console_output: bool = True
    log_to_file: bool = False

    def __post_init__(self):
        self.level = self.level.upper()
        if self.level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.level}")
        if self.log_to_file:
            os.makedirs(self.file_path, exist_ok=True)


@dataclass
class MonitorConfig:
    """Watchlist location"""
    watchlist_path: Optional[str] = None

    def __post_init__(self):
        if not self.watchlist_path:
            self.watchlist_path = DEFAULT_WATCHLIST


class Settings:
    """Main application settings"""

    def __init__(self):
        self.logging = LoggingConfig(
            level=os.getenv('LOG_LEVEL', 'INFO'),
            file_path=os.getenv('LOG_DIR', 'logs'),
            console_output=_env_flag('LOG_CONSOLE', 'true'),
            log_to_file=_env_flag('LOG_TO_FILE')
        )

        self.monitor = MonitorConfig(
            watchlist_path=os.getenv('WATCHLIST_FILE')
        )

        # Environment
        self.environment = os.getenv('ENVIRONMENT', 'development')
        self.debug = _env_flag('DEBUG')

    def is_production(self) -> bool:
        """Check if running in production"""
        return self.environment.lower() == 'production'

    def get_log_level(self) -> str:
        """Get effective log level"""
        if self.debug:
            return "DEBUG"
        return self.logging.level


# Global settings instance
settings = Settings()

"""Configuration management"""
import logging
import os
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

from wellness_quest.exceptions import ConfigurationError

load_dotenv()

# Storage
DATA_PATH: Path = Path(os.getenv("DATA_PATH", "./data"))
STATE_STORAGE_KEY: str = os.getenv("STATE_STORAGE_KEY", "wellness-quest-state-v2")

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# Calendar day boundaries ("today") are computed in this zone
USER_TIMEZONE: str = os.getenv("USER_TIMEZONE", "UTC")


# Validation
def validate_config() -> None:
    """Validate configuration values"""
    if not isinstance(logging.getLevelName(LOG_LEVEL.upper()), int):
        raise ConfigurationError(f"Unknown LOG_LEVEL: {LOG_LEVEL}", config_key="LOG_LEVEL")
    try:
        ZoneInfo(USER_TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigurationError(
            f"Unknown USER_TIMEZONE: {USER_TIMEZONE}",
            config_key="USER_TIMEZONE",
            cause=e
        )
    if not STATE_STORAGE_KEY:
        raise ConfigurationError("STATE_STORAGE_KEY is required", config_key="STATE_STORAGE_KEY")

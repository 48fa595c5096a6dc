"""Configuration management using Pydantic BaseSettings with JSON file support."""
import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


def flatten_json_config(config: dict[str, Any]) -> dict[str, Any]:
    """Flatten nested JSON config into flat key-value pairs.

    Supports grouping related keys by section:
    {
        "redis": {"redis_host": "localhost", "redis_port": 6379},
        "reporting": {"timezone": "Africa/Bamako"}
    }

    Becomes:
    {"redis_host": "localhost", "redis_port": 6379, "timezone": "Africa/Bamako"}

    Keys starting with "_" (like "_comment") are skipped.
    """
    result = {}

    for key, value in config.items():
        if key.startswith("_"):
            continue

        if isinstance(value, dict):
            result.update(flatten_json_config(value))
        else:
            result[key] = value

    return result


def load_json_config(config_file: Optional[str] = None) -> dict[str, Any]:
    """Load configuration from a JSON file.

    Args:
        config_file: Path to JSON config file. If None, checks CONFIG_FILE env var.

    Returns:
        Flattened configuration values, or an empty dict if no usable file was found.
    """
    file_path = config_file or os.getenv("CONFIG_FILE")

    if not file_path:
        return {}

    path = Path(file_path)
    if not path.exists():
        logger.warning(f"Config file not found: {file_path}")
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in config file {file_path}: {e}")
        return {}
    except OSError as e:
        logger.error(f"Error reading config file {file_path}: {e}")
        return {}

    if not isinstance(config, dict):
        logger.error(f"Config file {file_path} must contain a JSON object")
        return {}

    logger.info(f"Loaded configuration from: {file_path}")
    return flatten_json_config(config)


class Settings(BaseSettings):
    """Application configuration.

    Configuration priority (highest to lowest):
    1. Environment variables
    2. JSON config file (specified via CONFIG_FILE env var)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Redis Configuration
    redis_host: str = "redis"
    redis_port: int = 6379
    redis_password: str = ""
    redis_db: int = 0

    # Server Configuration
    server_port: int = 8080
    log_level: str = "INFO"

    # Reporting Configuration
    # Africa/Bamako is UTC+0 with no daylight-saving shifts
    timezone: str = "Africa/Bamako"
    venues_page_size: int = 10
    export_filename_prefix: str = "salles"

    def __init__(self, **kwargs):
        """Initialize settings from JSON file and environment variables.

        Priority: env vars > JSON config > defaults
        """
        json_config = load_json_config()

        # Env vars must still win over the JSON file, so JSON values are
        # only used for keys that are not set in the environment.
        json_config = {
            key: value
            for key, value in json_config.items()
            if os.getenv(key.upper()) is None and os.getenv(key) is None
        }

        super().__init__(**{**json_config, **kwargs})

    @property
    def redis_address(self) -> str:
        """Get Redis connection address in host:port format."""
        return f"{self.redis_host}:{self.redis_port}"

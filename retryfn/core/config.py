"""Configuration management for retryfn."""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# Load environment variables from .env file
load_dotenv()


def _env_count(name: str, default: int) -> int:
    """Read a positive integer from the environment, falling back to default."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value < 1:
        logger.warning(f"Ignoring {name}={raw!r}: expected a positive integer, using {default}")
        return default
    return value


class GlobalConfig(BaseModel):
    """Global runtime configuration."""

    # Async loop
    # Checked when resolved, see retryfn.resilience.aio.get_sleeper
    async_backend: str = Field(
        default_factory=lambda: os.getenv("RETRYFN_ASYNC_BACKEND", "asyncio").lower()
    )

    # CLI
    schedule_count: int = Field(
        default_factory=lambda: _env_count("RETRYFN_SCHEDULE_COUNT", 10)
    )

    # Logging
    log_level: str = Field(
        default_factory=lambda: os.getenv("RETRYFN_LOG_LEVEL", "WARNING")
    )
    log_format: str = Field(
        default_factory=lambda: os.getenv(
            "RETRYFN_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    )


# Global configuration instance
config = GlobalConfig()


def get_config() -> GlobalConfig:
    """Get global configuration instance."""
    return config


def reload_config() -> GlobalConfig:
    """Reload configuration from environment."""
    load_dotenv(override=True)
    global config
    config = GlobalConfig()
    return config

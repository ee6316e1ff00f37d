"""Analytics configuration.

Settings are read from ``~/.config/tradestats/config.toml``::

    [analytics]
    starting_capital = 10000.0
    bin_width = 50.0
"""

import logging
import os
from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "tradestats" / "config.toml"
CONFIG_ENV_VAR = "TRADESTATS_CONFIG"


class AnalyticsConfig(BaseModel):
    """Parameters supplied to the analytics engine."""

    starting_capital: float = Field(default=10000.0, description="Equity before the first trade")
    bin_width: float = Field(default=50.0, gt=0, description="P&L histogram bin width")

    model_config = {"frozen": True}


def get_config_path() -> Path:
    """Resolve the config file path, honouring ``TRADESTATS_CONFIG``."""
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override).expanduser() if override else DEFAULT_CONFIG_PATH


def load_config(path: Optional[Path] = None) -> AnalyticsConfig:
    """Load analytics settings, falling back to defaults.

    Args:
        path: Config file to read. Defaults to ``get_config_path()``.

    Returns:
        AnalyticsConfig. Defaults are returned when the file is missing,
        unreadable, or holds invalid values.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return AnalyticsConfig()

    try:
        data = toml.load(config_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning("Could not read config %s: %s", config_path, e)
        return AnalyticsConfig()

    try:
        return AnalyticsConfig(**data.get("analytics", {}))
    except ValidationError as e:
        logger.warning("Invalid analytics settings in %s: %s", config_path, e)
        return AnalyticsConfig()

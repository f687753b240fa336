"""Configuration management for habitkit."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

HABITKIT_HOME = Path(os.environ.get("HABITKIT_HOME", Path.home() / "habitkit"))
CONFIG_FILE = HABITKIT_HOME / "config" / "habitkit.conf"
DATA_DIR = HABITKIT_HOME / "data"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class Config:
    """habitkit configuration."""

    data_dir: str = ""
    date_format: str = "%a %b %d"
    show_completed: bool = True

    def resolved_data_dir(self) -> Path:
        """Data directory from config, falling back to DATA_DIR."""
        if self.data_dir:
            return Path(self.data_dir).expanduser()
        return DATA_DIR


def _parse_bool(key: str, value: str, default: bool) -> bool:
    lowered = value.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    logger.warning(f"Invalid boolean for {key.upper()}: {value!r}")
    return default


def load_config(path: Path | None = None) -> Config:
    """Load configuration from habitkit.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value[:1] in ('"', "'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            value = value.split("#")[0].strip()

        match key:
            case "data_dir":
                config.data_dir = value
            case "date_format":
                config.date_format = value
            case "show_completed":
                config.show_completed = _parse_bool(key, value, config.show_completed)
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config

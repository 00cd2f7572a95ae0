# Configuration
"""
Settings for the leitbox command line tools, read from config.json.
"""
import json
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import structlog

logger = structlog.get_logger(__name__)

CONFIG_ENV_VAR = "LEITBOX_CONFIG"
DEFAULT_CONFIG_PATH = Path("config.json")


@dataclass
class Settings:
    """CLI defaults."""
    default_difficulty: str = "easy"
    simulate_days: int = 30
    log_level: str = "INFO"


def config_path() -> Path:
    """Path of the config file, honouring LEITBOX_CONFIG."""
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    return Path(override) if override else DEFAULT_CONFIG_PATH


def _load_config(path: Path) -> dict:
    """Load raw configuration from a JSON file."""
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("config_unreadable", path=str(path), error=repr(exc))
        return {}
    if not isinstance(data, dict):
        logger.warning("config_not_an_object", path=str(path))
        return {}
    return data


def load_settings(path: Optional[Path] = None) -> Settings:
    """Build Settings from the config file, keeping defaults for bad values."""
    raw = _load_config(path or config_path())
    settings = Settings()
    for f in fields(Settings):
        if f.name not in raw:
            continue
        value = raw[f.name]
        default = getattr(settings, f.name)
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, type(default)):
            logger.warning("config_value_ignored", key=f.name, value=repr(value))
            continue
        setattr(settings, f.name, value)
    return settings

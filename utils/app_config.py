"""Startup configuration. Zero imports from the rest of the app.

Stores user preferences that must be known before the store and window exist
(latency simulation, demo data, appearance, log level).
Config lives in ~/.budget_easy/config.json.
"""
import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".budget_easy"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULTS = {
    "simulate_latency": True,
    "seed_demo_data": True,
    "appearance_mode": "system",
    "date_format": "MMM D, YYYY",
    "log_level": "INFO",
}


def load_config() -> dict:
    """Returns {} on missing or corrupt file. Never raises."""
    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Ignoring unreadable config %s: %s", CONFIG_FILE, e)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: dict) -> None:
    """Creates ~/.budget_easy/ if needed; atomic write via .tmp + os.replace()."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    tmp = CONFIG_FILE.with_suffix(".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        os.replace(tmp, CONFIG_FILE)
    except OSError as e:
        logger.error("Could not save config to %s: %s", CONFIG_FILE, e)
        tmp.unlink(missing_ok=True)


def get_setting(key: str, default=None):
    """Return the stored value, else the built-in default, else `default`."""
    config = load_config()
    if key in config:
        return config[key]
    return DEFAULTS.get(key, default)


def set_setting(key: str, value) -> None:
    """Update one key in config and save. None removes the key."""
    config = load_config()
    if value is None:
        config.pop(key, None)
    else:
        config[key] = value
    save_config(config)


def get_log_level() -> str:
    """Env var BUDGET_EASY_LOG_LEVEL wins over the config file."""
    level = os.getenv("BUDGET_EASY_LOG_LEVEL") or get_setting("log_level")
    return str(level).upper()

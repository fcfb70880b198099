"""
User settings for PasteNotes.

Settings live in config.json next to the notes file. Unknown keys are kept,
known keys are type-checked, and a file that fails validation is moved to
config.json.bak so the app starts on defaults.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from app_paths import get_app_dir

logger = logging.getLogger(__name__)

CONFIG_FILE = get_app_dir() / "config.json"

THEME_MODES = ("system", "light", "dark")
BOOL_KEYS = ("high_contrast", "clipboard_monitor_enabled")
SECONDS_KEYS = ("poll_interval", "save_debounce")


class ConfigManager:
    """Loads, validates and atomically saves the settings file."""

    DEFAULTS = {
        "theme_mode": "System",
        "language": "en",
        "high_contrast": False,
        "clipboard_monitor_enabled": True,
        "poll_interval": 1.0,
        "save_debounce": 0.5,
    }

    @staticmethod
    def _resolve_config_file() -> Path:
        try:
            CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
            return CONFIG_FILE
        except OSError:
            return Path("config.json")

    @staticmethod
    def _validate_config(config: dict[str, Any]) -> None:
        """Raise ValueError if any known setting has the wrong type or range."""
        if not isinstance(config, dict):
            raise ValueError("Configuration must be a dictionary")

        theme_mode = config.get("theme_mode", "System")
        if not isinstance(theme_mode, str) or theme_mode.lower() not in THEME_MODES:
            raise ValueError("theme_mode must be one of: System, Light, Dark")

        if not isinstance(config.get("language", "en"), str):
            raise ValueError("language must be a string")

        for key in BOOL_KEYS:
            if key in config and not isinstance(config[key], bool):
                raise ValueError(f"{key} must be a boolean")

        for key in SECONDS_KEYS:
            if key not in config:
                continue
            seconds = config[key]
            # bool is an int subclass
            if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
                raise ValueError(f"{key} must be a positive number")
            if seconds <= 0:
                raise ValueError(f"{key} must be a positive number")

    @staticmethod
    def load_config() -> dict[str, Any]:
        """Return DEFAULTS overlaid with the stored settings."""
        config_path = ConfigManager._resolve_config_file()
        config = ConfigManager.DEFAULTS.copy()

        if not config_path.exists():
            logger.info("No settings file at %s, using defaults", config_path)
            return config

        try:
            if config_path.stat().st_size == 0:
                logger.warning("Settings file is empty, using defaults")
                return config
            with open(config_path, encoding="utf-8") as f:
                stored = json.load(f)
            ConfigManager._validate_config(stored)
        except (ValueError, RecursionError) as e:
            logger.warning("Invalid settings file (%s), using defaults", e)
            ConfigManager._set_aside(config_path)
            return config
        except OSError as e:
            logger.error("Could not read settings from %s: %s", config_path, e)
            return config

        config.update(stored)
        logger.info("Loaded settings from %s", config_path)
        return config

    @staticmethod
    def save_config(config: dict[str, Any]) -> None:
        """
        Validate and write the settings.

        Raises:
            ValueError: If a setting is invalid. Nothing is written.
            OSError: If the file cannot be written.
        """
        ConfigManager._validate_config(config)
        config_path = ConfigManager._resolve_config_file()

        temp_path = None
        try:
            fd, temp_path = tempfile.mkstemp(
                dir=str(config_path.parent), prefix=".settings_", suffix=".json"
            )
            os.chmod(temp_path, 0o600)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(config, f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(temp_path, str(config_path))
            logger.info("Settings saved to %s", config_path)
        except OSError as e:
            logger.error("Failed to save settings: %s", e)
            raise
        finally:
            if temp_path and os.path.exists(temp_path):
                try:
                    os.unlink(temp_path)
                except OSError as exc:
                    logger.warning("Could not remove %s: %s", temp_path, exc)

    @staticmethod
    def _set_aside(config_path: Path) -> None:
        backup = config_path.with_suffix(".json.bak")
        try:
            os.replace(config_path, backup)
            logger.info("Invalid settings moved to %s", backup)
        except OSError as exc:
            logger.warning("Could not move invalid settings aside: %s", exc)

"""
Per-user application data locations.
"""

import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

APP_NAME = "PasteNotes"


def _default_app_dir() -> Path:
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME
    return Path.home() / ".pastenotes"


def get_app_dir() -> Path:
    """
    Return the application data directory, creating it if needed.

    Falls back to the working directory when the home directory
    is not writable (sandboxed environments).
    """
    try:
        app_dir = _default_app_dir()
        app_dir.mkdir(parents=True, exist_ok=True)
        return app_dir
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.warning("App data directory unavailable (%s), using cwd", e)
        return Path(".")

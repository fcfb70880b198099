import logging
import threading

from clipboard_backend import get_clipboard
from clipboard_monitor import ClipboardMonitor
from config_manager import ConfigManager
from history_manager import HistoryManager
from localization_manager import LocalizationManager

logger = logging.getLogger(__name__)


class AppState:
    _instance = None
    _instance_lock = threading.RLock()

    def __new__(cls):
        """Thread-safe singleton constructor."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    instance = super(AppState, cls).__new__(cls)
                    instance._initialized = False
                    cls._instance = instance
        return cls._instance

    def __init__(self):
        with self._instance_lock:
            if self._initialized:
                return

            logger.info("Initializing AppState singleton...")

            self.config = ConfigManager.load_config()
            LocalizationManager.load_language(self.config.get("language", "en"))

            self.clipboard = get_clipboard()
            self.history = HistoryManager(
                clipboard=self.clipboard,
                save_debounce=self.config.get(
                    "save_debounce", HistoryManager.DEFAULT_SAVE_DEBOUNCE
                ),
            )
            self.history.load()

            self.clipboard_monitor = ClipboardMonitor(
                self.clipboard,
                self.history,
                poll_interval=self.config.get(
                    "poll_interval", ClipboardMonitor.DEFAULT_POLL_INTERVAL
                ),
            )
            self.clipboard_monitor.active = self.config.get(
                "clipboard_monitor_enabled", True
            )
            self.high_contrast = self.config.get("high_contrast", False)
            self.shutdown_flag = threading.Event()

            self._initialized = True
            logger.info("AppState initialization complete")

    def cleanup(self):
        """Stop polling and write any unsaved history."""
        if self.shutdown_flag.is_set():
            return
        logger.info("Cleaning up AppState...")
        self.shutdown_flag.set()
        self.clipboard_monitor.stop()
        self.history.flush()

    def set_clipboard_monitor_enabled(self, enabled: bool):
        """Pause or resume capture and remember the choice."""
        self.clipboard_monitor.active = enabled
        self.config["clipboard_monitor_enabled"] = enabled
        try:
            ConfigManager.save_config(self.config)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning("Could not persist clipboard monitor setting: %s", e)


state = AppState()

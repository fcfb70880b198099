"""
Clipboard monitor module.

Polls the system clipboard and hands new text snippets to the history.
"""

import logging
import threading
from typing import Hashable, Optional

from clipboard_backend import ClipboardError
from history_manager import HistoryManager
from note import Note

logger = logging.getLogger(__name__)


class ClipboardMonitor:
    """
    Background poller for the system clipboard.

    On every tick the clipboard change token is compared with the last one
    seen; only when it differs is the text read, trimmed and inserted.
    """

    DEFAULT_POLL_INTERVAL = 1.0  # seconds

    def __init__(
        self,
        clipboard,
        history: HistoryManager,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ):
        if poll_interval <= 0:
            raise ValueError("poll_interval must be positive")
        self._clipboard = clipboard
        self._history = history
        self._poll_interval = poll_interval
        self._last_token: Optional[Hashable] = None
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._thread_lock = threading.Lock()
        self.active = True

    @property
    def poll_interval(self) -> float:
        return self._poll_interval

    @property
    def is_running(self) -> bool:
        with self._thread_lock:
            return self._thread is not None and self._thread.is_alive()

    def prime(self):
        """Remember the current clipboard state without capturing it."""
        self._last_token = self._clipboard.change_token()

    def start(self) -> bool:
        """Starts the monitor thread. Returns False if the clipboard is unusable."""
        with self._thread_lock:
            if self._thread and self._thread.is_alive():
                logger.debug("Clipboard monitor already running.")
                return True

            # Test clipboard access first
            try:
                self.prime()
                logger.info("Clipboard monitoring initialized.")
            except ClipboardError as e:
                logger.warning("Clipboard access not available: %s", e)
                logger.warning("Clipboard monitor will be disabled")
                return False
            except Exception as e:  # pylint: disable=broad-exception-caught
                logger.error("Unexpected clipboard error: %s", e)
                return False

            self._stop_event.clear()
            self._thread = threading.Thread(
                target=self._clipboard_loop, daemon=True, name="ClipboardMonitor"
            )
            self._thread.start()

        logger.info("Clipboard monitor thread started.")
        return True

    def stop(self, timeout: float = 2.0):
        """Stops the monitor thread and waits for it to exit."""
        self._stop_event.set()
        with self._thread_lock:
            thread = self._thread
            self._thread = None
        if thread and thread.is_alive() and thread is not threading.current_thread():
            thread.join(timeout=timeout)
        logger.info("Clipboard monitor stopped.")

    def poll_once(self) -> Optional[Note]:
        """
        Performs a single tick.

        Returns:
            The inserted note, or None if nothing new was captured.
        """
        token = self._clipboard.change_token()
        if token == self._last_token:
            return None
        self._last_token = token

        if not self.active:
            return None

        text = self._clipboard.read_text()
        note = Note.from_clipboard(text)
        if note is None:
            return None

        if self._history.insert(note):
            return note
        return None

    def _clipboard_loop(self):
        """Background loop that checks the clipboard for new text."""
        while not self._stop_event.wait(self._poll_interval):
            try:
                self.poll_once()
            except ClipboardError as e:
                logger.debug("Clipboard temporarily unavailable: %s", e)
            except Exception as e:  # pylint: disable=broad-exception-caught
                # Catch-all to prevent thread death
                logger.error("Error in clipboard monitor: %s", e, exc_info=True)

"""
Plain-text clipboard access.

The monitor needs three things from the OS clipboard: a token that changes
whenever new content is copied, the current text, and a way to write text.
"""

import importlib.util
import logging
import sys
from typing import Hashable, Optional

import pyperclip

logger = logging.getLogger(__name__)


class ClipboardError(Exception):
    """Raised when the system clipboard cannot be accessed."""


class PyperclipClipboard:
    """
    Portable clipboard backed by pyperclip.

    pyperclip exposes no change counter, so the current text itself
    serves as the change token.
    """

    def change_token(self) -> Hashable:
        return self._paste()

    def read_text(self) -> Optional[str]:
        text = self._paste()
        return text if text else None

    def write_text(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(str(e)) from e

    @staticmethod
    def _paste() -> str:
        try:
            return pyperclip.paste() or ""
        except pyperclip.PyperclipException as e:
            raise ClipboardError(str(e)) from e


class AppKitClipboard:
    """macOS general pasteboard via PyObjC, using its changeCount."""

    def __init__(self):
        # pylint: disable=import-outside-toplevel
        from AppKit import NSPasteboard, NSPasteboardTypeString

        self._pasteboard = NSPasteboard.generalPasteboard()
        self._string_type = NSPasteboardTypeString

    def change_token(self) -> Hashable:
        return int(self._pasteboard.changeCount())

    def read_text(self) -> Optional[str]:
        text = self._pasteboard.stringForType_(self._string_type)
        return str(text) if text is not None else None

    def write_text(self, text: str) -> None:
        self._pasteboard.clearContents()
        if not self._pasteboard.setString_forType_(text, self._string_type):
            raise ClipboardError("NSPasteboard rejected the string")


def get_clipboard():
    """Return the best clipboard backend for this platform."""
    if sys.platform == "darwin" and importlib.util.find_spec("AppKit") is not None:
        try:
            backend = AppKitClipboard()
            logger.debug("Using AppKit clipboard backend")
            return backend
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning("AppKit clipboard unavailable (%s), using pyperclip", e)
    return PyperclipClipboard()

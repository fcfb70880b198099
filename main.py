"""
Main application entry point.

Initializes logging and the UI, then starts clipboard polling.
"""

import logging
import os
import sys
import traceback
from datetime import datetime
from typing import Optional

import flet as ft

from app_controller import AppController
from app_paths import get_app_dir
from app_state import state
from localization_manager import LocalizationManager as LM
from logger_config import setup_logging
from theme import Theme
from ui_manager import UIManager

# Setup logging immediately
setup_logging()
logger = logging.getLogger(__name__)

# Global instances
UI: Optional[UIManager] = None
PAGE: Optional[ft.Page] = None
CONTROLLER: Optional[AppController] = None


def main(pg: ft.Page):
    """Main application loop."""
    # pylint: disable=global-statement
    global PAGE, UI, CONTROLLER
    PAGE = pg

    logger.info("Initializing main UI...")

    PAGE.title = LM.get("app_title")

    theme_mode_str = state.config.get("theme_mode", "System").lower()
    PAGE.theme_mode = {
        "light": ft.ThemeMode.LIGHT,
        "dark": ft.ThemeMode.DARK,
    }.get(theme_mode_str, ft.ThemeMode.SYSTEM)

    PAGE.padding = 0
    PAGE.window.min_width = 850
    PAGE.window.min_height = 550
    PAGE.bgcolor = Theme.BG_DARK
    PAGE.theme = (
        Theme.get_high_contrast_theme() if state.high_contrast else Theme.get_theme()
    )

    UI = UIManager(PAGE, state.history)
    CONTROLLER = AppController(PAGE, UI)

    def on_keyboard(e: ft.KeyboardEvent):
        # Keys typed into a text field edit the text, not the list
        if UI and UI.is_text_input_focused():
            return
        # Delete, or Cmd+Backspace on macOS keyboards
        if e.key == "Delete" or (e.key == "Backspace" and e.meta):
            if CONTROLLER:
                CONTROLLER.on_delete_selected()

    PAGE.on_keyboard_event = on_keyboard

    main_view = UI.initialize_views(
        on_copy_callback=CONTROLLER.on_copy,
        on_share_callback=CONTROLLER.on_share,
        on_delete_callback=CONTROLLER.on_delete,
        on_clear_all_callback=CONTROLLER.on_clear_all,
        on_rename_callback=CONTROLLER.on_rename,
        on_toggle_clipboard_callback=CONTROLLER.on_toggle_clipboard,
        clipboard_enabled=state.clipboard_monitor.active,
    )

    PAGE.add(main_view)
    logger.info("Main view added to page.")

    CONTROLLER.start_clipboard_monitor()

    def cleanup_on_disconnect(e):
        # pylint: disable=unused-argument
        logger.info("Page disconnected, cleaning up...")
        if CONTROLLER:
            CONTROLLER.cleanup()

    PAGE.on_disconnect = cleanup_on_disconnect
    PAGE.on_close = cleanup_on_disconnect


def global_crash_handler(exctype, value, tb):
    """
    Global hook to catch any unhandled exception and record it before exiting.
    """
    error_trace = "".join(traceback.format_exception(exctype, value, tb))
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    crash_report = (
        f"PASTENOTES CRASH REPORT [{timestamp}]\n"
        f"{'-'*50}\n"
        f"Type: {exctype.__name__}\n"
        f"Message: {value}\n\n"
        f"Traceback:\n{error_trace}\n"
        f"{'-'*50}\n\n"
    )

    log_path = get_app_dir() / "crash.log"
    try:
        with open(
            log_path, "a", encoding="utf-8", opener=lambda p, f: os.open(p, f, 0o600)
        ) as f:
            f.write(crash_report)
    except OSError as e:
        print(f"Failed to write crash log {log_path}: {e}", file=sys.stderr)

    logger.critical("PASTENOTES CRASHED\n%s", crash_report)

    # Write any pending history
    try:
        state.history.flush()
    except Exception:  # pylint: disable=broad-exception-caught
        logger.exception("Failed to flush history during crash handling")

    sys.exit(1)


def run():
    """Console entry point."""
    sys.excepthook = global_crash_handler

    logger.info("=" * 60)
    logger.info("PasteNotes Starting...")
    logger.info("Python: %s", sys.version)
    logger.info("History file: %s", state.history.store.path)
    logger.info("=" * 60)

    try:
        ft.app(target=main)
    except Exception as e:  # pylint: disable=broad-exception-caught
        global_crash_handler(type(e), e, e.__traceback__)
    finally:
        state.cleanup()


if __name__ == "__main__":
    run()

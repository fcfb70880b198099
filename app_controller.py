"""
AppController module.
Handles user actions and bridges the UI and the history manager.
"""

import logging

import flet as ft

from app_state import state
from localization_manager import LocalizationManager as LM
from note import Note
from ui_manager import UIManager
from ui_utils import share_text

logger = logging.getLogger(__name__)


class AppController:
    """
    Controller for the main window.
    Every mutation goes through the history manager; the UI only re-renders.
    """

    def __init__(self, page: ft.Page, ui_manager: UIManager):
        self.page = page
        self.ui = ui_manager
        self.history = state.history
        self.history.add_listener(self.on_history_changed)

    def _notify(self, message: str):
        self.page.open(ft.SnackBar(content=ft.Text(message)))

    def start_clipboard_monitor(self) -> bool:
        """Starts the clipboard monitor."""
        started = state.clipboard_monitor.start()
        if not started:
            self._notify(LM.get("clipboard_unavailable"))
        return started

    def cleanup(self):
        """Clean up resources on shutdown."""
        logger.info("Controller cleaning up...")
        self.history.remove_listener(self.on_history_changed)
        state.cleanup()
        logger.info("Cleanup complete")

    # --- Callbacks ---

    def on_history_changed(self):
        """History listener; may run on the monitor or timer thread."""
        try:
            self.ui.refresh()
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning("Failed to refresh UI after history change: %s", e)

    def on_copy(self, note: Note):
        """Callback to put a note back on the clipboard."""
        logger.info("User requested copy of note %s", note.id)
        if self.history.copy_to_clipboard(note):
            self._notify(LM.get("note_copied"))
        else:
            self._notify(LM.get("copy_failed"))

    def on_share(self, note: Note):
        """Callback to share a note's content."""
        if not share_text(note.content, self.page, LM.get("share_subject")):
            self._notify(LM.get("share_failed"))

    def on_delete(self, note: Note):
        """Callback to delete a single note."""
        if self.history.delete(note.id):
            self._notify(LM.get("note_deleted"))

    def on_delete_selected(self):
        """Delete key handler."""
        note = self.ui.get_selected_note()
        if note:
            self.on_delete(note)

    def on_rename(self, note_id: str, title: str):
        """Callback for title edits in the detail pane."""
        self.history.rename_note(note_id, title)

    def on_clear_all(self):
        """Clears the history after a confirmation dialog."""
        dlg = ft.AlertDialog(modal=True)

        def close_dlg(e):
            # pylint: disable=unused-argument
            self.page.close(dlg)

        def confirm_clear(e):
            # pylint: disable=unused-argument
            logger.info("User confirmed clear all")
            try:
                self.history.clear_all()
                self._notify(LM.get("history_cleared"))
            finally:
                self.page.close(dlg)

        dlg.title = ft.Text(LM.get("confirm_clear_all"))
        dlg.actions = [
            ft.TextButton(LM.get("yes"), on_click=confirm_clear),
            ft.TextButton(LM.get("no"), on_click=close_dlg),
        ]
        dlg.actions_alignment = ft.MainAxisAlignment.END

        self.page.open(dlg)

    def on_toggle_clipboard(self, active: bool, show_message: bool = True):
        """Callback to pause or resume clipboard capture."""
        state.set_clipboard_monitor_enabled(active)
        if show_message:
            msg = (
                LM.get("clipboard_monitor_enabled")
                if active
                else LM.get("clipboard_monitor_disabled")
            )
            self._notify(msg)

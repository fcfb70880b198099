"""
UI Manager module.

Builds the two panes and keeps them in sync with the history: current
search query, selected note and re-rendering after history changes.
"""

import logging
from typing import Optional

import flet as ft

from app_layout import AppLayout
from history_manager import HistoryManager
from note import Note
from views.note_detail_view import NoteDetailView
from views.notes_list_view import NotesListView

logger = logging.getLogger(__name__)


class UIManager:
    """
    Manages the application's UI state on top of the history manager.
    """

    def __init__(self, page: ft.Page, history: HistoryManager):
        self.page = page
        self.history = history
        self.list_view: Optional[NotesListView] = None
        self.detail_view: Optional[NoteDetailView] = None
        self.app_layout: Optional[AppLayout] = None

        self.selected_note_id: Optional[str] = None
        self.search_query = ""

    # pylint: disable=too-many-arguments, too-many-positional-arguments
    def initialize_views(
        self,
        on_copy_callback,
        on_share_callback,
        on_delete_callback,
        on_clear_all_callback,
        on_rename_callback,
        on_toggle_clipboard_callback,
        clipboard_enabled: bool = True,
    ) -> AppLayout:
        """Initialize both panes with their callbacks."""
        logger.debug("Initializing views...")

        self.list_view = NotesListView(
            on_select=self.select_note,
            on_copy=on_copy_callback,
            on_share=on_share_callback,
            on_delete=on_delete_callback,
            on_clear_all=on_clear_all_callback,
            on_search_change=self.set_search_query,
            on_toggle_clipboard=on_toggle_clipboard_callback,
            clipboard_enabled=clipboard_enabled,
        )
        self.detail_view = NoteDetailView(
            on_rename=on_rename_callback,
            on_copy=on_copy_callback,
            on_share=on_share_callback,
            on_delete=on_delete_callback,
        )

        self.app_layout = AppLayout(self.list_view, self.detail_view)
        self.refresh()
        return self.app_layout

    def is_text_input_focused(self) -> bool:
        """True while the search field or the title field has keyboard focus."""
        return bool(
            (self.list_view and self.list_view.search_focused)
            or (self.detail_view and self.detail_view.title_focused)
        )

    def get_selected_note(self) -> Optional[Note]:
        if self.selected_note_id is None:
            return None
        return self.history.get_by_id(self.selected_note_id)

    def select_note(self, note: Optional[Note]):
        """Select a note by identity and show it in the detail pane."""
        self.selected_note_id = note.id if note else None
        if self.detail_view:
            self.detail_view.show_note(note)
        self.render_list()

    def set_search_query(self, query: str):
        self.search_query = query
        self.render_list()

    def render_list(self):
        """Re-render the list pane from the current history and query."""
        if not self.list_view:
            return
        notes = self.history.filter(self.search_query)
        self.list_view.render(
            notes,
            selected_id=self.selected_note_id,
            query=self.search_query,
            has_any_notes=len(self.history) > 0,
        )

    def refresh(self):
        """
        Sync both panes with the history.

        The detail pane is only rebuilt when the selected note disappeared,
        so that an in-progress title edit is not reset.
        """
        if self.selected_note_id is not None and self.get_selected_note() is None:
            self.selected_note_id = None
            if self.detail_view:
                self.detail_view.show_note(None)
        self.render_list()

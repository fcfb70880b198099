"""Notes List View"""

import logging
from collections.abc import Callable
from typing import List, Optional

import flet as ft

from localization_manager import LocalizationManager as LM
from note import Note
from theme import Theme
from views.base_view import BaseView
from views.components.empty_state import EmptyState
from views.components.note_item import NoteItemControl

logger = logging.getLogger(__name__)


class NotesListView(BaseView):
    """List pane: search field, clear-all action and the note cards."""

    # pylint: disable=too-many-arguments, too-many-positional-arguments
    def __init__(
        self,
        on_select: Callable[[Note], None],
        on_copy: Callable[[Note], None],
        on_share: Callable[[Note], None],
        on_delete: Callable[[Note], None],
        on_clear_all: Callable[[], None],
        on_search_change: Callable[[str], None],
        on_toggle_clipboard: Callable[[bool], None],
        clipboard_enabled: bool = True,
    ):
        super().__init__(LM.get("clipboard_history"), ft.Icons.CONTENT_PASTE)
        self.on_select = on_select
        self.on_copy = on_copy
        self.on_share = on_share
        self.on_delete = on_delete
        self.search_focused = False

        self.search_input = ft.TextField(
            on_change=lambda e: on_search_change(e.control.value or ""),
            on_focus=lambda _: self._set_search_focused(True),
            on_blur=lambda _: self._set_search_focused(False),
            **Theme.get_input_decoration(
                hint_text=LM.get("search_clips"), prefix_icon=ft.Icons.SEARCH
            ),
        )

        self.clear_btn = ft.IconButton(
            ft.Icons.DELETE_SWEEP,
            tooltip=LM.get("clear_all_tooltip"),
            icon_color=Theme.ERROR,
            on_click=lambda _: on_clear_all(),
            visible=False,
        )

        self.capture_switch = ft.Switch(
            label=LM.get("capture_clipboard"),
            value=clipboard_enabled,
            on_change=lambda e: on_toggle_clipboard(bool(e.control.value)),
        )

        self.header_actions.controls.append(self.clear_btn)

        self.notes_list = ft.ListView(expand=True, spacing=6, padding=4)

        self.add_control(self.search_input)
        self.add_control(self.notes_list)
        self.add_control(self.capture_switch)

    def _set_search_focused(self, focused: bool):
        self.search_focused = focused

    def render(
        self,
        notes: List[Note],
        selected_id: Optional[str] = None,
        query: str = "",
        has_any_notes: bool = False,
    ):
        """Rebuild the list from the given (already filtered) notes."""
        self.notes_list.controls.clear()
        self.clear_btn.visible = has_any_notes or bool(notes)

        if not notes:
            if query.strip():
                message = LM.get("no_matching_clips", query.strip())
            else:
                message = LM.get("no_clips")
            self.notes_list.controls.append(
                EmptyState(ft.Icons.CONTENT_PASTE_OFF, message)
            )
        else:
            logger.debug("Rendering %d notes", len(notes))
            for note in notes:
                self.notes_list.controls.append(
                    NoteItemControl(
                        note,
                        on_select=self.on_select,
                        on_copy=self.on_copy,
                        on_share=self.on_share,
                        on_delete=self.on_delete,
                        selected=note.id == selected_id,
                    )
                )

        self.safe_update()

"""Note Detail View"""

import logging
from collections.abc import Callable
from typing import Optional

import flet as ft

from localization_manager import LocalizationManager as LM
from note import Note
from theme import Theme
from ui_utils import format_note_date
from views.components.empty_state import EmptyState

logger = logging.getLogger(__name__)


class NoteDetailView(ft.Container):
    """
    Detail pane for the selected note.

    The title is editable; content is read-only and shown in a monospaced
    block. With no selection an empty state is shown instead.
    """

    # pylint: disable=too-many-arguments, too-many-positional-arguments
    def __init__(
        self,
        on_rename: Callable[[str, str], None],
        on_copy: Callable[[Note], None],
        on_share: Callable[[Note], None],
        on_delete: Callable[[Note], None],
    ):
        super().__init__()
        self.expand = True
        self.padding = 20
        self.bgcolor = Theme.BG_DARK

        self.note: Optional[Note] = None
        self.title_focused = False
        self.on_rename = on_rename
        self.on_copy = on_copy
        self.on_share = on_share
        self.on_delete = on_delete

        self.title_input = ft.TextField(
            label=LM.get("title"),
            text_size=20,
            on_change=self._title_changed,
            on_focus=lambda _: self._set_title_focused(True),
            on_blur=lambda _: self._set_title_focused(False),
            **Theme.get_input_decoration(),
        )
        self.meta_text = ft.Text("", size=12, color=Theme.TEXT_MUTED)
        self.content_text = ft.Text(
            "",
            selectable=True,
            font_family=Theme.MONOSPACE_FONT,
            color=Theme.TEXT_PRIMARY,
        )

        self.copy_btn = ft.OutlinedButton(
            LM.get("copy"),
            icon=ft.Icons.CONTENT_COPY,
            on_click=lambda _: self._with_note(self.on_copy),
        )
        self.share_btn = ft.OutlinedButton(
            LM.get("share"),
            icon=ft.Icons.IOS_SHARE,
            on_click=lambda _: self._with_note(self.on_share),
        )
        self.delete_btn = ft.OutlinedButton(
            LM.get("delete"),
            icon=ft.Icons.DELETE_OUTLINE,
            on_click=lambda _: self._with_note(self.on_delete),
            style=ft.ButtonStyle(
                color=Theme.ERROR,
                side=ft.BorderSide(1, Theme.ERROR),
            ),
        )

        self.detail_col = ft.Column(
            [
                self.title_input,
                self.meta_text,
                ft.Container(
                    content=ft.Column(
                        [self.content_text], scroll=ft.ScrollMode.AUTO, expand=True
                    ),
                    bgcolor=Theme.BG_CARD,
                    border_radius=12,
                    padding=16,
                    expand=True,
                ),
                ft.Divider(color=Theme.BORDER),
                ft.Row([self.copy_btn, self.share_btn, self.delete_btn], spacing=10),
            ],
            expand=True,
            spacing=12,
        )
        self.empty_state = EmptyState(
            ft.Icons.CONTENT_PASTE,
            LM.get("no_note_selected"),
            LM.get("copy_to_get_started"),
        )
        self.content = self.empty_state

    def show_note(self, note: Optional[Note]):
        """Display a note, or the empty state when note is None."""
        self.note = note
        if note is None:
            self.title_focused = False
            self.content = self.empty_state
        else:
            self.title_input.value = note.title
            self.meta_text.value = (
                f"{format_note_date(note.date)} · "
                f"{LM.get('characters', len(note.content))}"
            )
            self.content_text.value = note.content
            self.content = self.detail_col
        if self.page:
            self.update()

    def _set_title_focused(self, focused: bool):
        self.title_focused = focused

    def _title_changed(self, e):
        if self.note is not None:
            self.on_rename(self.note.id, e.control.value or "")

    def _with_note(self, action: Callable[[Note], None]):
        if self.note is not None:
            action(self.note)

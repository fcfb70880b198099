"""
Note Item Control.

Represents a single clip in the list pane: title, a short preview of the
content and the capture date, with a menu of per-note actions.
"""

import logging
from collections.abc import Callable

import flet as ft

from localization_manager import LocalizationManager as LM
from note import Note
from theme import Theme
from ui_utils import format_note_date, preview_text

logger = logging.getLogger(__name__)


class NoteItemControl(ft.Container):
    """
    A card-like control representing one note.
    """

    # pylint: disable=too-many-arguments, too-many-positional-arguments
    def __init__(
        self,
        note: Note,
        on_select: Callable[[Note], None],
        on_copy: Callable[[Note], None],
        on_share: Callable[[Note], None],
        on_delete: Callable[[Note], None],
        selected: bool = False,
    ):
        super().__init__()
        self.note = note
        self.on_select = on_select
        self.on_copy = on_copy
        self.on_share = on_share
        self.on_delete = on_delete
        self.selected = selected

        for key, value in Theme.get_card_decoration(selected).items():
            setattr(self, key, value)
        self.padding = ft.padding.symmetric(vertical=8, horizontal=10)
        self.ink = True
        self.on_click = lambda _: self.on_select(self.note)

        self.title_text = ft.Text(
            note.title,
            weight=ft.FontWeight.BOLD,
            size=14,
            max_lines=1,
            overflow=ft.TextOverflow.ELLIPSIS,
            color=Theme.TEXT_PRIMARY,
        )
        self.preview_text = ft.Text(
            preview_text(note.content),
            font_family=Theme.MONOSPACE_FONT,
            size=12,
            max_lines=2,
            overflow=ft.TextOverflow.ELLIPSIS,
            color=Theme.TEXT_SECONDARY,
        )
        self.date_text = ft.Text(
            format_note_date(note.date),
            size=10,
            color=Theme.TEXT_MUTED,
        )

        self.menu = ft.PopupMenuButton(
            icon=ft.Icons.MORE_VERT,
            items=[
                ft.PopupMenuItem(
                    text=LM.get("copy"),
                    icon=ft.Icons.CONTENT_COPY,
                    on_click=lambda _: self.on_copy(self.note),
                ),
                ft.PopupMenuItem(
                    text=LM.get("share"),
                    icon=ft.Icons.IOS_SHARE,
                    on_click=lambda _: self.on_share(self.note),
                ),
                ft.PopupMenuItem(),
                ft.PopupMenuItem(
                    text=LM.get("delete"),
                    icon=ft.Icons.DELETE_OUTLINE,
                    on_click=lambda _: self.on_delete(self.note),
                ),
            ],
        )

        self.content = ft.Row(
            [
                ft.Column(
                    [self.title_text, self.preview_text, self.date_text],
                    spacing=4,
                    expand=True,
                ),
                self.menu,
            ],
            vertical_alignment=ft.CrossAxisAlignment.START,
        )

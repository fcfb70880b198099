"""
AppLayout module.
Two-pane layout: the note list on the left, the selected note on the right.
"""

import flet as ft

from theme import Theme


class AppLayout(ft.Row):
    """
    Main application layout using a Row of [List pane, Detail pane].
    """

    LIST_PANE_WIDTH = 360

    def __init__(self, list_view: ft.Control, detail_view: ft.Control):
        super().__init__()
        self.expand = True
        self.spacing = 0

        self.sidebar_container = ft.Container(
            content=list_view,
            width=self.LIST_PANE_WIDTH,
            bgcolor=Theme.BG_LIGHT,
        )

        self.content_area = ft.Container(
            expand=True,
            bgcolor=Theme.BG_DARK,
            content=detail_view,
        )

        self.controls = [
            self.sidebar_container,
            ft.Container(width=1, bgcolor=Theme.DIVIDER),
            self.content_area,
        ]

"""Base View Module"""

import flet as ft

from theme import Theme

# pylint: disable=missing-class-docstring


class BaseView(ft.Container):
    def __init__(self, title: str, icon: str | None = None, **kwargs):
        super().__init__(**kwargs)
        self.expand = True
        self.padding = 16
        self.bgcolor = Theme.BG_DARK
        self.content_col = ft.Column(expand=True, spacing=12)

        self.header_actions = ft.Row(spacing=4)
        self.header = ft.Row(
            [
                ft.Icon(icon, size=22, color=Theme.PRIMARY) if icon else ft.Container(),
                ft.Text(
                    title, size=18, weight=ft.FontWeight.BOLD, color=Theme.TEXT_PRIMARY
                ),
                ft.Container(expand=True),
                self.header_actions,
            ],
            alignment=ft.MainAxisAlignment.START,
            spacing=10,
        )

        self.content_col.controls.append(self.header)
        self.content_col.controls.append(ft.Divider(color=Theme.BORDER))
        self.content = self.content_col

    # pylint: disable=missing-function-docstring
    def add_control(self, control):
        self.content_col.controls.append(control)

    def safe_update(self):
        """Update only once the view is mounted on a page."""
        if self.page:
            self.update()

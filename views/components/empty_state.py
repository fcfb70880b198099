from typing import Optional

import flet as ft

from theme import Theme


class EmptyState(ft.Container):
    def __init__(self, icon: str, message: str, hint: Optional[str] = None):
        super().__init__()
        self.expand = True
        self.alignment = ft.alignment.center

        controls = [
            ft.Icon(icon, size=50, color=Theme.TEXT_MUTED),
            ft.Text(message, size=18, color=Theme.TEXT_SECONDARY),
        ]
        if hint:
            controls.append(ft.Text(hint, size=12, color=Theme.TEXT_MUTED))

        self.content = ft.Column(
            controls,
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            alignment=ft.MainAxisAlignment.CENTER,
        )

"""
Application theme definitions and constants.
"""

from typing import Any, Dict, Optional

import flet as ft


class Theme:
    """
    Color definitions and theme generation for the two-pane window.
    """

    # --- Colors ---
    PRIMARY = "#818CF8"  # Indigo 400
    ACCENT = "#F472B6"  # Pink 400

    BG_DARK = "#0F172A"  # Slate 900
    BG_CARD = "#1E293B"  # Slate 800
    BG_HOVER = "#334155"  # Slate 700
    BG_INPUT = "#020617"  # Slate 950
    BG_SELECTED = "#312E81"  # Indigo 900
    BG_LIGHT = "#1E293B"  # Sidebar pane

    TEXT_PRIMARY = "#F8FAFC"  # Slate 50
    TEXT_SECONDARY = "#94A3B8"  # Slate 400
    TEXT_MUTED = "#64748B"  # Slate 500

    ERROR = "#EF4444"  # Red 500

    BORDER = "#334155"  # Slate 700
    DIVIDER = "#334155"

    MONOSPACE_FONT = "monospace"

    @staticmethod
    def get_high_contrast_theme() -> ft.Theme:
        """Returns the High Contrast Theme object."""
        return ft.Theme(
            color_scheme=ft.ColorScheme(
                primary=ft.Colors.YELLOW_400,
                secondary=ft.Colors.CYAN_400,
                surface=ft.Colors.GREY_900,
                error=ft.Colors.RED_500,
                on_primary=ft.Colors.BLACK,
                on_secondary=ft.Colors.BLACK,
                on_surface=ft.Colors.WHITE,
                surface_tint=ft.Colors.TRANSPARENT,
                outline=ft.Colors.WHITE,
                inverse_surface=ft.Colors.WHITE,
                on_inverse_surface=ft.Colors.BLACK,
            ),
            visual_density=ft.VisualDensity.COMFORTABLE,
            scrollbar_theme=ft.ScrollbarTheme(
                thumb_color=ft.Colors.WHITE,
                radius=0,
                thickness=10,
                interactive=True,
            ),
        )

    @staticmethod
    def get_theme() -> ft.Theme:
        """Returns the Flet Theme object configured with application colors."""
        return ft.Theme(
            color_scheme=ft.ColorScheme(
                primary=Theme.PRIMARY,
                secondary=Theme.ACCENT,
                surface=Theme.BG_CARD,
                error=Theme.ERROR,
                on_primary=Theme.BG_DARK,
                on_secondary=Theme.BG_DARK,
                on_surface=Theme.TEXT_PRIMARY,
                surface_tint=ft.Colors.TRANSPARENT,
                outline=Theme.BORDER,
                inverse_surface=Theme.TEXT_PRIMARY,
                on_inverse_surface=Theme.BG_DARK,
            ),
            visual_density=ft.VisualDensity.COMFORTABLE,
            scrollbar_theme=ft.ScrollbarTheme(
                thumb_color=Theme.BG_HOVER,
                radius=4,
                thickness=6,
                interactive=True,
            ),
        )

    @staticmethod
    def get_input_decoration(
        hint_text: str = "", prefix_icon: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Standardized Input Decoration properties.
        Returns a dictionary of properties to be unpacked into a TextField.
        """
        return {
            "filled": True,
            "bgcolor": Theme.BG_INPUT,
            "hint_text": hint_text,
            "hint_style": ft.TextStyle(color=Theme.TEXT_MUTED),
            "border": ft.InputBorder.OUTLINE,
            "border_color": ft.Colors.TRANSPARENT,
            "focused_border_color": Theme.PRIMARY,
            "focused_border_width": 1,
            "content_padding": 12,
            "prefix_icon": prefix_icon,
            "dense": True,
            "border_radius": 8,
        }

    @staticmethod
    def get_card_decoration(selected: bool = False) -> Dict[str, Any]:
        """Container properties for a note card in the list pane."""
        return {
            "bgcolor": Theme.BG_SELECTED if selected else Theme.BG_CARD,
            "border_radius": 8,
            "border": ft.border.all(
                1, Theme.PRIMARY if selected else ft.Colors.TRANSPARENT
            ),
        }

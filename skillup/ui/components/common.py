import flet as ft
from skillup.config import (
    COLOR_ACCENT,
    COLOR_CARD,
    COLOR_CARD_MUTED,
    COLOR_CHIP_BG,
    COLOR_CHIP_TEXT,
    COLOR_ICON,
    COLOR_TEXT_MUTED,
    BORDER_RADIUS_BTN,
    BORDER_RADIUS_CARD,
)
from skillup.domain.models import Achievement


def _card_shadow() -> ft.BoxShadow:
    return ft.BoxShadow(
        blur_radius=2,
        color=ft.Colors.BLACK12,
        offset=ft.Offset(0, 1),
    )


def section_header(title: str, subtitle: str) -> ft.Column:
    return ft.Column(
        controls=[
            ft.Text(title, size=18, weight=ft.FontWeight.W_600),
            ft.Text(subtitle, size=12, color=COLOR_TEXT_MUTED),
        ],
        spacing=2,
    )


class CategoryChip(ft.Container):
    def __init__(self, name: str, selected: bool, on_select):
        super().__init__()
        self.padding = ft.Padding.symmetric(horizontal=14, vertical=8)
        self.border_radius = 50
        self.bgcolor = COLOR_ACCENT if selected else COLOR_CHIP_BG
        self.on_click = lambda _e: on_select(name)
        self.ink = True
        self.content = ft.Text(
            name,
            size=14,
            weight=ft.FontWeight.W_500,
            color="white" if selected else COLOR_CHIP_TEXT,
        )


class DashboardStatCard(ft.Container):
    def __init__(self, title: str, value: str, icon, on_click=None):
        super().__init__()
        self.padding = ft.Padding.all(12)
        self.height = 90
        self.expand = True
        self.bgcolor = COLOR_CARD_MUTED
        self.border_radius = BORDER_RADIUS_CARD
        if on_click:
            self.on_click = lambda _e: on_click(title)
            self.ink = True
        self.content = ft.Column(
            controls=[
                ft.Icon(icon, color=COLOR_ICON, size=20),
                ft.Text(value, weight=ft.FontWeight.BOLD, size=16),
                ft.Text(title, size=11, color=COLOR_TEXT_MUTED),
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
        )


class AchievementRow(ft.Container):
    def __init__(self, achievement: Achievement):
        super().__init__()
        self.padding = ft.Padding.all(12)
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_BTN
        self.shadow = _card_shadow()
        self.content = ft.Row(
            controls=[
                ft.Icon(ft.Icons.WORKSPACE_PREMIUM, color=COLOR_ACCENT, size=28),
                ft.Column(
                    controls=[
                        ft.Text(achievement.title, weight=ft.FontWeight.W_600, size=14),
                        ft.Text(achievement.description, size=12, color=COLOR_TEXT_MUTED),
                    ],
                    spacing=2,
                ),
            ],
            spacing=10,
        )


class ToggleRow(ft.Container):
    def __init__(self, icon, title: str, subtitle: str, checked: bool, on_toggle):
        super().__init__()
        self.padding = ft.Padding.all(12)
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_BTN
        self.shadow = _card_shadow()
        self.content = ft.Row(
            controls=[
                ft.Icon(icon, color=COLOR_ICON),
                ft.Column(
                    controls=[
                        ft.Text(title, weight=ft.FontWeight.W_600),
                        ft.Text(subtitle, size=11, color=COLOR_TEXT_MUTED),
                    ],
                    spacing=2,
                    expand=True,
                ),
                ft.Switch(value=checked, on_change=lambda e: on_toggle(bool(e.control.value))),
            ],
            spacing=12,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )

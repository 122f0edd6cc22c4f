import flet as ft
from skillup.config import (
    COLOR_ACCENT_DARK,
    COLOR_CARD,
    COLOR_CARD_MUTED,
    COLOR_CARD_PEACH,
    COLOR_STREAK,
    COLOR_TEXT_MUTED,
    BORDER_RADIUS_CARD,
)
from skillup.domain.models import LeaderboardEntry
from skillup.ui.helpers import format_streak, points_progress, rank_color


class PodiumCard(ft.Container):
    def __init__(self, entry: LeaderboardEntry):
        super().__init__()
        self.entry = entry
        self.padding = ft.Padding.all(12)
        self.height = 110
        self.expand = True
        self.bgcolor = COLOR_CARD_PEACH
        self.border_radius = BORDER_RADIUS_CARD
        self.content = ft.Column(
            controls=[
                ft.Text(f"#{entry.rank}", weight=ft.FontWeight.BOLD, color=COLOR_ACCENT_DARK),
                ft.Text(entry.name, weight=ft.FontWeight.W_600),
                ft.Text(f"{entry.points} pts", size=12, color=COLOR_TEXT_MUTED),
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
        )


class LeaderboardRow(ft.Container):
    def __init__(self, entry: LeaderboardEntry):
        super().__init__()
        self.entry = entry

        self.padding = ft.Padding.all(12)
        self.bgcolor = COLOR_CARD
        self.border_radius = 12
        self.shadow = ft.BoxShadow(
            blur_radius=2,
            color=ft.Colors.BLACK12,
            offset=ft.Offset(0, 1),
        )
        self.content = self._build_content()

    def _build_content(self):
        entry = self.entry
        return ft.Row(
            controls=[
                ft.Container(
                    content=ft.Text(f"#{entry.rank}", weight=ft.FontWeight.BOLD, size=14),
                    width=40,
                    height=40,
                    bgcolor=rank_color(entry.rank),
                    border_radius=20,
                    alignment=ft.Alignment.CENTER,
                ),
                ft.Column(
                    controls=[
                        ft.Text(entry.name, weight=ft.FontWeight.W_600, size=16),
                        ft.Text(entry.level, size=12, color=COLOR_TEXT_MUTED),
                        ft.ProgressBar(
                            value=points_progress(entry.points),
                            bgcolor=COLOR_CARD_MUTED,
                        ),
                    ],
                    spacing=4,
                    expand=True,
                ),
                ft.Column(
                    controls=[
                        ft.Text(f"{entry.points} pts", weight=ft.FontWeight.BOLD, size=14),
                        ft.Text(
                            f"🔥 {format_streak(entry.streak, short=True)}",
                            size=12,
                            color=COLOR_STREAK,
                        ),
                    ],
                    horizontal_alignment=ft.CrossAxisAlignment.END,
                    spacing=2,
                ),
            ],
            spacing=12,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )

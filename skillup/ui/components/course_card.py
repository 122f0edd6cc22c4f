import flet as ft
from skillup.config import (
    COLOR_ACCENT,
    COLOR_ACCENT_DARK,
    COLOR_CARD,
    COLOR_CARD_PLAN,
    COLOR_CARD_WARM,
    COLOR_COURSE_TITLE,
    COLOR_ICON,
    COLOR_PLAN,
    COLOR_TEXT_MUTED,
    BORDER_RADIUS_CARD,
)
from skillup.domain.models import Course
from skillup.ui.helpers import course_meta, plan_meta


class ContinueCourseCard(ft.Container):
    def __init__(self, course: Course, on_play, on_open):
        super().__init__()
        self.course = course
        self.on_play = on_play
        self.on_open = on_open

        self.padding = ft.Padding.all(14)
        self.bgcolor = COLOR_CARD_WARM
        self.border_radius = BORDER_RADIUS_CARD
        self.on_click = lambda _e: self.on_open(self.course)
        self.ink = True

        self.content = self._build_content()

    def _build_content(self):
        course = self.course
        return ft.Row(
            controls=[
                ft.Container(
                    content=ft.Icon(ft.Icons.MENU_BOOK, color="white"),
                    width=44,
                    height=44,
                    bgcolor=COLOR_ACCENT,
                    border_radius=22,
                    alignment=ft.Alignment.CENTER,
                ),
                ft.Column(
                    controls=[
                        ft.Text(
                            course.title,
                            weight=ft.FontWeight.BOLD,
                            size=16,
                            color=COLOR_COURSE_TITLE,
                        ),
                        ft.Text(course_meta(course), size=12, color=COLOR_TEXT_MUTED),
                        ft.Text(course.category, size=12, color=COLOR_ACCENT_DARK),
                    ],
                    spacing=4,
                    expand=True,
                ),
                ft.IconButton(
                    icon=ft.Icons.PLAY_ARROW,
                    icon_color=COLOR_ACCENT,
                    tooltip="Play",
                    on_click=lambda _e: self.on_play(course),
                ),
            ],
            spacing=12,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )


class PopularCourseCard(ft.Container):
    def __init__(self, course: Course, on_add_to_plan, on_start):
        super().__init__()
        self.course = course
        self.on_add_to_plan = on_add_to_plan
        self.on_start = on_start

        self.padding = ft.Padding.all(14)
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_CARD
        self.shadow = ft.BoxShadow(
            blur_radius=2,
            color=ft.Colors.BLACK12,
            offset=ft.Offset(0, 1),
        )

        self.content = self._build_content()

    def _build_content(self):
        course = self.course
        return ft.Column(
            controls=[
                ft.Row(
                    controls=[
                        ft.Icon(ft.Icons.AUTO_AWESOME, color=COLOR_ACCENT, size=20),
                        ft.Text(course.title, weight=ft.FontWeight.BOLD, size=16),
                    ],
                    spacing=6,
                ),
                ft.Text(course_meta(course), size=12, color=COLOR_TEXT_MUTED),
                ft.Text(f"Category: {course.category}", size=12, color=COLOR_ICON),
                ft.Row(
                    controls=[
                        ft.OutlinedButton(
                            "Add to Plan",
                            icon=ft.Icons.ADD,
                            on_click=lambda _e: self.on_add_to_plan(course),
                        ),
                        ft.FilledButton(
                            "Start",
                            style=ft.ButtonStyle(bgcolor=COLOR_ACCENT, color="white"),
                            on_click=lambda _e: self.on_start(course),
                        ),
                    ],
                    alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                ),
            ],
            spacing=6,
        )


class PlanCourseCard(ft.Container):
    def __init__(self, course: Course, on_remove):
        super().__init__()
        self.course = course
        self.on_remove = on_remove

        self.padding = ft.Padding.all(14)
        self.bgcolor = COLOR_CARD_PLAN
        self.border_radius = BORDER_RADIUS_CARD

        self.content = ft.Row(
            controls=[
                ft.Icon(ft.Icons.BOOKMARK, color=COLOR_PLAN),
                ft.Column(
                    controls=[
                        ft.Text(course.title, weight=ft.FontWeight.W_600),
                        ft.Text(plan_meta(course), size=12, color=COLOR_TEXT_MUTED),
                    ],
                    spacing=2,
                    expand=True,
                ),
                ft.IconButton(
                    icon=ft.Icons.DELETE,
                    icon_color=COLOR_ICON,
                    tooltip="Remove",
                    on_click=lambda _e: self.on_remove(course),
                ),
            ],
            spacing=10,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )


class SuggestionRow(ft.Container):
    def __init__(self, course: Course, on_open):
        super().__init__()
        self.padding = ft.Padding.symmetric(vertical=8)
        self.on_click = lambda _e: on_open(course)
        self.ink = True
        self.content = ft.Row(
            controls=[
                ft.Icon(ft.Icons.SEARCH, color=COLOR_ICON),
                ft.Column(
                    controls=[
                        ft.Text(course.title, weight=ft.FontWeight.W_600, size=14),
                        ft.Text(course.category, size=12, color=COLOR_TEXT_MUTED),
                    ],
                    spacing=0,
                    expand=True,
                ),
                ft.Icon(ft.Icons.KEYBOARD_ARROW_RIGHT, color=COLOR_TEXT_MUTED),
            ],
            spacing=10,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )

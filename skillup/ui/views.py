"""
views.py - UI view builders (splash/auth/main/detail)
Single responsibility: build flet Views using provided callbacks/state.
"""

import logging

import flet as ft

from skillup.config import (
    APP_TITLE,
    APP_TAGLINE,
    COLOR_ACCENT,
    COLOR_ACCENT_DARK,
    COLOR_AMBER,
    COLOR_AMBER_LIGHT,
    COLOR_BG,
    COLOR_CARD,
    COLOR_CARD_PEACH,
    COLOR_CARD_RANK,
    COLOR_ICON,
    COLOR_RANK,
    COLOR_TEXT_MUTED,
    BORDER_RADIUS_BTN,
    BORDER_RADIUS_CARD,
    BORDER_RADIUS_HEADER,
)
from skillup.domain import catalog
from skillup.domain.models import Course, Session
from skillup.services.auth_service import AuthGateway
from skillup.ui import actions
from skillup.ui.components.common import (
    AchievementRow,
    CategoryChip,
    DashboardStatCard,
    ToggleRow,
    section_header,
)
from skillup.ui.components.course_card import (
    ContinueCourseCard,
    PlanCourseCard,
    PopularCourseCard,
    SuggestionRow,
)
from skillup.ui.components.leaderboard_row import LeaderboardRow, PodiumCard
from skillup.ui.helpers import (
    detail_meta,
    display_email,
    display_name,
    format_points,
    format_streak,
    initial,
    rank_summary,
)
from skillup.ui_state import AppState

logger = logging.getLogger(__name__)

NAV_ITEMS = [
    ("Dashboard", ft.Icons.HOME),
    ("Leaderboard", ft.Icons.STAR),
    ("Profile", ft.Icons.PERSON),
]


def _amber_gradient() -> ft.LinearGradient:
    return ft.LinearGradient(
        begin=ft.Alignment.TOP_CENTER,
        end=ft.Alignment.BOTTOM_CENTER,
        colors=[COLOR_AMBER_LIGHT, COLOR_AMBER],
    )


def _quick_stats() -> list[tuple[str, str, str]]:
    you = catalog.YOUR_STATS
    return [
        ("Points", format_points(you.points), ft.Icons.BOLT),
        ("Streak", format_streak(you.streak), ft.Icons.WHATSHOT),
        ("Courses", str(catalog.COURSES_COMPLETED), ft.Icons.SCHOOL),
    ]


# ==========================================================================
# Splash
# ==========================================================================


def build_splash_view() -> tuple[ft.View, ft.Container]:
    """Return the view and the fading block; the caller drives the timing."""
    fading = ft.Container(
        content=ft.Column(
            controls=[
                ft.Icon(ft.Icons.SCHOOL, size=120, color="white"),
                ft.Text(APP_TITLE, size=36, weight=ft.FontWeight.BOLD, color="white"),
                ft.Text(APP_TAGLINE, size=16, color=ft.Colors.with_opacity(0.9, "white")),
            ],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            spacing=8,
        ),
        opacity=0,
        animate_opacity=500,
    )
    view = ft.View(
        route="/splash",
        padding=0,
        controls=[
            ft.Container(
                content=fading,
                gradient=_amber_gradient(),
                alignment=ft.Alignment.CENTER,
                expand=True,
            )
        ],
    )
    return view, fading


# ==========================================================================
# Sign in / Sign up
# ==========================================================================


def build_sign_in_view(
    page: ft.Page,
    gateway: AuthGateway,
    on_signed_in,
    on_go_to_sign_up,
) -> ft.View:
    email_field = ft.TextField(label="Email", border_radius=BORDER_RADIUS_BTN)
    password_field = ft.TextField(
        label="Password",
        password=True,
        can_reveal_password=True,
        border_radius=BORDER_RADIUS_BTN,
    )
    login_button = ft.FilledButton(
        "Login",
        style=ft.ButtonStyle(bgcolor=COLOR_ACCENT, color="white"),
        width=float("inf"),
    )
    progress = ft.ProgressRing(visible=False)

    def set_busy(busy: bool):
        login_button.visible = not busy
        progress.visible = busy
        page.update()

    async def on_login(_e=None):
        set_busy(True)
        try:
            session = await actions.run_sign_in(
                page, gateway, email_field.value or "", password_field.value or ""
            )
        finally:
            if view in page.views:
                set_busy(False)
        if view not in page.views:
            logger.debug("Sign-in finished after the screen was closed")
            return
        if session:
            on_signed_in(session)

    async def on_forgot(_e=None):
        await actions.run_password_reset(page, gateway, email_field.value or "")

    login_button.on_click = on_login

    view = ft.View(
        route="/sign-in",
        bgcolor=COLOR_BG,
        padding=20,
        vertical_alignment=ft.MainAxisAlignment.CENTER,
        horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        controls=[
            ft.Text("Welcome Back", size=28, weight=ft.FontWeight.BOLD),
            ft.Text("Login to continue learning", size=14, text_align=ft.TextAlign.CENTER),
            ft.Container(height=25),
            email_field,
            password_field,
            ft.Row(
                controls=[ft.TextButton("Forgot Password?", on_click=on_forgot)],
                alignment=ft.MainAxisAlignment.END,
            ),
            login_button,
            progress,
            ft.Container(height=20),
            ft.Row(
                controls=[
                    ft.Text("Don't have an account?"),
                    ft.TextButton("Sign Up", on_click=lambda _e: on_go_to_sign_up()),
                ],
                alignment=ft.MainAxisAlignment.CENTER,
            ),
        ],
    )
    return view


def build_sign_up_view(
    page: ft.Page,
    gateway: AuthGateway,
    on_signed_up,
    on_back,
) -> ft.View:
    email_field = ft.TextField(label="Email", border_radius=BORDER_RADIUS_BTN)
    password_field = ft.TextField(label="Password", password=True, border_radius=BORDER_RADIUS_BTN)
    confirm_field = ft.TextField(
        label="Confirm Password", password=True, border_radius=BORDER_RADIUS_BTN
    )
    sign_up_button = ft.FilledButton(
        "Sign Up",
        style=ft.ButtonStyle(bgcolor=COLOR_ACCENT, color="white"),
        width=float("inf"),
    )

    async def on_sign_up(_e=None):
        sign_up_button.disabled = True
        page.update()
        try:
            session = await actions.run_sign_up(
                page,
                gateway,
                email_field.value or "",
                password_field.value or "",
                confirm_field.value or "",
            )
        finally:
            if view in page.views:
                sign_up_button.disabled = False
                page.update()
        if view not in page.views:
            return
        if session:
            on_signed_up(session)

    sign_up_button.on_click = on_sign_up

    view = ft.View(
        route="/sign-up",
        bgcolor=COLOR_BG,
        padding=20,
        appbar=ft.AppBar(
            leading=ft.IconButton(icon=ft.Icons.ARROW_BACK, on_click=lambda _e: on_back()),
            bgcolor=COLOR_BG,
            elevation=0,
        ),
        vertical_alignment=ft.MainAxisAlignment.CENTER,
        horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        controls=[
            ft.Text("Create Account", size=28, weight=ft.FontWeight.BOLD),
            ft.Container(height=20),
            email_field,
            password_field,
            confirm_field,
            ft.Container(height=20),
            sign_up_button,
        ],
    )
    return view


# ==========================================================================
# Main screen (bottom navigation)
# ==========================================================================


def build_main_view(
    page: ft.Page,
    state: AppState,
    on_open_course,
    on_logout,
    on_refresh,
) -> ft.View:
    session = state.session

    def on_nav_change(e):
        state.nav_index = int(e.control.selected_index)
        on_refresh()

    if state.nav_index == 1:
        body = build_leaderboard(page, state, on_refresh)
    elif state.nav_index == 2:
        body = build_profile(page, state, session, on_logout)
    else:
        body = build_dashboard(page, state, session, on_open_course)

    return ft.View(
        route="/",
        bgcolor=COLOR_BG,
        padding=ft.Padding.symmetric(horizontal=16, vertical=12),
        navigation_bar=ft.NavigationBar(
            destinations=[
                ft.NavigationBarDestination(icon=icon, label=label)
                for label, icon in NAV_ITEMS
            ],
            selected_index=state.nav_index,
            on_change=on_nav_change,
        ),
        controls=[body],
    )


# --------------------------------------------------------------------------
# Dashboard
# --------------------------------------------------------------------------


def build_dashboard(page: ft.Page, state: AppState, session: Session | None, on_open_course) -> ft.Control:
    dash = state.dashboard
    name = display_name(session)

    # In-place update targets
    suggestions_ref = ft.Ref[ft.Container]()
    chips_ref = ft.Ref[ft.Row]()
    results_ref = ft.Ref[ft.Column]()

    def open_course(course: Course, verb: str = "Opened"):
        actions.show_snackbar(page, f"{verb}: {course.title}")
        on_open_course(course)

    def on_add(course: Course):
        if actions.add_to_plan(page, dash, course):
            _update_results()

    def on_remove(course: Course):
        actions.remove_from_plan(page, dash, course)
        _update_results()

    def _build_suggestions() -> list[ft.Control]:
        items = dash.suggestions()
        if not items:
            return []
        return [
            ft.Text("Suggestions", size=12, color=COLOR_TEXT_MUTED),
            *[SuggestionRow(c, lambda c: open_course(c, "Opening")) for c in items],
        ]

    def _build_chips() -> list[ft.Control]:
        return [
            CategoryChip(cat, cat == dash.selected_category, on_category)
            for cat in catalog.CATEGORIES
        ]

    def _build_results() -> list[ft.Control]:
        controls: list[ft.Control] = []
        if dash.has_no_results():
            controls.append(
                ft.Container(
                    content=ft.Row(
                        controls=[
                            ft.Icon(ft.Icons.INFO, color=COLOR_ACCENT_DARK),
                            ft.Column(
                                controls=[
                                    ft.Text("No results found", weight=ft.FontWeight.W_600),
                                    ft.Text(
                                        "Try a different keyword or category.",
                                        size=12,
                                        color=COLOR_TEXT_MUTED,
                                    ),
                                ],
                                spacing=2,
                            ),
                        ],
                        spacing=10,
                    ),
                    padding=ft.Padding.all(14),
                    bgcolor=COLOR_CARD_PEACH,
                    border_radius=BORDER_RADIUS_CARD,
                )
            )
        if len(dash.plan):
            controls.append(section_header("My Plan", "Courses you saved"))
            controls.extend(PlanCourseCard(c, on_remove) for c in dash.plan)
        controls.append(section_header("Continue Learning", "Pick up where you left off"))
        controls.extend(
            ContinueCourseCard(
                c,
                on_play=lambda c: open_course(c, "Playing"),
                on_open=open_course,
            )
            for c in dash.filtered_continue()
        )
        controls.append(section_header("Popular Courses", "Most loved by learners"))
        controls.extend(
            PopularCourseCard(
                c,
                on_add_to_plan=on_add,
                on_start=lambda c: open_course(c, "Starting"),
            )
            for c in dash.filtered_popular()
        )
        return controls

    def _update_results():
        """Update only the derived sections without rebuilding the whole view."""
        box = suggestions_ref.current
        if box is not None:
            box.content.controls = _build_suggestions()
            box.visible = bool(box.content.controls)
        if chips_ref.current is not None:
            chips_ref.current.controls = _build_chips()
        if results_ref.current is not None:
            results_ref.current.controls = _build_results()
        clear_button.visible = bool(dash.search_text)
        page.update()

    def on_search(e):
        dash.search_text = e.control.value or ""
        _update_results()

    def on_clear(_e=None):
        dash.search_text = ""
        search_field.value = ""
        _update_results()

    def on_category(cat: str):
        dash.selected_category = cat
        _update_results()
        actions.show_snackbar(page, f"Filtered: {cat}")

    clear_button = ft.IconButton(
        icon=ft.Icons.CLOSE,
        tooltip="Clear",
        on_click=on_clear,
        visible=bool(dash.search_text),
    )
    search_field = ft.TextField(
        label="Search courses",
        value=dash.search_text,
        prefix_icon=ft.Icons.SEARCH,
        suffix=clear_button,
        on_change=on_search,
        border_radius=50,
        bgcolor=COLOR_CARD,
    )

    initial_suggestions = _build_suggestions()
    suggestions_box = ft.Container(
        ref=suggestions_ref,
        content=ft.Column(controls=initial_suggestions, spacing=0),
        padding=ft.Padding.all(10),
        bgcolor=COLOR_CARD,
        border_radius=BORDER_RADIUS_BTN,
        shadow=ft.BoxShadow(blur_radius=2, color=ft.Colors.BLACK12, offset=ft.Offset(0, 1)),
        visible=bool(initial_suggestions),
    )

    title_row = ft.Row(
        controls=[
            ft.Text(APP_TITLE, size=24, weight=ft.FontWeight.BOLD),
            ft.IconButton(
                icon=ft.Icons.NOTIFICATIONS,
                icon_color=COLOR_ICON,
                tooltip="Notifications",
                on_click=lambda _e: actions.show_snackbar(page, "Notifications clicked (demo)"),
            ),
        ],
        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
    )

    header = ft.Container(
        content=ft.Column(
            controls=[
                ft.Text(f"Hi, {name} 👋", size=22, weight=ft.FontWeight.BOLD, color="white"),
                ft.Text(
                    "Let’s hit today’s learning goal!",
                    size=14,
                    color=ft.Colors.with_opacity(0.9, "white"),
                ),
                ft.Container(height=8),
                ft.Text(f"Daily Goal: {catalog.DAILY_GOAL_MINUTES} mins", size=12, color="white"),
                ft.ProgressBar(
                    value=catalog.DAILY_GOAL_PROGRESS,
                    color="white",
                    bgcolor=ft.Colors.with_opacity(0.25, "white"),
                ),
                ft.Container(height=8),
                ft.Container(
                    content=ft.Row(
                        controls=[
                            ft.Icon(ft.Icons.PLAY_ARROW, color=COLOR_ACCENT, size=18),
                            ft.Text(
                                "Continue Learning",
                                color=COLOR_ACCENT,
                                weight=ft.FontWeight.W_600,
                            ),
                        ],
                        spacing=6,
                        tight=True,
                    ),
                    bgcolor="white",
                    border_radius=50,
                    padding=ft.Padding.symmetric(horizontal=14, vertical=10),
                    on_click=lambda _e: actions.show_snackbar(page, "Continue Learning clicked"),
                    ink=True,
                ),
            ],
            spacing=4,
        ),
        gradient=_amber_gradient(),
        border_radius=BORDER_RADIUS_HEADER,
        padding=ft.Padding.all(16),
    )

    stats_row = ft.Row(
        controls=[
            DashboardStatCard(
                title,
                value,
                icon,
                on_click=lambda t: actions.show_snackbar(page, f"{t} clicked"),
            )
            for title, value, icon in _quick_stats()
        ],
        spacing=10,
    )

    return ft.ListView(
        controls=[
            title_row,
            header,
            stats_row,
            ft.Column(controls=[search_field, suggestions_box], spacing=8),
            section_header("Categories", "Explore by topic"),
            ft.Row(ref=chips_ref, controls=_build_chips(), spacing=8, scroll=ft.ScrollMode.AUTO),
            ft.Column(ref=results_ref, controls=_build_results(), spacing=16),
            ft.Container(height=16),
        ],
        spacing=16,
        expand=True,
    )


# --------------------------------------------------------------------------
# Leaderboard
# --------------------------------------------------------------------------


def build_leaderboard(page: ft.Page, state: AppState, on_refresh) -> ft.Control:
    top = catalog.TOP_LEARNERS
    you = catalog.YOUR_STATS

    def on_period(period: str):
        state.leaderboard_period = period
        on_refresh()

    return ft.ListView(
        controls=[
            ft.Text("Leaderboard", size=24, weight=ft.FontWeight.BOLD),
            ft.Row(
                controls=[
                    CategoryChip(p, p == state.leaderboard_period, on_period)
                    for p in catalog.LEADERBOARD_PERIODS
                ],
                spacing=8,
            ),
            ft.Row(controls=[PodiumCard(entry) for entry in top[:3]], spacing=10),
            ft.Container(
                content=ft.Row(
                    controls=[
                        ft.Icon(ft.Icons.PERSON_PIN, color=COLOR_RANK),
                        ft.Column(
                            controls=[
                                ft.Text("Your Rank", weight=ft.FontWeight.W_600),
                                ft.Text(rank_summary(you), size=12),
                            ],
                            spacing=2,
                            expand=True,
                        ),
                        ft.Icon(ft.Icons.KEYBOARD_ARROW_RIGHT, color=COLOR_RANK),
                    ],
                    spacing=10,
                ),
                padding=ft.Padding.all(14),
                bgcolor=COLOR_CARD_RANK,
                border_radius=BORDER_RADIUS_CARD,
            ),
            *[LeaderboardRow(entry) for entry in top],
            ft.Container(height=10),
        ],
        spacing=14,
        expand=True,
    )


# --------------------------------------------------------------------------
# Profile
# --------------------------------------------------------------------------


def build_profile(page: ft.Page, state: AppState, session: Session | None, on_logout) -> ft.Control:
    name = display_name(session)
    email = display_email(session)

    def on_notifications(value: bool):
        state.notifications_enabled = value
        logger.debug(f"notifications_enabled={value}")

    def on_dark_mode(value: bool):
        state.dark_mode = value
        page.theme_mode = ft.ThemeMode.DARK if value else ft.ThemeMode.LIGHT
        page.update()

    profile_card = ft.Container(
        content=ft.Row(
            controls=[
                ft.CircleAvatar(
                    content=ft.Text(initial(name), size=22, weight=ft.FontWeight.BOLD),
                    radius=28,
                    bgcolor=COLOR_ACCENT,
                    color="white",
                ),
                ft.Column(
                    controls=[
                        ft.Text(name, size=18, weight=ft.FontWeight.W_600),
                        ft.Text(email, size=12, color=COLOR_TEXT_MUTED),
                        ft.Text("Intermediate Learner", size=12, color=COLOR_ACCENT_DARK),
                    ],
                    spacing=2,
                    expand=True,
                ),
                ft.IconButton(
                    icon=ft.Icons.EDIT,
                    tooltip="Edit",
                    on_click=lambda _e: actions.show_snackbar(page, "Edit profile (demo)"),
                ),
            ],
            spacing=12,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        ),
        padding=ft.Padding.all(16),
        bgcolor=COLOR_CARD_PEACH,
        border_radius=BORDER_RADIUS_HEADER,
    )

    stats = {title: (value, icon) for title, value, icon in _quick_stats()}

    return ft.ListView(
        controls=[
            ft.Text("Profile", size=24, weight=ft.FontWeight.BOLD),
            profile_card,
            ft.Row(
                controls=[
                    DashboardStatCard(title, *stats[title])
                    for title in ("Points", "Courses", "Streak")
                ],
                spacing=10,
            ),
            ft.Text("Achievements", size=18, weight=ft.FontWeight.W_600),
            *[AchievementRow(a) for a in catalog.ACHIEVEMENTS],
            ft.Text("Preferences", size=18, weight=ft.FontWeight.W_600),
            ToggleRow(
                ft.Icons.NOTIFICATIONS,
                "Notifications",
                "Daily reminders and streak alerts",
                state.notifications_enabled,
                on_notifications,
            ),
            ToggleRow(
                ft.Icons.DARK_MODE,
                "Dark Mode",
                "Switch app theme",
                state.dark_mode,
                on_dark_mode,
            ),
            ft.FilledButton(
                "Logout",
                icon=ft.Icons.LOGOUT,
                style=ft.ButtonStyle(
                    bgcolor=COLOR_ACCENT,
                    color="white",
                    shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_BTN),
                ),
                on_click=lambda _e: on_logout(),
            ),
            ft.Container(height=18),
        ],
        spacing=14,
        expand=True,
    )


# ==========================================================================
# Course detail
# ==========================================================================


def build_course_detail_view(course: Course, on_back) -> ft.View:
    return ft.View(
        route="/course",
        bgcolor=COLOR_BG,
        padding=16,
        appbar=ft.AppBar(
            title=ft.Text("Course Details"),
            leading=ft.IconButton(icon=ft.Icons.ARROW_BACK, on_click=lambda _e: on_back()),
            bgcolor=COLOR_CARD,
        ),
        controls=[
            ft.Text(course.title, size=24, weight=ft.FontWeight.W_500),
            ft.Text(detail_meta(course), size=14),
            ft.Divider(),
            ft.Text(course.description, size=16),
        ],
        spacing=10,
    )

"""
actions.py - UI-side actions
Single responsibility: run user actions that change state (plan edits, auth
calls) and report the outcome with a snackbar.
"""

import asyncio

import flet as ft

from skillup.config import COLOR_DANGER
from skillup.domain.models import Course, Session
from skillup.services.auth_service import AuthError, AuthGateway
from skillup.ui_state import DashboardState


def show_snackbar(page: ft.Page, message: str, error: bool = False) -> None:
    page.snack_bar = ft.SnackBar(
        ft.Text(message),
        bgcolor=COLOR_DANGER if error else None,
    )
    page.snack_bar.open = True
    page.update()


# ---------------------------------------------------------------------------
# My Plan
# ---------------------------------------------------------------------------


def add_to_plan(page: ft.Page, dashboard: DashboardState, course: Course) -> bool:
    added = dashboard.plan.add(course)
    show_snackbar(page, "Added to plan" if added else "Already in plan")
    return added


def remove_from_plan(page: ft.Page, dashboard: DashboardState, course: Course) -> bool:
    removed = dashboard.plan.remove(course)
    show_snackbar(page, "Removed from plan")
    return removed


# ---------------------------------------------------------------------------
# Auth (one remote call each, awaited off the UI thread)
# ---------------------------------------------------------------------------


async def run_sign_in(page: ft.Page, gateway: AuthGateway, email: str, password: str) -> Session | None:
    try:
        session = await asyncio.to_thread(gateway.sign_in, email, password)
    except AuthError as exc:
        show_snackbar(page, exc.message, error=True)
        return None
    show_snackbar(page, "Login Successful")
    return session


async def run_sign_up(
    page: ft.Page, gateway: AuthGateway, email: str, password: str, confirm: str
) -> Session | None:
    try:
        session = await asyncio.to_thread(gateway.sign_up, email, password, confirm)
    except AuthError as exc:
        show_snackbar(page, exc.message, error=True)
        return None
    show_snackbar(page, "Account Created")
    return session


async def run_password_reset(page: ft.Page, gateway: AuthGateway, email: str) -> bool:
    try:
        await asyncio.to_thread(gateway.request_password_reset, email)
    except AuthError as exc:
        show_snackbar(page, exc.message, error=True)
        return False
    show_snackbar(page, "Password reset link sent")
    return True

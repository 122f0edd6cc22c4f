"""
app_main.py - SkillUp メインアプリケーション
SkillUp v0.1
"""

import asyncio
import atexit
import logging

import flet as ft

from skillup.config import (
    APP_TITLE,
    APP_VERSION,
    COLOR_ACCENT,
    COLOR_BG,
    SPLASH_FADE_SECONDS,
    SPLASH_HOLD_SECONDS,
)
from skillup.domain.models import Course, Session
from skillup.services.auth_service import AuthGateway
from skillup.ui import views
from skillup.ui.router import Router
from skillup.ui_state import AppState

logger = logging.getLogger(__name__)


# ==========================================================================
# メインアプリ
# ==========================================================================


def main(page: ft.Page, gateway: AuthGateway | None = None):
    page.title = APP_TITLE
    page.theme_mode = ft.ThemeMode.LIGHT
    page.bgcolor = COLOR_BG
    page.padding = 0
    page.theme = ft.Theme(color_scheme_seed=COLOR_ACCENT)

    logger.info(f"Starting {APP_TITLE} v{APP_VERSION}")
    if gateway is None:
        gateway = AuthGateway()
        atexit.register(gateway.close)
    state = AppState()
    router = Router(page)

    def show_error(exc: Exception):
        page.overlay.append(
            ft.AlertDialog(
                title=ft.Text("Something went wrong"),
                content=ft.Text(f"Details: {exc}"),
                open=True,
            )
        )
        page.update()

    # ------------------------------------------------------------------
    # 画面遷移
    # ------------------------------------------------------------------

    def go(screen: str, clear: bool = False, **params):
        try:
            router.navigate_to(screen, clear=clear, **params)
        except Exception as exc:
            logger.exception(f"Error while opening {screen}")
            show_error(exc)

    def refresh_main():
        # メイン画面が最上位のときだけ作り直す
        if not page.views or page.views[-1].route != "/":
            return
        try:
            router.replace("main")
        except Exception as exc:
            logger.exception("Error in refresh_main")
            show_error(exc)

    def handle_signed_in(session: Session):
        state.start_session(session)
        logger.info(f"Session started for {session.email}")
        go("main", clear=True)

    def handle_signed_up(_session: Session):
        # サインアップ後はログイン画面へ戻る
        router.finish()

    def handle_logout():
        gateway.sign_out()
        state.end_session()
        page.theme_mode = ft.ThemeMode.LIGHT
        go("sign_in", clear=True)

    def handle_open_course(course: Course):
        go("course", course=course)

    router.register("splash", lambda: splash_view)
    router.register(
        "sign_in",
        lambda: views.build_sign_in_view(
            page,
            gateway,
            on_signed_in=handle_signed_in,
            on_go_to_sign_up=lambda: go("sign_up"),
        ),
    )
    router.register(
        "sign_up",
        lambda: views.build_sign_up_view(
            page,
            gateway,
            on_signed_up=handle_signed_up,
            on_back=router.finish,
        ),
    )
    router.register(
        "main",
        lambda: views.build_main_view(
            page,
            state,
            on_open_course=handle_open_course,
            on_logout=handle_logout,
            on_refresh=refresh_main,
        ),
    )
    router.register(
        "course",
        lambda course: views.build_course_detail_view(course, on_back=router.finish),
    )

    def view_pop(_e: ft.ViewPopEvent = None):
        router.finish()

    page.on_view_pop = view_pop

    # ------------------------------------------------------------------
    # スプラッシュ
    # ------------------------------------------------------------------

    splash_view, splash_content = views.build_splash_view()

    async def run_splash():
        splash_content.opacity = 1
        page.update()
        await asyncio.sleep(SPLASH_HOLD_SECONDS)
        splash_content.opacity = 0
        page.update()
        await asyncio.sleep(SPLASH_FADE_SECONDS)
        if gateway.session:
            handle_signed_in(gateway.session)
        else:
            go("sign_in", clear=True)

    go("splash", clear=True)
    page.run_task(run_splash)


# ==========================================================================
# エントリーポイント
# ==========================================================================


if __name__ == "__main__":
    ft.app(main)

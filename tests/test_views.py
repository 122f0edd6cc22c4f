"""Tests for skillup.ui.views – auth screens release their busy state."""

from __future__ import annotations

import asyncio

import flet as ft
import pytest

from skillup.domain.models import Session
from skillup.ui import views


class FakePage:
    def __init__(self):
        self.views: list = []
        self.snack_bar = None
        self.updates = 0

    def update(self):
        self.updates += 1


class BrokenGateway:
    """Fails with something other than AuthError."""

    def sign_in(self, email, password):
        raise RuntimeError("unexpected")

    def sign_up(self, email, password, confirm):
        raise RuntimeError("unexpected")


class OkGateway:
    def sign_in(self, email, password):
        return Session(uid="u", email=email)

    def sign_up(self, email, password, confirm):
        return Session(uid="u", email=email)


def _first(view: ft.View, kind):
    return next(c for c in view.controls if isinstance(c, kind))


def _open_sign_in(gateway, signed_in: list):
    page = FakePage()
    view = views.build_sign_in_view(
        page, gateway, on_signed_in=signed_in.append, on_go_to_sign_up=lambda: None
    )
    page.views.append(view)
    return page, view


def _open_sign_up(gateway, signed_up: list):
    page = FakePage()
    view = views.build_sign_up_view(page, gateway, on_signed_up=signed_up.append, on_back=lambda: None)
    page.views.append(view)
    return page, view


# ---------------------------------------------------------------------------
# Sign in
# ---------------------------------------------------------------------------

class TestSignInView:
    def test_unexpected_error_restores_login_button(self):
        signed_in: list = []
        page, view = _open_sign_in(BrokenGateway(), signed_in)
        button = _first(view, ft.FilledButton)
        progress = _first(view, ft.ProgressRing)

        with pytest.raises(RuntimeError):
            asyncio.run(button.on_click(None))

        assert button.visible is True
        assert progress.visible is False
        assert signed_in == []

    def test_success_hands_over_session(self):
        signed_in: list = []
        page, view = _open_sign_in(OkGateway(), signed_in)
        button = _first(view, ft.FilledButton)
        _first(view, ft.TextField).value = "ada@example.com"

        asyncio.run(button.on_click(None))

        assert button.visible is True
        assert [s.email for s in signed_in] == ["ada@example.com"]


# ---------------------------------------------------------------------------
# Sign up
# ---------------------------------------------------------------------------

class TestSignUpView:
    def test_unexpected_error_reenables_button(self):
        signed_up: list = []
        page, view = _open_sign_up(BrokenGateway(), signed_up)
        button = _first(view, ft.FilledButton)

        with pytest.raises(RuntimeError):
            asyncio.run(button.on_click(None))

        assert not button.disabled
        assert signed_up == []

"""Tests for skillup.ui.router – navigation over a page's view stack."""

from __future__ import annotations

import pytest

from skillup.ui.router import Router


class FakeView:
    def __init__(self, route: str):
        self.route = route


class FakePage:
    def __init__(self):
        self.views: list[FakeView] = []
        self.updates = 0

    def update(self):
        self.updates += 1


@pytest.fixture
def router() -> Router:
    r = Router(FakePage())
    r.register("home", lambda: FakeView("/"))
    r.register("detail", lambda title: FakeView(f"/course/{title}"))
    return r


def routes(router: Router) -> list[str]:
    return [v.route for v in router.page.views]


class TestNavigateTo:
    def test_pushes_view(self, router):
        router.navigate_to("home")
        router.navigate_to("detail", title="x")
        assert routes(router) == ["/", "/course/x"]
        assert router.page.updates == 2

    def test_clear_drops_back_stack(self, router):
        router.navigate_to("home")
        router.navigate_to("detail", title="x")
        router.navigate_to("home", clear=True)
        assert routes(router) == ["/"]

    def test_unknown_screen(self, router):
        with pytest.raises(KeyError):
            router.navigate_to("nowhere")


class TestReplaceAndFinish:
    def test_replace_top(self, router):
        router.navigate_to("home")
        router.navigate_to("detail", title="a")
        router.replace("detail", title="b")
        assert routes(router) == ["/", "/course/b"]

    def test_finish_pops(self, router):
        router.navigate_to("home")
        router.navigate_to("detail", title="a")
        router.finish()
        assert routes(router) == ["/"]

    def test_finish_keeps_last_view(self, router):
        router.navigate_to("home")
        router.finish()
        assert routes(router) == ["/"]

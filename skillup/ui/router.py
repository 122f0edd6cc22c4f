"""
router.py - Screen navigation over page.views
Single responsibility: push/replace/pop screens built by registered builders.
"""
import logging
from typing import Callable

logger = logging.getLogger(__name__)


class Router:
    def __init__(self, page, builders: dict[str, Callable[..., object]] | None = None):
        self.page = page
        self.builders: dict[str, Callable[..., object]] = dict(builders or {})

    def register(self, screen: str, builder: Callable[..., object]) -> None:
        self.builders[screen] = builder

    def navigate_to(self, screen: str, clear: bool = False, **params) -> None:
        """Build `screen` and show it on top; `clear` drops the back stack."""
        builder = self.builders.get(screen)
        if builder is None:
            raise KeyError(f"Unknown screen: {screen}")
        view = builder(**params)
        if clear:
            self.page.views.clear()
        self.page.views.append(view)
        logger.debug(f"navigate_to {screen} (stack={len(self.page.views)})")
        self.page.update()

    def replace(self, screen: str, **params) -> None:
        """Swap the top screen for `screen`, keeping the rest of the stack."""
        if self.page.views:
            self.page.views.pop()
        self.navigate_to(screen, **params)

    def finish(self) -> None:
        """Close the top screen. The last remaining screen is kept."""
        if len(self.page.views) > 1:
            self.page.views.pop()
        self.page.update()

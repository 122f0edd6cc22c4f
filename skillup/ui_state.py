"""
ui_state.py - UI state container
"""
from skillup.config import CATEGORY_ALL
from skillup.domain import catalog
from skillup.domain.models import Course, Session
from skillup.services import filter_service
from skillup.services.plan_service import PlanList


class DashboardState:
    """Search/category/plan state for one dashboard session."""

    def __init__(
        self,
        continue_courses: list[Course] | None = None,
        popular_courses: list[Course] | None = None,
    ):
        self.continue_courses = list(
            catalog.CONTINUE_COURSES if continue_courses is None else continue_courses
        )
        self.popular_courses = list(
            catalog.POPULAR_COURSES if popular_courses is None else popular_courses
        )
        self.search_text: str = ""
        self.selected_category: str = CATEGORY_ALL
        self.plan = PlanList()
        self._continue_cache = filter_service.FilterCache(self.continue_courses)
        self._popular_cache = filter_service.FilterCache(self.popular_courses)

    @property
    def all_courses(self) -> list[Course]:
        return self.continue_courses + self.popular_courses

    def filtered_continue(self) -> list[Course]:
        return self._continue_cache.get(self.search_text, self.selected_category)

    def filtered_popular(self) -> list[Course]:
        return self._popular_cache.get(self.search_text, self.selected_category)

    def suggestions(self) -> list[Course]:
        return filter_service.suggest(self.all_courses, self.search_text)

    def has_no_results(self) -> bool:
        return (
            bool(self.search_text.strip())
            and not self.filtered_continue()
            and not self.filtered_popular()
        )


class AppState:
    def __init__(self):
        self.session: Session | None = None
        self.nav_index: int = 0  # 0: Dashboard | 1: Leaderboard | 2: Profile
        self.dashboard: DashboardState = DashboardState()
        self.leaderboard_period: str = catalog.LEADERBOARD_PERIODS[0]
        self.notifications_enabled: bool = True
        self.dark_mode: bool = False

    def start_session(self, session: Session) -> None:
        self._reset()
        self.session = session

    def end_session(self) -> None:
        self._reset()

    def _reset(self) -> None:
        # Nothing carries over from the previous user
        self.session = None
        self.nav_index = 0
        self.dashboard = DashboardState()
        self.leaderboard_period = catalog.LEADERBOARD_PERIODS[0]
        self.notifications_enabled = True
        self.dark_mode = False

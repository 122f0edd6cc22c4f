"""Tests for skillup.ui_state – dashboard and app state."""

from __future__ import annotations

from skillup.domain import catalog
from skillup.domain.models import Course, Session
from skillup.ui_state import AppState, DashboardState

KOTLIN = Course("Kotlin Basics", "Beginner", "12 mins left", "Programming")
UX = Course("UX for Mobile Apps", "Beginner", "2h 15m", "Design")


class TestDashboardState:
    def test_defaults_use_catalog(self):
        dash = DashboardState()
        assert dash.search_text == ""
        assert dash.selected_category == "All"
        assert dash.filtered_continue() == catalog.CONTINUE_COURSES
        assert dash.filtered_popular() == catalog.POPULAR_COURSES
        assert len(dash.plan) == 0

    def test_filtering_follows_inputs(self):
        dash = DashboardState([KOTLIN], [UX])
        dash.search_text = "design"
        assert dash.filtered_continue() == []
        assert dash.filtered_popular() == [UX]
        dash.selected_category = "Programming"
        assert dash.filtered_popular() == []

    def test_no_results_needs_non_blank_search(self):
        dash = DashboardState([KOTLIN], [UX])
        dash.selected_category = "Marketing"
        assert not dash.has_no_results()
        dash.search_text = "   "
        assert not dash.has_no_results()
        dash.search_text = "kotlin"
        assert dash.has_no_results()

    def test_suggestions_ignore_category(self):
        dash = DashboardState([KOTLIN], [UX])
        dash.selected_category = "Design"
        dash.search_text = "kot"
        assert dash.suggestions() == [KOTLIN]

    def test_suggestions_empty_without_text(self):
        assert DashboardState().suggestions() == []

    def test_plan_independent_of_filter(self):
        dash = DashboardState([KOTLIN], [UX])
        dash.plan.add(UX)
        dash.search_text = "kotlin"
        assert dash.plan.items() == [UX]


class TestAppState:
    def test_initial(self):
        state = AppState()
        assert state.session is None
        assert state.nav_index == 0
        assert state.leaderboard_period == "Weekly"
        assert state.notifications_enabled is True
        assert state.dark_mode is False

    def test_start_session_resets_dashboard(self):
        state = AppState()
        state.dashboard.plan.add(UX)
        state.nav_index = 2
        session = Session(uid="u", email="ada@example.com")
        state.start_session(session)
        assert state.session is session
        assert state.nav_index == 0
        assert len(state.dashboard.plan) == 0

    def test_end_session_drops_plan(self):
        state = AppState()
        state.start_session(Session(uid="u", email="ada@example.com"))
        state.dashboard.plan.add(UX)
        state.end_session()
        assert state.session is None
        assert len(state.dashboard.plan) == 0

    def test_logout_resets_profile_toggles(self):
        state = AppState()
        state.start_session(Session(uid="u", email="ada@example.com"))
        state.dark_mode = True
        state.notifications_enabled = False
        state.leaderboard_period = "Monthly"
        state.end_session()
        assert state.dark_mode is False
        state.start_session(Session(uid="v", email="grace@example.com"))
        assert state.dark_mode is False
        assert state.notifications_enabled is True
        assert state.leaderboard_period == "Weekly"

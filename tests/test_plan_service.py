"""Tests for skillup.services.plan_service – the "My Plan" list."""

from __future__ import annotations

from skillup.domain.models import Course
from skillup.services.plan_service import PlanList

COMPOSE = Course("Android Jetpack Compose", "Intermediate", "4h 20m", "Programming")
ML = Course("Intro to Machine Learning", "Beginner", "3h 05m", "AI & Data")


class TestAdd:
    def test_starts_empty(self):
        assert len(PlanList()) == 0

    def test_add_new(self):
        plan = PlanList()
        assert plan.add(COMPOSE) is True
        assert plan.items() == [COMPOSE]

    def test_add_twice_is_noop(self):
        plan = PlanList()
        plan.add(COMPOSE)
        assert plan.add(COMPOSE) is False
        assert len(plan) == 1

    def test_duplicate_title_with_other_fields(self):
        plan = PlanList()
        plan.add(COMPOSE)
        clone = Course(COMPOSE.title, "Advanced", "1h", "Design")
        assert plan.add(clone) is False
        assert plan.items() == [COMPOSE]

    def test_keeps_insertion_order(self):
        plan = PlanList()
        plan.add(ML)
        plan.add(COMPOSE)
        assert list(plan) == [ML, COMPOSE]


class TestRemove:
    def test_add_then_remove_round_trip(self):
        plan = PlanList()
        plan.add(ML)
        before = plan.items()
        plan.add(COMPOSE)
        assert plan.remove(COMPOSE) is True
        assert plan.items() == before

    def test_remove_absent_is_noop(self):
        plan = PlanList()
        plan.add(ML)
        assert plan.remove(COMPOSE) is False
        assert plan.items() == [ML]

    def test_remove_matches_by_title(self):
        plan = PlanList()
        plan.add(COMPOSE)
        assert plan.remove(Course(COMPOSE.title, "Beginner", "0m"))
        assert len(plan) == 0


class TestContains:
    def test_contains_title(self):
        plan = PlanList()
        plan.add(ML)
        assert plan.contains(ML.title)
        assert not plan.contains(COMPOSE.title)

    def test_in_operator(self):
        plan = PlanList()
        plan.add(ML)
        assert ML in plan
        assert ML.title in plan
        assert COMPOSE not in plan

    def test_items_is_a_copy(self):
        plan = PlanList()
        plan.add(ML)
        plan.items().clear()
        assert len(plan) == 1

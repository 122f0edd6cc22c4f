"""Tests for skillup.services.filter_service – course filtering and suggestions."""

from __future__ import annotations

import pytest

from skillup.domain.models import Course
from skillup.services.filter_service import (
    FilterCache,
    build_filter,
    filter_courses,
    matches,
    suggest,
)

KOTLIN = Course("Kotlin Basics", "Beginner", "12 mins left", "Programming")
UX = Course("UX for Mobile Apps", "Beginner", "2h 15m", "Design")
UI = Course("UI Design Fundamentals", "Intermediate", "25 mins left", "Design")
ML = Course("Intro to Machine Learning", "Beginner", "3h 05m", "AI & Data")


@pytest.fixture
def catalog() -> list[Course]:
    return [KOTLIN, UX]


# ---------------------------------------------------------------------------
# build_filter
# ---------------------------------------------------------------------------

class TestBuildFilter:
    def test_defaults(self):
        flt = build_filter()
        assert flt.search_text == ""
        assert flt.category == "All"
        assert flt.is_wildcard

    def test_none_inputs_fall_back(self):
        flt = build_filter(None, None)
        assert flt.search_text == ""
        assert flt.category == "All"

    def test_needle_is_trimmed_and_casefolded(self):
        assert build_filter("  KoTLin ").needle == "kotlin"


# ---------------------------------------------------------------------------
# filter_courses
# ---------------------------------------------------------------------------

class TestFilterCourses:
    def test_identity_for_empty_search_and_all(self, catalog):
        assert filter_courses(catalog, "", "All") == catalog

    def test_returns_new_list(self, catalog):
        result = filter_courses(catalog, "", "All")
        assert result is not catalog
        result.append(ML)
        assert catalog == [KOTLIN, UX]

    def test_empty_catalog(self):
        assert filter_courses([], "kotlin", "Programming") == []

    def test_no_match_returns_empty(self, catalog):
        assert filter_courses(catalog, "zzz-not-a-course", "All") == []

    def test_case_insensitive_title(self):
        assert filter_courses([KOTLIN], "KOTLIN", "All") == [KOTLIN]

    def test_matches_category_text(self, catalog):
        assert filter_courses(catalog, "design", "All") == [UX]

    def test_substring_in_title(self, catalog):
        assert filter_courses(catalog, "mobile", "All") == [UX]

    def test_whitespace_only_search_is_empty(self, catalog):
        assert filter_courses(catalog, "   ", "All") == catalog

    def test_search_text_is_trimmed(self, catalog):
        assert filter_courses(catalog, "  kotlin  ", "All") == [KOTLIN]

    def test_category_exact(self):
        courses = [KOTLIN, UX, UI, ML]
        assert filter_courses(courses, "", "Design") == [UX, UI]

    def test_category_is_case_sensitive(self, catalog):
        assert filter_courses(catalog, "", "design") == []

    def test_category_and_text_combined(self):
        courses = [KOTLIN, UX, UI, ML]
        assert filter_courses(courses, "fundamentals", "Design") == [UI]
        assert filter_courses(courses, "kotlin", "Design") == []

    def test_preserves_order(self):
        courses = [UI, ML, UX, KOTLIN]
        assert filter_courses(courses, "", "Design") == [UI, UX]

    def test_default_category(self):
        general = Course("Study Skills", "Beginner", "1h")
        assert filter_courses([general], "general", "All") == [general]
        assert filter_courses([general], "", "General") == [general]


class TestMatches:
    def test_wildcard(self):
        assert matches(KOTLIN, "", "All")

    def test_other_category(self):
        assert not matches(KOTLIN, "", "Design")


# ---------------------------------------------------------------------------
# suggest
# ---------------------------------------------------------------------------

class TestSuggest:
    def test_empty_text_gives_nothing(self, catalog):
        assert suggest(catalog, "") == []
        assert suggest(catalog, "   ") == []

    def test_ignores_category(self):
        assert suggest([KOTLIN, UX, UI], "design") == [UX, UI]

    def test_capped_at_five(self):
        many = [Course(f"Python {i}", "Beginner", "1h", "Programming") for i in range(12)]
        result = suggest(many, "python")
        assert len(result) == 5
        assert result == many[:5]

    def test_no_duplicate_titles(self):
        dupes = [KOTLIN, KOTLIN, Course("Kotlin Basics", "Advanced", "1h", "Programming")]
        result = suggest(dupes, "kotlin")
        assert result == [KOTLIN]

    def test_never_exceeds_limit_for_any_size(self):
        for size in (0, 1, 4, 5, 6, 50):
            courses = [Course(f"Course {i % 7}", "Beginner", "1h", "Design") for i in range(size)]
            result = suggest(courses, "course")
            assert len(result) <= 5
            titles = [c.title for c in result]
            assert len(titles) == len(set(titles))

    def test_custom_limit(self):
        assert suggest([KOTLIN, UX, UI], "a", limit=1) == [KOTLIN]


# ---------------------------------------------------------------------------
# FilterCache
# ---------------------------------------------------------------------------

class TestFilterCache:
    def test_same_key_computes_once(self):
        cache = FilterCache([KOTLIN, UX])
        first = cache.get("design", "All")
        second = cache.get("design", "All")
        assert first == second == [UX]
        assert cache.computations == 1

    def test_key_change_recomputes(self):
        cache = FilterCache([KOTLIN, UX])
        cache.get("", "All")
        cache.get("", "Programming")
        assert cache.get("", "Programming") == [KOTLIN]
        assert cache.computations == 2

    def test_returned_list_is_a_copy(self):
        cache = FilterCache([KOTLIN, UX])
        result = cache.get("", "All")
        result.clear()
        assert cache.get("", "All") == [KOTLIN, UX]

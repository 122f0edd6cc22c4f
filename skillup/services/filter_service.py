"""
filter_service.py - Course filtering and search suggestions
Single responsibility: derive visible course lists from search text + category.
"""
from typing import Iterable, Sequence

from skillup.config import CATEGORY_ALL, SUGGESTION_LIMIT
from skillup.domain.filters import CourseFilter
from skillup.domain.models import Course


def build_filter(search_text: str | None = "", category: str | None = CATEGORY_ALL) -> CourseFilter:
    return CourseFilter(
        search_text=search_text or "",
        category=category or CATEGORY_ALL,
    )


def _text_matches(course: Course, needle: str) -> bool:
    if not needle:
        return True
    return needle in course.title.casefold() or needle in course.category.casefold()


def matches(course: Course, search_text: str = "", category: str = CATEGORY_ALL) -> bool:
    flt = build_filter(search_text, category)
    category_ok = flt.is_wildcard or course.category == flt.category
    return category_ok and _text_matches(course, flt.needle)


def filter_courses(catalog: Iterable[Course], search_text: str = "", category: str = CATEGORY_ALL) -> list[Course]:
    """Return the courses matching both inputs, keeping catalog order."""
    return [c for c in catalog if matches(c, search_text, category)]


def suggest(catalog: Iterable[Course], search_text: str, limit: int = SUGGESTION_LIMIT) -> list[Course]:
    """Search-as-you-type: unique titles matching the text, category ignored."""
    needle = (search_text or "").strip().casefold()
    if not needle or limit <= 0:
        return []
    seen: set[str] = set()
    results: list[Course] = []
    for course in catalog:
        if course.title in seen:
            continue
        seen.add(course.title)
        if _text_matches(course, needle):
            results.append(course)
            if len(results) >= limit:
                break
    return results


class FilterCache:
    """Memoize a filtered view of one catalog on (search_text, category)."""

    def __init__(self, catalog: Sequence[Course]):
        self._catalog = tuple(catalog)
        self._key: tuple[str, str] | None = None
        self._result: list[Course] = []
        self.computations = 0

    def get(self, search_text: str, category: str) -> list[Course]:
        key = (search_text, category)
        if key != self._key:
            self._result = filter_courses(self._catalog, search_text, category)
            self._key = key
            self.computations += 1
        return list(self._result)

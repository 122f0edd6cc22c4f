"""
plan_service.py - "My Plan" list
Single responsibility: keep the user's saved courses unique by title.
"""
import logging
from typing import Iterator

from skillup.domain.models import Course

logger = logging.getLogger(__name__)


class PlanList:
    """Ordered set of saved courses, keyed by title. Lives for one session."""

    def __init__(self):
        self._items: list[Course] = []

    def add(self, course: Course) -> bool:
        """Append unless the title is already saved. True if newly added."""
        if self.contains(course.title):
            return False
        self._items.append(course)
        logger.debug(f"Added to plan: {course.title}")
        return True

    def remove(self, course: Course) -> bool:
        for i, item in enumerate(self._items):
            if item.title == course.title:
                del self._items[i]
                logger.debug(f"Removed from plan: {course.title}")
                return True
        return False

    def contains(self, title: str) -> bool:
        return any(item.title == title for item in self._items)

    def items(self) -> list[Course]:
        return list(self._items)

    def __contains__(self, course) -> bool:
        title = course.title if isinstance(course, Course) else course
        return self.contains(title)

    def __iter__(self) -> Iterator[Course]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

"""
filters.py - Filter DTOs
Single responsibility: carry course filter inputs.
"""
from dataclasses import dataclass

from skillup.config import CATEGORY_ALL


@dataclass(frozen=True)
class CourseFilter:
    search_text: str = ""
    category: str = CATEGORY_ALL

    @property
    def needle(self) -> str:
        return self.search_text.strip().casefold()

    @property
    def is_wildcard(self) -> bool:
        return self.category == CATEGORY_ALL

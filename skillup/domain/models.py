"""
models.py - Domain models
Single responsibility: typed containers for catalog and session entities.
"""
from dataclasses import dataclass

from skillup.config import DEFAULT_CATEGORY, DEFAULT_USER_EMAIL, DEFAULT_USER_NAME


@dataclass(frozen=True)
class Course:
    title: str
    level: str
    duration: str
    category: str = DEFAULT_CATEGORY

    @property
    def description(self) -> str:
        return f"This is a detailed overview of {self.title}."


@dataclass(frozen=True)
class LeaderboardEntry:
    rank: int
    name: str
    points: int
    streak: int
    level: str

    def __post_init__(self):
        if self.rank < 1:
            raise ValueError("rank must be positive")
        if self.points < 0 or self.streak < 0:
            raise ValueError("points and streak must be non-negative")


@dataclass(frozen=True)
class Achievement:
    title: str
    description: str


@dataclass(frozen=True)
class Session:
    """Authenticated-user context handed to screens after sign-in."""

    uid: str
    email: str
    display_name: str = ""
    id_token: str = ""

    @property
    def name(self) -> str:
        return self.display_name or DEFAULT_USER_NAME

    @property
    def contact(self) -> str:
        return self.email or DEFAULT_USER_EMAIL

"""
helpers.py - UI helper functions
Single responsibility: small formatting helpers used across screens.
"""
from skillup.config import (
    DEFAULT_USER_EMAIL,
    DEFAULT_USER_NAME,
    LEADERBOARD_POINTS_CEILING,
    RANK_COLOR_DEFAULT,
    RANK_COLORS,
)
from skillup.domain.models import Course, LeaderboardEntry, Session


def display_name(session: Session | None) -> str:
    return session.name if session else DEFAULT_USER_NAME


def display_email(session: Session | None) -> str:
    return session.contact if session else DEFAULT_USER_EMAIL


def initial(name: str) -> str:
    """First letter, upper-cased, for the profile avatar."""
    return name[:1].upper()


def format_points(points: int) -> str:
    return f"{points:,}"


def format_streak(days: int, short: bool = False) -> str:
    if short:
        return f"{days}d"
    return f"{days} day" if days == 1 else f"{days} days"


def course_meta(course: Course) -> str:
    return f"{course.level} • {course.duration}"


def plan_meta(course: Course) -> str:
    return f"{course.category} • {course.level}"


def detail_meta(course: Course) -> str:
    return f"{course.category} • {course.level} • {course.duration}"


def rank_summary(entry: LeaderboardEntry) -> str:
    return f"#{entry.rank} • {entry.points} pts • 🔥 {format_streak(entry.streak, short=True)}"


def rank_color(rank: int) -> str:
    return RANK_COLORS.get(rank, RANK_COLOR_DEFAULT)


def points_progress(points: int, ceiling: int = LEADERBOARD_POINTS_CEILING) -> float:
    """Fraction of the leaderboard bar to fill, clamped to [0, 1]."""
    if ceiling <= 0:
        return 0.0
    return max(0, min(points, ceiling)) / ceiling

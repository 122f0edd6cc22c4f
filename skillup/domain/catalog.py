"""
catalog.py - Built-in sample catalog.
Single responsibility: define the courses, categories, leaderboard snapshot
and achievements shown by the prototype screens.
"""
from skillup.config import CATEGORY_ALL
from skillup.domain.models import Achievement, Course, LeaderboardEntry

# Category chips (first entry is the wildcard)
CATEGORIES: list[str] = [
    CATEGORY_ALL,
    "Programming",
    "Design",
    "Marketing",
    "Business",
    "AI & Data",
    "Languages",
]

CONTINUE_COURSES: list[Course] = [
    Course("Kotlin Basics", "Beginner", "12 mins left", "Programming"),
    Course("UI Design Fundamentals", "Intermediate", "25 mins left", "Design"),
]

POPULAR_COURSES: list[Course] = [
    Course("Android Jetpack Compose", "Intermediate", "4h 20m", "Programming"),
    Course("Intro to Machine Learning", "Beginner", "3h 05m", "AI & Data"),
    Course("UX for Mobile Apps", "Beginner", "2h 15m", "Design"),
]

LEADERBOARD_PERIODS: list[str] = ["Weekly", "Monthly", "All-time"]

TOP_LEARNERS: list[LeaderboardEntry] = [
    LeaderboardEntry(1, "Aarav", 4520, 15, "Advanced"),
    LeaderboardEntry(2, "Saanvi", 4310, 12, "Advanced"),
    LeaderboardEntry(3, "Rahul", 3980, 10, "Intermediate"),
    LeaderboardEntry(4, "Meera", 3550, 8, "Intermediate"),
    LeaderboardEntry(5, "Dev", 3200, 7, "Intermediate"),
]

YOUR_STATS = LeaderboardEntry(12, "You", 2150, 5, "Beginner")

ACHIEVEMENTS: list[Achievement] = [
    Achievement("First Course Completed", "You finished your first SkillUp course"),
    Achievement("3-Day Streak", "You’ve learned 3 days in a row"),
    Achievement("Goal Setter", "You set your first weekly goal"),
]

COURSES_COMPLETED = 6
DAILY_GOAL_MINUTES = 20
DAILY_GOAL_PROGRESS = 0.65

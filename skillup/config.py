"""
config.py - 環境設定・アプリ定数
SkillUp v0.1
"""

import os

# ---------------------------------------------------------------------------
# 認証サービス（環境変数で上書き可）
# ---------------------------------------------------------------------------

AUTH_API_KEY = os.environ.get("SKILLUP_AUTH_API_KEY", "")
AUTH_BASE_URL = os.environ.get(
    "SKILLUP_AUTH_BASE_URL", "https://identitytoolkit.googleapis.com/v1"
)
AUTH_TIMEOUT_SECONDS = float(os.environ.get("SKILLUP_AUTH_TIMEOUT", "15"))

LOG_LEVEL = os.environ.get("SKILLUP_LOG_LEVEL", "INFO")

# ---------------------------------------------------------------------------
# アプリ定数
# ---------------------------------------------------------------------------

APP_TITLE = "SkillUp"
APP_TAGLINE = "Learn. Grow. Achieve."
APP_VERSION = "0.1.0"

CATEGORY_ALL = "All"
DEFAULT_CATEGORY = "General"
SUGGESTION_LIMIT = 5
MIN_PASSWORD_LENGTH = 6

DEFAULT_USER_NAME = "Learner"
DEFAULT_USER_EMAIL = "learner@email.com"

SPLASH_HOLD_SECONDS = 2.5
SPLASH_FADE_SECONDS = 0.5

LEADERBOARD_POINTS_CEILING = 5000

# ---------------------------------------------------------------------------
# カラーパレット（Amber）
# ---------------------------------------------------------------------------

COLOR_AMBER_LIGHT = "#FFD54F"
COLOR_AMBER = "#FFB300"
COLOR_ACCENT = "#FFA000"  # ボタン・アイコン
COLOR_ACCENT_DARK = "#EF6C00"
COLOR_CHIP_BG = "#FFECB3"
COLOR_CHIP_TEXT = "#BF360C"

COLOR_BG = "#FAFAFA"
COLOR_CARD = "#FFFFFF"
COLOR_CARD_MUTED = "#F5F5F5"
COLOR_CARD_WARM = "#FFF8E1"  # Continue Learning
COLOR_CARD_PEACH = "#FFF3E0"  # 表彰台・結果なし
COLOR_CARD_PLAN = "#E8F5E9"  # My Plan
COLOR_CARD_RANK = "#E3F2FD"  # Your Rank

COLOR_TEXT_MUTED = "#757575"
COLOR_ICON = "#616161"
COLOR_COURSE_TITLE = "#6D4C41"
COLOR_PLAN = "#2E7D32"
COLOR_RANK = "#1565C0"
COLOR_STREAK = "#D32F2F"
COLOR_DANGER = "#CF222E"

# 順位ごとのバッジ色
RANK_COLORS = {
    1: "#FFD54F",
    2: "#B0BEC5",
    3: "#FFCC80",
}
RANK_COLOR_DEFAULT = "#F5F5F5"

# UI 定数
BORDER_RADIUS_CARD = 16
BORDER_RADIUS_BTN = 14
BORDER_RADIUS_HEADER = 20

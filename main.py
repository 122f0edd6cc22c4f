import logging
import sys

from skillup.config import LOG_LEVEL

# ロギング設定
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
# urllib3 の接続ログは WARNING 以上のみ
logging.getLogger("urllib3").setLevel(logging.WARNING)

if __name__ == "__main__":
    import flet as ft
    from skillup.app_main import main

    try:
        ft.app(target=main)
    except Exception:
        logging.exception("Unhandled exception running Flet app")
        sys.exit(1)

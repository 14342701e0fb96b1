# spurgeon_daily/config.py
import os
from collections.abc import Mapping
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_QUOTES_RESOURCE = PACKAGE_DIR / "resources" / "quotes.txt"

INDEX_MODES = ("legacy", "zero_based")
OUT_OF_RANGE_POLICIES = ("placeholder", "clamp")


class Settings:
    def __init__(self, env: Mapping[str, str] | None = None):
        env = os.environ if env is None else env

        # Quote resource
        self.QUOTES_RESOURCE: Path = Path(
            env.get("QUOTES_RESOURCE", "") or DEFAULT_QUOTES_RESOURCE
        )
        self.QUOTES_ENCODING: str = env.get("QUOTES_ENCODING", "utf-8")
        self.QUOTE_ATTRIBUTION: str = env.get("QUOTE_ATTRIBUTION", "- Charles Spurgeon")

        # Reference calendar; empty means the host's local zone
        self.QUOTE_TIMEZONE: str = env.get("QUOTE_TIMEZONE", "").strip()

        # "zero_based": Jan 1 -> entry 0. "legacy" indexes with the raw day-of-year.
        self.QUOTE_INDEX_MODE: str = _choice(
            env.get("QUOTE_INDEX_MODE", "zero_based"), INDEX_MODES, "zero_based"
        )
        self.QUOTE_OUT_OF_RANGE: str = _choice(
            env.get("QUOTE_OUT_OF_RANGE", "placeholder"), OUT_OF_RANGE_POLICIES, "placeholder"
        )

        # Widget timeline shape
        self.WIDGET_ENTRY_COUNT: int = int(env.get("WIDGET_ENTRY_COUNT", "5"))
        self.WIDGET_INTERVAL_HOURS: int = int(env.get("WIDGET_INTERVAL_HOURS", "1"))

        # Anything but "0"/"false"/"off" grants the startup permission request
        self.NOTIFICATIONS_AUTHORIZE: bool = env.get(
            "NOTIFICATIONS_AUTHORIZE", "1"
        ).strip().lower() not in ("0", "false", "off")

        # Runtime info
        self.APP_HOST: str = env.get("APP_HOST", "0.0.0.0")
        self.APP_PORT: int = int(env.get("APP_PORT", "8001"))
        self.APP_WORKERS: int = int(env.get("APP_WORKERS", "1"))


def _choice(raw: str, allowed: tuple[str, ...], default: str) -> str:
    value = raw.strip().lower()
    return value if value in allowed else default


settings = Settings()

import math
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_FEED_URL = "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary/all_hour.csv"


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Settings:
    # Source feed
    FEED_URL: str = os.getenv("FEED_URL", DEFAULT_FEED_URL)

    # Output layout
    WORK_DIR: str = os.getenv("WORK_DIR", ".")
    DATA_DIR: str = os.getenv("DATA_DIR", "data_files")
    ANALYSIS_DIR: str = os.getenv("ANALYSIS_DIR", "analysis_results")
    DATA_FILE_EXTENSION: str = os.getenv("DATA_FILE_EXTENSION", ".csv")

    # Scheduling
    POLL_INTERVAL_SECONDS: float = float(os.getenv("POLL_INTERVAL_SECONDS", "60"))

    # Fetching
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "30"))
    USER_AGENT: str = os.getenv("USER_AGENT", "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36")

    # Email notifications (disabled unless SMTP_HOST and NOTIFY_EMAIL_TO are set)
    SMTP_HOST: Optional[str] = os.getenv("SMTP_HOST")
    SMTP_PORT: int = int(os.getenv("SMTP_PORT", "465"))
    SMTP_USER: Optional[str] = os.getenv("SMTP_USER")
    SMTP_PASSWORD: Optional[str] = os.getenv("SMTP_PASSWORD")
    SMTP_USE_SSL: bool = _env_bool("SMTP_USE_SSL", "1")
    NOTIFY_EMAIL_FROM: Optional[str] = os.getenv("NOTIFY_EMAIL_FROM")
    NOTIFY_EMAIL_TO: Optional[str] = os.getenv("NOTIFY_EMAIL_TO")

    # Webhook notifications
    NOTIFY_WEBHOOK_URL: Optional[str] = os.getenv("NOTIFY_WEBHOOK_URL")

settings = Settings()


@dataclass(frozen=True)
class PollerConfig:
    """Everything the poller needs, fixed at startup."""
    url: str
    data_dir: Path
    analysis_dir: Path
    interval_seconds: float = 60.0
    data_extension: str = ".csv"

    def __post_init__(self):
        if not self.url or not self.url.strip():
            raise ValueError("url must not be empty")
        if not math.isfinite(self.interval_seconds) or self.interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be a positive finite number, got {self.interval_seconds}")
        if self.interval_seconds > threading.TIMEOUT_MAX:
            raise ValueError(f"interval_seconds must be at most {threading.TIMEOUT_MAX:.0f}, got {self.interval_seconds}")
        if not self.data_extension.startswith("."):
            raise ValueError(f"data_extension must start with '.', got {self.data_extension!r}")

    @classmethod
    def from_settings(
        cls,
        source: Settings = settings,
        url: Optional[str] = None,
        work_dir: Optional[str] = None,
        interval_seconds: Optional[float] = None,
    ) -> "PollerConfig":
        """
        Build a config from settings, letting explicit arguments win.
        Relative data/analysis directories are resolved against the work dir.
        """
        base = Path(work_dir if work_dir is not None else source.WORK_DIR).expanduser().resolve()
        return cls(
            url=url if url is not None else source.FEED_URL,
            data_dir=base / source.DATA_DIR,
            analysis_dir=base / source.ANALYSIS_DIR,
            interval_seconds=interval_seconds if interval_seconds is not None else source.POLL_INTERVAL_SECONDS,
            data_extension=source.DATA_FILE_EXTENSION,
        )

from typing import Optional
import requests

from feedpoll.core.config import settings
from feedpoll.core.errors import ErrorKind, StageError
from .base import BaseFetcher, FetchResult, FetchSuccess
from .utils import now_local

class RequestsFetcher(BaseFetcher):
    """One plain GET per call. No retries, no caching."""

    def __init__(self, timeout_sec: Optional[float] = None, user_agent: Optional[str] = None):
        self.timeout_sec = timeout_sec if timeout_sec is not None else settings.REQUEST_TIMEOUT
        self.user_agent = user_agent or settings.USER_AGENT

    def fetch(self, url: str) -> FetchResult:
        headers = {"User-Agent": self.user_agent, "Accept": "text/csv,text/plain;q=0.9,*/*;q=0.8"}
        try:
            resp = requests.get(url, headers=headers, timeout=self.timeout_sec)
        except requests.RequestException as e:
            return StageError(ErrorKind.NETWORK, f"{type(e).__name__}: {e}")

        status = int(resp.status_code)
        if not 200 <= status < 300:
            reason = f" {resp.reason}" if resp.reason else ""
            return StageError(ErrorKind.NETWORK, f"HTTP {status}{reason}")

        return FetchSuccess(
            url=url,
            status_code=status,
            final_url=str(resp.url),
            content=resp.content,
            content_type=resp.headers.get("Content-Type"),
            captured_at=now_local(),
        )

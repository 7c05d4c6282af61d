from datetime import datetime, timezone
from typing import List, Optional, Tuple

import pytest
import requests

from feedpoll.core.config import PollerConfig
from feedpoll.fetch.base import BaseFetcher, FetchSuccess
from feedpoll.notify.base import BaseNotifier

FEED_URL = "https://feed.test/summary/all_hour.csv"

# 3 numeric columns, 10 rows, one missing cell in column B (row 3)
NUMERIC_CSV = (
    b"A,B,C\n"
    b"1,10,0.5\n"
    b"2,20,1.5\n"
    b"3,,2.5\n"
    b"4,40,3.5\n"
    b"5,50,4.5\n"
    b"6,60,5.5\n"
    b"7,70,6.5\n"
    b"8,80,7.5\n"
    b"9,90,8.5\n"
    b"10,100,9.5\n"
)

class RecordingNotifier(BaseNotifier):
    """Keeps every (title, message) pair instead of printing it"""

    def __init__(self):
        self.messages: List[Tuple[str, str]] = []

    def notify(self, title: str, message: str) -> None:
        self.messages.append((title, message))

    @property
    def titles(self) -> List[str]:
        return [t for t, _ in self.messages]

class StubFetcher(BaseFetcher):
    """Returns queued results in order; repeats the last one when exhausted"""

    def __init__(self, *results):
        self.results = list(results)
        self.calls: List[str] = []

    def fetch(self, url: str):
        self.calls.append(url)
        result = self.results.pop(0) if len(self.results) > 1 else self.results[0]
        if isinstance(result, Exception):
            raise result
        return result

def fetch_success(content: bytes, captured_at: Optional[datetime] = None) -> FetchSuccess:
    return FetchSuccess(
        url=FEED_URL,
        status_code=200,
        final_url=FEED_URL,
        content=content,
        content_type="text/csv",
        captured_at=captured_at or datetime(2026, 10, 19, 14, 30, 5, tzinfo=timezone.utc),
    )

@pytest.fixture
def make_response():
    """Factory for real requests.Response objects with canned content"""
    def _make(status: int = 200, content: bytes = b"", reason: str = "OK", url: str = FEED_URL,
              content_type: str = "text/csv") -> requests.Response:
        resp = requests.Response()
        resp.status_code = status
        resp.reason = reason
        resp._content = content
        resp.url = url
        resp.headers["Content-Type"] = content_type
        return resp
    return _make

@pytest.fixture
def notifier():
    return RecordingNotifier()

@pytest.fixture
def stub_fetcher():
    return StubFetcher

@pytest.fixture
def success():
    return fetch_success

@pytest.fixture
def config(tmp_path):
    return PollerConfig(
        url=FEED_URL,
        data_dir=tmp_path / "data_files",
        analysis_dir=tmp_path / "analysis_results",
        interval_seconds=60,
    )

@pytest.fixture
def numeric_csv():
    return NUMERIC_CSV

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from feedpoll.core.errors import StageError

@dataclass(frozen=True)
class FetchSuccess:
    url: str
    status_code: int
    final_url: str
    content: bytes
    content_type: Optional[str]
    captured_at: datetime

FetchResult = Union[FetchSuccess, StageError]

class BaseFetcher:
    def fetch(self, url: str) -> FetchResult:
        raise NotImplementedError

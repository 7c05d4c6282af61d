from typing import Optional

import requests

from feedpoll.core.config import settings
from .base import BaseNotifier

class WebhookNotifier(BaseNotifier):
    def __init__(self, url: str, timeout_sec: Optional[float] = None):
        self.url = url
        self.timeout_sec = timeout_sec if timeout_sec is not None else settings.REQUEST_TIMEOUT

    def notify(self, title: str, message: str) -> None:
        resp = requests.post(self.url, json={"title": title, "message": message}, timeout=self.timeout_sec)
        resp.raise_for_status()

import sys
from typing import Optional, TextIO

from .base import BaseNotifier

BORDER = "=" * 50

class ConsoleNotifier(BaseNotifier):
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def notify(self, title: str, message: str) -> None:
        out = self.stream or sys.stdout
        print(f"\n{BORDER}\n{title}\n{message}\n{BORDER}\n", file=out, flush=True)

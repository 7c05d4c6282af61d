from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    NETWORK = "NetworkError"
    IO = "IOError"
    PARSE = "ParseError"
    ANALYSIS = "AnalysisError"


@dataclass(frozen=True)
class StageError:
    """
    Failure value returned by a pipeline stage instead of raising.

    The poller checks for it after every stage and turns it into a
    failure notification.
    """
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"

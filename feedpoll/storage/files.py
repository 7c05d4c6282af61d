import os
import tempfile
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable, Union

from feedpoll.core.errors import ErrorKind, StageError
from feedpoll.fetch.utils import filename_stamp

@dataclass(frozen=True)
class StoredFile:
    path: Path
    captured_at: datetime
    size_bytes: int

def ensure_dirs(dirs: Iterable[Path]) -> None:
    """Create output directories if missing (safe to call repeatedly)"""
    for d in dirs:
        os.makedirs(d, exist_ok=True)

COUNTER_WIDTH = 3

def write_unique(directory: Path, stem: str, suffix: str, content: bytes) -> Path:
    """
    Write content to directory/<stem><suffix> without ever replacing an
    existing file.

    The bytes go to a hidden temp file in the same directory and are
    fsynced, then the final name is claimed with a hard link, which fails
    instead of clobbering when the name is taken. On conflict a zero-padded
    counter is appended (<stem>_001<suffix>, <stem>_002<suffix>, ...).
    The final name only ever appears with its complete content.

    Raises OSError on any filesystem failure; nothing is left behind then.
    """
    directory = Path(directory)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{stem}.", suffix=".tmp", dir=directory)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        return _claim(tmp_path, directory, stem, suffix)
    finally:
        _discard(tmp_path)

def _claim(tmp_path: Path, directory: Path, stem: str, suffix: str) -> Path:
    counter = 0
    while True:
        name = f"{stem}{suffix}" if counter == 0 else f"{stem}_{counter:0{COUNTER_WIDTH}d}{suffix}"
        candidate = directory / name
        try:
            os.link(tmp_path, candidate)
            return candidate
        except FileExistsError:
            counter += 1

def _discard(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass

def persist(content: bytes, captured_at: datetime, data_dir: Path, extension: str = ".csv") -> Union[StoredFile, StageError]:
    """Save fetched bytes verbatim as data_<YYYYMMDD_HHMMSS><extension>"""
    try:
        path = write_unique(data_dir, f"data_{filename_stamp(captured_at)}", extension, content)
    except OSError as e:
        return StageError(ErrorKind.IO, f"could not write data file in {data_dir}: {e}")
    return StoredFile(path=path, captured_at=captured_at, size_bytes=len(content))

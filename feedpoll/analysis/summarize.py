import io
from typing import Union

import pandas as pd

from feedpoll.core.errors import ErrorKind, StageError
from feedpoll.schemas import ColumnSummary, Summary
from feedpoll.storage.files import StoredFile

def load_table(content: bytes) -> Union[pd.DataFrame, StageError]:
    """
    Parse delimited text into a DataFrame with every cell kept as a string.

    Missing cells (empty, NA, NaN, ...) become NaN. Anything that is not
    decodable UTF-8 text with a consistent field count is a ParseError.
    """
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        return StageError(ErrorKind.PARSE, f"content is not valid UTF-8 text ({e.reason} at byte {e.start})")

    if "\x00" in text:
        return StageError(ErrorKind.PARSE, "content contains NUL bytes, not delimited text")

    try:
        return pd.read_csv(io.StringIO(text), dtype=str, skipinitialspace=True)
    except pd.errors.EmptyDataError:
        return StageError(ErrorKind.PARSE, "no columns to parse")
    except (pd.errors.ParserError, ValueError) as e:
        return StageError(ErrorKind.PARSE, str(e).strip())

def summarize_column(name: str, values: pd.Series) -> ColumnSummary:
    """Count, five-number summary + mean for numeric columns, distinct counts otherwise"""
    stripped = values.map(lambda v: v.strip() if isinstance(v, str) else v)
    present = stripped[stripped.notna() & (stripped != "")]
    missing = int(len(values) - len(present))

    if present.empty:
        return ColumnSummary(name=name, kind="empty", count=0, missing=missing)

    numbers = pd.to_numeric(present, errors="coerce")
    if numbers.notna().all():
        q1, median, q3 = numbers.quantile([0.25, 0.5, 0.75]).tolist()
        return ColumnSummary(
            name=name,
            kind="numeric",
            count=int(len(numbers)),
            missing=missing,
            min=float(numbers.min()),
            q1=float(q1),
            median=float(median),
            mean=float(numbers.mean()),
            q3=float(q3),
            max=float(numbers.max()),
        )

    counts = present.value_counts()
    return ColumnSummary(
        name=name,
        kind="categorical",
        count=int(len(present)),
        missing=missing,
        unique=int(len(counts)),
        top=str(counts.index[0]),
        top_count=int(counts.iloc[0]),
    )

def summarize_table(table: pd.DataFrame) -> Union[Summary, StageError]:
    if len(table.columns) == 0:
        return StageError(ErrorKind.ANALYSIS, "table has no columns")
    if len(table) == 0:
        return StageError(ErrorKind.ANALYSIS, "table has no rows")

    try:
        columns = [summarize_column(str(name), table.iloc[:, i]) for i, name in enumerate(table.columns)]
    except Exception as e:
        return StageError(ErrorKind.ANALYSIS, f"{type(e).__name__}: {e}")

    return Summary(row_count=int(len(table)), column_count=int(len(table.columns)), columns=columns)

def analyze(stored: StoredFile) -> Union[Summary, StageError]:
    """
    Read a stored fetch back from disk and summarize it.

    Works from the file, not the in-memory response, so the report always
    describes exactly what was persisted.
    """
    try:
        content = stored.path.read_bytes()
    except OSError as e:
        return StageError(ErrorKind.IO, f"could not read {stored.path}: {e}")

    table = load_table(content)
    if isinstance(table, StageError):
        return table
    return summarize_table(table)

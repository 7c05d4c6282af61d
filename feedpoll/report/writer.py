from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from feedpoll.core.errors import ErrorKind, StageError
from feedpoll.fetch.utils import display_time, filename_stamp, now_local
from feedpoll.schemas import ColumnSummary, Summary
from feedpoll.storage.files import StoredFile, write_unique

LABEL_WIDTH = 10

@dataclass(frozen=True)
class ReportFile:
    path: Path
    generated_at: datetime
    source: Path

def _fmt_number(value: Optional[float]) -> str:
    if value is None:
        return "-"
    if float(value).is_integer() and abs(value) < 1e15:
        return str(int(value))
    return f"{value:.6g}"

def _line(label: str, value) -> str:
    return f"  {label + ':':<{LABEL_WIDTH}} {value}"

def render_column(col: ColumnSummary) -> List[str]:
    lines = [f"[{col.name}] ({col.kind})", _line("Count", col.count), _line("Missing", col.missing)]
    if col.kind == "numeric":
        lines += [
            _line("Min", _fmt_number(col.min)),
            _line("1st Qu.", _fmt_number(col.q1)),
            _line("Median", _fmt_number(col.median)),
            _line("Mean", _fmt_number(col.mean)),
            _line("3rd Qu.", _fmt_number(col.q3)),
            _line("Max", _fmt_number(col.max)),
        ]
    elif col.kind == "categorical":
        lines += [
            _line("Unique", col.unique),
            _line("Top", f"{col.top} ({col.top_count})"),
        ]
    return lines

def render_report(summary: Summary, source: Path, generated_at: datetime) -> str:
    """Plain-text report: fixed header block, then one block per column"""
    lines = [
        "Analysis Report",
        f"Generated: {display_time(generated_at)}",
        f"Source file: {source}",
        "",
        f"Dimensions: {summary.row_count} rows x {summary.column_count} columns",
        f"Column names: {', '.join(summary.column_names)}",
        "",
        "Summary Statistics:",
    ]
    for col in summary.columns:
        lines.append("")
        lines.extend(render_column(col))
    return "\n".join(lines) + "\n"

def write_report(
    summary: Summary,
    source: StoredFile,
    analysis_dir: Path,
    generated_at: Optional[datetime] = None,
) -> Union[ReportFile, StageError]:
    generated_at = generated_at or now_local()
    text = render_report(summary, source.path, generated_at)
    try:
        path = write_unique(analysis_dir, f"analysis_{filename_stamp(generated_at)}", ".txt", text.encode("utf-8"))
    except OSError as e:
        return StageError(ErrorKind.IO, f"could not write report in {analysis_dir}: {e}")
    return ReportFile(path=path, generated_at=generated_at, source=source.path)

from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import date
from typing import Any, Collection, Iterable, Optional, Sequence

from ..common.datetime_utils import format_iso


@dataclass(frozen=True)
class CsvExport:
    filename: str
    content: str
    row_count: int


def _writer(out: io.StringIO, *, quote_all: bool = False):
    return csv.writer(out, quoting=csv.QUOTE_ALL if quote_all else csv.QUOTE_MINIMAL, lineterminator="\n")


def escape_field(value: Any, *, force_quotes: bool = False) -> str:
    """Quote a field when needed; inner quotes are doubled."""

    text = "" if value is None else str(value)
    if not text and not force_quotes:
        return ""
    out = io.StringIO()
    _writer(out, quote_all=force_quotes).writerow([text])
    return out.getvalue()[:-1]


def to_csv(headers: Sequence[str], rows: Iterable[Sequence[Any]], *, quoted_columns: Collection[str] = ()) -> str:
    """Header line, then one line per row. Free-text columns are always quoted."""

    out = io.StringIO()
    writer = _writer(out)
    writer.writerow(headers)

    forced = {i for i, h in enumerate(headers) if h in quoted_columns}
    if not forced:
        writer.writerows(rows)
    else:
        # csv has no per-column quoting, so forced columns are encoded cell by cell.
        for row in rows:
            out.write(",".join(escape_field(v, force_quotes=i in forced) for i, v in enumerate(row)))
            out.write("\n")

    return out.getvalue()[:-1]


def export_filename(
    domain: str,
    day: Optional[date] = None,
    *,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> str:
    """``attendance_2025-03-01.csv`` or ``summary_report_2025-03-01_to_2025-03-31.csv``."""

    if start and end:
        return f"{domain}_report_{format_iso(start)}_to_{format_iso(end)}.csv"
    if day is None:
        raise ValueError("export_filename needs a date or a date range")
    return f"{domain}_{format_iso(day)}.csv"

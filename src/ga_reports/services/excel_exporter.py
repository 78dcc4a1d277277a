from __future__ import annotations

import logging
from dataclasses import asdict, fields
from datetime import date
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence, Tuple

import pandas as pd

from ..models.report_records import DateRange

logger = logging.getLogger(__name__)

# One fetch: the range it covers and the records per report name
ReportBatch = Tuple[DateRange, Mapping[str, Sequence[Any]]]


def _record_to_row(record: Any, period: DateRange) -> dict:
    row = {
        key: value.isoformat() if isinstance(value, date) else value
        for key, value in asdict(record).items()
    }
    row["range_start"] = period.start.isoformat()
    row["range_end"] = period.end.isoformat()
    return row


def export_reports_to_excel(batches: Iterable[ReportBatch], output_path: Path) -> bool:
    """
    Creates an Excel file with one sheet per report name. Rows from every
    batch are stacked, each tagged with the range_start/range_end it came from.
    Returns False (and writes nothing) when no report has rows.
    """
    sheets: dict[str, list[dict]] = {}
    columns: dict[str, list[str]] = {}

    for period, reports in batches:
        for name, records in reports.items():
            rows = sheets.setdefault(name, [])
            for r in records:
                if name not in columns:
                    columns[name] = [f.name for f in fields(r)] + ["range_start", "range_end"]
                rows.append(_record_to_row(r, period))

    if not any(sheets.values()):
        print("There are no records to export.")
        return False

    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        for name, rows in sheets.items():
            if not rows:
                logger.info("Report '%s' returned no rows, sheet skipped", name)
                continue
            df = pd.DataFrame(rows, columns=columns[name])
            # Excel caps sheet names at 31 characters
            df.to_excel(writer, sheet_name=name[:31], index=False)

    total = sum(len(rows) for rows in sheets.values())
    print(f"Excel exported successfully with {total} rows to: {output_path}")
    return True

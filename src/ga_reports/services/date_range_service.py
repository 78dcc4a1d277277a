from __future__ import annotations
from datetime import date, timedelta
from typing import Iterator

from ..models.report_records import DateRange


def iter_dates(period: DateRange) -> Iterator[date]:
    """
    Generates every day from period.start to period.end (inclusive).
    """
    if period.end < period.start:
        raise ValueError("end date must be >= start date")

    current = period.start
    while current <= period.end:
        yield current
        current += timedelta(days=1)


def resolve_period(start: date | None, end: date | None, last_days: int) -> DateRange:
    """
    Fills in missing bounds. A missing end means today,
    a missing start means `last_days` before the end.
    """
    end_date = end or date.today()
    if start:
        return DateRange(start, end_date)
    return DateRange.last_days(last_days, today=end_date)

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Sequence

# Cells as returned by the Core Reporting API: dimension first, then metrics
ReportRow = Sequence[str]


@dataclass(frozen=True)
class DateRange:
    """
    Calendar range sent to the API as-is. The API rejects invalid ranges.
    """
    start: date
    end: date

    @classmethod
    def last_days(cls, days: int, today: date | None = None) -> "DateRange":
        end = today or date.today()
        return cls(end - timedelta(days=days), end)

    @classmethod
    def single_day(cls, day: date) -> "DateRange":
        return cls(day, day)


@dataclass(frozen=True)
class VisitorsAndPageViews:
    date: date          # Day parsed from the 'ga:date' dimension (YYYYMMDD)
    visitors: int       # ga:users
    page_views: int     # ga:pageviews

    @classmethod
    def from_row(cls, row: ReportRow) -> "VisitorsAndPageViews":
        return cls(
            date=datetime.strptime(row[0], "%Y%m%d").date(),
            visitors=int(row[1]),
            page_views=int(row[2]),
        )


@dataclass(frozen=True)
class PageViews:
    """
    One row of the most visited pages or top referrers reports.
    """
    url: str            # Page path or full referrer
    page_views: int

    @classmethod
    def from_row(cls, row: ReportRow) -> "PageViews":
        return cls(url=row[0], page_views=int(row[1]))


@dataclass(frozen=True)
class BrowserSessions:
    browser: str
    sessions: int

    @classmethod
    def from_row(cls, row: ReportRow) -> "BrowserSessions":
        return cls(browser=row[0], sessions=int(row[1]))


@dataclass(frozen=True)
class UserTypeSessions:
    type: str           # 'New Visitor' or 'Returning Visitor'
    sessions: int

    @classmethod
    def from_row(cls, row: ReportRow) -> "UserTypeSessions":
        return cls(type=row[0], sessions=int(row[1]))

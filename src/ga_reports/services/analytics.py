from __future__ import annotations

from typing import Any, Callable, List, Mapping, Optional, Sequence, TypeVar

from ..models.report_records import (
    BrowserSessions,
    DateRange,
    PageViews,
    ReportRow,
    UserTypeSessions,
    VisitorsAndPageViews,
)
from .query_client import AnalyticsServiceProvider, QueryClient

R = TypeVar("R")

OTHERS_LABEL = "Others"


def summarize_top_browsers(top_browsers: Sequence[BrowserSessions], max_results: int) -> List[BrowserSessions]:
    """
    Keeps the first max_results - 1 browsers (input order) and folds the rest
    into one 'Others' entry. With max_results <= 1 everything lands in 'Others'.
    """
    keep = max(max_results - 1, 0)
    others = sum(b.sessions for b in top_browsers[keep:])
    return [*top_browsers[:keep], BrowserSessions(browser=OTHERS_LABEL, sessions=others)]


class Analytics:
    def __init__(self, client: QueryClient, view_id: str) -> None:
        self._client = client
        self._view_id = view_id

    @property
    def view_id(self) -> str:
        return self._view_id

    def with_view_id(self, view_id: str) -> "Analytics":
        """Same client, different view. The current instance is left as is."""
        return Analytics(self._client, view_id)

    # ---------- Reports ----------

    def fetch_visitors_and_page_views(self, period: DateRange) -> List[VisitorsAndPageViews]:
        response = self.perform_query(period, "ga:users,ga:pageviews", {"dimensions": "ga:date"})
        return _map_rows(response, VisitorsAndPageViews.from_row)

    def fetch_most_visited_pages(self, period: DateRange, max_results: int = 20) -> List[PageViews]:
        response = self.perform_query(
            period,
            "ga:pageviews",
            {"dimensions": "ga:pagePath", "sort": "-ga:pageviews", "max-results": max_results},
        )
        return _map_rows(response, PageViews.from_row)

    def fetch_top_referrers(self, period: DateRange, max_results: int = 20) -> List[PageViews]:
        response = self.perform_query(
            period,
            "ga:pageviews",
            {"dimensions": "ga:fullReferrer", "sort": "-ga:pageviews", "max-results": max_results},
        )
        return _map_rows(response, PageViews.from_row)

    def fetch_top_browsers(self, period: DateRange, max_results: int = 10) -> List[BrowserSessions]:
        # No server-side cap: the tail is needed for the 'Others' total
        response = self.perform_query(
            period,
            "ga:sessions",
            {"dimensions": "ga:browser", "sort": "-ga:sessions"},
        )
        top_browsers = _map_rows(response, BrowserSessions.from_row)

        if len(top_browsers) <= max_results:
            return top_browsers

        return summarize_top_browsers(top_browsers, max_results)

    def fetch_user_types(self, period: DateRange) -> List[UserTypeSessions]:
        response = self.perform_query(period, "ga:sessions", {"dimensions": "ga:userType"})
        return _map_rows(response, UserTypeSessions.from_row)

    # ---------- Raw access ----------

    def perform_query(
        self,
        period: DateRange,
        metrics: str,
        others: Optional[Mapping[str, Any]] = None,
    ) -> Optional[dict]:
        """
        Runs any query against the current view and returns the API's raw
        result (or None when the client returned nothing).
        """
        return self._client.perform_query(
            self._view_id,
            period.start,
            period.end,
            metrics,
            dict(others or {}),
        )

    def get_analytics_service(self) -> Any:
        """
        The underlying authenticated service, for calls this class does not wrap.
        Only available when the client implements AnalyticsServiceProvider.
        """
        if not isinstance(self._client, AnalyticsServiceProvider):
            raise TypeError(f"{type(self._client).__name__} does not expose an analytics service")
        return self._client.get_analytics_service()


def _map_rows(response: Optional[Mapping[str, Any]], to_record: Callable[[ReportRow], R]) -> List[R]:
    rows = (response or {}).get("rows") or []
    return [to_record(row) for row in rows]

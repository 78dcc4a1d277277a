"""
Shared pytest fixtures for the ga_reports test suite.

Responsibilities:
    - Provide a fake QueryClient that records every query and answers
      with a canned response (no network, no credentials)
    - Provide an Analytics facade wired to that fake
    - Provide a fixed DateRange
"""

from datetime import date

import pytest

from ga_reports.models.report_records import DateRange
from ga_reports.services.analytics import Analytics
from ga_reports.services.query_client import QueryClient


class FakeQueryClient(QueryClient):
    """QueryClient double: returns `response` and remembers the calls."""

    def __init__(self, response=None):
        self.response = response
        self.calls = []

    def perform_query(self, view_id, start, end, metrics, others):
        self.calls.append(
            {"view_id": view_id, "start": start, "end": end, "metrics": metrics, "others": others}
        )
        return self.response


@pytest.fixture
def period() -> DateRange:
    return DateRange(date(2016, 12, 1), date(2016, 12, 31))


@pytest.fixture
def fake_client() -> FakeQueryClient:
    return FakeQueryClient()


@pytest.fixture
def analytics(fake_client) -> Analytics:
    return Analytics(fake_client, "12345678")

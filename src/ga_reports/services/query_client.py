from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)


class QueryClient(ABC):
    """Runs one Core Reporting query for a view."""

    @abstractmethod
    def perform_query(
        self,
        view_id: str,
        start: date,
        end: date,
        metrics: str,
        others: Mapping[str, Any],
    ) -> Optional[dict]:  # pragma: no cover
        """
        Returns the tabular result ({'rows': [[cell, ...], ...], ...}) or None.
        Errors from auth/transport propagate to the caller.
        """
        raise NotImplementedError


class AnalyticsServiceProvider(ABC):
    """Exposes the raw authenticated service for calls the facade does not wrap."""

    @abstractmethod
    def get_analytics_service(self) -> Any:  # pragma: no cover
        raise NotImplementedError


class GoogleAnalyticsClient(QueryClient, AnalyticsServiceProvider):
    def __init__(self, service: Any) -> None:
        # service: googleapiclient discovery resource for ('analytics', 'v3')
        self.service = service

    def perform_query(
        self,
        view_id: str,
        start: date,
        end: date,
        metrics: str,
        others: Mapping[str, Any],
    ) -> Optional[dict]:
        # The client library takes 'max-results' as max_results, etc.
        options = {key.replace("-", "_"): value for key, value in others.items()}

        logger.debug("GA query view=%s %s..%s metrics=%s %s", view_id, start, end, metrics, options)

        return self.service.data().ga().get(
            ids=f"ga:{view_id}",
            start_date=start.isoformat(),
            end_date=end.isoformat(),
            metrics=metrics,
            **options,
        ).execute()

    def get_analytics_service(self) -> Any:
        return self.service

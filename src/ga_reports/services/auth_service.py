# src/ga_reports/services/auth_service.py
from __future__ import annotations

import logging
from typing import Any, Sequence

from google.oauth2 import service_account
from googleapiclient.discovery import build

from config import ANALYTICS_SCOPES, DEFAULT_SERVICE_ACCOUNT_FILE
from .env_loader import get_env_variable_value
from .query_client import GoogleAnalyticsClient
from .runtime_paths import resolve_runtime_path

logger = logging.getLogger(__name__)


class GoogleAuthService:
    """
    Loads a service account key and builds the authenticated
    Analytics v3 service. The account needs read access on the view.
    """

    def __init__(self, credentials_file: str | None = None, scopes: Sequence[str] = ANALYTICS_SCOPES):
        self.credentials_file = credentials_file or get_env_variable_value(
            "GA_SERVICE_ACCOUNT_FILE", DEFAULT_SERVICE_ACCOUNT_FILE
        )
        self.scopes = list(scopes)

    def load_credentials(self) -> service_account.Credentials:
        path = resolve_runtime_path(self.credentials_file)
        if path is None:
            raise FileNotFoundError(f"Service account file not found: {self.credentials_file}")

        logger.debug("Loading service account credentials from %s", path)
        return service_account.Credentials.from_service_account_file(path, scopes=self.scopes)

    def build_service(self) -> Any:
        return build("analytics", "v3", credentials=self.load_credentials(), cache_discovery=False)

    def build_client(self) -> GoogleAnalyticsClient:
        return GoogleAnalyticsClient(self.build_service())

from pathlib import Path

# Base directory (where resources/, .env and exported workbooks live)
BASE_DIR = Path(__file__).resolve().parents[1]

# Default workbook written by main.py; the real name gets the date range appended
DEFAULT_OUTPUT = BASE_DIR / "ga_reports.xlsx"

# Service account key, relative paths are resolved via runtime_paths
DEFAULT_SERVICE_ACCOUNT_FILE = "resources/service-account-credentials.json"

# Core Reporting API v3, read only
ANALYTICS_SCOPES = ["https://www.googleapis.com/auth/analytics.readonly"]

# Window used by main.py when no dates are given
DEFAULT_LAST_DAYS = 7

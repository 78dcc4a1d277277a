# src/main.py
from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Callable, Dict, List, Sequence

from config import DEFAULT_LAST_DAYS, DEFAULT_OUTPUT
from ga_reports.models.report_records import DateRange
from ga_reports.services.analytics import Analytics
from ga_reports.services.auth_service import GoogleAuthService
from ga_reports.services.date_range_service import iter_dates, resolve_period
from ga_reports.services.env_loader import get_view_id
from ga_reports.services.excel_exporter import ReportBatch, export_reports_to_excel

REPORTS = ["visitors", "pages", "referrers", "browsers", "user_types"]


def _report_fetchers(analytics: Analytics, max_results: int | None) -> Dict[str, Callable[[DateRange], list]]:
    # max_results None keeps each report's own default
    cap = {} if max_results is None else {"max_results": max_results}
    return {
        "visitors": analytics.fetch_visitors_and_page_views,
        "pages": lambda p: analytics.fetch_most_visited_pages(p, **cap),
        "referrers": lambda p: analytics.fetch_top_referrers(p, **cap),
        "browsers": lambda p: analytics.fetch_top_browsers(p, **cap),
        "user_types": analytics.fetch_user_types,
    }


def run_reports(
    analytics: Analytics,
    start: date,
    end: date,
    base_output_dir: Path = DEFAULT_OUTPUT.parent,
    mode: str = "range",  # "per_day" or "range"
    reports: Sequence[str] = REPORTS,
    max_results: int | None = None,
) -> Path | None:
    """
    mode = "range": one fetch per report for the full range [start, end].
    mode = "per_day": one fetch per report per day (start..end).
    Returns the written workbook, or None when nothing was captured.
    """
    fetchers = _report_fetchers(analytics, max_results)

    if mode == "per_day":
        periods = [DateRange.single_day(d) for d in iter_dates(DateRange(start, end))]
        filename = f"ga_reports_daily_{start.isoformat()}_to_{end.isoformat()}.xlsx"
    else:
        periods = [DateRange(start, end)]
        filename = f"ga_reports_range_{start.isoformat()}_to_{end.isoformat()}.xlsx"

    output_path = base_output_dir / filename
    batches: List[ReportBatch] = []

    for period in periods:
        print(f"[GA] Processing {period.start} to {period.end} (view {analytics.view_id})...")
        batches.append((period, {name: fetchers[name](period) for name in reports}))

    print(f"Exporting to {output_path}...")
    if not export_reports_to_excel(batches, output_path):
        print("No records captured.")
        return None

    print("Done.")
    return output_path


def _parse_reports(value: str) -> List[str]:
    names = [v.strip() for v in value.split(",") if v.strip()]
    unknown = [n for n in names if n not in REPORTS]
    if unknown:
        raise argparse.ArgumentTypeError(f"unknown report(s): {', '.join(unknown)}")
    return names


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Export Google Analytics reports to Excel.")
    parser.add_argument("--start", type=date.fromisoformat, help="YYYY-MM-DD (default: --days before --end)")
    parser.add_argument("--end", type=date.fromisoformat, help="YYYY-MM-DD (default: today)")
    parser.add_argument("--days", type=int, default=DEFAULT_LAST_DAYS, help="window size when --start is omitted")
    parser.add_argument("--view-id", help="GA view id (default: GA_VIEW_ID)")
    parser.add_argument("--credentials", help="service account JSON (default: GA_SERVICE_ACCOUNT_FILE)")
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT.parent, help="output directory")
    parser.add_argument("--mode", choices=["range", "per_day"], default="range")
    parser.add_argument("--reports", type=_parse_reports, default=REPORTS, help=",".join(REPORTS))
    parser.add_argument("--max-results", type=int, help="row cap for pages/referrers/browsers")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    period = resolve_period(args.start, args.end, args.days)
    if period.start > period.end:
        parser.error(f"Start date ({period.start}) cannot be after end date ({period.end}).")

    try:
        client = GoogleAuthService(args.credentials).build_client()
        analytics = Analytics(client, get_view_id(args.view_id))
        run_reports(
            analytics,
            period.start,
            period.end,
            base_output_dir=args.output,
            mode=args.mode,
            reports=args.reports,
            max_results=args.max_results,
        )
    except Exception as e:
        print(f"Critical Error: {e}")
        logging.getLogger(__name__).debug("Report run failed", exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

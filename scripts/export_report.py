from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hr_dashboard.hr_dashboard.common.datetime_utils import today_local
from src.hr_dashboard.hr_dashboard.container import build_container
from src.hr_dashboard.hr_dashboard.core.enums import DateRangePreset, ReportType
from src.hr_dashboard.hr_dashboard.core.exceptions import ValidationError
from src.hr_dashboard.hr_dashboard.reports.service import DateWindow


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export an HR report as CSV.")
    parser.add_argument("--type", default=ReportType.SUMMARY.value, choices=[t.value for t in ReportType])
    parser.add_argument("--preset", default=DateRangePreset.THIS_MONTH.value, choices=[p.value for p in DateRangePreset])
    parser.add_argument("--from", dest="from_date", help="yyyy-MM-dd, overrides the preset start")
    parser.add_argument("--to", dest="to_date", help="yyyy-MM-dd, overrides the preset end")
    parser.add_argument("--out-dir", default=".", help="directory the CSV file is written to")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        api_config=dict(settings.API_CONFIG),
        admin_delete_password=getattr(settings, "ADMIN_DELETE_PASSWORD", ""),
        allowed_emails=getattr(settings, "ALLOWED_EMAILS", ()),
        half_day_counting=getattr(settings, "HALF_DAY_COUNTING", "half"),
    )

    query = {"preset": args.preset, "from": args.from_date or "", "to": args.to_date or ""}
    try:
        window = DateWindow.from_query(query, today=today_local())
    except ValidationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    data = container.report_service.build_report(report_type=ReportType(args.type), window=window)
    if data.errors:
        for name, message in sorted(data.errors.items()):
            print(f"ERROR: could not fetch {name}: {message}", file=sys.stderr)
        return 1

    export = container.report_service.to_csv(data)
    out_path = Path(args.out_dir) / export.filename
    out_path.write_text(export.content, encoding="utf-8-sig")

    print(f"OK: {export.row_count} rows -> {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations

import logging

from flask import Flask, request

from ..common.datetime_utils import today_local
from ..common.web import csv_download, fetch_warning, login_required, notify, ok
from ..container import Container
from ..core.enums import ReportType
from ..core.exceptions import ValidationError
from ..attendance.controller import to_json as attendance_json
from ..leaves.controller import to_json as leave_json
from .service import DateWindow, ReportData

logger = logging.getLogger(__name__)


def _parse_report_args(args) -> tuple:
    type_s = (args.get("type") or ReportType.ATTENDANCE.value).strip().lower()
    try:
        report_type = ReportType(type_s)
    except ValueError:
        raise ValidationError(f"Unknown report type: {type_s}")
    return report_type, DateWindow.from_query(args, today=today_local())


def _report_json(data: ReportData) -> dict:
    body = {
        "type": data.report_type.value,
        "range": data.window.to_dict(),
        "charts": data.charts,
        "notification": fetch_warning(data.errors),
    }
    if data.report_type == ReportType.ATTENDANCE:
        body["rows"] = [attendance_json(r) for r in data.attendance]
    elif data.report_type == ReportType.LEAVES:
        body["rows"] = [leave_json(r) for r in data.leaves]
    else:
        body["rows"] = [s.to_dict() for s in data.summary]
    body["count"] = len(body["rows"])
    return body


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        overview = container.dashboard_service.overview(today=today_local())
        return ok(notification=fetch_warning(overview.errors), **overview.to_dict())

    @app.route("/api/reports", methods=["GET"], endpoint="reports")
    @login_required
    def reports():
        try:
            report_type, window = _parse_report_args(request.args)
        except ValidationError as e:
            return notify("Invalid report", str(e))

        data = container.report_service.build_report(report_type=report_type, window=window)
        return ok(**_report_json(data))

    @app.route("/api/reports/export.csv", methods=["GET"], endpoint="reports_export_csv")
    @login_required
    def reports_export_csv():
        try:
            report_type, window = _parse_report_args(request.args)
        except ValidationError as e:
            return notify("Invalid report", str(e))

        data = container.report_service.build_report(report_type=report_type, window=window)
        if data.errors:
            return notify("Export Failed", fetch_warning(data.errors)["message"], status=502)

        export = container.report_service.to_csv(data)
        logger.info("Exported %s report (%s rows) to %s", report_type.value, export.row_count, export.filename)
        return csv_download(export)

"""One list/filter/export/CRUD screen, parameterized per record kind.

Attendance and leaves are the same screen with different fields, so both
controllers describe themselves with a :class:`RecordView` and share the
routes registered here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional

from flask import Flask, request

from ..core.exceptions import ApiError, AuthorizationError, ValidationError
from ..exports.csv_exporter import export_filename
from ..exports.layouts import CsvLayout
from .datetime_utils import parse_query_date, today_local
from .paging import RecordPage
from .validators import require_positive
from .web import csv_download, fetch_warning, login_required, notify, ok, request_data

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordView:
    domain: str
    label: str
    url_prefix: str
    list_page: Callable[..., RecordPage]
    list_all: Callable[[], List[Any]]
    parse_criteria: Callable[[Mapping[str, str]], Any]
    apply_filter: Callable[[List[Any], Any], List[Any]]
    to_json: Callable[[Any], Dict[str, Any]]
    layout: CsvLayout
    create: Callable[[Dict[str, Any]], Any]
    update: Callable[[str, Dict[str, Any]], Any]
    delete: Callable[[Optional[str], Optional[str]], str]


def _optional_positive(name: str) -> Optional[int]:
    raw = (request.args.get(name) or "").strip()
    return require_positive(raw, name) if raw else None


def register_record_view(app: Flask, view: RecordView) -> None:
    prefix = view.url_prefix.rstrip("/")

    def _refetch() -> Dict[str, Any]:
        try:
            return {"records": [view.to_json(r) for r in view.list_all()]}
        except ApiError as e:
            logger.warning("Refreshing %s list failed: %s", view.domain, e)
            return {"records": [], "notification": fetch_warning({view.domain: str(e)})}

    @app.route(prefix, methods=["GET"], endpoint=f"{view.domain}_list")
    @login_required
    def list_records():
        try:
            criteria = view.parse_criteria(request.args)
            page = _optional_positive("page")
            limit = _optional_positive("limit")
            work_date = parse_query_date(request.args.get("date"), "date")
        except ValidationError as e:
            return notify("Invalid filter", str(e))

        pagination = None
        try:
            if page or limit:
                result = view.list_page(
                    page=page,
                    limit=limit,
                    work_date=work_date,
                    user_id=(request.args.get("userId") or "").strip() or None,
                )
                records, pagination = result.items, result.pagination
            else:
                records = view.list_all()
        except ApiError as e:
            logger.warning("Listing %s failed: %s", view.domain, e)
            return ok(records=[], count=0, pagination=None, notification=fetch_warning({view.domain: str(e)}))

        filtered = view.apply_filter(records, criteria)
        return ok(
            records=[view.to_json(r) for r in filtered],
            count=len(filtered),
            pagination=pagination.to_dict() if pagination else None,
        )

    @app.route(f"{prefix}/export.csv", methods=["GET"], endpoint=f"{view.domain}_export_csv")
    @login_required
    def export_csv():
        try:
            criteria = view.parse_criteria(request.args)
            records = view.apply_filter(view.list_all(), criteria)
        except ValidationError as e:
            return notify("Invalid filter", str(e))
        except ApiError as e:
            logger.warning("Export of %s failed: %s", view.domain, e)
            return notify("Export Failed", str(e), status=502)

        day = getattr(criteria, "work_date", None) or today_local()
        export = view.layout.render(records, filename=export_filename(view.domain, day))
        logger.info("Exported %s %s rows to %s", export.row_count, view.domain, export.filename)
        return csv_download(export)

    @app.route(prefix, methods=["POST"], endpoint=f"{view.domain}_create")
    @login_required
    def create_record():
        try:
            record = view.create(request_data(request))
        except ValidationError as e:
            return notify("Validation Error", str(e))
        except ApiError as e:
            logger.warning("Creating %s failed: %s", view.label, e)
            return notify("Create Failed", str(e), status=502)
        except Exception:
            logger.exception("Unexpected error creating %s", view.label)
            return notify("Error", f"System error while creating {view.label}", status=500)

        body = {"record": view.to_json(record) if record else None, "message": f"{view.label.capitalize()} created"}
        if record is None:
            body.update(_refetch())
        return ok(201, **body)

    @app.route(f"{prefix}/<record_id>", methods=["PUT"], endpoint=f"{view.domain}_update")
    @login_required
    def update_record(record_id: str):
        try:
            record = view.update(record_id, request_data(request))
        except ValidationError as e:
            return notify("Validation Error", str(e))
        except ApiError as e:
            logger.warning("Updating %s %s failed: %s", view.label, record_id, e)
            status = 404 if e.status_code == 404 else 502
            return notify("Update Failed", str(e), status=status)
        except Exception:
            logger.exception("Unexpected error updating %s %s", view.label, record_id)
            return notify("Error", f"System error while updating {view.label}", status=500)

        body = {"record": view.to_json(record) if record else None, "message": f"{view.label.capitalize()} updated"}
        if record is None:
            body.update(_refetch())
        return ok(**body)

    @app.route(f"{prefix}/<record_id>", methods=["DELETE"], endpoint=f"{view.domain}_delete")
    @login_required
    def delete_record(record_id: str):
        password = request_data(request).get("password")
        try:
            view.delete(record_id, password)
        except AuthorizationError as e:
            return notify("Invalid Password", str(e), status=403)
        except ValidationError as e:
            return notify("Error", str(e))
        except ApiError as e:
            return notify("Delete Failed", str(e), status=502)
        except Exception:
            logger.exception("Unexpected error deleting %s %s", view.label, record_id)
            return notify("Error", f"System error while deleting {view.label}", status=500)

        return ok(message=f"The {view.label} has been successfully deleted.", **_refetch())

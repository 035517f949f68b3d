"""Flask helpers shared by every controller."""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Dict, Mapping, Optional

from flask import Response, jsonify, session

from ..exports.csv_exporter import CsvExport

logger = logging.getLogger(__name__)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "email" not in session:
            return notify("Sign in required", "Please sign in to continue.", status=401)
        return view(*args, **kwargs)

    return wrapper


def notify(title: str, message: str, *, status: int = 400, **extra: Any):
    """Error reply the browser shows as a dismissible toast."""
    body: Dict[str, Any] = {"success": False, "title": title, "message": message}
    body.update(extra)
    return jsonify(body), status


def ok(status: int = 200, **payload: Any):
    body: Dict[str, Any] = {"success": True}
    body.update(payload)
    return jsonify(body), status


def fetch_warning(errors: Mapping[str, str]) -> Optional[Dict[str, str]]:
    """Notification attached to a list reply when some fetch fell back to empty."""
    if not errors:
        return None
    return {
        "title": "Error fetching data",
        "message": "; ".join(f"{name}: {msg}" for name, msg in sorted(errors.items())),
    }


def csv_download(export: CsvExport) -> Response:
    csv_bytes = export.content.encode("utf-8-sig")
    return Response(
        csv_bytes,
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={export.filename}"},
    )


def request_data(req) -> Dict[str, Any]:
    """JSON body or form fields, whichever the browser sent."""
    data = req.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return req.form.to_dict()

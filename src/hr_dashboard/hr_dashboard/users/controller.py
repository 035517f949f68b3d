from __future__ import annotations

import logging

from flask import Flask, request, session

from ..attendance.controller import to_json as attendance_json
from ..common.datetime_utils import today_local
from ..common.web import fetch_warning, login_required, notify, ok, request_data
from ..container import Container
from ..core.exceptions import ApiError, AuthenticationError, NotFoundError, ValidationError
from ..leaves.controller import to_json as leave_json
from .service import EmployeeService

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = request_data(request)
        try:
            user = container.auth_service.authenticate(data.get("email"), data.get("name"))
        except ValidationError as e:
            return notify("Sign-in Failed", str(e))
        except AuthenticationError as e:
            logger.info("Rejected sign-in for %s", data.get("email"))
            return notify("Access Denied", str(e), status=401)

        session.clear()
        session["email"] = user.email
        session["name"] = user.name
        logger.info("Signed in %s", user.email)
        return ok(user={"email": user.email, "name": user.name})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok(message="Signed out")

    @app.route("/api/session", methods=["GET"], endpoint="session_info")
    def session_info():
        if "email" not in session:
            return ok(authenticated=False, user=None)
        return ok(authenticated=True, user={"email": session["email"], "name": session.get("name")})

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    @login_required
    def employees_list():
        rows, errors = container.employee_service.overview(
            today=today_local(),
            search_term=request.args.get("search", ""),
        )
        return ok(
            employees=[EmployeeService.overview_to_dict(r) for r in rows],
            count=len(rows),
            notification=fetch_warning(errors),
        )

    @app.route("/api/employees/<user_id>", methods=["GET"], endpoint="employee_detail")
    @login_required
    def employee_detail(user_id: str):
        try:
            detail = container.employee_service.detail(user_id)
        except NotFoundError as e:
            return notify("Not Found", str(e), status=404)
        except ApiError as e:
            logger.warning("Loading employee %s failed: %s", user_id, e)
            return notify("Error fetching data", str(e), status=502)
        except ValidationError as e:
            return notify("Invalid request", str(e))

        return ok(
            employee=detail.employee.to_dict(),
            stats=detail.stats(),
            attendance=[attendance_json(r) for r in detail.attendance],
            leaves=[leave_json(r) for r in detail.leaves],
            chart=EmployeeService.chart(detail),
            notification=fetch_warning(detail.errors),
        )

from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .leaves.controller import register as register_leaves
from .reports.controller import register as register_reports
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    api_config = getattr(settings, "API_CONFIG")
    if container is None:
        container = build_container(
            api_config=api_config,
            admin_delete_password=getattr(settings, "ADMIN_DELETE_PASSWORD", ""),
            allowed_emails=getattr(settings, "ALLOWED_EMAILS", ()),
            half_day_counting=getattr(settings, "HALF_DAY_COUNTING", "half"),
        )
    logger.info("HR dashboard starting (settings=%s, api=%s)", settings_module, api_config.get("base_url"))

    register_users(app, container)
    register_attendance(app, container)
    register_leaves(app, container)
    register_reports(app, container)

    return app

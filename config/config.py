import os


def env_list(name: str, default: str = "") -> list:
    """Comma separated environment variable as a list of trimmed entries."""
    raw = os.environ.get(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "hr-dashboard-dev-secret"

    # Remote HR API
    API_BASE_URL = os.environ.get("API_BASE_URL", "http://localhost:5000")
    ATTENDANCE_PATH = os.environ.get("ATTENDANCE_PATH", "/api/hr/attendance")
    LEAVES_PATH = os.environ.get("LEAVES_PATH", "/api/leaves")
    USERS_PATH = os.environ.get("USERS_PATH", "/api/hr/users")
    API_TIMEOUT_SECONDS = float(os.environ.get("API_TIMEOUT_SECONDS", "15"))

    # Access control
    ALLOWED_EMAILS = env_list("ALLOWED_EMAILS")
    ADMIN_DELETE_PASSWORD = os.environ.get("ADMIN_DELETE_PASSWORD", "")

    # "half" counts a half day as 0.5 in the half-day column, "whole" as 1
    HALF_DAY_COUNTING = os.environ.get("HALF_DAY_COUNTING", "half")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


def api_config() -> dict:
    return {
        "base_url": Config.API_BASE_URL,
        "attendance_path": Config.ATTENDANCE_PATH,
        "leaves_path": Config.LEAVES_PATH,
        "users_path": Config.USERS_PATH,
        "timeout": Config.API_TIMEOUT_SECONDS,
    }

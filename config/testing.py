SECRET_KEY = "test-secret"

API_CONFIG = {
    "base_url": "http://hr-api.test",
    "timeout": 5,
}

ALLOWED_EMAILS = ["admin@example.com", "Manager@Example.com"]
ADMIN_DELETE_PASSWORD = "letmein"
HALF_DAY_COUNTING = "half"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

import os

from .config import Config, api_config

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

API_CONFIG = api_config()

ALLOWED_EMAILS = Config.ALLOWED_EMAILS
ADMIN_DELETE_PASSWORD = Config.ADMIN_DELETE_PASSWORD
HALF_DAY_COUNTING = Config.HALF_DAY_COUNTING

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

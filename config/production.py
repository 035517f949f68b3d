import os

from .config import Config, api_config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_CONFIG = api_config()

ALLOWED_EMAILS = Config.ALLOWED_EMAILS
# Empty means every delete is refused until the operator sets one.
ADMIN_DELETE_PASSWORD = Config.ADMIN_DELETE_PASSWORD
HALF_DAY_COUNTING = Config.HALF_DAY_COUNTING

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

"""
Test Settings - used by pytest-django
"""

from .base import *

DEBUG = False
SECRET_KEY = "test-secret-key-not-for-production-use-0123456789abcdef"
ALLOWED_HOSTS = ["*"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Fast hashing keeps user fixtures cheap
PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

REST_FRAMEWORK["DEFAULT_THROTTLE_CLASSES"] = []

LOGGING["loggers"]["blog"]["level"] = "INFO"

# App loggers hand records to root so caplog sees them and console prints once
for _name in ("blog", "core", "users", "inkwell"):
    LOGGING["loggers"][_name]["handlers"] = []
    LOGGING["loggers"][_name]["propagate"] = True

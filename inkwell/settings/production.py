"""
Production Settings - Security Hardened
"""

from .base import *
from inkwell.config import config, get_database_config

DEBUG = False
SECRET_KEY = config.security.secret_key
ALLOWED_HOSTS = config.security.allowed_hosts

# PostgreSQL for production (from config, with production overrides)
DATABASES = {"default": get_database_config()}
DATABASES["default"]["CONN_MAX_AGE"] = 60  # Persistent connections
if not config.database.is_sqlite:
    DATABASES["default"]["OPTIONS"] = {
        "sslmode": os.getenv("DB_SSL_MODE", "prefer"),
    }

# =============================================================================
# SECURITY SETTINGS - PRODUCTION
# =============================================================================

SECURE_SSL_REDIRECT = True
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")

SECURE_HSTS_SECONDS = 31536000  # 1 year
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True

SESSION_COOKIE_SECURE = True
SESSION_COOKIE_HTTPONLY = True
CSRF_COOKIE_SECURE = True

SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = "DENY"
SECURE_REFERRER_POLICY = "strict-origin-when-cross-origin"

# =============================================================================
# RATE LIMITING - Stricter for Production
# =============================================================================
REST_FRAMEWORK["DEFAULT_THROTTLE_RATES"] = {
    "anon": "60/minute",
    "user": "300/minute",
}

# =============================================================================
# LOGGING - Production (console only, collected by the container runtime)
# =============================================================================
LOGGING["root"]["level"] = "WARNING"
LOGGING["loggers"]["blog"]["level"] = "INFO"

# =============================================================================
# JWT
# =============================================================================
SIMPLE_JWT["SIGNING_KEY"] = config.security.secret_key

# =============================================================================
# STATIC
# =============================================================================
STATIC_ROOT = os.getenv("STATIC_ROOT", BASE_DIR / "staticfiles")
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "django.contrib.staticfiles.storage.ManifestStaticFilesStorage"},
}

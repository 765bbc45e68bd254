"""
Configuration Validators
========================

Checks the Inkwell configuration once, from ``CoreConfig.ready()``.

Each issue returned by ``AppConfig.validate()`` is prefixed with its
severity and logged at that level. Outside production nothing is fatal;
in production any CRITICAL issue stops the process.
"""

import logging

from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)

SEVERITY_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
}


def severity_of(issue: str) -> str:
    prefix = issue.split(":", 1)[0].strip().upper()
    return prefix if prefix in SEVERITY_LEVELS else "INFO"


def validate_config_on_startup(app_config=None):
    """
    Log configuration issues and fail hard on critical ones in production.

    Args:
        app_config: ``AppConfig`` to check; defaults to the process singleton

    Raises:
        ImproperlyConfigured: production config with CRITICAL issues
    """
    if app_config is None:
        from inkwell.config import config as app_config

    issues = app_config.validate()
    if not issues:
        logger.info("Configuration validated, no issues found")

    for issue in issues:
        logger.log(SEVERITY_LEVELS[severity_of(issue)], issue)

    critical = [issue for issue in issues if severity_of(issue) == "CRITICAL"]
    if critical and app_config.is_production:
        raise ImproperlyConfigured(
            "Refusing to start with a broken production configuration:\n"
            + "\n".join(f"  - {issue}" for issue in critical)
        )

    app_config.log_status()

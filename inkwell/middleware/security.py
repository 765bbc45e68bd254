"""
Security & Audit Middleware for Inkwell

Adds defensive response headers and logs API traffic.
"""

import logging
import time

logger = logging.getLogger(__name__)


def get_client_ip(request):
    """Get the real client IP, handling proxies."""
    x_forwarded_for = request.META.get("HTTP_X_FORWARDED_FOR")
    if x_forwarded_for:
        return x_forwarded_for.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR", "unknown")


class SecurityHeadersMiddleware:
    """
    Add security headers to all responses.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)

        response["X-Content-Type-Options"] = "nosniff"
        response["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response["Permissions-Policy"] = "geolocation=(), microphone=(), camera=()"

        return response


class RequestLoggingMiddleware:
    """
    Log all API requests, their duration, and any error status.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if not request.path.startswith("/api/"):
            return self.get_response(request)

        started = time.monotonic()
        logger.info("API Request: %s %s from %s", request.method, request.path, get_client_ip(request))

        response = self.get_response(request)

        elapsed_ms = (time.monotonic() - started) * 1000
        if response.status_code >= 400:
            logger.warning(
                "API Error %s: %s %s (%.1f ms)",
                response.status_code, request.method, request.path, elapsed_ms,
            )
        else:
            logger.debug("API Response %s in %.1f ms", response.status_code, elapsed_ms)

        return response

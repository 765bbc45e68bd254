"""
API Deprecation Middleware
==========================

The API is mounted at both ``/api/v1/`` and the bare ``/api/`` prefix.
Responses to the bare prefix carry ``Deprecation`` / ``Sunset`` headers
so clients move to the versioned routes before they are removed.
"""

from django.utils.deprecation import MiddlewareMixin

from inkwell.config import config


class APIDeprecationMiddleware(MiddlewareMixin):
    """
    Headers added to unversioned ``/api/*`` responses:
        Deprecation: true
        Sunset: <API_UNVERSIONED_SUNSET>
        X-API-Warn: Use /api/v1/ prefix.
    """

    VERSION_PREFIXES = ("/api/v1/",)

    def process_response(self, request, response):
        path = request.path

        if path.startswith("/api/") and not path.startswith(self.VERSION_PREFIXES):
            response["Deprecation"] = "true"
            response["Sunset"] = config.api.sunset_date
            response["X-API-Warn"] = "Use /api/v1/ prefix. Unversioned /api/ endpoints are deprecated."

        return response

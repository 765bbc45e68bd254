"""
Project-level views: health check and JSON error pages.
"""

from django.http import JsonResponse
from django.views import View

from inkwell.config import config



class HealthCheckView(View):
    """
    Simple health check endpoint for load balancers and deployment platforms.
    Returns 200 OK if the service is running.
    """

    def get(self, request):
        return JsonResponse({
            "status": "healthy",
            "service": "inkwell-api",
            "version": config.api.version,
        })


def not_found(request, exception=None):
    """Unrouted paths get the API's JSON envelope instead of an HTML page."""
    return JsonResponse({"success": False, "error": "not_found", "message": "Route not found"}, status=404)


def server_error(request):
    return JsonResponse(
        {"success": False, "error": "server_error", "message": "Internal server error"},
        status=500,
    )

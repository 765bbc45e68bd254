"""
Inkwell URL Configuration
"""

from django.contrib import admin
from django.urls import path, include

from inkwell.config import config
from inkwell.container import build_container
from inkwell.views import HealthCheckView

from blog.api_urls import post_urlpatterns, comment_urlpatterns
from users.urls import auth_urlpatterns

# Repositories and services are built once per process
container = build_container()


def api_patterns():
    return [
        path("health/", HealthCheckView.as_view(), name="health"),
        path("auth/", include(auth_urlpatterns(container))),
        path("posts/", include(post_urlpatterns(container))),
        path("comments/", include(comment_urlpatterns(container))),
    ]


urlpatterns = [
    path(f"{config.security.admin_url}/", admin.site.urls),

    # ── Versioned API (canonical) ─────────────────────────────────────
    path("api/v1/", include((api_patterns(), "api"), namespace="v1")),

    # ── Unversioned API (deprecated, see APIDeprecationMiddleware) ────
    path("api/", include((api_patterns(), "api"), namespace="legacy")),
]

handler404 = "inkwell.views.not_found"
handler500 = "inkwell.views.server_error"

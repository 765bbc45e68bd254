"""
Auth URL Configuration
"""

from django.urls import path

from . import views


def auth_urlpatterns(container):
    users = container.user_service
    return [
        path("register/", views.RegisterView.as_view(user_service=users), name="register"),
        path("login/", views.LoginView.as_view(user_service=users), name="login"),
        path("refresh/", views.RefreshView.as_view(), name="token_refresh"),
        path("profile/", views.ProfileView.as_view(), name="profile"),
    ]

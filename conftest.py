"""
Shared pytest fixtures.

Run with: python -m pytest -v
"""

import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

LONG_CONTENT = (
    "Writing clear posts takes practice, patience and a good editor "
    "who reads every single draft before it goes out."
)


@pytest.fixture
def make_user(django_user_model):
    counter = {"n": 0}

    def _make_user(username=None, password="secret-pass-123", **extra):
        counter["n"] += 1
        username = username or f"writer{counter['n']}"
        return django_user_model.objects.create_user(
            username=username,
            email=extra.pop("email", f"{username}@example.com"),
            password=password,
            **extra,
        )

    return _make_user


@pytest.fixture
def user(make_user):
    return make_user("alice")


@pytest.fixture
def other_user(make_user):
    return make_user("bob")


@pytest.fixture
def api_client():
    return APIClient()


def bearer_client(user):
    client = APIClient()
    token = RefreshToken.for_user(user).access_token
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return client


@pytest.fixture
def client_for():
    """Build a bearer-authenticated client for any user."""
    return bearer_client


@pytest.fixture
def auth_client(user):
    return bearer_client(user)


@pytest.fixture
def other_client(other_user):
    return bearer_client(other_user)


@pytest.fixture
def make_post(db, user):
    from blog.models import Post

    def _make_post(author=None, **fields):
        fields.setdefault("title", "A post worth reading")
        fields.setdefault("content", LONG_CONTENT)
        return Post.objects.create(author=author or user, **fields)

    return _make_post


@pytest.fixture
def post(make_post):
    return make_post()

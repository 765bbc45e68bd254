"""
User Services
=============

Business logic for account registration and login, extracted from views.
"""

from django.contrib.auth import authenticate
from rest_framework_simplejwt.tokens import RefreshToken

from core.services import BaseService
from core.exceptions import AuthenticationError, ConflictError


class UserService(BaseService):
    """Registration, credential checks and token issuing."""

    def __init__(self, users):
        self.users = users

    def register(self, email: str, username: str, password: str, **profile):
        """
        Create an account.

        Raises:
            ConflictError: if the email or username is already in use
        """
        if self.users.email_taken(email):
            raise ConflictError("User with this email already exists", resource="user", field="email")
        if self.users.username_taken(username):
            raise ConflictError("Username is already taken", resource="user", field="username")

        with self.atomic():
            user = self.users.create_user(email=email, username=username, password=password, **profile)
        self.logger.info("Registered user %s (%s)", user.pk, user.username)
        return user

    def login(self, request, email: str, password: str):
        """
        Check credentials and return the user.

        Raises:
            AuthenticationError: on bad credentials or a disabled account
        """
        user = authenticate(request, email=email, password=password)
        if user is None:
            self.logger.info("Failed login for %s", email)
            raise AuthenticationError("Invalid email or password")
        if not user.is_active:
            raise AuthenticationError("Account is disabled")
        return user

    @staticmethod
    def issue_tokens(user) -> dict:
        """Bearer credentials for a user."""
        refresh = RefreshToken.for_user(user)
        return {
            "access": str(refresh.access_token),
            "refresh": str(refresh),
        }

"""
Users Repositories
==================

Data-access layer for the User model.
"""

from django.contrib.auth import get_user_model

from core.repositories import BaseRepository

User = get_user_model()


class UserRepository(BaseRepository[User]):
    """User data access."""

    model = User

    def email_taken(self, email: str) -> bool:
        return self.exists(email__iexact=email)

    def username_taken(self, username: str) -> bool:
        return self.exists(username__iexact=username)

    def create_user(self, email: str, username: str, password: str, **extra_fields):
        """Create a new user through the model's UserManager."""
        return self.model.objects.create_user(
            username=username,
            email=email,
            password=password,
            **extra_fields,
        )

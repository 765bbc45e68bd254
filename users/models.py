"""
User Model
"""

from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Account used for authentication. Logs in by email.

    Posts and comments reference users as their author; users never own
    the content records themselves.
    """

    email = models.EmailField(unique=True)
    avatar = models.URLField(blank=True, default="")
    bio = models.TextField(max_length=500, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["username"]

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return self.username or self.email

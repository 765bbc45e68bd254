"""
User Serializers
"""

from rest_framework import serializers
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError

User = get_user_model()


class AuthorSerializer(serializers.ModelSerializer):
    """Compact author block embedded in posts and comments."""

    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)

    class Meta:
        model = User
        fields = ["id", "username", "firstName", "lastName", "avatar"]
        read_only_fields = fields


class UserSerializer(serializers.ModelSerializer):
    """Serializer for the signed-in user's own profile."""

    firstName = serializers.CharField(source="first_name", required=False, allow_blank=True, max_length=150)
    lastName = serializers.CharField(source="last_name", required=False, allow_blank=True, max_length=150)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = User
        fields = ["id", "email", "username", "firstName", "lastName", "avatar", "bio", "createdAt"]
        read_only_fields = ["id", "email", "username", "createdAt"]


class RegisterSerializer(serializers.Serializer):
    """Serializer for user registration."""

    email = serializers.EmailField()
    username = serializers.RegexField(r"^[\w.-]+$", min_length=3, max_length=30)
    password = serializers.CharField(write_only=True, min_length=6)
    firstName = serializers.CharField(required=False, allow_blank=True, max_length=150)
    lastName = serializers.CharField(required=False, allow_blank=True, max_length=150)

    def validate(self, attrs):
        candidate = User(email=attrs["email"], username=attrs["username"])
        try:
            validate_password(attrs["password"], user=candidate)
        except DjangoValidationError as exc:
            raise serializers.ValidationError({"password": exc.messages})
        return attrs

    def profile_fields(self) -> dict:
        data = self.validated_data
        return {
            "first_name": data.get("firstName", ""),
            "last_name": data.get("lastName", ""),
        }


class LoginSerializer(serializers.Serializer):
    """Serializer for login."""

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

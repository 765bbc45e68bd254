"""
Inkwell Exception Hierarchy
===========================

Domain-specific exceptions for structured error handling across the API.
Services raise these; the DRF exception handler turns them into the
standard ``{success, message, errors}`` envelope.

Usage::

    from core.exceptions import NotFoundError, AuthorizationError

    # In a service:
    raise NotFoundError("Post not found", resource="post")

    # In an ownership check:
    raise AuthorizationError("You can only modify your own comments")
"""

from rest_framework import status


# =============================================================================
# Base Exception
# =============================================================================

class InkwellError(Exception):
    """Base exception for all Inkwell application errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "server_error"

    def __init__(self, message="An unexpected error occurred", **kwargs):
        self.message = message
        self.details = kwargs
        super().__init__(message)

    def to_dict(self):
        result = {
            "success": False,
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["detail"] = self.details
        return result


# =============================================================================
# Client Errors
# =============================================================================

class ValidationError(InkwellError):
    """
    Invalid input from the client.

    ``errors`` is a list of ``{field, value, message}`` dicts, one per
    violated constraint, so every problem is reported at once.
    """

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "validation_error"

    def __init__(self, message="Validation failed", errors=None, field=None, **kwargs):
        if field:
            kwargs["field"] = field
        self.errors = list(errors or [])
        super().__init__(message, **kwargs)

    def to_dict(self):
        result = super().to_dict()
        result["errors"] = self.errors
        return result


class NotFoundError(InkwellError):
    """Requested resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "not_found"

    def __init__(self, message="Resource not found", resource=None, **kwargs):
        if resource:
            kwargs["resource"] = resource
        super().__init__(message, **kwargs)


class AuthenticationError(InkwellError):
    """Authentication failed or missing."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "authentication_error"

    def __init__(self, message="Authentication required", **kwargs):
        super().__init__(message, **kwargs)


class AuthorizationError(InkwellError):
    """Authenticated user does not own the resource."""

    status_code = status.HTTP_403_FORBIDDEN
    error_code = "permission_denied"

    def __init__(self, message="You do not have permission", **kwargs):
        super().__init__(message, **kwargs)


class ConflictError(InkwellError):
    """Resource conflict (duplicate email, username, etc.)."""

    status_code = status.HTTP_409_CONFLICT
    error_code = "conflict"

    def __init__(self, message="Resource conflict", resource=None, **kwargs):
        if resource:
            kwargs["resource"] = resource
        super().__init__(message, **kwargs)


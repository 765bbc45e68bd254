"""
core.exceptions: re-exports for convenient imports.

Usage::

    from core.exceptions import ValidationError, NotFoundError, AuthorizationError
    from core.exceptions import inkwell_exception_handler
"""

from .base import (
    InkwellError,
    ValidationError,
    NotFoundError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
)

from .handlers import inkwell_exception_handler, flatten_errors

__all__ = [
    # Base
    "InkwellError",
    # Client
    "ValidationError",
    "NotFoundError",
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    # Handler
    "inkwell_exception_handler",
    "flatten_errors",
]

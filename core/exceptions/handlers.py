"""
DRF Exception Handler
=====================

Custom exception handler that catches InkwellError subtypes and DRF's own
exceptions and returns the consistent ``{success, message, errors}`` JSON
envelope used by every endpoint.

Registered in ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``.
"""

import logging
from collections.abc import Mapping

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from .base import InkwellError, ValidationError

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "Internal server error"

# Django's Http404 / PermissionDenied carry no DRF default_code
_STATUS_ERROR_CODES = {
    status.HTTP_403_FORBIDDEN: "permission_denied",
    status.HTTP_404_NOT_FOUND: "not_found",
}


def _pick(data, key):
    """Return ``data[key]`` for mappings or list indexes, else None."""
    if isinstance(data, Mapping) or hasattr(data, "getlist"):
        return data.get(key)
    if isinstance(data, (list, tuple)) and isinstance(key, int) and 0 <= key < len(data):
        return data[key]
    return None


def flatten_errors(detail, data=None, field=None):
    """
    Flatten DRF serializer errors into ``[{field, value, message}]``.

    Nested list items are addressed as ``tags[1]``, nested objects as
    ``author.username``.
    """
    if isinstance(detail, Mapping):
        errors = []
        for key, sub in detail.items():
            if field is None:
                name = str(key)
            elif isinstance(key, int):
                name = f"{field}[{key}]"
            else:
                name = f"{field}.{key}"
            errors.extend(flatten_errors(sub, _pick(data, key), name))
        return errors

    if isinstance(detail, (list, tuple)):
        errors = []
        for item in detail:
            if isinstance(item, (Mapping, list, tuple)):
                errors.extend(flatten_errors(item, data, field))
            else:
                errors.append({
                    "field": field or "non_field_errors",
                    "value": data,
                    "message": str(item),
                })
        return errors

    return [{"field": field or "non_field_errors", "value": data, "message": str(detail)}]


def _request_data(context):
    request = context.get("request")
    if request is None:
        return None
    try:
        return request.data
    except exceptions.ParseError:
        return None


def inkwell_exception_handler(exc, context):
    """
    Custom DRF exception handler.

    - Catches any ``InkwellError`` subtype → structured JSON response.
    - Wraps DRF's own exceptions (validation, auth, 404, 405, throttling)
      in the same envelope.
    - Logs unhandled exceptions and answers with a generic 500.
    """

    # Handle our custom exceptions
    if isinstance(exc, InkwellError):
        logger.warning(
            "InkwellError [%s]: %s %s",
            exc.error_code,
            exc.message,
            exc.details or "",
        )
        return Response(exc.to_dict(), status=exc.status_code)

    # Let DRF translate Http404 / PermissionDenied / APIException first
    response = drf_exception_handler(exc, context)

    if response is None:
        logger.exception("Unhandled exception in %s", context.get("view", "unknown"))
        return Response(
            {"success": False, "error": "server_error", "message": GENERIC_SERVER_ERROR},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        error = ValidationError(errors=flatten_errors(exc.detail, _request_data(context)))
        response.data = error.to_dict()
        return response

    detail = response.data.get("detail") if isinstance(response.data, Mapping) else response.data
    response.data = {
        "success": False,
        "error": getattr(exc, "default_code", None) or _STATUS_ERROR_CODES.get(response.status_code, "error"),
        "message": str(detail) if detail is not None else str(exc),
    }
    return response

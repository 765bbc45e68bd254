"""
Tests for the error envelope and DRF exception handler.

Run with: python -m pytest core/tests/test_exceptions.py -v
"""

from django.http import Http404
from rest_framework import exceptions

from core.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
    flatten_errors,
    inkwell_exception_handler,
)


class TestFlattenErrors:

    def test_one_entry_per_message(self):
        detail = {"title": ["Too short.", "Not a headline."], "content": ["Required."]}
        errors = flatten_errors(detail, {"title": "Hi"})
        assert errors == [
            {"field": "title", "value": "Hi", "message": "Too short."},
            {"field": "title", "value": "Hi", "message": "Not a headline."},
            {"field": "content", "value": None, "message": "Required."},
        ]

    def test_list_items_are_indexed(self):
        detail = {"tags": {1: ["Ensure this field has no more than 30 characters."]}}
        errors = flatten_errors(detail, {"tags": ["ok", "x" * 31]})
        assert errors == [{
            "field": "tags[1]",
            "value": "x" * 31,
            "message": "Ensure this field has no more than 30 characters.",
        }]

    def test_non_field_errors(self):
        errors = flatten_errors(["Something is off."])
        assert errors == [{"field": "non_field_errors", "value": None, "message": "Something is off."}]


class TestDomainErrors:

    def test_not_found_to_dict(self):
        assert NotFoundError("Post not found", resource="post").to_dict() == {
            "success": False,
            "error": "not_found",
            "message": "Post not found",
            "detail": {"resource": "post"},
        }

    def test_validation_error_carries_errors(self):
        error = ValidationError(errors=[{"field": "title", "value": "", "message": "Required"}])
        body = error.to_dict()
        assert error.status_code == 400
        assert body["errors"][0]["field"] == "title"

    def test_status_codes(self):
        assert AuthorizationError().status_code == 403
        assert ConflictError().status_code == 409


class TestExceptionHandler:

    def test_domain_error(self):
        response = inkwell_exception_handler(AuthorizationError("Access denied."), {})
        assert response.status_code == 403
        assert response.data["success"] is False
        assert response.data["message"] == "Access denied."

    def test_drf_validation_error_flattened(self):
        exc = exceptions.ValidationError({"limit": ["Ensure this value is less than or equal to 50."]})
        response = inkwell_exception_handler(exc, {})
        assert response.status_code == 400
        assert response.data["message"] == "Validation failed"
        assert response.data["errors"] == [{
            "field": "limit",
            "value": None,
            "message": "Ensure this value is less than or equal to 50.",
        }]

    def test_not_authenticated(self):
        response = inkwell_exception_handler(exceptions.NotAuthenticated(), {})
        assert response.status_code in (401, 403)
        assert response.data["error"] == "not_authenticated"

    def test_django_404(self):
        response = inkwell_exception_handler(Http404(), {})
        assert response.status_code == 404
        assert response.data["error"] == "not_found"

    def test_unhandled_exception_becomes_generic_500(self):
        response = inkwell_exception_handler(RuntimeError("db exploded"), {})
        assert response.status_code == 500
        assert response.data == {
            "success": False,
            "error": "server_error",
            "message": "Internal server error",
        }
        assert "db exploded" not in str(response.data)

"""
Response Envelope
=================

Every endpoint answers with ``{success, data?, message?, errors?}``.
Errors are shaped by ``core.exceptions.handlers``; this module covers the
success side.
"""

from rest_framework import status as http_status
from rest_framework.response import Response


def success_response(data=None, message=None, status=http_status.HTTP_200_OK):
    """Wrap a payload in the standard success envelope."""
    body = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return Response(body, status=status)

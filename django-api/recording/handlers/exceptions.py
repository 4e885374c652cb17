"""Maps domain and DRF errors to ``{"error": <message>}`` responses."""

import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.settings import api_settings
from rest_framework.views import exception_handler

from recording.domain.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.INVALID_IDENTIFIER: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PAGINATION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_FIELD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.SESSION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.STORAGE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.STORAGE_TIMEOUT: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _first_message(detail) -> str:
    """Flatten DRF error detail (dict/list/str) into a single message."""
    if isinstance(detail, dict):
        field, value = next(iter(detail.items()))
        message = _first_message(value)
        if field == api_settings.NON_FIELD_ERRORS_KEY:
            return message
        return f"{field}: {message}"
    if isinstance(detail, list):
        return _first_message(detail[0]) if detail else "Invalid input."
    return str(detail)


def recording_exception_handler(exc, context):
    """DRF EXCEPTION_HANDLER for the recording API."""
    if isinstance(exc, DomainError):
        status_code = STATUS_BY_CODE.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        if status_code >= 500:
            logger.error("%s failed: %s", context["view"].__class__.__name__, exc)
        return Response({"error": exc.message}, status=status_code)

    response = exception_handler(exc, context)
    if response is None:
        logger.exception("Unhandled error in %s", context["view"].__class__.__name__)
        return Response({"error": "Something went wrong."}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
    if isinstance(exc, APIException):
        response.data = {"error": _first_message(exc.detail)}
    return response

# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from services.translation_manager import tr
from services.exceptions import (
    ApiException, CatalogException, NetworkException,
    RequestTimeoutException, ValidationException,
)
from utils.logger import get_logger

logger = get_logger(__name__)


def map_api_error(error: ApiException) -> str:
    """Map API exception to generic user-friendly message.

    Technical details are logged only - never shown to the user.
    """
    status = error.status_code

    if status == 400:
        details = _extract_validation_details(error.response_data)
        if details:
            logger.warning(f"API validation error (400): {details}")
    elif status:
        logger.warning(f"API error ({status}): {error}")
    else:
        logger.warning(f"API error: {error}")

    if error.context == "quote.submit":
        return tr("error.quote.rejected")
    if status == 404:
        return tr("error.api.not_found")
    if status and status >= 500:
        return tr("error.api.server")
    return tr("error.api.connection")


def map_network_error(error: NetworkException) -> str:
    """Map network exception to user-friendly translated message."""
    if isinstance(error, RequestTimeoutException):
        return tr("error.api.timeout")
    msg = str(error.original_error) if error.original_error else ""
    if "timeout" in msg.lower() or "timed out" in msg.lower():
        return tr("error.api.timeout")
    return tr("error.api.connection")


def map_exception(error: Exception, context: str = None) -> str:
    """Map any exception to generic user-friendly message.

    Technical details are logged only - never shown to the user.
    """
    if isinstance(error, ApiException):
        if not error.context and context:
            error.context = context
        return map_api_error(error)

    if isinstance(error, NetworkException):
        return map_network_error(error)

    if isinstance(error, ValidationException):
        if error.errors:
            logger.warning(f"Validation error: {error.errors}")
        return tr("error.validation.failed")

    if isinstance(error, CatalogException):
        if error.cause is not None:
            return map_exception(error.cause, context)
        logger.warning(f"Catalog error: {error}")
        return tr("error.catalog.load_failed")

    logger.warning(f"Unexpected error: {error}")
    return tr("error.api.unknown")


def _extract_validation_details(response_data: dict) -> str:
    """Extract validation error details from API response."""
    if not response_data:
        return ""

    errors = response_data.get("errors", {})
    if isinstance(errors, dict):
        lines = []
        for field, messages in errors.items():
            if isinstance(messages, list):
                for msg in messages:
                    lines.append(f"• {field}: {msg}")
            else:
                lines.append(f"• {field}: {messages}")
        if lines:
            return "\n".join(lines)

    if isinstance(errors, list):
        return "\n".join(f"• {e}" for e in errors)

    return response_data.get("message", "")

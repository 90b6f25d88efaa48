# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class ApiException(Exception):
    """Exception raised for API errors (non-success status or bad envelope)."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        self.context = context

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class ValidationException(Exception):
    """Exception raised for validation errors."""

    def __init__(self, message: str, field: str = None,
                 errors: list = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or []
        self.context = context


class NetworkException(Exception):
    """Exception raised for network/connection errors."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context


class RequestTimeoutException(NetworkException):
    """Raised when a request does not complete within its time budget."""

    def __init__(self, message: str, timeout: float = None,
                 original_error: Exception = None, context: str = None):
        super().__init__(message, original_error=original_error, context=context)
        self.timeout = timeout


class CatalogException(Exception):
    """Raised when the product/category source cannot be read."""

    def __init__(self, operation: str, cause: Exception = None):
        detail = str(cause) if cause else "Unknown error"
        super().__init__(f"Failed to {operation}: {detail}")
        self.operation = operation
        self.cause = cause

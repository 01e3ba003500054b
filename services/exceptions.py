# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class ApiException(Exception):
    """Exception raised when the property API answers with an error."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        self.context = context

    @property
    def server_message(self) -> str:
        """Message carried in the {success: false, error} envelope, if any."""
        data = self.response_data
        if not isinstance(data, dict):
            return ""
        for key in ("message", "error"):
            value = data.get(key)
            if isinstance(value, str) and value:
                return value
            if isinstance(value, dict) and value.get("message"):
                return value["message"]
        return ""

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class NetworkException(Exception):
    """Exception raised for network/connection errors."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context


class PreconditionException(Exception):
    """A submission was attempted without what it needs; no request was sent."""

    def __init__(self, message: str, reason: str = None):
        super().__init__(message)
        self.message = message
        self.reason = reason

from __future__ import annotations


class TextmagicClientError(Exception):
    """Base client error."""


class ConfigurationError(TextmagicClientError):
    """Missing or invalid client credentials / base URL."""


class ArgumentError(TextmagicClientError):
    """Caller arguments failed local validation; nothing was sent."""


class NetworkError(TextmagicClientError):
    """Transport/network layer error."""


class ApiError(TextmagicClientError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.details = details


class AuthError(ApiError):
    """Auth-related API error."""

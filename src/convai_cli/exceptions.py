"""Error types raised by convai-cli."""

from __future__ import annotations


class ConvAIError(Exception):
    """Base class for all convai-cli errors."""


class ConfigurationError(ConvAIError):
    """No API key could be resolved."""


class APIError(ConvAIError):
    """The service answered with a non-2xx status."""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"API Error: {status_code} {reason}")


class NotFoundError(APIError):
    pass


class UnauthorizedError(APIError):
    pass


class FilesystemError(ConvAIError):
    """Writing a snapshot or audio file failed."""


def api_error_for(status_code: int, reason: str) -> APIError:
    """Pick the APIError subclass matching a status code."""
    if status_code == 404:
        return NotFoundError(status_code, reason)
    if status_code in (401, 403):
        return UnauthorizedError(status_code, reason)
    return APIError(status_code, reason)

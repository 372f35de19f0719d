"""
Exceptions for floodwatch operations.
"""

from typing import Any, Dict, Optional


class FloodWatchError(Exception):
    """Base exception for floodwatch-related errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class FloodWatchConnectionError(FloodWatchError):
    """Error connecting to the dashboard backend."""

    pass


class FloodWatchTimeoutError(FloodWatchConnectionError):
    """Request to the dashboard backend timed out."""

    pass


class FloodWatchResponseError(FloodWatchError):
    """Backend answered with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        endpoint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code
        self.endpoint = endpoint


class FloodWatchDecodeError(FloodWatchError):
    """Response body is not valid JSON or does not have the expected shape."""

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.endpoint = endpoint

    def __str__(self) -> str:
        if self.endpoint:
            return f"{self.message} (endpoint: {self.endpoint})"
        return self.message


class LifecycleError(FloodWatchError):
    """Illegal transition of the dashboard lifecycle flag."""

    pass

"""
Shared error handling for the scraper API.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    details: Dict[str, Any] = {}


class ScraperException(Exception):
    """Base exception for scraper API services."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            details=self.details
        )


class CacheError(ScraperException):
    """Base class for cache layer failures."""


class ConfigurationError(CacheError):
    """Cache store could not be configured (e.g. malformed connection URL)."""

    def __init__(self, message: str = "Invalid cache configuration", details: Optional[Dict[str, Any]] = None):
        super().__init__("CACHE_CONFIGURATION_ERROR", message, details)


class CacheMissError(CacheError):
    """Key is not present in the store. A clean miss, not a failure."""

    def __init__(self, key: str):
        super().__init__("CACHE_MISS", f"Key not found: {key}", {"key": key})
        self.key = key


class ConnectivityError(CacheError):
    """Network, timeout or protocol failure talking to the store."""

    def __init__(self, operation: str, message: str = "Cache store unavailable", details: Optional[Dict[str, Any]] = None):
        super().__init__("CACHE_CONNECTIVITY_ERROR", f"{operation}: {message}", details)
        self.operation = operation


class DeserializationError(CacheError):
    """Stored payload does not match the requested shape."""

    def __init__(self, key: str, message: str = "Cached payload could not be decoded", details: Optional[Dict[str, Any]] = None):
        super().__init__("CACHE_DESERIALIZATION_ERROR", message, {"key": key, **(details or {})})
        self.key = key

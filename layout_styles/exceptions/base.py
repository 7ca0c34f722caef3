"""Base exception classes for layout_styles.

Every error carries a machine readable ``code``, a human readable
``message`` and an optional ``details`` mapping with context for the caller.
"""

from typing import Any, Dict, Optional


class LayoutStylesError(Exception):
    """Root of the layout_styles exception hierarchy."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": self.details}


class ValidationError(LayoutStylesError):
    """Raised when caller supplied data is invalid."""

    def __init__(self, code: str = "VALIDATION_ERROR", message: str = "Validation failed",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(code=code, message=message, details=details)


class ResourceNotFoundError(LayoutStylesError):
    """Raised when a named resource does not exist."""

    def __init__(self, code: str = "NOT_FOUND", message: str = "Resource not found",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(code=code, message=message, details=details)


class ConfigurationError(LayoutStylesError):
    """Raised when the library is misconfigured."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="CONFIGURATION_ERROR", message=message, details=details)


__all__ = [
    "LayoutStylesError",
    "ValidationError",
    "ResourceNotFoundError",
    "ConfigurationError",
]

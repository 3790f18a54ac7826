"""
Domain Errors

This module defines the error taxonomy raised by the OpenKarotz client.
Device-reported failures (a non-zero ``return`` field) are not errors; they
surface as ordinary ``False``/``-1`` results.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class KarotzConfigurationError(DomainError):
    """Raised when a client cannot be constructed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class InvalidHostnameError(KarotzConfigurationError, ValueError):
    """Raised when a hostname is missing or syntactically invalid."""

    def __init__(self, hostname: Any, reason: str = "invalid hostname"):
        super().__init__(
            f"Invalid Karotz hostname {hostname!r}: {reason}",
            {"hostname": hostname, "reason": reason},
        )


class KarotzValidationError(DomainError, ValueError):
    """Raised when command arguments are rejected before any request is made."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class UnsupportedOperationError(DomainError):
    """Raised when the device answers HTTP 400 to a command.

    This usually means the command belongs to a newer OpenKarotz API version
    than the one installed on the rabbit.
    """

    def __init__(self, path: str, status_code: int = 400):
        super().__init__(
            "Possibly you used a command from a newer api version?",
            {"path": path, "status_code": status_code},
        )
        self.path = path
        self.status_code = status_code

"""
Errors - Exception hierarchy for credential and lease operations.

Every failure is scoped to a single request; nothing here is fatal
to the process.
"""

from typing import Optional


class MasheryAuthError(Exception):
    """Base class for all mashery_auth errors."""


class InsufficientDataError(MasheryAuthError, ValueError):
    """Area record lacks the fields required for the requested artifact."""


class InvalidFieldError(MasheryAuthError, ValueError):
    """A request field could not be parsed into its declared type."""


class RecordNotFoundError(MasheryAuthError):
    """No credential record is stored under the area name."""

    def __init__(self, area_name: str):
        super().__init__(f"no credentials stored for area '{area_name}'")
        self.area_name = area_name


class StorageError(MasheryAuthError):
    """Storage backend failed to read, write or delete an entry."""


class RecordDecodeError(StorageError):
    """Stored payload is not a valid credential record."""


class UpstreamExchangeError(MasheryAuthError):
    """Upstream authorization server rejected or failed a token exchange."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class LeaseStateError(MasheryAuthError):
    """Lease cannot be renewed; the caller should acquire a new one."""


class TokenExpiredError(LeaseStateError):
    """Upstream access token has already expired."""


class TokenNearExpiryError(LeaseStateError):
    """Access token is inside the renewal guard band."""


class InvalidLeaseStateError(LeaseStateError):
    """Internal lease state is missing, malformed or has been tampered with."""


class UnsupportedOperationError(MasheryAuthError):
    """No handler for the requested path or operation."""

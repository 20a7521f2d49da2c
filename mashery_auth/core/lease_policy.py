"""
Lease TTL Policy - Time arithmetic for V3 access token leases.

Pure functions; all times are integer seconds.
"""

from typing import Optional

from mashery_auth.domain.errors import TokenExpiredError, TokenNearExpiryError


# A lease may always be renewed up to at least one hour
MIN_MAX_TTL = 60 * 60

# Renewal ceiling when the area record cannot be read
DEFAULT_RENEWAL_CEILING = 60 * 60

# No renewals this close to the token's expiry
RENEWAL_GUARD_SECONDS = 15


def usable_ttl(lease_duration: int, expires_in: int) -> int:
    """
    TTL granted at issuance.

    Never longer than the configured lease duration or the token's
    remaining validity reported upstream.
    """
    return min(lease_duration, expires_in)


def max_ttl(usable: int) -> int:
    """Renewal ceiling handed to the external lease manager."""
    return max(MIN_MAX_TTL, usable)


def renewal_ceiling(lease_duration: Optional[int]) -> int:
    """Policy ceiling for a renewal: the record's lease duration, if any."""
    if lease_duration is not None and lease_duration > 0:
        return lease_duration
    return DEFAULT_RENEWAL_CEILING


def renewal_ttl(token_expiry_epoch: int, now: int, ceiling: int) -> int:
    """
    TTL for a renewal at time now.

    Non-increasing as now approaches token_expiry_epoch, so a lease is
    never renewed past the token's real expiry.

    Raises:
        TokenExpiredError: Token expiry has passed
        TokenNearExpiryError: Token expires within the guard band
    """
    remaining = token_expiry_epoch - now

    if remaining <= 0:
        raise TokenExpiredError("lease cannot be renewed as token has expired")
    if remaining <= RENEWAL_GUARD_SECONDS:
        raise TokenNearExpiryError("lease almost expired, request new one instead")

    return min(remaining, ceiling)

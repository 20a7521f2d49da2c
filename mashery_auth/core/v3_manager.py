"""
V3 Token Lifecycle Manager - Issues, renews and revokes V3 access token leases.

Lease lifecycle: ISSUED -> (renewed)* -> EXPIRED | REVOKED.

Renewal only recomputes the lease TTL. The internal state packed at
issuance (storage path, refresh token, token expiry) never changes, and
the token expiry recorded there bounds every renewal.
"""

import logging
import time
from typing import Callable, Optional

from mashery_auth.core import lease_policy
from mashery_auth.core.record_store import CredentialRecordStore
from mashery_auth.domain.credential import CredentialRecord
from mashery_auth.domain.lease import IssuedV3Lease, LeaseInternalState
from mashery_auth.domain.errors import InsufficientDataError, MasheryAuthError, UpstreamExchangeError
from mashery_auth.ports.oauth_port import OAuthExchangePort


logger = logging.getLogger(__name__)


class V3TokenManager:
    """
    Exchanges area credentials for V3 access tokens and manages their leases.

    Never mutates a CredentialRecord. The OAuth exchange client is shared
    across requests and holds no per-request state.
    """

    def __init__(
        self,
        oauth: OAuthExchangePort,
        records: CredentialRecordStore,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize manager.

        Args:
            oauth: Upstream token exchange
            records: Store used to re-read lease policy on renew/revoke
            clock: Source of epoch seconds
        """
        self._oauth = oauth
        self._records = records
        self._clock = clock

    def _now(self) -> int:
        return int(self._clock())

    def acquire(self, record: CredentialRecord, storage_path: str) -> IssuedV3Lease:
        """
        Exchange the record's credentials for an access token lease.

        Args:
            record: Area credentials
            storage_path: Where the record lives; carried in the lease state

        Returns:
            Lease with TTL = min(lease duration, expires_in) and
            MaxTTL = max(1 hour, TTL)

        Raises:
            InsufficientDataError: Record lacks a V3 field
            UpstreamExchangeError: Token was not granted
        """
        if not record.sufficient_for_v3():
            raise InsufficientDataError("area data is not sufficient to request v3 access token")

        token = self._oauth.exchange_credentials(
            api_key=record.api_key,
            api_secret=record.api_secret,
            username=record.username,
            password=record.password,
            area_id=record.area_id,
        )

        if token.expires_in <= 0:
            raise UpstreamExchangeError(f"access token granted with non-positive expires_in {token.expires_in}")

        expiry = self._now() + token.expires_in
        logger.info("Maximum token expiry time %d", expiry)

        ttl = lease_policy.usable_ttl(record.lease_duration, token.expires_in)
        logger.info(
            "Usable token time in seconds: %d, chosen from %d lease duration and %d expiry time",
            ttl,
            record.lease_duration,
            token.expires_in,
        )

        lease = IssuedV3Lease(
            access_token=token.access_token,
            max_qps=record.max_qps,
            ttl=ttl,
            max_ttl=lease_policy.max_ttl(ttl),
            internal=LeaseInternalState(
                storage_path=storage_path,
                refresh_token=token.refresh_token,
                token_expiry_epoch=expiry,
            ),
        )
        logger.info("Response TTL %ds, max TTL %ds", lease.ttl, lease.max_ttl)
        return lease

    def _lease_record(self, state: LeaseInternalState) -> Optional[CredentialRecord]:
        return self._records.read_path(state.storage_path)

    def renew(self, state: LeaseInternalState) -> int:
        """
        Compute the TTL of a renewed lease. No upstream call is made.

        Returns:
            min(seconds until token expiry, area lease duration)

        Raises:
            TokenExpiredError: Token already expired
            TokenNearExpiryError: Token expires within 15 seconds
        """
        lease_duration = None
        try:
            record = self._lease_record(state)
            if record is not None:
                lease_duration = record.lease_duration
        except MasheryAuthError as e:
            logger.warning("Cannot read area record at %s for renewal: %s", state.storage_path, e)

        now = self._now()
        ceiling = lease_policy.renewal_ceiling(lease_duration)
        ttl = lease_policy.renewal_ttl(state.token_expiry_epoch, now, ceiling)

        logger.info(
            "Renewed lease for %ds, chosen from %d seconds lease duration and remaining %d seconds expiry time",
            ttl,
            ceiling,
            state.token_expiry_epoch - now,
        )
        return ttl

    def revoke(self, state: LeaseInternalState) -> None:
        """
        Best-effort revocation of the access token.

        Exchanging the refresh token makes the upstream server invalidate
        the access token. A failed exchange is logged and otherwise
        ignored: the token then simply expires at token_expiry_epoch.

        Raises:
            StorageError: Area record could not be read
        """
        record = self._lease_record(state)
        if record is None or not record.supplies_key_and_secret():
            logger.info("No area credentials at %s; access token will expire by itself", state.storage_path)
            return

        try:
            self._oauth.exchange_refresh_token(
                api_key=record.api_key,
                api_secret=record.api_secret,
                area_id=record.area_id,
                refresh_token=state.refresh_token,
            )
        except Exception as e:
            # TODO: decide whether a failed refresh exchange should fail the revoke
            logger.error("Error returned while trying to invoke an exchange token: %s", e, exc_info=True)

"""
V2 Signature Issuer - Time-salted signatures for the Mashery V2 API.

The signature is MD5(api_key + secret + unix seconds), hex encoded.
It is only as fresh as the second it was computed in; there is no
replay protection inside that window. Upstream accepts a signature for
about five minutes, the lease is capped at one minute.
"""

import hashlib
import logging
import time
from typing import Callable

from mashery_auth.domain.credential import CredentialRecord
from mashery_auth.domain.lease import IssuedV2Artifact, V2_LEASE_SECONDS
from mashery_auth.domain.errors import InsufficientDataError


logger = logging.getLogger(__name__)


def sign(api_key: str, api_secret: str, timestamp: int) -> str:
    """MD5 hex digest of key, secret and timestamp concatenated."""
    material = f"{api_key}{api_secret}{timestamp}"
    return hashlib.md5(material.encode("utf-8")).hexdigest()


class V2SignatureIssuer:
    """Stateless issuer of V2 signed secrets."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock

    def issue(self, record: CredentialRecord) -> IssuedV2Artifact:
        """
        Sign the record's key and secret with the current time.

        Raises:
            InsufficientDataError: area_nid, api_key or secret missing
        """
        if not record.sufficient_for_v2():
            raise InsufficientDataError("insufficient data to generate V2 signature")

        now = int(self._clock())

        return IssuedV2Artifact(
            area_nid=record.area_nid,
            api_key=record.api_key,
            max_qps=record.max_qps,
            signed_secret=sign(record.api_key, record.api_secret, now),
            ttl=V2_LEASE_SECONDS,
        )

    def revoke(self) -> None:
        """Nothing to invalidate upstream."""
        logger.debug("V2 signature revoke is a no-op")

"""
Lease Sealer - Tamper-evident wrapping of V3 lease internal state.

The host runtime round-trips lease internal data between issuance and
renew/revoke. Sealing it as an HS256 JWT means a modified
token_expiry_time or storage path fails verification instead of
silently extending a lease.
"""

import jwt
from typing import Dict, Any
from mashery_auth.domain.lease import LeaseInternalState
from mashery_auth.domain.errors import InvalidLeaseStateError


SEALED_STATE_KEY = "sealed_state"


class LeaseSealer:
    """
    Seals LeaseInternalState with PyJWT.

    The JWT carries no "exp" claim: expiry of the access token is judged
    by the renewal policy, which reports it with its own errors.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        issuer: str = "mashery-auth",
    ):
        """
        Initialize sealer.

        Args:
            secret: Signing secret
            algorithm: JWT algorithm (default HS256)
            issuer: Issuer claim checked on unseal
        """
        if not secret:
            raise ValueError("lease seal secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._issuer = issuer

    def seal(self, state: LeaseInternalState) -> Dict[str, Any]:
        """
        Seal internal state into host-storable internal data.

        Returns:
            {"sealed_state": <jwt>}
        """
        payload = {
            "sub": state.storage_path,
            "rt": state.refresh_token,
            "tex": state.token_expiry_epoch,
            "iss": self._issuer,
        }
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        return {SEALED_STATE_KEY: token}

    def unseal(self, internal_data: Dict[str, Any]) -> LeaseInternalState:
        """
        Verify and unwrap sealed internal data.

        Raises:
            InvalidLeaseStateError: Missing, forged or altered state
        """
        token = (internal_data or {}).get(SEALED_STATE_KEY)
        if not isinstance(token, str):
            raise InvalidLeaseStateError("request does not bear sealed lease state")

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                issuer=self._issuer,
                options={"require": ["sub", "iss"]},
            )
        except jwt.InvalidTokenError as e:
            raise InvalidLeaseStateError(f"lease state failed verification: {e}") from e

        return LeaseInternalState.from_dict({
            "siteStoragePath": payload.get("sub"),
            "refresh_token": payload.get("rt"),
            "token_expiry_time": payload.get("tex"),
        })

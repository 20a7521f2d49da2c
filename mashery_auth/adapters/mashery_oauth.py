"""
Mashery OAuth Adapter - Exchanges area credentials at the V3 token endpoint.

Password grant issues the access/refresh token pair; the refresh grant
is used on revocation, since exchanging the refresh token invalidates
the access token it was issued with.
"""

import logging
from typing import Dict, Any, Optional
import httpx
from mashery_auth.ports.oauth_port import OAuthExchangePort, AccessTokenResponse
from mashery_auth.domain.errors import UpstreamExchangeError


logger = logging.getLogger(__name__)

DEFAULT_TOKEN_URL = "https://api.mashery.com/v3/token"


class MasheryOAuthAdapter(OAuthExchangePort):
    """
    Mashery V3 OAuth client.

    Stateless apart from the pooled HTTP client; one instance is shared
    by all requests. No retries: a failed exchange is reported as is.
    """

    def __init__(
        self,
        token_url: str = DEFAULT_TOKEN_URL,
        timeout: float = 10.0,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialize the OAuth client.

        Args:
            token_url: V3 token endpoint
            timeout: Request timeout in seconds
            http_client: Pre-built httpx client (tests pass one with a MockTransport)
        """
        self._token_url = token_url
        self._client = http_client or httpx.Client(timeout=timeout)

    def exchange_credentials(
        self,
        api_key: str,
        api_secret: str,
        username: str,
        password: str,
        area_id: str,
    ) -> AccessTokenResponse:
        return self._request_token(
            api_key,
            api_secret,
            {
                "grant_type": "password",
                "username": username,
                "password": password,
                "scope": area_id,
            },
        )

    def exchange_refresh_token(
        self,
        api_key: str,
        api_secret: str,
        area_id: str,
        refresh_token: str,
    ) -> AccessTokenResponse:
        return self._request_token(
            api_key,
            api_secret,
            {
                "grant_type": "refresh_token",
                "refresh_token": refresh_token,
                "scope": area_id,
            },
        )

    def _request_token(self, api_key: str, api_secret: str, form: Dict[str, str]) -> AccessTokenResponse:
        """POST a grant to the token endpoint and parse the token response."""
        logger.debug("Requesting %s grant from %s", form["grant_type"], self._token_url)
        try:
            response = self._client.post(
                self._token_url,
                data=form,
                auth=(api_key, api_secret),
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as e:
            raise UpstreamExchangeError(f"token endpoint unreachable: {e}") from e

        if response.status_code != 200:
            raise UpstreamExchangeError(
                f"{form['grant_type']} grant rejected with HTTP {response.status_code}: "
                f"{self._error_description(response)}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
            expires_in = int(payload["expires_in"])
            if expires_in <= 0:
                raise ValueError(f"non-positive expires_in {expires_in}")
            return AccessTokenResponse(
                access_token=payload["access_token"],
                refresh_token=payload.get("refresh_token", ""),
                expires_in=expires_in,
                token_type=payload.get("token_type", "bearer"),
                scope=payload.get("scope"),
            )
        except (ValueError, KeyError, TypeError) as e:
            raise UpstreamExchangeError(
                f"malformed token response: {e}",
                status_code=response.status_code,
            ) from e

    @staticmethod
    def _error_description(response: httpx.Response) -> str:
        """Extract the OAuth error description without echoing the body."""
        try:
            payload: Dict[str, Any] = response.json()
        except ValueError:
            return "no error description"
        if not isinstance(payload, dict):
            return "no error description"
        return payload.get("error_description") or payload.get("error") or "no error description"

    def close(self) -> None:
        """Close the pooled HTTP client."""
        self._client.close()

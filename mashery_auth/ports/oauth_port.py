"""
OAuth Exchange Port - Upstream authorization server for V3 tokens.

Implementations:
- MasheryOAuthAdapter: Mashery V3 token endpoint over HTTPS
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class AccessTokenResponse:
    """Token pair granted by the upstream server."""
    access_token: str = field(repr=False)
    refresh_token: str = field(repr=False)
    expires_in: int  # seconds from now, as reported upstream
    token_type: str = "bearer"
    scope: Optional[str] = None


class OAuthExchangePort(ABC):
    """
    Port: Exchange long-lived credentials for access tokens.

    A single stateless instance is shared by all requests.
    """

    @abstractmethod
    def exchange_credentials(
        self,
        api_key: str,
        api_secret: str,
        username: str,
        password: str,
        area_id: str,
    ) -> AccessTokenResponse:
        """
        Obtain an access/refresh token pair with the password grant.

        Raises:
            UpstreamExchangeError: Exchange rejected or server unreachable
        """
        pass

    @abstractmethod
    def exchange_refresh_token(
        self,
        api_key: str,
        api_secret: str,
        area_id: str,
        refresh_token: str,
    ) -> AccessTokenResponse:
        """
        Exchange a refresh token for a new token pair.

        As a side effect the upstream server invalidates the access
        token issued together with the refresh token.

        Raises:
            UpstreamExchangeError: Exchange rejected or server unreachable
        """
        pass

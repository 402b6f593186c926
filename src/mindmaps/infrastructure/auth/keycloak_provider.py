"""Keycloak OIDC provider for bearer token validation."""

import logging
from dataclasses import dataclass

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

logger = logging.getLogger(__name__)


@dataclass
class OIDCUser:
    """Authenticated user from OIDC token."""

    user_id: str
    display_name: str
    email: str | None
    username: str | None


class KeycloakProvider:
    """Keycloak OIDC - introspects tokens and extracts user info."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    def decode_token(self, token: str) -> OIDCUser | None:
        """Introspect token, return user info or None if inactive/invalid."""
        try:
            token_info = self._keycloak.introspect(token)
        except KeycloakError as e:
            logger.warning("Token introspection failed: %s", e)
            return None
        return user_from_token_info(token_info)


def user_from_token_info(token_info: dict) -> OIDCUser | None:
    """Build OIDCUser from an introspection response."""
    if not token_info.get("active") or not token_info.get("sub"):
        return None
    username = token_info.get("preferred_username")
    return OIDCUser(
        user_id=token_info["sub"],
        display_name=token_info.get("name") or username or token_info["sub"],
        email=token_info.get("email"),
        username=username,
    )

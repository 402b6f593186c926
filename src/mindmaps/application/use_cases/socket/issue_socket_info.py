"""Issue socket info use case."""

import logging

from mindmaps.application.ports import AuthenticatedUser, ConfigSource
from mindmaps.application.ports.config_source import APP_NAME, WEBSOCKET_URL_KEY
from mindmaps.application.use_cases.mindmap.common import Clock, utc_now
from mindmaps.domain.entities import SocketInfo
from mindmaps.domain.exceptions import ConfigurationError, Unauthenticated
from mindmaps.domain.value_objects import MindMapName, compute_socket_token

logger = logging.getLogger(__name__)


class IssueSocketInfoUseCase:
    """Issue a bearer token and connection URL for a mind map's realtime channel.

    Tokens carry no server-side state. Expiry is left to the realtime server,
    which should reject stale timestamps via ``verify_socket_token``.
    """

    def __init__(self, config_source: ConfigSource, clock: Clock = utc_now) -> None:
        self._config = config_source
        self._clock = clock

    async def execute(
        self,
        user: AuthenticatedUser | None,
        document_name: str,
        request_host: str,
    ) -> SocketInfo:
        """Build socket info for the current user."""
        if user is None or not user.user_id:
            raise Unauthenticated("User not logged in")
        document_name = MindMapName(document_name).value

        secret = self._config.get_secret()
        if not secret:
            logger.error("Cannot issue socket token for %r: secret is not configured", document_name)
            raise ConfigurationError("Socket token secret is not configured")

        timestamp = int(self._clock().timestamp())
        token = compute_socket_token(user.user_id, document_name, timestamp, secret)
        connection_url = self._config.get_value(
            APP_NAME,
            WEBSOCKET_URL_KEY,
            f"wss://{request_host}/mindmap-ws",
        )
        return SocketInfo(
            token=token,
            owner_id=user.user_id,
            display_name=user.display_name or user.user_id,
            document_name=document_name,
            timestamp=timestamp,
            connection_url=connection_url,
        )

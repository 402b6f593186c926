"""Socket connection info entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SocketInfo:
    """Handshake payload for joining the realtime channel of one mind map."""

    token: str
    owner_id: str
    display_name: str
    document_name: str
    timestamp: int
    connection_url: str

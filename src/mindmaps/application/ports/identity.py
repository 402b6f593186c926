"""Identity port - the current user as seen by use cases."""

from typing import Protocol


class AuthenticatedUser(Protocol):
    """User resolved by the auth layer for the current request."""

    user_id: str
    display_name: str

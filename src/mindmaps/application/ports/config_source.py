"""Configuration source port."""

from typing import Protocol

APP_NAME = "mindmaps"
WEBSOCKET_URL_KEY = "websocket_url"


class ConfigSource(Protocol):
    """Port for reading app settings and the shared signing secret.

    ``get_value`` serves public settings only; the secret is read through
    ``get_secret``.
    """

    def get_value(self, app_name: str, key: str, default: str) -> str: ...

    def get_secret(self) -> str: ...

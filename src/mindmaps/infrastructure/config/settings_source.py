"""ConfigSource backed by pydantic Settings."""

from mindmaps.application.ports.config_source import APP_NAME, WEBSOCKET_URL_KEY
from mindmaps.config import Settings

READABLE_KEYS = frozenset({WEBSOCKET_URL_KEY})


class SettingsConfigSource:
    """Expose Settings through the ConfigSource port.

    Only keys in READABLE_KEYS are served; anything else, including secrets,
    falls back to the default, as do other apps and empty values.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def get_value(self, app_name: str, key: str, default: str) -> str:
        if app_name != APP_NAME or key not in READABLE_KEYS:
            return default
        value = getattr(self._settings, key)
        if value is None or value == "":
            return default
        return str(value)

    def get_secret(self) -> str:
        return self._settings.secret

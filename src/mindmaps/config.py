"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Storage
    storage_root: str = Field(
        default="./data",
        description="Directory holding one folder per user",
    )
    namespace_folder: str = Field(
        default="mindmaps",
        description="Folder inside each user's directory that holds mind map records",
    )

    # Realtime collaboration
    websocket_url: str = Field(
        default="",
        description="WebSocket URL handed to clients; empty derives it from the request host",
    )
    secret: str = Field(default="", description="Shared secret for socket tokens")
    socket_token_max_age: int = Field(
        default=300,
        description="Max token age in seconds accepted by verify_socket_token callers",
    )

    # Keycloak OIDC
    keycloak_url: str = Field(
        default="http://localhost:8080",
        description="Keycloak server URL",
    )
    keycloak_realm: str = Field(default="mindmaps", description="Keycloak realm")
    keycloak_client_id: str = Field(default="mindmaps-api", description="Keycloak client ID")
    keycloak_client_secret: str = Field(default="", description="Keycloak client secret")

    # Application
    cors_origins: str = Field(default="", description="Comma-separated allowed origins")
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

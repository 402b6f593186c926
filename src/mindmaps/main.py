"""Application entry point and composition root."""

import logging
from pathlib import Path

from mindmaps import __version__
from mindmaps.application.use_cases.mindmap.delete_mindmap import DeleteMindMapUseCase
from mindmaps.application.use_cases.mindmap.get_mindmap import GetMindMapUseCase
from mindmaps.application.use_cases.mindmap.list_mindmaps import ListMindMapsUseCase
from mindmaps.application.use_cases.mindmap.save_mindmap import SaveMindMapUseCase
from mindmaps.application.use_cases.socket.issue_socket_info import IssueSocketInfoUseCase
from mindmaps.config import Settings, get_settings
from mindmaps.infrastructure.auth.keycloak_provider import KeycloakProvider
from mindmaps.infrastructure.config.settings_source import SettingsConfigSource
from mindmaps.infrastructure.storage.filesystem import FilesystemNamespaceResolver
from mindmaps.interfaces.api.app import create_app
from mindmaps.interfaces.api.middleware.auth import AuthMiddleware
from mindmaps.interfaces.api.middleware.cors import CORSMiddleware
from mindmaps.interfaces.api.resources.health import HealthResource
from mindmaps.interfaces.api.resources.mindmaps import (
    MindMapResource,
    MindMapSocketResource,
    MindMapsResource,
)

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point."""
    print(f"mindmaps v{__version__}")


def configure_logging(settings: Settings) -> None:
    """Plain log lines in development, JSON lines elsewhere."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    if settings.environment == "development" or settings.debug:
        fmt = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    else:
        fmt = '{"time":"%(asctime)s","level":"%(levelname)s","name":"%(name)s","message":"%(message)s"}'
    logging.basicConfig(level=level, format=fmt)


def create_mindmaps_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings)

    storage_root = Path(settings.storage_root)
    storage_root.mkdir(parents=True, exist_ok=True)
    resolver = FilesystemNamespaceResolver(storage_root, settings.namespace_folder)
    config_source = SettingsConfigSource(settings)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("Keycloak client secret not set; all API requests will be unauthorized")
    if not settings.secret:
        logger.warning("SECRET not set; socket token issuance is disabled")

    get_mindmap = GetMindMapUseCase(namespace_resolver=resolver)
    save_mindmap = SaveMindMapUseCase(namespace_resolver=resolver)
    list_mindmaps = ListMindMapsUseCase(namespace_resolver=resolver)
    delete_mindmap = DeleteMindMapUseCase(namespace_resolver=resolver)
    issue_socket_info = IssueSocketInfoUseCase(config_source=config_source)

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    logger.info("mindmaps v%s storing documents under %s", __version__, storage_root)
    return create_app(
        mindmaps_resource=MindMapsResource(list_mindmaps),
        mindmap_resource=MindMapResource(get_mindmap, save_mindmap, delete_mindmap),
        socket_resource=MindMapSocketResource(issue_socket_info),
        health_resource=HealthResource(storage_root),
        middleware=[
            CORSMiddleware(cors_origins),
            AuthMiddleware(keycloak),
        ],
    )


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    app = create_mindmaps_app()
    uvicorn.run(app, host="0.0.0.0", port=8000)

"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from mindmaps.interfaces.api.resources.health import HealthResource
from mindmaps.interfaces.api.resources.mindmaps import (
    MindMapResource,
    MindMapSocketResource,
    MindMapsResource,
)

logger = logging.getLogger(__name__)


async def handle_unexpected_error(req, resp, ex, params) -> None:
    """Log the failure once and answer 500 with its message."""
    logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"error": str(ex) or type(ex).__name__}


def create_app(
    mindmaps_resource: MindMapsResource,
    mindmap_resource: MindMapResource,
    socket_resource: MindMapSocketResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_route("/api/health", health_resource)
    app.add_route("/api/health/ready", health_resource, suffix="ready")
    app.add_route("/api/mindmaps", mindmaps_resource)
    app.add_route("/api/mindmaps/{name}", mindmap_resource)
    app.add_route("/api/mindmaps/{name}/socket", socket_resource)
    return app

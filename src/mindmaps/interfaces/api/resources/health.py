"""Health check endpoints."""

import os
from pathlib import Path

import falcon.asgi


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, storage_root: Path | None = None) -> None:
        self._storage_root = storage_root

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /api/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /api/health/ready - storage root is a writable directory."""
        root = self._storage_root
        if root is not None and not (root.is_dir() and os.access(root, os.W_OK)):
            resp.media = {"status": "unavailable", "error": "Storage root is not writable"}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200

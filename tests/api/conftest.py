"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from mindmaps.application.use_cases.mindmap.delete_mindmap import DeleteMindMapUseCase
from mindmaps.application.use_cases.mindmap.get_mindmap import GetMindMapUseCase
from mindmaps.application.use_cases.mindmap.list_mindmaps import ListMindMapsUseCase
from mindmaps.application.use_cases.mindmap.save_mindmap import SaveMindMapUseCase
from mindmaps.application.use_cases.socket.issue_socket_info import IssueSocketInfoUseCase
from mindmaps.interfaces.api.app import create_app
from mindmaps.interfaces.api.middleware.auth import RequestUser
from mindmaps.interfaces.api.resources.health import HealthResource
from mindmaps.interfaces.api.resources.mindmaps import (
    MindMapResource,
    MindMapSocketResource,
    MindMapsResource,
)

ANONYMOUS = "-"


class AuthBypassMiddleware:
    """Sets context.user from the X-Test-User header ("-" means no user)."""

    async def process_request(self, req, resp):
        user_id = req.get_header("X-Test-User") or "test-user-1"
        if user_id == ANONYMOUS:
            req.context.user = None
        else:
            req.context.user = RequestUser(user_id=user_id, display_name=f"{user_id} display")


@pytest.fixture
def app(resolver, clock, config_source):
    """Falcon ASGI app wired to in-memory storage."""
    return create_app(
        mindmaps_resource=MindMapsResource(ListMindMapsUseCase(resolver, clock=clock)),
        mindmap_resource=MindMapResource(
            GetMindMapUseCase(resolver, clock=clock),
            SaveMindMapUseCase(resolver, clock=clock),
            DeleteMindMapUseCase(resolver),
        ),
        socket_resource=MindMapSocketResource(IssueSocketInfoUseCase(config_source, clock=clock)),
        health_resource=HealthResource(),
        middleware=[AuthBypassMiddleware()],
    )


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)

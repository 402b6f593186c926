"""Mind map API resources."""

import falcon
import falcon.asgi

from mindmaps.application.dto.mindmap_dto import SaveMindMapInput
from mindmaps.application.use_cases.mindmap.delete_mindmap import DeleteMindMapUseCase
from mindmaps.application.use_cases.mindmap.get_mindmap import GetMindMapUseCase
from mindmaps.application.use_cases.mindmap.list_mindmaps import ListMindMapsUseCase
from mindmaps.application.use_cases.mindmap.save_mindmap import SaveMindMapUseCase
from mindmaps.application.use_cases.socket.issue_socket_info import IssueSocketInfoUseCase
from mindmaps.domain.entities import MindMap, SocketInfo
from mindmaps.domain.exceptions import NotFound, Unauthenticated, ValidationError


def _unauthorized(resp: falcon.asgi.Response) -> None:
    resp.status = falcon.HTTP_401
    resp.media = {"error": "Unauthorized"}


class MindMapsResource:
    """GET /api/mindmaps - list the current user's mind maps."""

    def __init__(self, list_mindmaps: ListMindMapsUseCase) -> None:
        self._list_mindmaps = list_mindmaps

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            _unauthorized(resp)
            return

        mindmaps = await self._list_mindmaps.execute(user.user_id)
        resp.media = [_mindmap_to_dict(m) for m in mindmaps]
        resp.status = falcon.HTTP_200


class MindMapResource:
    """GET/POST/DELETE /api/mindmaps/{name} - one mind map by name."""

    def __init__(
        self,
        get_mindmap: GetMindMapUseCase,
        save_mindmap: SaveMindMapUseCase,
        delete_mindmap: DeleteMindMapUseCase,
    ) -> None:
        self._get_mindmap = get_mindmap
        self._save_mindmap = save_mindmap
        self._delete_mindmap = delete_mindmap

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, name: str
    ) -> None:
        """Get mind map by name."""
        user = getattr(req.context, "user", None)
        if not user:
            _unauthorized(resp)
            return

        try:
            result = await self._get_mindmap.execute(user.user_id, name)
            resp.media = _mindmap_to_dict(result)
            resp.status = falcon.HTTP_200
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Mind map not found"}
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, name: str
    ) -> None:
        """Create or replace mind map. Body: {"content": "<opaque string>"}."""
        user = getattr(req.context, "user", None)
        if not user:
            _unauthorized(resp)
            return

        try:
            body = await req.get_media()
            content = body["content"]
            if not isinstance(content, str):
                raise ValueError("content must be a string")
        except falcon.HTTPBadRequest as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": e.description or e.title}
            return
        except (KeyError, TypeError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            result = await self._save_mindmap.execute(
                user.user_id, SaveMindMapInput(name=name, content=content)
            )
            resp.media = _mindmap_to_dict(result)
            resp.status = falcon.HTTP_200
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, name: str
    ) -> None:
        """Delete mind map by name."""
        user = getattr(req.context, "user", None)
        if not user:
            _unauthorized(resp)
            return

        try:
            deleted = await self._delete_mindmap.execute(user.user_id, name)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        if not deleted:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Mind map not found"}
            return
        resp.media = {"success": True}
        resp.status = falcon.HTTP_200


class MindMapSocketResource:
    """GET /api/mindmaps/{name}/socket - realtime connection info."""

    def __init__(self, issue_socket_info: IssueSocketInfoUseCase) -> None:
        self._issue_socket_info = issue_socket_info

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, name: str
    ) -> None:
        user = getattr(req.context, "user", None)
        try:
            result = await self._issue_socket_info.execute(user, name, req.netloc)
            resp.media = _socket_info_to_dict(result)
            resp.status = falcon.HTTP_200
        except Unauthenticated:
            _unauthorized(resp)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}


def _mindmap_to_dict(m: MindMap) -> dict:
    return {
        "id": m.id,
        "name": m.name,
        "content": m.content,
        "ownerId": m.owner_id,
        "storagePath": m.storage_path,
        "createdAt": m.created_at.isoformat(),
        "updatedAt": m.updated_at.isoformat(),
    }


def _socket_info_to_dict(s: SocketInfo) -> dict:
    return {
        "token": s.token,
        "ownerId": s.owner_id,
        "displayName": s.display_name,
        "documentName": s.document_name,
        "timestamp": s.timestamp,
        "connectionURL": s.connection_url,
    }

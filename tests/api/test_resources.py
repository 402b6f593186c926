"""API resource tests."""

import pytest
from falcon.testing import TestClient

from mindmaps.domain.value_objects import compute_socket_token

from tests.api.conftest import ANONYMOUS
from tests.conftest import FakeConfigSource


def _save(client: TestClient, name: str, content: str, user: str | None = None):
    headers = {"X-Test-User": user} if user else None
    return client.simulate_post(f"/api/mindmaps/{name}", json={"content": content}, headers=headers)


class TestListMindMaps:
    def test_list_empty(self, client: TestClient) -> None:
        r = client.simulate_get("/api/mindmaps")
        assert r.status_code == 200
        assert r.json == []

    def test_list_returns_own_maps_only(self, client: TestClient) -> None:
        for name in ["a", "b", "c"]:
            assert _save(client, name, f"content-{name}").status_code == 200
        _save(client, "d", "theirs", user="someone-else")

        r = client.simulate_get("/api/mindmaps")
        assert r.status_code == 200
        assert sorted(m["name"] for m in r.json) == ["a", "b", "c"]
        assert {m["ownerId"] for m in r.json} == {"test-user-1"}

    def test_list_requires_user(self, client: TestClient) -> None:
        r = client.simulate_get("/api/mindmaps", headers={"X-Test-User": ANONYMOUS})
        assert r.status_code == 401
        assert r.json == {"error": "Unauthorized"}

    def test_list_unexpected_error_is_500_with_message(self, client: TestClient, resolver) -> None:
        def _explode(owner_id):
            raise RuntimeError("disk on fire")

        resolver.for_owner = _explode
        r = client.simulate_get("/api/mindmaps")
        assert r.status_code == 500
        assert r.json == {"error": "disk on fire"}


class TestSaveMindMap:
    def test_save_returns_document(self, client: TestClient) -> None:
        r = _save(client, "plan", '{"nodes":[]}')
        assert r.status_code == 200
        body = r.json
        assert body["id"] == 0
        assert body["name"] == "plan"
        assert body["content"] == '{"nodes":[]}'
        assert body["ownerId"] == "test-user-1"
        assert body["storagePath"] == "/test-user-1/mindmaps/plan.json"
        assert body["createdAt"] == body["updatedAt"]

    def test_resave_keeps_created_at(self, client: TestClient) -> None:
        first = _save(client, "plan", "v1").json
        second = _save(client, "plan", "v2").json
        assert second["createdAt"] == first["createdAt"]
        assert second["updatedAt"] > first["updatedAt"]
        assert second["content"] == "v2"

    @pytest.mark.parametrize(
        "body",
        [{}, {"content": 5}, {"content": {"nodes": []}}, ["content"]],
    )
    def test_save_rejects_bad_body(self, client: TestClient, body) -> None:
        r = client.simulate_post("/api/mindmaps/plan", json=body)
        assert r.status_code == 400
        assert "error" in r.json

    def test_save_rejects_missing_body(self, client: TestClient) -> None:
        r = client.simulate_post("/api/mindmaps/plan")
        assert r.status_code == 400

    def test_save_rejects_invalid_name(self, client: TestClient) -> None:
        r = _save(client, "x" * 256, "c")
        assert r.status_code == 400

    def test_save_storage_failure_is_500(self, client: TestClient, resolver) -> None:
        resolver.fail_on.add("write")
        r = _save(client, "plan", "c")
        assert r.status_code == 500
        assert r.json == {"error": "write failed"}

    def test_save_requires_user(self, client: TestClient, resolver) -> None:
        r = _save(client, "plan", "c", user=ANONYMOUS)
        assert r.status_code == 401
        assert resolver.namespaces == {}


class TestGetMindMap:
    def test_get_existing(self, client: TestClient) -> None:
        _save(client, "plan", '{"nodes":[1]}')
        r = client.simulate_get("/api/mindmaps/plan")
        assert r.status_code == 200
        assert r.json["content"] == '{"nodes":[1]}'
        assert r.json["name"] == "plan"

    def test_get_missing_is_404(self, client: TestClient) -> None:
        r = client.simulate_get("/api/mindmaps/nope")
        assert r.status_code == 404
        assert r.json == {"error": "Mind map not found"}

    def test_get_other_users_map_is_404(self, client: TestClient) -> None:
        _save(client, "x", "c", user="alice")
        r = client.simulate_get("/api/mindmaps/x", headers={"X-Test-User": "bob"})
        assert r.status_code == 404

    def test_get_requires_user(self, client: TestClient) -> None:
        r = client.simulate_get("/api/mindmaps/plan", headers={"X-Test-User": ANONYMOUS})
        assert r.status_code == 401


class TestDeleteMindMap:
    def test_delete_existing_then_missing(self, client: TestClient) -> None:
        _save(client, "plan", "c")
        r = client.simulate_delete("/api/mindmaps/plan")
        assert r.status_code == 200
        assert r.json == {"success": True}

        assert client.simulate_get("/api/mindmaps/plan").status_code == 404
        r = client.simulate_delete("/api/mindmaps/plan")
        assert r.status_code == 404
        assert r.json == {"error": "Mind map not found"}

    def test_delete_requires_user(self, client: TestClient) -> None:
        r = client.simulate_delete("/api/mindmaps/plan", headers={"X-Test-User": ANONYMOUS})
        assert r.status_code == 401


class TestSocketInfo:
    def test_socket_info(self, client: TestClient, clock) -> None:
        issued_at = int(clock.now.timestamp())
        r = client.simulate_get("/api/mindmaps/plan/socket")
        assert r.status_code == 200
        body = r.json
        assert body["timestamp"] == issued_at
        assert body["token"] == compute_socket_token("test-user-1", "plan", issued_at, "s3cret")
        assert body["ownerId"] == "test-user-1"
        assert body["displayName"] == "test-user-1 display"
        assert body["documentName"] == "plan"
        assert body["connectionURL"] == "wss://falconframework.org/mindmap-ws"

    def test_socket_info_requires_user(self, client: TestClient) -> None:
        r = client.simulate_get("/api/mindmaps/plan/socket", headers={"X-Test-User": ANONYMOUS})
        assert r.status_code == 401
        assert "token" not in r.json

    def test_socket_info_without_secret_is_500(self, client: TestClient, config_source: FakeConfigSource) -> None:
        config_source._secret = ""
        r = client.simulate_get("/api/mindmaps/plan/socket")
        assert r.status_code == 500
        assert r.json == {"error": "Socket token secret is not configured"}


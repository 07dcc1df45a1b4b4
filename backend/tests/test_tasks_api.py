"""
Tests for the /api/v1/tasks endpoints.
"""

from __future__ import annotations

from datetime import datetime

from fastapi.testclient import TestClient

from app.schemas.task import TITLE_REQUIRED, TITLE_TOO_LONG, TITLE_TOO_SHORT

from .fakes import API_PREFIX


def _create(client: TestClient, title: str, **extra) -> dict:
    response = client.post(API_PREFIX, json={"title": title, **extra})
    assert response.status_code == 201, response.text
    return response.json()


class TestHealth:
    def test_healthz_returns_200_without_body(self, client: TestClient) -> None:
        response = client.get(f"{API_PREFIX}/healthz")

        assert response.status_code == 200
        assert response.content == b""


class TestCreate:
    def test_create_defaults_to_pending(self, client: TestClient) -> None:
        body = _create(client, "Buy milk")

        assert body["title"] == "Buy milk"
        assert body["status"] == "pending"
        assert isinstance(body["id"], int)
        assert set(body) == {"id", "title", "status", "createdAt", "updatedAt"}

    def test_create_with_completed_status(self, client: TestClient) -> None:
        assert _create(client, "Done already", status="completed")["status"] == "completed"

    def test_empty_title_is_rejected_with_min_length_message(self, client: TestClient) -> None:
        response = client.post(API_PREFIX, json={"title": ""})

        assert response.status_code == 400
        assert response.json() == {"error": TITLE_TOO_SHORT}

    def test_long_title_is_rejected(self, client: TestClient) -> None:
        response = client.post(API_PREFIX, json={"title": "x" * 21})

        assert response.status_code == 400
        assert response.json() == {"error": TITLE_TOO_LONG}

    def test_invalid_status_is_rejected(self, client: TestClient) -> None:
        response = client.post(API_PREFIX, json={"title": "ok", "status": "archived"})

        assert response.status_code == 400
        assert "error" in response.json()

    def test_duplicate_title_is_rejected(self, client: TestClient) -> None:
        _create(client, "Buy milk")

        response = client.post(API_PREFIX, json={"title": "Buy milk"})

        assert response.status_code == 400
        assert response.json() == {"error": "Task Title should be unique"}
        assert len(client.get(API_PREFIX).json()) == 1

    def test_missing_body_reports_title_required(self, client: TestClient) -> None:
        response = client.post(API_PREFIX)

        assert response.status_code == 400
        assert response.json() == {"error": TITLE_REQUIRED}

    def test_client_supplied_id_is_ignored(self, client: TestClient) -> None:
        response = client.post(API_PREFIX, json={"id": [1], "title": "ok"})

        assert response.status_code == 201, response.text
        assert isinstance(response.json()["id"], int)
        assert response.json()["title"] == "ok"

    def test_malformed_json_is_bad_request(self, client: TestClient) -> None:
        response = client.post(
            API_PREFIX,
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert "error" in response.json()


class TestRead:
    def test_list_is_newest_first(self, client: TestClient) -> None:
        _create(client, "older")
        _create(client, "newer")

        titles = [task["title"] for task in client.get(API_PREFIX).json()]

        assert titles == ["newer", "older"]

    def test_get_unknown_id_is_404(self, client: TestClient) -> None:
        response = client.get(f"{API_PREFIX}/4242")

        assert response.status_code == 404
        assert response.json() == {"error": "Task not found"}

    def test_get_malformed_id_is_404(self, client: TestClient) -> None:
        assert client.get(f"{API_PREFIX}/not-an-id").status_code == 404

    def test_list_then_get_round_trip(self, client: TestClient) -> None:
        _create(client, "a")
        _create(client, "b", status="completed")

        for listed in client.get(API_PREFIX).json():
            assert client.get(f"{API_PREFIX}/{listed['id']}").json() == listed


class TestUpdate:
    def test_buy_milk_scenario(self, client: TestClient) -> None:
        created = _create(client, "Buy milk")
        assert created["status"] == "pending"

        response = client.put(
            f"{API_PREFIX}/{created['id']}",
            json={"title": "Buy milk", "status": "completed"},
        )
        assert response.status_code == 200
        assert response.json()["status"] == "completed"

        fetched = client.get(f"{API_PREFIX}/{created['id']}").json()
        assert fetched["status"] == "completed"
        assert datetime.fromisoformat(fetched["updatedAt"]) > datetime.fromisoformat(
            created["updatedAt"]
        )

    def test_toggle_back_to_pending(self, client: TestClient) -> None:
        created = _create(client, "Flip", status="completed")

        body = client.put(
            f"{API_PREFIX}/{created['id']}", json={"title": "Flip", "status": "pending"}
        ).json()

        assert body["status"] == "pending"

    def test_update_validation_error(self, client: TestClient) -> None:
        created = _create(client, "Buy milk")

        response = client.put(f"{API_PREFIX}/{created['id']}", json={"title": "   "})

        assert response.status_code == 400
        assert response.json() == {"error": TITLE_TOO_SHORT}

    def test_update_to_duplicate_title(self, client: TestClient) -> None:
        _create(client, "one")
        two = _create(client, "two")

        response = client.put(f"{API_PREFIX}/{two['id']}", json={"title": "one", "status": "pending"})

        assert response.status_code == 400
        assert response.json() == {"error": "Task Title should be unique"}

    def test_update_unknown_id_is_404(self, client: TestClient) -> None:
        response = client.put(f"{API_PREFIX}/999", json={"title": "ghost", "status": "pending"})

        assert response.status_code == 404

    def test_update_malformed_id_is_400(self, client: TestClient) -> None:
        response = client.put(f"{API_PREFIX}/abc", json={"title": "ghost", "status": "pending"})

        assert response.status_code == 400
        assert response.json() == {"error": "Bad request"}


class TestDelete:
    def test_delete_then_get_is_404(self, client: TestClient) -> None:
        created = _create(client, "Buy milk")

        response = client.delete(f"{API_PREFIX}/{created['id']}")

        assert response.status_code == 204
        assert client.get(f"{API_PREFIX}/{created['id']}").status_code == 404

    def test_delete_missing_id_still_204(self, client: TestClient) -> None:
        assert client.delete(f"{API_PREFIX}/999").status_code == 204

    def test_delete_malformed_id_is_400(self, client: TestClient) -> None:
        response = client.delete(f"{API_PREFIX}/abc")

        assert response.status_code == 400
        assert response.json() == {"error": "Bad request"}

    def test_delete_all(self, client: TestClient) -> None:
        for title in ("a", "b", "c"):
            _create(client, title)

        assert client.delete(API_PREFIX).status_code == 204
        assert client.get(API_PREFIX).json() == []

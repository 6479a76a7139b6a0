"""End-to-end tests for the HTTP API."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from lifequest.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app(container=build_test_container())
    return TestClient(app_instance)


class TestUserEndpoints:
    """End-to-end tests for account endpoints.

    Note: in-memory repositories live for one request, so each test makes
    a single stateful call. Business rules are covered by unit tests.
    """

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_create_user(self, client):
        response = client.post("/users", json={"name": "Ada"})

        assert response.status_code == 201
        user = response.json()["user"]
        assert user["name"] == "Ada"
        assert user["level"] == 1
        assert user["coins"] == 50
        assert len(user["skill_trees"]) == 5

    def test_create_user_with_empty_name_fails(self, client):
        response = client.post("/users", json={"name": ""})

        assert response.status_code == 422

    def test_get_nonexistent_user(self, client):
        response = client.get(f"/users/{uuid4()}")

        assert response.status_code == 404
        assert "User" in response.json()["detail"]

    def test_get_user_with_malformed_id(self, client):
        response = client.get("/users/not-a-uuid")

        assert response.status_code == 422


class TestValidation:
    """Invalid payloads are rejected before touching the user."""

    def test_task_with_unknown_category(self, client):
        response = client.post(
            f"/users/{uuid4()}/tasks", json={"title": "Read", "category": "Nope"}
        )

        assert response.status_code == 422

    def test_task_for_missing_user(self, client):
        response = client.post(
            f"/users/{uuid4()}/tasks", json={"title": "Read", "category": "Education"}
        )

        assert response.status_code == 404

    def test_boss_needs_positive_hp(self, client):
        response = client.put(f"/users/{uuid4()}/boss", json={"name": "Imp", "max_hp": 0})

        assert response.status_code == 422

    def test_custom_reward_needs_a_price(self, client):
        response = client.post(f"/users/{uuid4()}/rewards", json={"title": "Free"})

        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail
        assert all("input" not in error for error in detail)

    def test_journal_entry_needs_content(self, client):
        response = client.post(f"/users/{uuid4()}/journal", json={})

        assert response.status_code == 422
        assert response.json()["detail"]


class TestSyncEndpoints:
    def test_status(self, client):
        response = client.get("/sync/status")

        assert response.status_code == 200
        assert response.json() == {"online": True, "pending": 0}

    def test_replay_with_empty_log(self, client):
        response = client.post("/sync/replay")

        assert response.status_code == 200
        body = response.json()
        assert body["online"]
        assert body["applied"] == 0
        assert body["remaining"] == 0

    def test_replay_limit_is_bounded(self, client):
        response = client.post("/sync/replay", params={"limit": 0})

        assert response.status_code == 422

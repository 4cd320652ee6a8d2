"""End-to-end tests for the tasks HTTP API."""

import time

import pytest
from dishka import Provider, Scope, make_async_container, provide
from fastapi.testclient import TestClient

from taskboard.api_app import create_fastapi_app
from taskboard.domain.ports.repositories import TaskRepository
from taskboard.errors import GENERIC_ERROR_MESSAGE
from taskboard.setup.ioc.container import AppProvider, InMemoryPersistenceProvider, create_container
from tests.conftest import OWNER, service_token
from tests.fakes import UnreachableStore

pytestmark = pytest.mark.api

MISSING_ID = "0190a0c4-7b7e-7c3a-9d2e-5f6a7b8c9d0e"


def create(client, headers, **body):
    body.setdefault("title", "Write release notes")
    response = client.post("/tasks", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["id"]


class TestCreateAndGet:
    def test_create_returns_generated_id(self, client, auth_headers):
        task_id = create(client, auth_headers, description="v1.4", priority="high")

        response = client.get(f"/tasks/{task_id}", headers=auth_headers)
        assert response.status_code == 200
        task = response.json()
        assert task["id"] == task_id
        assert task["owner"] == OWNER
        assert task["priority"] == "high"
        assert task["status"] == "open"
        assert task["version"] == 1
        assert task["checklist"] == []

    def test_empty_title_is_a_domain_error(self, client, auth_headers):
        response = client.post("/tasks", json={"title": "   "}, headers=auth_headers)
        assert response.status_code == 422
        assert response.json() == {"message": "Title cannot be empty"}

    def test_missing_field_is_a_request_error(self, client, auth_headers):
        response = client.post("/tasks", json={"description": "no title"}, headers=auth_headers)
        assert response.status_code == 400
        assert response.json() == {"message": "Field required"}

    def test_malformed_id(self, client, auth_headers):
        response = client.get("/tasks/not-a-uuid", headers=auth_headers)
        assert response.status_code == 400
        assert response.json() == {"message": "Malformed task id: not-a-uuid"}

    def test_unknown_task(self, client, auth_headers):
        response = client.get(f"/tasks/{MISSING_ID}", headers=auth_headers)
        assert response.status_code == 404
        assert response.json() == {"message": f"Task '{MISSING_ID}' not found"}


class TestAuthentication:
    def test_missing_token(self, client):
        response = client.get("/tasks")
        assert response.status_code == 401
        assert response.json() == {"message": "Missing bearer token"}

    def test_expired_token(self, client):
        token = service_token(exp=int(time.time()) - 60)
        response = client.get("/tasks", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json() == {"message": "Token has expired"}

    def test_wrong_audience(self, client):
        token = service_token(aud="someone-else")
        response = client.get("/tasks", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json() == {"message": "Invalid token"}

    def test_token_without_email(self, client):
        token = service_token(email=None, sub="svc-without-email")
        response = client.get("/tasks", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json() == {"message": "Missing required claims in token"}


class TestOwnership:
    def test_foreign_task_looks_missing(self, client, auth_headers, intruder_headers):
        task_id = create(client, auth_headers)

        response = client.get(f"/tasks/{task_id}", headers=intruder_headers)
        assert response.status_code == 404
        assert response.json() == {"message": f"Task '{task_id}' not found"}

    def test_intruder_cannot_delete(self, client, auth_headers, intruder_headers):
        task_id = create(client, auth_headers)

        response = client.delete(f"/tasks/{task_id}", headers=intruder_headers)
        assert response.status_code == 404
        assert client.get(f"/tasks/{task_id}", headers=auth_headers).status_code == 200

    def test_lists_are_per_owner(self, client, auth_headers, intruder_headers):
        create(client, auth_headers)
        response = client.get("/tasks", headers=intruder_headers)
        assert response.json() == {"tasks": [], "total": 0}


class TestUpdate:
    def test_if_match_update(self, client, auth_headers):
        task_id = create(client, auth_headers)

        response = client.patch(
            f"/tasks/{task_id}",
            json={"title": "Publish release notes"},
            headers={**auth_headers, "If-Match": 'W/"1"'},
        )
        assert response.status_code == 200
        assert response.json()["title"] == "Publish release notes"
        assert response.json()["version"] == 2

    def test_stale_version_conflicts(self, client, auth_headers):
        task_id = create(client, auth_headers)
        client.patch(
            f"/tasks/{task_id}",
            json={"priority": "urgent", "expected_version": 1},
            headers=auth_headers,
        )

        response = client.patch(
            f"/tasks/{task_id}",
            json={"priority": "low"},
            headers={**auth_headers, "If-Match": "1"},
        )
        assert response.status_code == 409
        task = client.get(f"/tasks/{task_id}", headers=auth_headers).json()
        assert task["priority"] == "urgent"

    def test_version_is_required(self, client, auth_headers):
        task_id = create(client, auth_headers)
        response = client.patch(f"/tasks/{task_id}", json={"title": "x"}, headers=auth_headers)
        assert response.status_code == 400
        assert response.json() == {
            "message": "expected_version or an If-Match header is required"
        }

    def test_header_and_body_must_agree(self, client, auth_headers):
        task_id = create(client, auth_headers)
        response = client.patch(
            f"/tasks/{task_id}",
            json={"title": "x", "expected_version": 2},
            headers={**auth_headers, "If-Match": "1"},
        )
        assert response.status_code == 400

    def test_failed_update_changes_nothing(self, client, auth_headers):
        task_id = create(client, auth_headers)
        response = client.patch(
            f"/tasks/{task_id}",
            json={"title": "Valid new title", "priority": "whenever", "expected_version": 1},
            headers=auth_headers,
        )
        assert response.status_code == 422
        task = client.get(f"/tasks/{task_id}", headers=auth_headers).json()
        assert task["title"] == "Write release notes"
        assert task["version"] == 1


class TestWorkflow:
    def test_checklist_gates_completion(self, client, auth_headers):
        task_id = create(client, auth_headers)
        base = f"/tasks/{task_id}"

        assert client.post(f"{base}/checklist", json={"text": "Draft"}, headers=auth_headers).status_code == 200
        assert client.post(f"{base}/status", json={"status": "in_progress"}, headers=auth_headers).status_code == 200

        blocked = client.post(f"{base}/status", json={"status": "done"}, headers=auth_headers)
        assert blocked.status_code == 422
        assert blocked.json() == {"message": "Task has 1 open checklist item(s)"}

        completed = client.post(f"{base}/checklist/0/complete", headers=auth_headers)
        assert completed.json()["checklist"] == [{"text": "Draft", "done": True}]

        done = client.post(f"{base}/status", json={"status": "done"}, headers=auth_headers)
        assert done.status_code == 200
        assert done.json()["status"] == "done"
        assert done.json()["version"] == 5

    def test_illegal_transition(self, client, auth_headers):
        task_id = create(client, auth_headers)
        response = client.post(f"/tasks/{task_id}/status", json={"status": "done"}, headers=auth_headers)
        assert response.status_code == 422
        assert response.json() == {"message": "Cannot move a task from open to done"}

    def test_archived_task_is_read_only(self, client, auth_headers):
        task_id = create(client, auth_headers)
        client.post(f"/tasks/{task_id}/status", json={"status": "archived"}, headers=auth_headers)

        response = client.post(f"/tasks/{task_id}/checklist", json={"text": "Late"}, headers=auth_headers)
        assert response.status_code == 422
        assert response.json() == {"message": "Archived tasks cannot be modified"}

    def test_done_task_stays_readable_after_rejected_item(self, client, auth_headers):
        task_id = create(client, auth_headers)
        base = f"/tasks/{task_id}"
        for status in ("in_progress", "done"):
            assert client.post(f"{base}/status", json={"status": status}, headers=auth_headers).status_code == 200

        response = client.post(f"{base}/checklist", json={"text": "Late"}, headers=auth_headers)
        assert response.status_code == 422
        assert response.json() == {"message": "Reopen a done task before adding checklist items"}

        task = client.get(base, headers=auth_headers)
        assert task.status_code == 200
        assert task.json()["status"] == "done"
        assert task.json()["checklist"] == []
        assert client.get("/tasks", headers=auth_headers).json()["total"] == 1

    def test_missing_checklist_position(self, client, auth_headers):
        task_id = create(client, auth_headers)
        response = client.post(f"/tasks/{task_id}/checklist/3/complete", headers=auth_headers)
        assert response.status_code == 422


class TestListAndDelete:
    def test_filters_and_limit(self, client, auth_headers):
        first = create(client, auth_headers, title="First", priority="high")
        create(client, auth_headers, title="Second")
        client.post(f"/tasks/{first}/status", json={"status": "in_progress"}, headers=auth_headers)

        in_progress = client.get("/tasks", params={"status": "in_progress"}, headers=auth_headers).json()
        assert [task["id"] for task in in_progress["tasks"]] == [first]

        high = client.get("/tasks", params={"priority": "high"}, headers=auth_headers).json()
        assert high["total"] == 1

        limited = client.get("/tasks", params={"limit": 1}, headers=auth_headers).json()
        assert limited["total"] == 1

    def test_out_of_range_limit(self, client, auth_headers):
        response = client.get("/tasks", params={"limit": 0}, headers=auth_headers)
        assert response.status_code == 400

    def test_delete(self, client, auth_headers):
        task_id = create(client, auth_headers)

        response = client.delete(f"/tasks/{task_id}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert client.get(f"/tasks/{task_id}", headers=auth_headers).status_code == 404


class BrokenPersistenceProvider(Provider):
    @provide(scope=Scope.REQUEST)
    def get_task_repository(self) -> TaskRepository:
        raise RuntimeError("pool exhausted: 10.0.3.7")


class TestInfrastructureFailures:
    def test_database_outage_hides_details(self, auth_headers):
        container = create_container(InMemoryPersistenceProvider(UnreachableStore()))
        client = TestClient(create_fastapi_app(container), raise_server_exceptions=False)

        response = client.post("/tasks", json={"title": "Anything"}, headers=auth_headers)
        assert response.status_code == 500
        assert response.json() == {"message": GENERIC_ERROR_MESSAGE}
        assert "db-primary" not in response.text

    def test_wiring_failure(self, auth_headers):
        container = make_async_container(AppProvider(), BrokenPersistenceProvider())
        client = TestClient(create_fastapi_app(container), raise_server_exceptions=False)

        response = client.get("/tasks", headers=auth_headers)
        assert response.status_code == 500
        assert response.json() == {"message": GENERIC_ERROR_MESSAGE}
        assert "10.0.3.7" not in response.text


def test_correlation_id_is_echoed(client):
    response = client.get("/health", headers={"X-Correlation-ID": "req-42"})
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
    assert response.headers["X-Correlation-ID"] == "req-42"


def test_unknown_route_keeps_message_shape(client):
    response = client.get("/nowhere")
    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}

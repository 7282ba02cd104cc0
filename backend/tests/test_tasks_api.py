"""
To-Do List — Task API Integration Tests
=========================================

What:  End-to-end tests of GET/POST/DELETE /tasks against a real SQLite store.
How:   HTTPX AsyncClient over ASGITransport (no server process).
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from todolist.database import get_db_session


class TestListTasks:

    @pytest.mark.asyncio
    async def test_empty_store_returns_empty_list(self, test_client):
        response = await test_client.get("/tasks")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_lists_tasks_in_creation_order(self, test_client):
        for text in ("first", "second", "third"):
            await test_client.post("/tasks", json={"task": text, "completed": False})

        response = await test_client.get("/tasks")

        assert [t["task"] for t in response.json()] == ["first", "second", "third"]


class TestCreateTask:

    @pytest.mark.asyncio
    async def test_create_returns_id_and_submitted_fields(self, test_client):
        """POST echoes the submitted fields plus a store-assigned _id; GET shows the same record."""
        response = await test_client.post("/tasks", json={"task": "buy milk", "completed": False})

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"_id", "task", "completed"}
        assert body["task"] == "buy milk"
        assert body["completed"] is False
        assert body["_id"]

        listed = (await test_client.get("/tasks")).json()
        assert listed == [body]

    @pytest.mark.asyncio
    async def test_each_create_gets_a_fresh_id(self, test_client):
        seen = set()
        for i in range(5):
            body = (await test_client.post("/tasks", json={"task": f"t{i}", "completed": True})).json()
            assert body["_id"] not in seen
            seen.add(body["_id"])

        listed = (await test_client.get("/tasks")).json()
        assert {t["_id"] for t in listed} == seen
        assert all(t["completed"] is True for t in listed)

    @pytest.mark.asyncio
    async def test_concurrent_creates_produce_distinct_ids(self, test_client):
        first, second = await asyncio.gather(
            test_client.post("/tasks", json={"task": "walk dog", "completed": False}),
            test_client.post("/tasks", json={"task": "feed cat", "completed": False}),
        )

        assert first.status_code == second.status_code == 200
        assert first.json()["_id"] != second.json()["_id"]

        listed = (await test_client.get("/tasks")).json()
        assert sorted(t["task"] for t in listed) == ["feed cat", "walk dog"]
        assert len({t["_id"] for t in listed}) == 2

    @pytest.mark.asyncio
    async def test_completed_defaults_to_false(self, test_client):
        body = (await test_client.post("/tasks", json={"task": "no flag"})).json()

        assert body["completed"] is False

    @pytest.mark.asyncio
    async def test_text_is_accepted_as_alias(self, test_client):
        body = (await test_client.post("/tasks", json={"text": "aliased", "completed": False})).json()

        assert body["task"] == "aliased"

    @pytest.mark.asyncio
    async def test_empty_text_is_accepted(self, test_client):
        response = await test_client.post("/tasks", json={"task": "", "completed": False})

        assert response.status_code == 200
        assert response.json()["task"] == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"completed": False},
            {"task": 123, "completed": False},
            {"task": None, "completed": False},
            {"task": "x", "completed": "no"},
            {"task": "x", "completed": 1},
        ],
    )
    async def test_malformed_body_is_rejected(self, test_client, payload):
        response = await test_client.post("/tasks", json=payload)

        assert response.status_code == 422
        assert (await test_client.get("/tasks")).json() == []

    @pytest.mark.asyncio
    async def test_unencodable_text_is_rejected(self, test_client):
        # "\ud800" is valid JSON but a lone surrogate has no UTF-8 form
        response = await test_client.post(
            "/tasks",
            content=b'{"task": "\\ud800", "completed": false}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert all("input" not in err for err in response.json()["detail"])
        assert (await test_client.get("/tasks")).json() == []


class TestDeleteTask:

    @pytest.mark.asyncio
    async def test_delete_removes_task(self, test_client):
        keep = (await test_client.post("/tasks", json={"task": "keep", "completed": False})).json()
        drop = (await test_client.post("/tasks", json={"task": "drop", "completed": False})).json()

        response = await test_client.delete(f"/tasks/{drop['_id']}")

        assert response.status_code == 200
        assert response.text == "Task deleted"
        assert response.headers["content-type"].startswith("text/plain")
        assert (await test_client.get("/tasks")).json() == [keep]

    @pytest.mark.asyncio
    async def test_delete_unknown_id_looks_like_success(self, test_client):
        created = (await test_client.post("/tasks", json={"task": "x", "completed": False})).json()

        existing = await test_client.delete(f"/tasks/{created['_id']}")
        missing = await test_client.delete("/tasks/does-not-exist")
        repeated = await test_client.delete(f"/tasks/{created['_id']}")

        for response in (missing, repeated):
            assert response.status_code == existing.status_code
            assert response.text == existing.text


class TestStoreFailures:
    """A broken task store must produce a 500 with the generic envelope, not crash."""

    @pytest.fixture
    def broken_store(self):
        from todolist.main import app

        session = AsyncMock()
        session.add = MagicMock()
        failure = OperationalError("SELECT 1", {}, Exception("connection refused"))
        session.execute = AsyncMock(side_effect=failure)
        session.flush = AsyncMock(side_effect=failure)
        session.commit = AsyncMock(side_effect=failure)

        async def override():
            yield session

        app.dependency_overrides[get_db_session] = override
        yield session
        app.dependency_overrides.pop(get_db_session, None)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, path, payload",
        [
            ("GET", "/tasks", None),
            ("POST", "/tasks", {"task": "x", "completed": False}),
            ("DELETE", "/tasks/abc", None),
        ],
    )
    async def test_store_failure_maps_to_500(self, test_client, broken_store, method, path, payload):
        response = await test_client.request(method, path, json=payload)

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "server_error"
        assert "connection refused" not in body["message"]
        assert body["request_id"] == response.headers["X-Request-ID"]

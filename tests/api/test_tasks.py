"""HTTP tests for /task endpoints against a per-test SQLite database."""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import AsyncClient

from app.api.v1.dependencies import get_task_service, get_task_service_for_write
from app.application.services.task_service import TaskService
from app.domain.entities.task import TaskEntity
from app.main import app


async def _create(client: AsyncClient, title: str, description: str = "desc") -> dict:
    response = await client.post(
        "/task/create-post", json={"title": title, "description": description}
    )
    assert response.status_code == 201, response.text
    return response.json()["task"]


def _failing_service(**repo_errors: Exception) -> TaskService:
    """TaskService over a repository mock whose named methods raise."""
    repo = MagicMock()
    repo.create = MagicMock(
        side_effect=lambda title, description, status: TaskEntity(
            title=title, description=description, status=status
        )
    )
    repo.save = AsyncMock(side_effect=repo_errors.get("save"))
    repo.find_one = AsyncMock(side_effect=repo_errors.get("find_one"))
    repo.find = AsyncMock(side_effect=repo_errors.get("find"))
    return TaskService(repo)


# --- POST /task/create-post ---


async def test_create_task_returns_201_with_pending_task(client: AsyncClient) -> None:
    """Creating {Buy milk, 2%} returns the stored task with status Pending."""
    response = await client.post(
        "/task/create-post", json={"title": "Buy milk", "description": "2%"}
    )
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Task Created"
    task = body["task"]
    assert task["title"] == "Buy milk"
    assert task["description"] == "2%"
    assert task["status"] == "Pending"
    assert task["id"]
    assert task["created_at"] == task["updated_at"]


async def test_create_task_ignores_client_status(client: AsyncClient) -> None:
    """A status in the body is ignored; new tasks are always Pending."""
    response = await client.post(
        "/task/create-post",
        json={"title": "a", "description": "b", "status": "Completed"},
    )
    assert response.status_code == 201
    assert response.json()["task"]["status"] == "Pending"


async def test_create_task_assigns_distinct_ids(client: AsyncClient) -> None:
    first = await _create(client, "one")
    second = await _create(client, "two")
    assert first["id"] != second["id"]


@pytest.mark.parametrize(
    "body",
    [
        {"description": "no title"},
        {"title": "no description"},
        {"title": "", "description": "x"},
        {"title": "x", "description": ""},
        {},
    ],
)
async def test_create_task_invalid_body_returns_400(client: AsyncClient, body: dict) -> None:
    """Missing or empty title/description fails validation with 400."""
    response = await client.post("/task/create-post", json=body)
    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "VALIDATION_ERROR"
    assert data["message"]


async def test_create_task_save_failure_returns_400_with_message(
    client: AsyncClient,
) -> None:
    """A generic error from save surfaces as 400 carrying the error's message."""
    app.dependency_overrides[get_task_service_for_write] = lambda: _failing_service(
        save=RuntimeError("disk full")
    )
    response = await client.post(
        "/task/create-post", json={"title": "Buy milk", "description": "2%"}
    )
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "TASK_WRITE_FAILED"
    assert body["message"] == "disk full"


# --- GET /task/all ---


async def test_list_tasks_returns_five_most_recent_and_total(client: AsyncClient) -> None:
    """Six pending tasks: five returned newest first, total six."""
    created = [await _create(client, f"task {i}") for i in range(6)]

    response = await client.get("/task/all")
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Tasks fetched successfully"
    data = body["data"]
    assert data["total"] == 6
    assert len(data["tasks"]) == 5
    returned_ids = [t["id"] for t in data["tasks"]]
    assert created[0]["id"] not in returned_ids
    stamps = [datetime.fromisoformat(t["created_at"]) for t in data["tasks"]]
    assert stamps == sorted(stamps, reverse=True)


async def test_list_tasks_search_matches_title_or_description(client: AsyncClient) -> None:
    """search=alpha finds a title match and a description match, case-insensitively."""
    by_title = await _create(client, "Alpha report", "quarterly")
    by_description = await _create(client, "Notes", "contains alpha text")
    await _create(client, "Other", "nothing")

    response = await client.get("/task/all", params={"search": "alpha"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["total"] == 2
    assert {t["id"] for t in data["tasks"]} == {by_title["id"], by_description["id"]}
    for task in data["tasks"]:
        assert "alpha" in (task["title"] + " " + task["description"]).lower()


async def test_list_tasks_space_search_returns_only_tasks_with_a_space(
    client: AsyncClient,
) -> None:
    """search=" " is matched as text, not dropped."""
    spaced = await _create(client, "Buy milk", "2%")
    await _create(client, "nospace", "nospace")

    response = await client.get("/task/all", params={"search": " "})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["total"] == 1
    assert [t["id"] for t in data["tasks"]] == [spaced["id"]]


async def test_list_tasks_empty_search_lists_all_open(client: AsyncClient) -> None:
    await _create(client, "one")
    await _create(client, "two")
    response = await client.get("/task/all", params={"search": ""})
    assert response.status_code == 200
    assert response.json()["data"]["total"] == 2


async def test_list_tasks_ignores_pagination_params(client: AsyncClient) -> None:
    """page and limit are accepted but the list is still the 5 most recent."""
    for i in range(7):
        await _create(client, f"task {i}")
    response = await client.get("/task/all", params={"page": 2, "limit": 2})
    assert response.status_code == 200
    data = response.json()["data"]
    assert len(data["tasks"]) == 5
    assert data["total"] == 7


async def test_list_tasks_invalid_page_returns_400(client: AsyncClient) -> None:
    response = await client.get("/task/all", params={"page": 0})
    assert response.status_code == 400


async def test_list_tasks_store_failure_returns_500(client: AsyncClient) -> None:
    """A store error while listing is a retrieval failure (500)."""
    app.dependency_overrides[get_task_service] = lambda: _failing_service(
        find=RuntimeError("connection reset")
    )
    response = await client.get("/task/all")
    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "TASK_RETRIEVAL_FAILED"
    assert body["message"] == "connection reset"


# --- PATCH /task/{task_id} ---


async def test_complete_task_returns_completed_task(client: AsyncClient) -> None:
    created = await _create(client, "Buy milk", "2%")

    response = await client.patch(f"/task/{created['id']}")
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Task completed successfully"
    task = body["data"]
    assert task["id"] == created["id"]
    assert task["status"] == "Completed"
    assert task["created_at"] == created["created_at"]
    assert datetime.fromisoformat(task["updated_at"]) >= datetime.fromisoformat(
        created["updated_at"]
    )


async def test_completed_task_is_excluded_from_listing(client: AsyncClient) -> None:
    """Create, complete, list: the completed task is gone from the results."""
    done = await _create(client, "finish me")
    kept = await _create(client, "keep me")
    assert (await client.patch(f"/task/{done['id']}")).status_code == 200

    data = (await client.get("/task/all")).json()["data"]
    assert [t["id"] for t in data["tasks"]] == [kept["id"]]
    assert data["total"] == 1

    searched = (await client.get("/task/all", params={"search": "finish"})).json()
    assert searched["data"] == {"tasks": [], "total": 0}


async def test_complete_task_twice_succeeds(client: AsyncClient) -> None:
    created = await _create(client, "twice")
    assert (await client.patch(f"/task/{created['id']}")).status_code == 200
    again = await client.patch(f"/task/{created['id']}")
    assert again.status_code == 200
    assert again.json()["data"]["status"] == "Completed"


async def test_complete_unknown_task_returns_404(client: AsyncClient) -> None:
    response = await client.patch("/task/nonexistent-id")
    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "RESOURCE_NOT_FOUND"
    assert body["message"] == "Task with id nonexistent-id not found"


async def test_complete_task_save_failure_returns_400(client: AsyncClient) -> None:
    """Lookup succeeds, save fails: 400 with the update fallback message."""
    service = _failing_service(save=RuntimeError())
    service._task_repo.find_one.side_effect = None
    service._task_repo.find_one.return_value = TaskEntity(
        id="t1", title="a", description="b"
    )
    app.dependency_overrides[get_task_service_for_write] = lambda: service

    response = await client.patch("/task/t1")
    assert response.status_code == 400
    assert response.json()["message"] == "Failed to update task"

from typing import Any
from fastapi.testclient import TestClient


def create_task(
    client: TestClient,
    title: str,
    description: str = "",
    due_date: str = "",
) -> dict[str, Any]:
    """Helper to create a task through the API and return its JSON."""

    response = client.post(
        "/api/tasks",
        json={"title": title, "description": description, "dueDate": due_date},
    )
    assert response.status_code == 201, response.text
    return response.json()


def list_task_ids(client: TestClient, task_filter: str = "all") -> list[str]:
    response = client.get("/api/tasks", params={"filter": task_filter})
    assert response.status_code == 200, response.text
    return [task["id"] for task in response.json()]

import json
import os
from typing import Any
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.config import Settings, get_settings
from src.tasks.dependencies import get_task_store
from src.tasks.store import TaskStore

router = APIRouter()


@router.get(
    "/healthcheck",
    tags=["Healthcheck"],
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Healthcheck status",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok", "version": "v0.1.x"},
                        "storage": {
                            "status": "ok",
                            "document": "data/tasks.json",
                            "num_tasks": 3,
                        },
                    }
                }
            },
        },
        503: {
            "description": "Service unavailable",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "storage": {
                            "status": "error",
                            "message": "Task document is not a JSON array",
                        },
                    }
                }
            },
        },
    },
)
def healthcheck(
    settings: Settings = Depends(get_settings),
    task_store: TaskStore = Depends(get_task_store),
) -> JSONResponse:
    health_status: dict[str, Any] = {
        "api": {"status": "ok", "version": settings.API_VERSION},
        "storage": {"status": "ok", "document": settings.TASKS_FILE},
    }

    # Check the task document is present, writable and holds an array
    try:
        task_store.ensure()
        if not os.access(task_store.path, os.W_OK):
            raise Exception("Task document is not writable")
        with task_store.lock():
            document = json.loads(task_store.path.read_text(encoding="utf-8") or "[]")
        if not isinstance(document, list):
            raise Exception("Task document is not a JSON array")
        health_status["storage"]["num_tasks"] = len(document)
    except Exception as e:
        health_status["storage"].update({"status": "error", "message": str(e)})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=health_status
        )

    return JSONResponse(status_code=status.HTTP_200_OK, content=health_status)

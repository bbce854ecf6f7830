from fastapi import APIRouter, Depends, Query, status

from src.common.exceptions import (
    ResourceType,
    bad_request_response,
    resource_not_found_response,
)
from src.tasks.dependencies import get_task_service
from src.tasks.schemas import (
    CreateTaskRequest,
    SetCompletionRequest,
    Task,
    TaskFilter,
    UpdateTaskRequest,
)
from src.tasks.service import TaskService


router = APIRouter(
    prefix="/api/tasks",
    tags=["Tasks"],
)


@router.get("")
def list_tasks(
    task_filter: TaskFilter = Query(TaskFilter.ALL, alias="filter"),
    task_service: TaskService = Depends(get_task_service),
) -> list[Task]:
    return task_service.list_tasks(task_filter)


@router.get("/{task_id}", responses={**resource_not_found_response(ResourceType.TASK)})
def get_task(
    task_id: str, task_service: TaskService = Depends(get_task_service)
) -> Task:
    return task_service.get_task(task_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={**bad_request_response("Title is required")},
)
def create_task(
    task_input: CreateTaskRequest,
    task_service: TaskService = Depends(get_task_service),
) -> Task:
    return task_service.create_task(task_input)


@router.put(
    "/{task_id}",
    responses={
        **bad_request_response("Title is required"),
        **resource_not_found_response(ResourceType.TASK),
    },
)
def update_task(
    task_id: str,
    task_input: UpdateTaskRequest,
    task_service: TaskService = Depends(get_task_service),
) -> Task:
    return task_service.update_task(task_id, task_input)


@router.patch(
    "/{task_id}/complete",
    responses={
        **bad_request_response("completed must be boolean"),
        **resource_not_found_response(ResourceType.TASK),
    },
)
def set_task_completion(
    task_id: str,
    completion_input: SetCompletionRequest,
    task_service: TaskService = Depends(get_task_service),
) -> Task:
    return task_service.set_completion(task_id, completion_input.completed)


@router.delete(
    "/{task_id}", responses={**resource_not_found_response(ResourceType.TASK)}
)
def delete_task(
    task_id: str, task_service: TaskService = Depends(get_task_service)
) -> Task:
    return task_service.delete_task(task_id)

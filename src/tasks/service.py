import logging
from datetime import datetime
from typing import Any
from uuid import uuid4

from src.common.current_datetime import get_current_datetime
from src.common.exceptions import (
    ResourceNotFoundException,
    ResourceType,
    ValidationException,
)
from src.tasks.schemas import (
    CreateTaskRequest,
    Task,
    TaskFilter,
    UpdateTaskRequest,
)
from src.tasks.store import TaskStore

logger = logging.getLogger(__name__)


def sanitize(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def validate_title(title: str) -> str:
    if not title:
        raise ValidationException("Title is required")
    return title


def validate_due_date(due_date: str) -> str:
    if not due_date:
        return ""
    try:
        datetime.strptime(due_date, "%Y-%m-%d")
    except ValueError:
        raise ValidationException("dueDate must be a date in YYYY-MM-DD format")
    return due_date


def find_task_index(tasks: list[Task], task_id: str) -> int:
    for index, task in enumerate(tasks):
        if task.id == task_id:
            return index
    raise ResourceNotFoundException(ResourceType.TASK, task_id)


class TaskService:
    def __init__(self, task_store: TaskStore):
        self.task_store = task_store

    def list_tasks(self, task_filter: TaskFilter = TaskFilter.ALL) -> list[Task]:
        with self.task_store.lock():
            tasks = self.task_store.read_all()

        if task_filter == TaskFilter.ACTIVE:
            return [task for task in tasks if not task.completed]
        if task_filter == TaskFilter.COMPLETED:
            return [task for task in tasks if task.completed]
        return tasks

    def get_task(self, task_id: str) -> Task:
        with self.task_store.lock():
            tasks = self.task_store.read_all()
        return tasks[find_task_index(tasks, task_id)]

    def create_task(self, task_input: CreateTaskRequest) -> Task:
        title = validate_title(sanitize(task_input.title))
        description = sanitize(task_input.description)
        due_date = validate_due_date(sanitize(task_input.due_date))

        timestamp = get_current_datetime()
        task = Task(
            id=str(uuid4()),
            title=title,
            description=description,
            due_date=due_date,
            completed=False,
            created_at=timestamp,
            updated_at=timestamp,
        )

        with self.task_store.lock():
            tasks = self.task_store.read_all()
            tasks.append(task)
            self.task_store.write_all(tasks)

        logger.info(f"Created task '{task.id}'")
        return task

    def update_task(self, task_id: str, task_input: UpdateTaskRequest) -> Task:
        with self.task_store.lock():
            tasks = self.task_store.read_all()
            index = find_task_index(tasks, task_id)

            title = validate_title(sanitize(task_input.title))
            description = sanitize(task_input.description)
            due_date = validate_due_date(sanitize(task_input.due_date))

            updated_task = tasks[index].model_copy(
                update={
                    "title": title,
                    "description": description,
                    "due_date": due_date,
                    "completed": task_input.completed,
                    "updated_at": get_current_datetime(),
                }
            )
            tasks[index] = updated_task
            self.task_store.write_all(tasks)

        logger.info(f"Updated task '{task_id}'")
        return updated_task

    def set_completion(self, task_id: str, completed: Any) -> Task:
        with self.task_store.lock():
            tasks = self.task_store.read_all()
            index = find_task_index(tasks, task_id)

            if not isinstance(completed, bool):
                raise ValidationException("completed must be boolean")

            updated_task = tasks[index].model_copy(
                update={"completed": completed, "updated_at": get_current_datetime()}
            )
            tasks[index] = updated_task
            self.task_store.write_all(tasks)

        logger.info(f"Set completed={completed} on task '{task_id}'")
        return updated_task

    def delete_task(self, task_id: str) -> Task:
        with self.task_store.lock():
            tasks = self.task_store.read_all()
            removed_task = tasks.pop(find_task_index(tasks, task_id))
            self.task_store.write_all(tasks)

        logger.info(f"Deleted task '{task_id}'")
        return removed_task

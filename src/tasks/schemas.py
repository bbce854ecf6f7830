from datetime import datetime
from enum import Enum
from typing import Any
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Task(CamelModel):
    id: str
    title: str
    description: str = ""
    due_date: str = ""
    completed: bool = False
    created_at: datetime
    updated_at: datetime


class TaskFilter(str, Enum):
    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def _missing_(cls, value: Any):
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
            return cls.ALL
        return None


class CreateTaskRequest(CamelModel):
    title: str | None = None
    description: str | None = None
    due_date: str | None = None


class UpdateTaskRequest(CamelModel):
    title: str | None = None
    description: str | None = None
    due_date: str | None = None
    completed: bool = False


class SetCompletionRequest(CamelModel):
    # Checked by the service once the task is known to exist
    completed: Any = None

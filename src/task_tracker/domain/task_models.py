from __future__ import annotations
from pydantic import AfterValidator, BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel
from enum import Enum
from datetime import datetime, timezone
from typing import Annotated, Optional
import uuid


def ensure_utc(value: datetime) -> datetime:
    # naive timestamps are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDateTime = Annotated[datetime, AfterValidator(ensure_utc)]
Title = Annotated[str, StringConstraints(min_length=1, max_length=140)]
Description = Annotated[str, StringConstraints(max_length=4000)]


class TaskStatus(str, Enum):
    pending = "pending"
    in_progress = "in-progress"
    completed = "completed"

class TaskPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TaskCreate(CamelModel):
    title: Title
    description: Description
    priority: TaskPriority
    due_date: Optional[UtcDateTime] = None
    assigned_to: Optional[str] = None

class TaskUpdate(CamelModel):
    """
    Partial update. Only fields present in the request body are applied;
    `model_fields_set` tells an explicit null apart from an omitted field.
    """
    title: Optional[Title] = None
    description: Optional[Description] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[UtcDateTime] = None
    assigned_to: Optional[str] = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)

class Task(CamelModel):
    id: str
    title: str
    description: str
    status: TaskStatus = TaskStatus.pending
    priority: TaskPriority
    due_date: Optional[datetime] = None
    assigned_to: Optional[str] = None
    created_at: datetime
    updated_at: datetime

class DeleteResult(BaseModel):
    message: str = "Task deleted successfully"

def new_task_id() -> str:
    return str(uuid.uuid4())

def utc_now() -> datetime:
    return datetime.now(timezone.utc)

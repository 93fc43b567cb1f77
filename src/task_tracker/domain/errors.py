"""
Domain error variants.

Service operations return these instead of raising; the HTTP layer
(`task_tracker.app.errors`) is the only place that turns them into
status codes.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from task_tracker.domain.task_models import DeleteResult, Task


@dataclass(frozen=True)
class NotFound:
    task_id: str

    @property
    def message(self) -> str:
        return "Task not found"


@dataclass(frozen=True)
class ValidationError:
    field: str
    message: str


TaskResult = Union[Task, NotFound, ValidationError]
DeleteOutcome = Union[DeleteResult, NotFound]

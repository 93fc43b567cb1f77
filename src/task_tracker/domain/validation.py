from __future__ import annotations
from typing import Optional

from task_tracker.domain.errors import ValidationError
from task_tracker.domain.task_models import TaskCreate, TaskUpdate

# dueDate/assignedTo accept an explicit null (clears the value); these don't.
NON_NULLABLE_FIELDS = ("title", "description", "status", "priority")


def _blank_title(title: Optional[str]) -> Optional[ValidationError]:
    if title is not None and not title.strip():
        return ValidationError(field="title", message="title must not be blank")
    return None


def validate_create(data: TaskCreate) -> Optional[ValidationError]:
    """Return the first violated constraint of a create payload, or None."""
    return _blank_title(data.title)


def validate_update(data: TaskUpdate) -> Optional[ValidationError]:
    """Return the first violated constraint of an update payload, or None."""
    supplied = data.model_fields_set
    for name in NON_NULLABLE_FIELDS:
        if name in supplied and getattr(data, name) is None:
            return ValidationError(field=name, message=f"{name} may not be null")
    return _blank_title(data.title)

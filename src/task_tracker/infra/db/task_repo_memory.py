from __future__ import annotations
import asyncio
from typing import Callable, Dict, List, Optional
from datetime import datetime

from task_tracker.domain.task_models import (
    Task,
    TaskCreate,
    TaskPriority,
    TaskStatus,
    ensure_utc,
    new_task_id,
    utc_now,
)

class InMemoryTaskRepo:
    """
    Process-local task store. Nothing survives a restart.

    One lock serializes every read and write of the map; returned tasks are
    copies, so callers can't mutate stored records.
    """
    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._tasks: Dict[str, Task] = {}
        self._lock = asyncio.Lock()
        self._clock = clock or utc_now

    def _now(self) -> datetime:
        return ensure_utc(self._clock())

    async def create(self, data: TaskCreate) -> Task:
        now = self._now()
        task = Task(
            id=new_task_id(),
            title=data.title,
            description=data.description,
            priority=data.priority,
            due_date=data.due_date,
            assigned_to=data.assigned_to,
            status=TaskStatus.pending,
            created_at=now,
            updated_at=now,
        )
        async with self._lock:
            self._tasks[task.id] = task
        return task.model_copy()

    async def get(self, task_id: str) -> Optional[Task]:
        async with self._lock:
            task = self._tasks.get(task_id)
            return task.model_copy() if task else None

    async def list(
        self,
        status: Optional[TaskStatus] = None,
        priority: Optional[TaskPriority] = None,
        assigned_to: Optional[str] = None,
    ) -> List[Task]:
        # insertion order
        async with self._lock:
            return [
                t.model_copy()
                for t in self._tasks.values()
                if (status is None or t.status == status)
                and (priority is None or t.priority == priority)
                and (assigned_to is None or t.assigned_to == assigned_to)
            ]

    async def update(self, task_id: str, changes: dict) -> Optional[Task]:
        async with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return None
            # updated_at never goes backwards, even if the clock does
            changes = {**changes, "updated_at": max(self._now(), task.updated_at)}
            updated = task.model_copy(update=changes)
            self._tasks[task_id] = updated
            return updated.model_copy()

    async def delete(self, task_id: str) -> bool:
        async with self._lock:
            return self._tasks.pop(task_id, None) is not None

    async def list_due_today(self) -> List[Task]:
        today = self._now().date()
        async with self._lock:
            return [
                t.model_copy()
                for t in self._tasks.values()
                if t.due_date is not None and t.due_date.date() == today
            ]

    async def list_overdue(self) -> List[Task]:
        now = self._now()
        async with self._lock:
            return [
                t.model_copy()
                for t in self._tasks.values()
                if t.due_date is not None
                and t.due_date < now
                and t.status != TaskStatus.completed
            ]

    async def count(self) -> int:
        async with self._lock:
            return len(self._tasks)

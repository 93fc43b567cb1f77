import logging
from typing import List, Optional
from task_tracker.domain.errors import DeleteOutcome, NotFound, TaskResult, ValidationError
from task_tracker.domain.task_models import (
    DeleteResult,
    Task,
    TaskCreate,
    TaskPriority,
    TaskStatus,
    TaskUpdate,
)
from task_tracker.domain.validation import validate_create, validate_update

logger = logging.getLogger("tracker.tasks")

class TaskService:
    def __init__(self, repo):
        self.repo = repo

    def _rejected(self, op: str, error: ValidationError) -> ValidationError:
        logger.warning(
            "task.invalid",
            extra={"category": "tasks", "event": "task.invalid", "op": op, "field": error.field},
        )
        return error

    async def create_task(self, data: TaskCreate) -> TaskResult:
        error = validate_create(data)
        if error:
            return self._rejected("create", error)
        task = await self.repo.create(data)
        logger.info("task.create", extra={"category": "tasks", "event": "task.create", "task_id": task.id, "title": task.title})
        return task

    async def get_task(self, task_id: str) -> TaskResult:
        task = await self.repo.get(task_id)
        return task if task else NotFound(task_id)

    async def list_tasks(
        self,
        status: Optional[TaskStatus] = None,
        priority: Optional[TaskPriority] = None,
        assigned_to: Optional[str] = None,
    ) -> List[Task]:
        return await self.repo.list(status=status, priority=priority, assigned_to=assigned_to)

    async def update_task(self, task_id: str, data: TaskUpdate) -> TaskResult:
        if await self.repo.get(task_id) is None:
            return NotFound(task_id)
        error = validate_update(data)
        if error:
            return self._rejected("update", error)
        changes = data.changes()
        task = await self.repo.update(task_id, changes)
        # deleted between the lookup and the write
        if task is None:
            return NotFound(task_id)
        logger.info(
            "task.update",
            extra={"category": "tasks", "event": "task.update", "task_id": task_id, "fields": sorted(changes)},
        )
        return task

    async def delete_task(self, task_id: str) -> DeleteOutcome:
        if not await self.repo.delete(task_id):
            return NotFound(task_id)
        logger.info("task.delete", extra={"category": "tasks", "event": "task.delete", "task_id": task_id})
        return DeleteResult()

    async def list_due_today(self) -> List[Task]:
        return await self.repo.list_due_today()

    async def list_overdue(self) -> List[Task]:
        return await self.repo.list_overdue()

    async def count(self) -> int:
        return await self.repo.count()

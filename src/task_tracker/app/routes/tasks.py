from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from task_tracker.app.errors import unwrap
from task_tracker.domain.task_models import (
    DeleteResult,
    Task,
    TaskCreate,
    TaskPriority,
    TaskStatus,
    TaskUpdate,
)
from task_tracker.services.task_service import TaskService

router = APIRouter(prefix="/tasks", tags=["tasks"])


def get_service(request: Request) -> TaskService:
    # Wired in main.create_app: app.state.task_service = svc
    return request.app.state.task_service


@router.get("", response_model=list[Task])
async def list_tasks(
    status: Optional[TaskStatus] = None,
    priority: Optional[TaskPriority] = None,
    assigned_to: Optional[str] = Query(default=None, alias="assignedTo"),
    svc: TaskService = Depends(get_service),
):
    return await svc.list_tasks(status=status, priority=priority, assigned_to=assigned_to)


# Literal paths go before /{task_id} so they are never captured as an id.
@router.get("/due-today", response_model=list[Task])
async def list_due_today(svc: TaskService = Depends(get_service)):
    return await svc.list_due_today()


@router.get("/overdue", response_model=list[Task])
async def list_overdue(svc: TaskService = Depends(get_service)):
    return await svc.list_overdue()


@router.get("/{task_id}", response_model=Task)
async def get_task(task_id: str, svc: TaskService = Depends(get_service)):
    return unwrap(await svc.get_task(task_id))


@router.post("", response_model=Task, status_code=201)
async def create_task(payload: TaskCreate, svc: TaskService = Depends(get_service)):
    return unwrap(await svc.create_task(payload))


@router.put("/{task_id}", response_model=Task)
async def update_task(task_id: str, payload: TaskUpdate, svc: TaskService = Depends(get_service)):
    return unwrap(await svc.update_task(task_id, payload))


@router.delete("/{task_id}", response_model=DeleteResult)
async def delete_task(task_id: str, svc: TaskService = Depends(get_service)):
    return unwrap(await svc.delete_task(task_id))

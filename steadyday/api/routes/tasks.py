"""
Tasks Route - Task list, status changes and subtasks
"""

from fastapi import APIRouter, Depends, Query

from steadyday.api.dependencies import get_user_id, unwrap
from steadyday.api.models import SubtaskCreate, TaskCreate, TaskStatus, TaskStatusUpdate
from steadyday.tasks import manager


router = APIRouter()


@router.get("")
async def list_tasks(
    status: TaskStatus | None = Query(None, description="Filter by status"),
    user_id: str = Depends(get_user_id),
):
    """List tasks, newest first."""
    return unwrap(manager.list_tasks(user_id, status=status.value if status else None))


@router.post("", status_code=201)
async def create_task(body: TaskCreate, user_id: str = Depends(get_user_id)):
    return unwrap(
        manager.create_task(
            user_id,
            body.title,
            priority=body.priority.value,
            description=body.description,
            estimated_minutes=body.estimated_minutes,
            due_date=body.due_date,
            category=body.category,
        )
    )


@router.get("/{task_id}")
async def get_task(task_id: str, user_id: str = Depends(get_user_id)):
    return unwrap(manager.get_task(user_id, task_id))


@router.patch("/{task_id}/status")
async def update_status(task_id: str, body: TaskStatusUpdate, user_id: str = Depends(get_user_id)):
    """Move a task to a new status. Completing it records the completion time."""
    return unwrap(
        manager.update_task_status(
            user_id, task_id, body.status.value, actual_minutes=body.actual_minutes
        )
    )


@router.post("/{task_id}/subtasks", status_code=201)
async def add_subtask(task_id: str, body: SubtaskCreate, user_id: str = Depends(get_user_id)):
    return unwrap(manager.add_subtask(user_id, task_id, body.title))


@router.post("/{task_id}/subtasks/{subtask_id}/toggle")
async def toggle_subtask(task_id: str, subtask_id: str, user_id: str = Depends(get_user_id)):
    return unwrap(manager.toggle_subtask(user_id, task_id, subtask_id))


@router.delete("/{task_id}")
async def delete_task(task_id: str, user_id: str = Depends(get_user_id)):
    return unwrap(manager.delete_task(user_id, task_id))

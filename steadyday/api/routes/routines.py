"""
Routines Route - Routine CRUD, daily execution and consistency stats
"""

from fastapi import APIRouter, Depends, Query

from steadyday.api.dependencies import get_user_id, unwrap
from steadyday.api.models import RoutineCreate, RoutineExecute, RoutineUpdate, TimeOfDay
from steadyday.routines import manager


router = APIRouter()


@router.get("")
async def list_routines(
    time_of_day: TimeOfDay | None = Query(None, description="Only routines for this time of day"),
    user_id: str = Depends(get_user_id),
):
    return unwrap(manager.list_routines(user_id, time_of_day=time_of_day.value if time_of_day else None))


@router.post("", status_code=201)
async def create_routine(body: RoutineCreate, user_id: str = Depends(get_user_id)):
    return unwrap(
        manager.create_routine(
            user_id,
            body.name,
            body.time_of_day.value,
            tasks=[item.model_dump() for item in body.tasks],
            description=body.description,
            color=body.color,
            icon=body.icon,
        )
    )


@router.get("/{routine_id}")
async def get_routine(routine_id: str, user_id: str = Depends(get_user_id)):
    return unwrap(manager.get_routine(user_id, routine_id))


@router.patch("/{routine_id}")
async def update_routine(routine_id: str, body: RoutineUpdate, user_id: str = Depends(get_user_id)):
    """Partial update; omitted fields keep their value."""
    return unwrap(
        manager.update_routine(
            user_id,
            routine_id,
            name=body.name,
            description=body.description,
            tasks=[item.model_dump() for item in body.tasks] if body.tasks is not None else None,
            is_active=body.is_active,
            color=body.color,
            icon=body.icon,
        )
    )


@router.delete("/{routine_id}")
async def delete_routine(routine_id: str, user_id: str = Depends(get_user_id)):
    return unwrap(manager.delete_routine(user_id, routine_id))


@router.post("/{routine_id}/executions")
async def execute_routine(routine_id: str, body: RoutineExecute, user_id: str = Depends(get_user_id)):
    """Record today's run. Running again today replaces the earlier run."""
    return unwrap(
        manager.execute_routine(user_id, routine_id, body.completed_task_ids, notes=body.notes)
    )


@router.get("/{routine_id}/stats")
async def routine_stats(
    routine_id: str,
    days: int = Query(30, ge=1, le=365),
    user_id: str = Depends(get_user_id),
):
    return unwrap(manager.get_routine_stats(user_id, routine_id, days=days))

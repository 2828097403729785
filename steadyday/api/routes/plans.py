"""
Plans Route - 30-day transformation plan and habit tracking
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from steadyday.api.dependencies import get_user_id, unwrap
from steadyday.api.models import HabitTrack, PlanCreate, PlanStatusUpdate, WeekProgress
from steadyday.plans import manager


router = APIRouter()


@router.post("", status_code=201)
async def create_plan(body: PlanCreate, user_id: str = Depends(get_user_id)):
    """Start a new plan. Any previously active plan is paused."""
    return unwrap(manager.create_plan(user_id, enneagram_type=body.enneagram_type))


@router.get("/active")
async def active_plan(user_id: str = Depends(get_user_id)):
    plan = manager.get_active_plan(user_id)
    if plan is None:
        raise HTTPException(status_code=404, detail="No active plan")
    return plan


@router.get("/{plan_id}")
async def get_plan(plan_id: str, user_id: str = Depends(get_user_id)):
    return unwrap(manager.get_plan(user_id, plan_id))


@router.patch("/{plan_id}/status")
async def update_status(plan_id: str, body: PlanStatusUpdate, user_id: str = Depends(get_user_id)):
    return unwrap(manager.update_plan_status(user_id, plan_id, body.status.value))


@router.post("/{plan_id}/weeks")
async def week_progress(plan_id: str, body: WeekProgress, user_id: str = Depends(get_user_id)):
    return unwrap(
        manager.update_week_progress(user_id, plan_id, body.week_number, body.reflections)
    )


@router.post("/{plan_id}/habits/{habit_id}")
async def track_habit(
    plan_id: str, habit_id: str, body: HabitTrack, user_id: str = Depends(get_user_id)
):
    return unwrap(
        manager.track_habit(user_id, plan_id, habit_id, body.completed, notes=body.notes)
    )


@router.get("/{plan_id}/habits/{habit_id}/stats")
async def habit_stats(
    plan_id: str,
    habit_id: str,
    days: int = Query(30, ge=1, le=365),
    user_id: str = Depends(get_user_id),
):
    return unwrap(manager.get_habit_stats(user_id, plan_id, habit_id, days=days))

"""
Focus Route - Adaptive session length and pomodoro history
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from steadyday.api.dependencies import get_user_id, unwrap
from steadyday.api.models import FocusSessionCreate, MoodCreate
from steadyday.focus import pomodoro
from steadyday.focus.adaptive import MoodVector, break_duration, recommend_duration


router = APIRouter()


@router.get("/session")
async def adaptive_session(
    base: float | None = Query(None, gt=0, description="Base duration in minutes"),
    user_id: str = Depends(get_user_id),
):
    """Recommended session length for today, based on today's check-in."""
    try:
        return pomodoro.get_adaptive_session(user_id, base=base)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/duration")
async def preview_duration(
    body: MoodCreate,
    base: float | None = Query(None, gt=0, description="Base duration in minutes"),
):
    """Recommended session length for an arbitrary mood, without storing anything."""
    config = pomodoro.load_config()
    vector = MoodVector.from_values(body.mood.value, body.energy.value, body.focus.value)
    try:
        duration = recommend_duration(
            vector,
            base=base if base is not None else config["base_duration"],
            min_minutes=config["min_duration"],
            max_minutes=config["max_duration"],
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"duration": duration, "break_duration": break_duration(duration)}


@router.post("/sessions", status_code=201)
async def record_session(body: FocusSessionCreate, user_id: str = Depends(get_user_id)):
    return unwrap(
        pomodoro.record_session(
            user_id, body.duration, body.session_type.value, task_id=body.task_id
        )
    )


@router.get("/stats")
async def stats(
    days: int = Query(7, ge=1, le=365),
    user_id: str = Depends(get_user_id),
):
    return pomodoro.get_pomodoro_stats(user_id, days=days)

"""
Mood Route - Daily check-ins
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from steadyday.api.dependencies import get_user_id, unwrap
from steadyday.api.models import MoodCreate
from steadyday.mood import tracker


router = APIRouter()


@router.post("", status_code=201)
async def record_mood(body: MoodCreate, user_id: str = Depends(get_user_id)):
    """Check in for today. A second check-in the same day replaces the first."""
    return unwrap(
        tracker.record_mood(
            user_id, body.mood.value, body.energy.value, body.focus.value, notes=body.notes
        )
    )


@router.get("")
async def list_entries(
    days: int = Query(30, ge=1, le=365, description="Window length in days"),
    user_id: str = Depends(get_user_id),
):
    entries = tracker.get_mood_entries(user_id, days=days)
    return {"entries": entries, "total": len(entries)}


@router.get("/today")
async def today_entry(user_id: str = Depends(get_user_id)):
    entry = tracker.get_today_entry(user_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="No check-in today")
    return entry

"""
Insights Route - Suggestions and weekly productivity summary
"""

from fastapi import APIRouter, Depends

from steadyday.api.dependencies import get_user_id
from steadyday.insights.suggestions import get_productivity_insights, get_smart_suggestions


router = APIRouter()


@router.get("/suggestions")
async def suggestions(user_id: str = Depends(get_user_id)):
    items = get_smart_suggestions(user_id)
    return {"suggestions": items, "total": len(items)}


@router.get("/productivity")
async def productivity(user_id: str = Depends(get_user_id)):
    return get_productivity_insights(user_id)

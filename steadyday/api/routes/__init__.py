"""SteadyDay API Routes Package

This module aggregates all route handlers into a single router
that can be included in the main FastAPI application.
"""

from fastapi import APIRouter

from .chat import router as chat_router
from .focus import router as focus_router
from .insights import router as insights_router
from .mood import router as mood_router
from .personality import router as personality_router
from .plans import router as plans_router
from .routines import router as routines_router
from .status import router as status_router
from .tasks import router as tasks_router


# Create main API router
api_router = APIRouter(prefix="/api")

# Include all sub-routers
api_router.include_router(status_router, tags=["status"])
api_router.include_router(tasks_router, prefix="/tasks", tags=["tasks"])
api_router.include_router(mood_router, prefix="/mood", tags=["mood"])
api_router.include_router(focus_router, prefix="/focus", tags=["focus"])
api_router.include_router(routines_router, prefix="/routines", tags=["routines"])
api_router.include_router(plans_router, prefix="/plans", tags=["plans"])
api_router.include_router(personality_router, prefix="/personality", tags=["personality"])
api_router.include_router(chat_router, prefix="/chat", tags=["chat"])
api_router.include_router(insights_router, prefix="/insights", tags=["insights"])

__all__ = ["api_router"]

"""Transformation Plans - A 30-day, four-week habit plan

Each week has a theme, a few goals and a handful of daily habits. Habit
check-ins are stored as boolean completion events, so a habit day only
counts toward the streak when it was fully done.

Components:
    generator.py: Builds the four weeks, personalized by Enneagram type
    manager.py: Plan lifecycle, weekly reflections and habit tracking
"""

PLAN_WEEKS = 4
PLAN_DAYS = 30
PLAN_STATUSES = ("active", "completed", "paused")

PLAN_TITLE = "30-Day Transformation Plan"
PLAN_DESCRIPTION = (
    "A personalized plan to build healthy habits and improve your quality of life with ADHD"
)

__all__ = ["PLAN_WEEKS", "PLAN_DAYS", "PLAN_STATUSES", "PLAN_TITLE", "PLAN_DESCRIPTION"]

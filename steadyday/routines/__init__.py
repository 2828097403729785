"""Routines - Repeatable checklists tied to a time of day

Each routine is an ordered list of small task items. Running a routine
records one completion event for the day; the streak and completion rate
come from the consistency package.

Components:
    manager.py: Routine CRUD, daily execution and stats
"""

TIMES_OF_DAY = ("morning", "afternoon", "evening", "night")

DEFAULT_COLOR = "#3B82F6"
DEFAULT_ICON = "🌟"

__all__ = ["TIMES_OF_DAY", "DEFAULT_COLOR", "DEFAULT_ICON"]

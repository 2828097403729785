"""Insights - Suggestions and weekly summaries built from the user's data

Components:
    suggestions.py: Smart suggestions for right now, 7-day productivity insights
"""

MAX_SUGGESTIONS = 6
URGENT_TASK_LIMIT = 3
LOW_MOOD_AVERAGE = 2.5
SUGGESTION_MOOD_ENTRIES = 3
MORNING_HOURS = (6, 10)
INSIGHT_DAYS = 7

# Completion rate (%) above which the trend is "up" / "stable"
TREND_UP_ABOVE = 70
TREND_STABLE_ABOVE = 40

__all__ = [
    "MAX_SUGGESTIONS",
    "URGENT_TASK_LIMIT",
    "LOW_MOOD_AVERAGE",
    "SUGGESTION_MOOD_ENTRIES",
    "MORNING_HOURS",
    "INSIGHT_DAYS",
    "TREND_UP_ABOVE",
    "TREND_STABLE_ABOVE",
]

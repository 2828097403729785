"""
Tool: Smart Suggestions
Purpose: Pick a few timely nudges and summarize the last week

Suggestions are checked in a fixed order and capped at MAX_SUGGESTIONS:
    1. More than 3 urgent open tasks     -> use a pomodoro
    2. Average of last 3 moods below 2.5 -> take a short break
    3. Enneagram result on file          -> advice for that type
    4. Active plan in weeks 1-4          -> keep going with the plan
    5. Between 06:00 and 10:59           -> start the morning routine

Usage:
    from steadyday.insights.suggestions import get_smart_suggestions, get_productivity_insights

    get_smart_suggestions("alice")
    get_productivity_insights("alice")
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from steadyday import database
from steadyday.consistency.events import normalize_day, reference_tz
from steadyday.focus.pomodoro import get_pomodoro_stats
from steadyday.mood.tracker import average_mood, get_mood_entries, get_recent_entries
from steadyday.personality.profiles import get_advice
from steadyday.personality.results import get_result
from steadyday.plans import PLAN_WEEKS
from steadyday.plans.manager import get_active_plan

from . import (
    INSIGHT_DAYS,
    LOW_MOOD_AVERAGE,
    MAX_SUGGESTIONS,
    MORNING_HOURS,
    SUGGESTION_MOOD_ENTRIES,
    TREND_STABLE_ABOVE,
    TREND_UP_ABOVE,
    URGENT_TASK_LIMIT,
)


def _local_now(now: Optional[datetime]) -> datetime:
    """Aware datetime in the reference timezone; naive input is already local."""
    tz = reference_tz()
    if now is None:
        return datetime.now(tz)
    return now.astimezone(tz) if now.tzinfo else now.replace(tzinfo=tz)


def _count_urgent_open_tasks(user_id: str) -> int:
    conn = database.get_connection()
    cursor = conn.cursor()
    cursor.execute(
        "SELECT COUNT(*) FROM tasks WHERE user_id = ? AND priority = 'urgent' AND status != 'completed'",
        (user_id,),
    )
    count = cursor.fetchone()[0]
    conn.close()
    return count


def get_smart_suggestions(user_id: str, now: Optional[datetime] = None) -> List[Dict[str, str]]:
    """
    Suggestions for the user right now.

    Args:
        user_id: User to advise
        now: Current instant (hour is read in the reference timezone)

    Returns:
        Up to MAX_SUGGESTIONS dicts with icon, title, description and action
    """
    local_now = _local_now(now)
    suggestions = []

    if _count_urgent_open_tasks(user_id) > URGENT_TASK_LIMIT:
        suggestions.append(
            {
                "icon": "🚨",
                "title": "Too many urgent tasks",
                "description": "You have a lot of urgent tasks. How about using the Pomodoro "
                "technique to focus on one at a time?",
                "action": "pomodoro",
            }
        )

    recent_mood = average_mood(get_recent_entries(user_id, limit=SUGGESTION_MOOD_ENTRIES))
    if recent_mood is not None and recent_mood < LOW_MOOD_AVERAGE:
        suggestions.append(
            {
                "icon": "🌱",
                "title": "Low mood detected",
                "description": "How about a 5-minute break to breathe or a quick walk?",
                "action": "mood_boost",
            }
        )

    enneagram = get_result(user_id)
    if enneagram:
        suggestions.append(
            {
                "icon": "🎯",
                "title": f"Tip for Type {enneagram['type']}",
                "description": get_advice(enneagram["type"]),
                "action": "enneagram_tip",
            }
        )

    plan = get_active_plan(user_id)
    if plan and plan["current_week"] <= PLAN_WEEKS:
        suggestions.append(
            {
                "icon": "🚀",
                "title": "Transformation Plan",
                "description": f"You are in week {plan['current_week']} of your plan. Keep going!",
                "action": "transformation_plan",
            }
        )

    first_hour, last_hour = MORNING_HOURS
    if first_hour <= local_now.hour <= last_hour:
        suggestions.append(
            {
                "icon": "🌅",
                "title": "Morning Routine",
                "description": "Good morning! How about starting with your morning routine "
                "for a more productive day?",
                "action": "morning_routine",
            }
        )

    return suggestions[:MAX_SUGGESTIONS]


def _trend(completion_rate: float) -> str:
    if completion_rate > TREND_UP_ABOVE:
        return "up"
    if completion_rate > TREND_STABLE_ABOVE:
        return "stable"
    return "down"


def get_productivity_insights(user_id: str, now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Summary of the last INSIGHT_DAYS days.

    Returns:
        dict with completion_rate (whole %), avg_mood (1 decimal, 0 without
        entries), total_focus_time (work minutes), completed_tasks and trend
    """
    local_now = _local_now(now)
    # Stored timestamps are UTC ISO strings
    utc_now = local_now.astimezone(timezone.utc)
    since = utc_now - timedelta(days=INSIGHT_DAYS)

    conn = database.get_connection()
    cursor = conn.cursor()
    cursor.execute(
        """
        SELECT COUNT(*) AS total,
               COALESCE(SUM(CASE WHEN status = 'completed' THEN 1 ELSE 0 END), 0) AS completed
        FROM tasks WHERE user_id = ? AND created_at >= ?
        """,
        (user_id, since.isoformat()),
    )
    counts = cursor.fetchone()
    conn.close()

    total, completed = counts["total"], counts["completed"]
    completion_rate = completed / total * 100 if total else 0.0

    moods = get_mood_entries(user_id, days=INSIGHT_DAYS, today=normalize_day(local_now))
    avg_mood = average_mood(moods, default=0.0)

    focus = get_pomodoro_stats(user_id, days=INSIGHT_DAYS, now=utc_now)

    return {
        "completion_rate": math.floor(completion_rate + 0.5),
        "avg_mood": math.floor(avg_mood * 10 + 0.5) / 10,
        "total_focus_time": focus["work_minutes"],
        "completed_tasks": completed,
        "trend": _trend(completion_rate),
    }

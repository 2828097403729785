"""
Tool: Transformation Plan Manager
Purpose: Start a 30-day plan, record weekly reflections and track daily habits

Only one plan is active per user. Starting a new plan pauses the previous
active one.

Habit check-ins are stored in the shared completion event log with
    subject_id = "<plan_id>:<habit_id>"
so that the same habit id in two different plans never shares a history.

Usage:
    from steadyday.plans.manager import create_plan, track_habit, get_habit_stats

    plan = create_plan("alice", enneagram_type=7)
    track_habit("alice", plan_id, "single-focus", completed=True)
    get_habit_stats("alice", plan_id, "single-focus")

Dependencies:
    - sqlite3 (stdlib)
"""

import json
import logging
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, Optional

from steadyday import database
from steadyday.consistency import RECENT_EVENTS_LIMIT
from steadyday.consistency.events import (
    CompletionEvent,
    current_day,
    get_events,
    load_config,
    normalize_day,
    record_event,
)
from steadyday.consistency.streaks import summarize_window
from steadyday.personality.results import get_result

from . import PLAN_DAYS, PLAN_DESCRIPTION, PLAN_STATUSES, PLAN_TITLE, PLAN_WEEKS
from .generator import generate_plan, habit_ids

logger = logging.getLogger(__name__)


def habit_subject_id(plan_id: str, habit_id: str) -> str:
    """Event log subject id for one habit of one plan."""
    return f"{plan_id}:{habit_id}"


def _fetch_owned(cursor, user_id: str, plan_id: str) -> Optional[Dict[str, Any]]:
    cursor.execute(
        "SELECT * FROM transformation_plans WHERE id = ? AND user_id = ?",
        (plan_id, user_id),
    )
    return database.row_to_dict(cursor.fetchone())


def create_plan(
    user_id: str,
    enneagram_type: Optional[int] = None,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Start a new active plan.

    Args:
        user_id: Plan owner
        enneagram_type: Type used to personalize the plan. When omitted the
            user's stored quiz result is used, if there is one.
        now: Start instant

    Returns:
        dict with plan_id and the stored plan
    """
    if enneagram_type is None:
        saved = get_result(user_id)
        if saved:
            enneagram_type = saved["type"]
    elif enneagram_type not in range(1, 10):
        return {"success": False, "error": f"Invalid Enneagram type: {enneagram_type}. Must be 1-9"}

    start = now or datetime.now(timezone.utc)
    end = start + timedelta(days=PLAN_DAYS)
    weeks = generate_plan(enneagram_type)["weeks"]
    plan_id = database.generate_id()

    conn = database.get_connection()
    cursor = conn.cursor()

    cursor.execute(
        "UPDATE transformation_plans SET status = 'paused' WHERE user_id = ? AND status = 'active'",
        (user_id,),
    )
    if cursor.rowcount:
        logger.info(f"Paused {cursor.rowcount} active plan(s) for {user_id}")

    cursor.execute(
        """
        INSERT INTO transformation_plans
            (id, user_id, title, description, start_date, end_date, status, weeks,
             current_week, enneagram_type)
        VALUES (?, ?, ?, ?, ?, ?, 'active', ?, 1, ?)
        """,
        (
            plan_id,
            user_id,
            PLAN_TITLE,
            PLAN_DESCRIPTION,
            start.isoformat(),
            end.isoformat(),
            json.dumps(weeks),
            enneagram_type,
        ),
    )
    conn.commit()

    plan = _fetch_owned(cursor, user_id, plan_id)
    conn.close()

    logger.info(f"Created plan {plan_id} for {user_id} (type={enneagram_type})")

    return {
        "success": True,
        "data": {"plan_id": plan_id, "plan": plan},
        "message": f"Plan created with ID {plan_id}",
    }


def get_active_plan(user_id: str) -> Optional[Dict[str, Any]]:
    """The user's active plan, or None."""
    conn = database.get_connection()
    cursor = conn.cursor()
    cursor.execute(
        """
        SELECT * FROM transformation_plans
        WHERE user_id = ? AND status = 'active'
        ORDER BY start_date DESC, rowid DESC
        LIMIT 1
        """,
        (user_id,),
    )
    plan = database.row_to_dict(cursor.fetchone())
    conn.close()
    return plan


def get_plan(user_id: str, plan_id: str) -> Dict[str, Any]:
    conn = database.get_connection()
    cursor = conn.cursor()
    plan = _fetch_owned(cursor, user_id, plan_id)
    conn.close()

    if not plan:
        return {"success": False, "error": f"Plan not found: {plan_id}"}
    return {"success": True, "data": plan}


def update_plan_status(user_id: str, plan_id: str, status: str) -> Dict[str, Any]:
    """Mark a plan active, completed or paused."""
    if status not in PLAN_STATUSES:
        return {"success": False, "error": f"Invalid status. Must be one of: {PLAN_STATUSES}"}

    conn = database.get_connection()
    cursor = conn.cursor()

    if not _fetch_owned(cursor, user_id, plan_id):
        conn.close()
        return {"success": False, "error": f"Plan not found: {plan_id}"}

    if status == "active":
        cursor.execute(
            "UPDATE transformation_plans SET status = 'paused' "
            "WHERE user_id = ? AND status = 'active' AND id != ?",
            (user_id, plan_id),
        )
    cursor.execute("UPDATE transformation_plans SET status = ? WHERE id = ?", (status, plan_id))
    conn.commit()

    plan = _fetch_owned(cursor, user_id, plan_id)
    conn.close()

    return {"success": True, "data": plan, "message": f"Plan {plan_id} is now {status}"}


def update_week_progress(
    user_id: str,
    plan_id: str,
    week_number: int,
    reflections: str,
) -> Dict[str, Any]:
    """
    Store a week's reflections and move the plan to the next week.

    The current week never goes past the last week of the plan.
    """
    if week_number < 1 or week_number > PLAN_WEEKS:
        return {"success": False, "error": f"Invalid week: {week_number}. Must be 1-{PLAN_WEEKS}"}

    conn = database.get_connection()
    cursor = conn.cursor()

    plan = _fetch_owned(cursor, user_id, plan_id)
    if not plan:
        conn.close()
        return {"success": False, "error": f"Plan not found: {plan_id}"}

    weeks = plan["weeks"]
    for week in weeks:
        if week["week_number"] == week_number:
            week["reflections"] = reflections

    current_week = min(week_number + 1, PLAN_WEEKS)
    cursor.execute(
        "UPDATE transformation_plans SET weeks = ?, current_week = ? WHERE id = ?",
        (json.dumps(weeks), current_week, plan_id),
    )
    conn.commit()

    plan = _fetch_owned(cursor, user_id, plan_id)
    conn.close()

    return {"success": True, "data": plan, "message": f"Week {week_number} saved"}


def _check_habit(user_id: str, plan_id: str, habit_id: str) -> Dict[str, Any]:
    plan_result = get_plan(user_id, plan_id)
    if not plan_result["success"]:
        return plan_result
    if habit_id not in habit_ids(plan_result["data"]["weeks"]):
        return {"success": False, "error": f"Habit not found in plan {plan_id}: {habit_id}"}
    return plan_result


def track_habit(
    user_id: str,
    plan_id: str,
    habit_id: str,
    completed: bool,
    notes: Optional[str] = None,
    today: Optional[date] = None,
) -> Dict[str, Any]:
    """
    Record whether a habit was done today. A later call the same day
    replaces the earlier answer.
    """
    checked = _check_habit(user_id, plan_id, habit_id)
    if not checked["success"]:
        return checked

    day = normalize_day(today) if today is not None else current_day()

    event = CompletionEvent(
        subject_id=habit_subject_id(plan_id, habit_id),
        owner_id=user_id,
        day=day,
        completion_ratio=bool(completed),
        subject_type="habit",
        details={"plan_id": plan_id, "habit_id": habit_id, "notes": notes},
    )
    return record_event(event)


def get_habit_stats(
    user_id: str,
    plan_id: str,
    habit_id: str,
    days: Optional[int] = None,
    today: Optional[date] = None,
) -> Dict[str, Any]:
    """
    Consistency report for one habit.

    Returns:
        dict with completed_days, total_days, completion_rate (whole %),
        current_streak (only fully completed days count) and the 7 most
        recent check-ins
    """
    checked = _check_habit(user_id, plan_id, habit_id)
    if not checked["success"]:
        return checked

    config = load_config()
    days = days or config["window_days"]
    threshold = config["thresholds"]["habit"]
    day = normalize_day(today) if today is not None else current_day()

    try:
        events = get_events(user_id, habit_subject_id(plan_id, habit_id), today=day, days=days)
    except ValueError as e:
        return {"success": False, "error": str(e)}

    summary = summarize_window(events, day, threshold, recent_limit=RECENT_EVENTS_LIMIT)

    return {
        "success": True,
        "data": {
            "habit_id": habit_id,
            "completed_days": sum(1 for e in events if e.completion_ratio >= 1.0),
            "total_days": summary["total_executions"],
            "completion_rate": summary["completion_rate"],
            "current_streak": summary["current_streak"],
            "recent_trackings": summary["recent"],
        },
    }

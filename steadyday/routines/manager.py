"""
Tool: Routine Manager
Purpose: Create routines, run them day by day and report their consistency

A routine run stores a completion event for the day with
    ratio = completed items / total items   (0 when the routine is empty)
Running the same routine twice on one day replaces that day's event.

Usage:
    from steadyday.routines.manager import create_routine, execute_routine, get_routine_stats

    routine = create_routine("alice", "Wake up", "morning", tasks=[
        {"title": "Drink water", "order": 0},
        {"title": "Make the bed", "estimated_minutes": 2, "order": 1},
    ])
    execute_routine("alice", routine_id, completed_task_ids=[first_item_id])
    get_routine_stats("alice", routine_id)

Dependencies:
    - sqlite3 (stdlib)
"""

import json
import logging
import uuid
from datetime import date
from typing import Any, Dict, List, Optional

from steadyday import database
from steadyday.consistency import RECENT_EVENTS_LIMIT
from steadyday.consistency.events import (
    CompletionEvent,
    current_day,
    delete_subject_events,
    get_events,
    load_config,
    normalize_day,
    record_event,
)
from steadyday.consistency.streaks import summarize_window

from . import DEFAULT_COLOR, DEFAULT_ICON, TIMES_OF_DAY

logger = logging.getLogger(__name__)


def _build_items(tasks: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Normalize task items; items without an id get a fresh one."""
    items = []
    for index, task in enumerate(tasks):
        title = (task.get("title") or "").strip()
        if not title:
            raise ValueError(f"Routine item {index} has no title")
        items.append(
            {
                "id": task.get("id") or uuid.uuid4().hex,
                "title": title,
                "estimated_minutes": task.get("estimated_minutes"),
                "completed": False,
                "order": task.get("order", index),
            }
        )
    return sorted(items, key=lambda item: item["order"])


def _fetch_owned(cursor, user_id: str, routine_id: str) -> Optional[Dict[str, Any]]:
    cursor.execute("SELECT * FROM routines WHERE id = ? AND user_id = ?", (routine_id, user_id))
    routine = database.row_to_dict(cursor.fetchone())
    if routine:
        routine["is_active"] = bool(routine["is_active"])
    return routine


def create_routine(
    user_id: str,
    name: str,
    time_of_day: str,
    tasks: Optional[List[Dict[str, Any]]] = None,
    description: Optional[str] = None,
    color: Optional[str] = None,
    icon: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Create an active routine.

    Args:
        user_id: Owner
        name: Display name
        time_of_day: morning, afternoon, evening or night
        tasks: Items as dicts with title, optional estimated_minutes and order
        description: Optional description
        color: Display color (defaults to blue)
        icon: Display icon

    Returns:
        dict with routine_id and the stored routine
    """
    if not name or not name.strip():
        return {"success": False, "error": "Routine name is required"}
    if time_of_day not in TIMES_OF_DAY:
        return {"success": False, "error": f"Invalid time_of_day. Must be one of: {TIMES_OF_DAY}"}

    try:
        items = _build_items(tasks or [])
    except ValueError as e:
        return {"success": False, "error": str(e)}

    routine_id = database.generate_id()

    conn = database.get_connection()
    cursor = conn.cursor()
    cursor.execute(
        """
        INSERT INTO routines (id, user_id, name, description, time_of_day, tasks, is_active, color, icon)
        VALUES (?, ?, ?, ?, ?, ?, 1, ?, ?)
        """,
        (
            routine_id,
            user_id,
            name.strip(),
            description,
            time_of_day,
            json.dumps(items),
            color or DEFAULT_COLOR,
            icon or DEFAULT_ICON,
        ),
    )
    conn.commit()

    routine = _fetch_owned(cursor, user_id, routine_id)
    conn.close()

    logger.info(f"Created routine {routine_id} with {len(items)} items for {user_id}")

    return {
        "success": True,
        "data": {"routine_id": routine_id, "routine": routine},
        "message": f"Routine created with ID {routine_id}",
    }


def list_routines(user_id: str, time_of_day: Optional[str] = None) -> Dict[str, Any]:
    """List a user's routines, optionally for one time of day."""
    if time_of_day and time_of_day not in TIMES_OF_DAY:
        return {"success": False, "error": f"Invalid time_of_day. Must be one of: {TIMES_OF_DAY}"}

    conditions = ["user_id = ?"]
    params: List[Any] = [user_id]
    if time_of_day:
        conditions.append("time_of_day = ?")
        params.append(time_of_day)

    conn = database.get_connection()
    cursor = conn.cursor()
    cursor.execute(
        f"SELECT * FROM routines WHERE {' AND '.join(conditions)} ORDER BY created_at ASC, rowid ASC",
        params,
    )
    routines = []
    for row in cursor.fetchall():
        routine = database.row_to_dict(row)
        routine["is_active"] = bool(routine["is_active"])
        routines.append(routine)
    conn.close()

    return {"success": True, "data": {"routines": routines, "total": len(routines)}}


def get_routine(user_id: str, routine_id: str) -> Dict[str, Any]:
    conn = database.get_connection()
    cursor = conn.cursor()
    routine = _fetch_owned(cursor, user_id, routine_id)
    conn.close()

    if not routine:
        return {"success": False, "error": f"Routine not found: {routine_id}"}
    return {"success": True, "data": routine}


def update_routine(
    user_id: str,
    routine_id: str,
    name: Optional[str] = None,
    description: Optional[str] = None,
    tasks: Optional[List[Dict[str, Any]]] = None,
    is_active: Optional[bool] = None,
    color: Optional[str] = None,
    icon: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Partially update a routine. Only the given fields change.

    Replacing the task list keeps the ids of items that carry one and
    assigns fresh ids to new items.
    """
    updates = []
    params: List[Any] = []

    if name is not None:
        if not name.strip():
            return {"success": False, "error": "Routine name is required"}
        updates.append("name = ?")
        params.append(name.strip())
    if description is not None:
        updates.append("description = ?")
        params.append(description)
    if tasks is not None:
        try:
            items = _build_items(tasks)
        except ValueError as e:
            return {"success": False, "error": str(e)}
        updates.append("tasks = ?")
        params.append(json.dumps(items))
    if is_active is not None:
        updates.append("is_active = ?")
        params.append(1 if is_active else 0)
    if color is not None:
        updates.append("color = ?")
        params.append(color)
    if icon is not None:
        updates.append("icon = ?")
        params.append(icon)

    conn = database.get_connection()
    cursor = conn.cursor()

    if not _fetch_owned(cursor, user_id, routine_id):
        conn.close()
        return {"success": False, "error": f"Routine not found: {routine_id}"}

    if updates:
        params.append(routine_id)
        cursor.execute(f"UPDATE routines SET {', '.join(updates)} WHERE id = ?", params)
        conn.commit()

    routine = _fetch_owned(cursor, user_id, routine_id)
    conn.close()

    return {"success": True, "data": routine, "message": f"Routine {routine_id} updated"}


def delete_routine(user_id: str, routine_id: str) -> Dict[str, Any]:
    """Delete a routine together with its completion history."""
    conn = database.get_connection()
    cursor = conn.cursor()
    cursor.execute("DELETE FROM routines WHERE id = ? AND user_id = ?", (routine_id, user_id))
    deleted = cursor.rowcount
    conn.commit()
    conn.close()

    if not deleted:
        return {"success": False, "error": f"Routine not found: {routine_id}"}

    events_deleted = delete_subject_events(user_id, routine_id)

    return {
        "success": True,
        "data": {"events_deleted": events_deleted},
        "message": f"Routine {routine_id} deleted",
    }


def execute_routine(
    user_id: str,
    routine_id: str,
    completed_task_ids: List[str],
    notes: Optional[str] = None,
    today: Optional[date] = None,
) -> Dict[str, Any]:
    """
    Record today's run of a routine.

    Args:
        user_id: Owner
        routine_id: Routine that was run
        completed_task_ids: Ids of the items ticked off
        notes: Optional free text
        today: Reference day (defaults to the current day)

    Returns:
        dict with the event id, created flag and stored event
    """
    routine_result = get_routine(user_id, routine_id)
    if not routine_result["success"]:
        return routine_result
    routine = routine_result["data"]

    item_ids = [item["id"] for item in routine.get("tasks") or []]
    ticked = set(completed_task_ids)
    # Unknown ids and repeats are not counted
    completed = [item_id for item_id in item_ids if item_id in ticked]
    ratio = len(completed) / len(item_ids) if item_ids else 0.0

    day = normalize_day(today) if today is not None else current_day()

    event = CompletionEvent(
        subject_id=routine_id,
        owner_id=user_id,
        day=day,
        completion_ratio=ratio,
        subject_type="routine",
        details={"completed_tasks": completed, "total_tasks": len(item_ids), "notes": notes},
    )
    return record_event(event)


def get_routine_stats(
    user_id: str,
    routine_id: str,
    days: Optional[int] = None,
    today: Optional[date] = None,
) -> Dict[str, Any]:
    """
    Consistency report for one routine over the last `days` days.

    Returns:
        dict with total_executions, average_completion (whole %),
        streak, threshold and the 7 most recent executions
    """
    routine_result = get_routine(user_id, routine_id)
    if not routine_result["success"]:
        return routine_result

    config = load_config()
    days = days or config["window_days"]
    threshold = config["thresholds"]["routine"]
    day = normalize_day(today) if today is not None else current_day()

    try:
        events = get_events(user_id, routine_id, today=day, days=days)
    except ValueError as e:
        return {"success": False, "error": str(e)}

    summary = summarize_window(events, day, threshold, recent_limit=RECENT_EVENTS_LIMIT)

    return {
        "success": True,
        "data": {
            "routine_id": routine_id,
            "total_executions": summary["total_executions"],
            "average_completion": summary["completion_rate"],
            "average_completion_exact": summary["completion_rate_exact"],
            "streak": summary["current_streak"],
            "threshold": summary["threshold"],
            "recent_executions": summary["recent"],
        },
    }

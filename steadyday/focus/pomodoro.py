"""
Tool: Pomodoro Sessions
Purpose: Record finished focus/break sessions and resolve today's session length

Usage:
    from steadyday.focus.pomodoro import record_session, get_pomodoro_stats, get_adaptive_session

    record_session("alice", duration=25, session_type="work", task_id="abc123")
    stats = get_pomodoro_stats("alice", days=7)
    session = get_adaptive_session("alice")   # {"duration": 30, "break_duration": 6, ...}

Dependencies:
    - sqlite3 (stdlib)
    - yaml (PyYAML)
"""

import logging
import math
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, Optional

import yaml

from steadyday import database
from steadyday.consistency.events import current_day, normalize_day
from steadyday.mood.tracker import get_today_entry, mood_vector_for

from . import (
    BASE_DURATION,
    CONFIG_PATH,
    DEFAULT_STATS_DAYS,
    MAX_DURATION,
    MIN_DURATION,
    SESSION_TYPES,
)
from .adaptive import break_duration, session_length_for

logger = logging.getLogger(__name__)


def load_config() -> Dict[str, Any]:
    """Load focus configuration from YAML file."""
    defaults = {
        "base_duration": BASE_DURATION,
        "min_duration": MIN_DURATION,
        "max_duration": MAX_DURATION,
        "stats_days": DEFAULT_STATS_DAYS,
    }
    if CONFIG_PATH.exists():
        with open(CONFIG_PATH) as f:
            config = yaml.safe_load(f) or {}
            defaults.update(config.get("focus", {}))
    return defaults


def record_session(
    user_id: str,
    duration: float,
    session_type: str,
    task_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Store a finished session.

    Args:
        user_id: Session owner
        duration: Minutes spent
        session_type: work, short_break or long_break
        task_id: Task worked on, if any
        now: Completion instant (defaults to the current time; stored in UTC)

    Returns:
        dict with session_id and the stored session
    """
    if session_type not in SESSION_TYPES:
        return {
            "success": False,
            "error": f"Invalid session type: {session_type}. Must be one of: {SESSION_TYPES}",
        }
    if isinstance(duration, bool) or not isinstance(duration, (int, float)) \
            or not math.isfinite(duration) or duration <= 0:
        return {"success": False, "error": f"Duration must be a positive number of minutes, got {duration!r}"}

    completed_at = (now or datetime.now(timezone.utc)).astimezone(timezone.utc).isoformat()
    session_id = database.generate_id()

    conn = database.get_connection()
    cursor = conn.cursor()
    cursor.execute(
        """
        INSERT INTO pomodoro_sessions (id, user_id, task_id, duration, session_type, completed_at)
        VALUES (?, ?, ?, ?, ?, ?)
        """,
        (session_id, user_id, task_id, duration, session_type, completed_at),
    )
    conn.commit()
    cursor.execute("SELECT * FROM pomodoro_sessions WHERE id = ?", (session_id,))
    session = database.row_to_dict(cursor.fetchone())
    conn.close()

    logger.info(f"Recorded {session_type} session of {duration} min for {user_id}")

    return {"success": True, "data": {"session_id": session_id, "session": session}}


def get_pomodoro_stats(
    user_id: str, days: int = DEFAULT_STATS_DAYS, now: Optional[datetime] = None
) -> Dict[str, Any]:
    """Session count, total minutes and work-session count over the last `days` days."""
    # completed_at is stored in UTC, so the bound must be too
    since = (now or datetime.now(timezone.utc)).astimezone(timezone.utc) - timedelta(days=days)

    conn = database.get_connection()
    cursor = conn.cursor()
    cursor.execute(
        """
        SELECT
            COUNT(*) AS total_sessions,
            COALESCE(SUM(duration), 0) AS total_minutes,
            COALESCE(SUM(CASE WHEN session_type = 'work' THEN 1 ELSE 0 END), 0) AS work_sessions,
            COALESCE(SUM(CASE WHEN session_type = 'work' THEN duration ELSE 0 END), 0) AS work_minutes
        FROM pomodoro_sessions
        WHERE user_id = ? AND completed_at >= ?
        """,
        (user_id, since.isoformat()),
    )
    stats = dict(cursor.fetchone())
    conn.close()
    return stats


def get_adaptive_session(
    user_id: str, today: Optional[date] = None, base: Optional[float] = None
) -> Dict[str, Any]:
    """
    Session length for today, adapted to the user's check-in when there is one.

    Returns:
        dict with duration, break_duration, adapted flag and the mood used
    """
    config = load_config()
    base = base if base is not None else config["base_duration"]
    day = normalize_day(today) if today else current_day()

    entry = get_today_entry(user_id, today=day)
    vector = mood_vector_for(entry)
    duration = session_length_for(
        vector,
        base=base,
        min_minutes=config["min_duration"],
        max_minutes=config["max_duration"],
    )

    return {
        "duration": duration,
        "break_duration": break_duration(duration),
        "adapted": vector is not None,
        "base_duration": base,
        "mood": (
            {"mood": vector.mood.value, "energy": vector.energy.value, "focus": vector.focus.value}
            if vector
            else None
        ),
    }

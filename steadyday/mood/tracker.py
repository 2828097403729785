"""
Tool: Mood Tracker
Purpose: Record one mood / energy / focus check-in per user per day

Checking in twice on the same day replaces the earlier entry. Today's entry
feeds the adaptive focus timer; recent entries feed the assistant context
and suggestions.

Usage:
    from steadyday.mood.tracker import record_mood, get_today_entry

    record_mood("alice", mood="good", energy="medium", focus="low")
    entry = get_today_entry("alice")

Output:
    dict results with success status and data
"""

import logging
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Optional

from steadyday import database
from steadyday.consistency.events import current_day, normalize_day
from steadyday.focus.adaptive import MoodVector

from . import MOOD_SCORES, MoodLevel

logger = logging.getLogger(__name__)


def record_mood(
    user_id: str,
    mood: str,
    energy: str,
    focus: str,
    notes: Optional[str] = None,
    today: Optional[date] = None,
) -> Dict[str, Any]:
    """
    Create or replace today's check-in.

    Args:
        user_id: User checking in
        mood: MoodLevel value
        energy: EnergyLevel value
        focus: FocusLevel value
        notes: Optional free text
        today: Reference day (defaults to the current day)

    Returns:
        dict with entry_id, created flag and the stored entry
    """
    try:
        vector = MoodVector.from_values(mood, energy, focus)
    except ValueError as e:
        return {"success": False, "error": str(e)}

    day = normalize_day(today) if today else current_day()
    day_str = day.isoformat()

    conn = database.get_connection()
    cursor = conn.cursor()

    cursor.execute(
        "SELECT id FROM mood_entries WHERE user_id = ? AND day = ?",
        (user_id, day_str),
    )
    existing = cursor.fetchone()

    if existing:
        entry_id = existing["id"]
        cursor.execute(
            "UPDATE mood_entries SET mood = ?, energy = ?, focus = ?, notes = ? WHERE id = ?",
            (vector.mood.value, vector.energy.value, vector.focus.value, notes, entry_id),
        )
    else:
        entry_id = database.generate_id()
        cursor.execute(
            """
            INSERT INTO mood_entries (id, user_id, mood, energy, focus, notes, day)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (entry_id, user_id, vector.mood.value, vector.energy.value, vector.focus.value, notes, day_str),
        )

    conn.commit()
    cursor.execute("SELECT * FROM mood_entries WHERE id = ?", (entry_id,))
    entry = database.row_to_dict(cursor.fetchone())
    conn.close()

    return {
        "success": True,
        "data": {"entry_id": entry_id, "created": existing is None, "entry": entry},
    }


def get_mood_entries(
    user_id: str, days: int = 30, today: Optional[date] = None
) -> List[Dict[str, Any]]:
    """Entries in the window (today - days, today], newest first."""
    end = normalize_day(today) if today else current_day()
    start = end - timedelta(days=days)

    conn = database.get_connection()
    cursor = conn.cursor()
    cursor.execute(
        """
        SELECT * FROM mood_entries
        WHERE user_id = ? AND day > ? AND day <= ?
        ORDER BY day DESC
        """,
        (user_id, start.isoformat(), end.isoformat()),
    )
    entries = [database.row_to_dict(row) for row in cursor.fetchall()]
    conn.close()
    return entries


def get_recent_entries(user_id: str, limit: int = 7) -> List[Dict[str, Any]]:
    """The `limit` most recent entries regardless of date, newest first."""
    conn = database.get_connection()
    cursor = conn.cursor()
    cursor.execute(
        "SELECT * FROM mood_entries WHERE user_id = ? ORDER BY day DESC LIMIT ?",
        (user_id, limit),
    )
    entries = [database.row_to_dict(row) for row in cursor.fetchall()]
    conn.close()
    return entries


def get_today_entry(user_id: str, today: Optional[date] = None) -> Optional[Dict[str, Any]]:
    """Today's check-in, or None when the user has not checked in yet."""
    day = normalize_day(today) if today else current_day()

    conn = database.get_connection()
    cursor = conn.cursor()
    cursor.execute(
        "SELECT * FROM mood_entries WHERE user_id = ? AND day = ?",
        (user_id, day.isoformat()),
    )
    entry = database.row_to_dict(cursor.fetchone())
    conn.close()
    return entry


def mood_vector_for(entry: Optional[Dict[str, Any]]) -> Optional[MoodVector]:
    """MoodVector of a stored entry (None passes through)."""
    if entry is None:
        return None
    return MoodVector.from_values(entry["mood"], entry["energy"], entry["focus"])


def average_mood(entries: Iterable[Dict[str, Any]], default: Optional[float] = None) -> Optional[float]:
    """Mean mood score (1-5) of the entries, or `default` when there are none."""
    scores = [MOOD_SCORES[MoodLevel(e["mood"])] for e in entries]
    if not scores:
        return default
    return sum(scores) / len(scores)

"""
Tool: Completion Event Log
Purpose: Store one dated completion record per (subject, day)

Routines and plan habits report progress here. A later report for the same
subject on the same day replaces the earlier one, so the log never holds
two events for one day. Events are only deleted when their parent subject
is removed.

Usage:
    from steadyday.consistency.events import CompletionEvent, record_event, get_events

    record_event(CompletionEvent(
        subject_id="routine_abc",
        owner_id="alice",
        day=date(2025, 3, 14),
        completion_ratio=0.8,
    ))
    events = get_events("alice", "routine_abc", today=date(2025, 3, 14), days=30)

Dependencies:
    - sqlite3 (stdlib)
    - zoneinfo (stdlib)
    - yaml (PyYAML)
"""

import json
import logging
import math
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Union
from zoneinfo import ZoneInfo

import yaml

from steadyday import database

from . import (
    CONFIG_PATH,
    DEFAULT_TIMEZONE,
    DEFAULT_WINDOW_DAYS,
    HABIT_THRESHOLD,
    ROUTINE_THRESHOLD,
    SUBJECT_TYPES,
)

logger = logging.getLogger(__name__)

DayLike = Union[date, datetime, int, float, str]


def load_config() -> Dict[str, Any]:
    """Load consistency configuration, filling gaps with defaults."""
    config: Dict[str, Any] = {
        "timezone": DEFAULT_TIMEZONE,
        "window_days": DEFAULT_WINDOW_DAYS,
        "thresholds": {"routine": ROUTINE_THRESHOLD, "habit": HABIT_THRESHOLD},
    }
    if CONFIG_PATH.exists():
        with open(CONFIG_PATH) as f:
            loaded = (yaml.safe_load(f) or {}).get("consistency", {})
        config["timezone"] = loaded.get("timezone", config["timezone"])
        config["window_days"] = loaded.get("window_days", config["window_days"])
        config["thresholds"].update(loaded.get("thresholds", {}))
    return config


def reference_tz() -> ZoneInfo:
    """Timezone in which calendar days are cut."""
    return ZoneInfo(load_config()["timezone"])


def normalize_day(value: DayLike, tz: Optional[ZoneInfo] = None) -> date:
    """
    Reduce a timestamp to its calendar day in the reference timezone.

    Args:
        value: date, datetime, epoch milliseconds or ISO string.
            Naive datetimes are read as already local to the reference zone.
        tz: Override for the reference timezone

    Returns:
        The calendar day (no time-of-day component)
    """
    tz = tz or reference_tz()

    if isinstance(value, bool):
        raise ValueError("A boolean is not a day")
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.date()
        return value.astimezone(tz).date()
    if isinstance(value, date):
        return value
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise ValueError(f"Non-finite timestamp: {value}")
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc).astimezone(tz).date()
    if isinstance(value, str):
        try:
            if len(value) == 10:
                return date.fromisoformat(value)
            text = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
            return normalize_day(datetime.fromisoformat(text), tz)
        except ValueError as e:
            raise ValueError(f"Unparseable day: {value!r}") from e

    raise ValueError(f"Unsupported day value: {value!r}")


def current_day(now: Optional[datetime] = None) -> date:
    """Reference day for `now` (defaults to the current instant)."""
    tz = reference_tz()
    return normalize_day(now or datetime.now(tz), tz)


def coerce_ratio(value: Union[bool, int, float]) -> float:
    """Validate a completion ratio; booleans become 0.0 / 1.0."""
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ValueError(f"Completion ratio must be a finite number, got {value!r}")
    if value < 0 or value > 1:
        raise ValueError(f"Completion ratio must be within [0, 1], got {value}")
    return float(value)


@dataclass
class CompletionEvent:
    """A single day's completion record for one subject."""

    subject_id: str
    owner_id: str
    day: date
    completion_ratio: float
    subject_type: str = "routine"
    details: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.subject_type not in SUBJECT_TYPES:
            raise ValueError(f"Invalid subject type: {self.subject_type}")
        self.completion_ratio = coerce_ratio(self.completion_ratio)
        if isinstance(self.day, datetime) or not isinstance(self.day, date):
            self.day = normalize_day(self.day)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "subject_id": self.subject_id,
            "owner_id": self.owner_id,
            "subject_type": self.subject_type,
            "day": self.day.isoformat(),
            "completion_ratio": self.completion_ratio,
            "details": self.details,
        }


def event_from_row(row) -> CompletionEvent:
    """Build a CompletionEvent from a completion_events row."""
    d = database.row_to_dict(row)
    return CompletionEvent(
        subject_id=d["subject_id"],
        owner_id=d["owner_id"],
        day=date.fromisoformat(d["day"]),
        completion_ratio=d["completion_ratio"],
        subject_type=d["subject_type"],
        details=d.get("details") or {},
    )


def record_event(event: CompletionEvent) -> Dict[str, Any]:
    """
    Upsert an event keyed by (subject_id, day).

    A row for the same key held by another owner is left untouched and
    reported as an error.

    Args:
        event: The event to store

    Returns:
        dict with event_id, whether a new row was created, and the event
    """
    conn = database.get_connection()
    cursor = conn.cursor()

    day_str = event.day.isoformat()
    cursor.execute(
        "SELECT id FROM completion_events WHERE subject_id = ? AND day = ? AND owner_id = ?",
        (event.subject_id, day_str, event.owner_id),
    )
    existing = cursor.fetchone()
    event_id = existing["id"] if existing else database.generate_id()

    cursor.execute(
        """
        INSERT INTO completion_events
            (id, owner_id, subject_type, subject_id, day, completion_ratio, details)
        VALUES (?, ?, ?, ?, ?, ?, ?)
        ON CONFLICT(subject_id, day) DO UPDATE SET
            completion_ratio = excluded.completion_ratio,
            details = excluded.details,
            updated_at = CURRENT_TIMESTAMP
        WHERE completion_events.owner_id = excluded.owner_id
        """,
        (
            event_id,
            event.owner_id,
            event.subject_type,
            event.subject_id,
            day_str,
            event.completion_ratio,
            json.dumps(event.details),
        ),
    )
    if cursor.rowcount == 0:
        conn.close()
        return {
            "success": False,
            "error": f"Event {event.subject_id} on {day_str} belongs to another user",
        }
    conn.commit()
    conn.close()

    logger.debug(
        f"{'Updated' if existing else 'Recorded'} {event.subject_type} event "
        f"{event.subject_id} on {day_str}"
    )

    return {
        "success": True,
        "data": {"event_id": event_id, "created": existing is None, "event": event.to_dict()},
    }


def get_event(owner_id: str, subject_id: str, day: DayLike) -> Optional[CompletionEvent]:
    """Fetch the event for one subject on one day, if any."""
    conn = database.get_connection()
    cursor = conn.cursor()
    cursor.execute(
        "SELECT * FROM completion_events WHERE owner_id = ? AND subject_id = ? AND day = ?",
        (owner_id, subject_id, normalize_day(day).isoformat()),
    )
    row = cursor.fetchone()
    conn.close()
    return event_from_row(row) if row else None


def get_events(
    owner_id: str,
    subject_id: str,
    today: DayLike,
    days: int = DEFAULT_WINDOW_DAYS,
) -> List[CompletionEvent]:
    """
    Snapshot of a subject's events in the window (today - days, today].

    Args:
        owner_id: Owning user; events of other users are never returned
        subject_id: Routine id or plan habit subject id
        today: Reference day closing the window
        days: Window length in days

    Returns:
        Events ordered by day ascending
    """
    if days < 1:
        raise ValueError(f"Window must cover at least one day, got {days}")

    end = normalize_day(today)
    start = end - timedelta(days=days)

    conn = database.get_connection()
    cursor = conn.cursor()
    cursor.execute(
        """
        SELECT * FROM completion_events
        WHERE owner_id = ? AND subject_id = ? AND day > ? AND day <= ?
        ORDER BY day ASC
        """,
        (owner_id, subject_id, start.isoformat(), end.isoformat()),
    )
    events = [event_from_row(row) for row in cursor.fetchall()]
    conn.close()
    return events


def delete_subject_events(owner_id: str, subject_id: str) -> int:
    """Remove every event of a subject. Returns number of rows deleted."""
    conn = database.get_connection()
    cursor = conn.cursor()
    cursor.execute(
        "DELETE FROM completion_events WHERE owner_id = ? AND subject_id = ?",
        (owner_id, subject_id),
    )
    deleted = cursor.rowcount
    conn.commit()
    conn.close()

    if deleted:
        logger.info(f"Deleted {deleted} events for subject {subject_id}")
    return deleted

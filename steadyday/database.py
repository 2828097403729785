"""
SteadyDay Database Module

Handles the SQLite schema shared by every feature package:
- completion_events: Daily completion records (routines, plan habits)
- routines: Routine definitions with ordered task items
- mood_entries: One mood/energy/focus check-in per user per day
- pomodoro_sessions: Finished focus and break sessions
- tasks: Tasks with embedded subtasks
- enneagram_results: Latest personality quiz result per user
- transformation_plans: 30-day plans with weekly habits
- chat_messages: Assistant conversation history

JSON columns are stored as TEXT and decoded by row_to_dict().
"""

import json
import logging
import sqlite3
import uuid
from pathlib import Path
from typing import Any, Dict, Optional

from steadyday import DATA_DIR

logger = logging.getLogger(__name__)


# Database path
DB_PATH = DATA_DIR / "steadyday.db"

# Columns holding JSON payloads
JSON_FIELDS = (
    "details",
    "tasks",
    "subtasks",
    "strengths",
    "challenges",
    "growth_tips",
    "answers",
    "weeks",
)


SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS completion_events (
        id TEXT PRIMARY KEY,
        owner_id TEXT NOT NULL,
        subject_type TEXT NOT NULL CHECK(subject_type IN ('routine', 'habit')),
        subject_id TEXT NOT NULL,
        day TEXT NOT NULL,
        completion_ratio REAL NOT NULL CHECK(completion_ratio >= 0 AND completion_ratio <= 1),
        details TEXT,
        recorded_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        updated_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        UNIQUE(subject_id, day)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS routines (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        name TEXT NOT NULL,
        description TEXT,
        time_of_day TEXT NOT NULL CHECK(time_of_day IN ('morning', 'afternoon', 'evening', 'night')),
        tasks TEXT NOT NULL,
        is_active INTEGER DEFAULT 1,
        color TEXT,
        icon TEXT,
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS mood_entries (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        mood TEXT NOT NULL,
        energy TEXT NOT NULL,
        focus TEXT NOT NULL,
        notes TEXT,
        day TEXT NOT NULL,
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        UNIQUE(user_id, day)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS pomodoro_sessions (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        task_id TEXT,
        duration INTEGER NOT NULL,
        session_type TEXT NOT NULL CHECK(session_type IN ('work', 'short_break', 'long_break')),
        completed_at DATETIME NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS tasks (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        title TEXT NOT NULL,
        description TEXT,
        priority TEXT NOT NULL CHECK(priority IN ('low', 'medium', 'high', 'urgent')),
        status TEXT DEFAULT 'todo' CHECK(status IN ('todo', 'in_progress', 'completed')),
        estimated_minutes INTEGER,
        actual_minutes INTEGER,
        due_date DATETIME,
        category TEXT,
        subtasks TEXT,
        created_at DATETIME NOT NULL,
        completed_at DATETIME
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS enneagram_results (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL UNIQUE,
        type INTEGER NOT NULL CHECK(type BETWEEN 1 AND 9),
        wing INTEGER,
        name TEXT,
        description TEXT NOT NULL,
        strengths TEXT,
        challenges TEXT,
        growth_tips TEXT,
        answers TEXT,
        completed_at DATETIME NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS transformation_plans (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        title TEXT NOT NULL,
        description TEXT,
        start_date DATETIME NOT NULL,
        end_date DATETIME NOT NULL,
        status TEXT DEFAULT 'active' CHECK(status IN ('active', 'completed', 'paused')),
        weeks TEXT NOT NULL,
        current_week INTEGER DEFAULT 1,
        enneagram_type INTEGER
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS chat_messages (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        message TEXT NOT NULL,
        response TEXT NOT NULL,
        message_type TEXT NOT NULL,
        source TEXT DEFAULT 'llm',
        timestamp DATETIME NOT NULL
    )
    """,
)

INDEXES = (
    "CREATE INDEX IF NOT EXISTS idx_events_owner_subject ON completion_events(owner_id, subject_id)",
    "CREATE INDEX IF NOT EXISTS idx_events_day ON completion_events(day)",
    "CREATE INDEX IF NOT EXISTS idx_routines_user ON routines(user_id)",
    "CREATE INDEX IF NOT EXISTS idx_mood_user_day ON mood_entries(user_id, day)",
    "CREATE INDEX IF NOT EXISTS idx_pomodoro_user ON pomodoro_sessions(user_id, completed_at)",
    "CREATE INDEX IF NOT EXISTS idx_tasks_user_status ON tasks(user_id, status)",
    "CREATE INDEX IF NOT EXISTS idx_plans_user_status ON transformation_plans(user_id, status)",
    "CREATE INDEX IF NOT EXISTS idx_chat_user_time ON chat_messages(user_id, timestamp)",
)


def get_connection() -> sqlite3.Connection:
    """Get database connection, creating tables if needed."""
    db_path = Path(DB_PATH)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row

    cursor = conn.cursor()
    for statement in SCHEMA:
        cursor.execute(statement)
    for statement in INDEXES:
        cursor.execute(statement)

    conn.commit()
    return conn


def row_to_dict(row: Optional[sqlite3.Row]) -> Optional[Dict[str, Any]]:
    """Convert sqlite3.Row to dictionary, decoding JSON columns."""
    if row is None:
        return None
    d = dict(row)
    for key in JSON_FIELDS:
        if isinstance(d.get(key), str):
            try:
                d[key] = json.loads(d[key])
            except json.JSONDecodeError:
                logger.warning(f"Undecodable JSON in column {key} of row {d.get('id')}")
    return d


def generate_id() -> str:
    """Generate a short unique ID."""
    return uuid.uuid4().hex[:12]


__all__ = ["DB_PATH", "get_connection", "row_to_dict", "generate_id"]

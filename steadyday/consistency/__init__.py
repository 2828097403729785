"""Consistency Engine - Daily completion log and streaks

Philosophy:
    A streak is a gentle signal, not a scoreboard.
    It answers one question: "have I kept this going through today?"

Components:
    events.py: Completion event log
        - One event per (subject, day), later writes replace earlier ones
        - Days normalized to midnight in a fixed reference timezone
        - Window queries scoped to the owning user

    streaks.py: Pure streak / completion-rate calculation
        - Current streak anchored to the reference day
        - Unweighted mean completion rate over the window
        - No storage access, no clock access

Subjects:
    routine: ratio = completed routine items / total items, streak at 70%
    habit:   boolean completion (0.0 or 1.0), streak at 100%

Configuration: args/consistency.yaml
    - Reference timezone
    - Qualifying thresholds per subject type
    - Default stats window
"""

from steadyday import ARGS_DIR

CONFIG_PATH = ARGS_DIR / "consistency.yaml"

# Subject types
SUBJECT_TYPES = ("routine", "habit")

# Qualifying thresholds
DEFAULT_THRESHOLD = 0.70
ROUTINE_THRESHOLD = 0.70
HABIT_THRESHOLD = 1.0

# Stats window in days
DEFAULT_WINDOW_DAYS = 30

# Number of most recent events returned alongside stats
RECENT_EVENTS_LIMIT = 7

DEFAULT_TIMEZONE = "UTC"

__all__ = [
    "CONFIG_PATH",
    "SUBJECT_TYPES",
    "DEFAULT_THRESHOLD",
    "ROUTINE_THRESHOLD",
    "HABIT_THRESHOLD",
    "DEFAULT_WINDOW_DAYS",
    "RECENT_EVENTS_LIMIT",
    "DEFAULT_TIMEZONE",
]

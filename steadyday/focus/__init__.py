"""Focus Sessions - Mood-adaptive pomodoro timing

Philosophy:
    A 25-minute block is a default, not a law. On a foggy, low-energy
    day a shorter block is the one that actually gets started; on a
    sharp day a longer one protects the flow.

Components:
    adaptive.py: Pure mapping from today's mood/energy/focus to minutes
        - Fixed multiplier per level, product applied to the base length
        - Result clamped to a safe range
        - Break length derived from the work block

    pomodoro.py: Session history and stats
        - Record finished work / break sessions
        - Aggregate minutes and counts over a window
        - Resolve today's adaptive session length (falls back to the base
          length when there is no check-in today)

Configuration: args/focus.yaml
    - Base, minimum and maximum session minutes
"""

from steadyday import ARGS_DIR

CONFIG_PATH = ARGS_DIR / "focus.yaml"

# Session lengths in minutes
BASE_DURATION = 25
MIN_DURATION = 15
MAX_DURATION = 45

# Break = 20% of the work block, never under 5 minutes
BREAK_RATIO = 0.2
MIN_BREAK = 5

SESSION_TYPES = ("work", "short_break", "long_break")

# Stats window in days
DEFAULT_STATS_DAYS = 7

__all__ = [
    "CONFIG_PATH",
    "BASE_DURATION",
    "MIN_DURATION",
    "MAX_DURATION",
    "BREAK_RATIO",
    "MIN_BREAK",
    "SESSION_TYPES",
    "DEFAULT_STATS_DAYS",
]

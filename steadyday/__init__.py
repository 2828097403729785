"""SteadyDay - productivity and wellbeing toolkit for ADHD brains

Philosophy:
    Consistency beats intensity. Small daily actions, tracked gently,
    add up to change. Nothing here punishes a missed day.

Packages:
    consistency/: Event log of daily completions + streak calculation
    focus/: Mood-adaptive focus session length and pomodoro history
    mood/: Daily mood / energy / focus check-ins
    personality/: Enneagram quiz classifier and type profiles
    routines/: Routine CRUD and daily executions
    plans/: 30-day transformation plan with daily habits
    tasks/: Task CRUD with subtasks
    chat/: LLM-backed assistant with template fallback
    insights/: Smart suggestions and weekly productivity insights
    api/: FastAPI application exposing all of the above
"""

from pathlib import Path

__version__ = "0.1.0"

# Path constants
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"
ARGS_DIR = PROJECT_ROOT / "args"

__all__ = ["__version__", "PROJECT_ROOT", "DATA_DIR", "ARGS_DIR"]

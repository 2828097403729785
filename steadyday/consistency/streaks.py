"""
Tool: Streak Calculator
Purpose: Derive the current streak and completion rate from a window of events

Pure functions over a snapshot of the event log. Nothing here touches the
database or the clock: the caller passes the events and the reference day.

Rules:
    - A day qualifies when its completion ratio >= threshold
    - The streak counts consecutive qualifying days ending AT the reference
      day. If the reference day itself does not qualify the streak is 0,
      even when yesterday and earlier qualified.
    - The completion rate is the plain mean of every event's ratio in the
      window (qualifying or not), expressed as a percentage.
    - Two events on the same day violate the event log invariant and raise
      DuplicateDayError rather than being counted twice.
    - Events dated after the reference day are ignored.

Usage:
    from steadyday.consistency.streaks import calculate_streak

    result = calculate_streak(events, today=date(2025, 3, 14), threshold=0.7)
    result.current_streak           # 5
    result.completion_rate          # 83.333...
    result.completion_rate_display  # 83
"""

import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List

from . import DEFAULT_THRESHOLD, RECENT_EVENTS_LIMIT
from .events import CompletionEvent


class DuplicateDayError(ValueError):
    """Raised when a snapshot holds more than one event for the same day."""


@dataclass(frozen=True)
class StreakResult:
    current_streak: int
    completion_rate: float
    total_executions: int

    @property
    def completion_rate_display(self) -> int:
        """Completion rate rounded half-up to a whole percentage."""
        return math.floor(self.completion_rate + 0.5)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "current_streak": self.current_streak,
            "completion_rate": self.completion_rate_display,
            "completion_rate_exact": self.completion_rate,
            "total_executions": self.total_executions,
        }


EMPTY_RESULT = StreakResult(current_streak=0, completion_rate=0.0, total_executions=0)


def _check_threshold(threshold: float) -> None:
    if not isinstance(threshold, (int, float)) or not math.isfinite(threshold):
        raise ValueError(f"Threshold must be a finite number, got {threshold!r}")
    if threshold <= 0 or threshold > 1:
        raise ValueError(f"Threshold must be within (0, 1], got {threshold}")


def _check_unique_days(events: List[CompletionEvent]) -> None:
    seen = set()
    for event in events:
        if event.day in seen:
            raise DuplicateDayError(
                f"More than one event for {event.subject_id} on {event.day.isoformat()}"
            )
        seen.add(event.day)


def current_streak_for(
    events: Iterable[CompletionEvent],
    today: date,
    threshold: float = DEFAULT_THRESHOLD,
) -> int:
    """Count consecutive qualifying days ending at `today`."""
    _check_threshold(threshold)
    events = list(events)
    _check_unique_days(events)

    qualifying = sorted(
        (e.day for e in events if e.completion_ratio >= threshold and e.day <= today),
        reverse=True,
    )

    streak = 0
    cursor = today
    for day in qualifying:
        if day != cursor:
            break
        streak += 1
        cursor -= timedelta(days=1)

    return streak


def completion_rate(events: Iterable[CompletionEvent]) -> float:
    """Unweighted mean completion ratio as a percentage (0 when empty)."""
    ratios = [e.completion_ratio for e in events]
    if not ratios:
        return 0.0
    return sum(ratios) / len(ratios) * 100


def calculate_streak(
    events: Iterable[CompletionEvent],
    today: date,
    threshold: float = DEFAULT_THRESHOLD,
) -> StreakResult:
    """
    Compute streak, completion rate and execution count for one subject.

    Args:
        events: Events of a single subject in the window, any order
        today: Reference day, already normalized to the reference timezone
        threshold: Minimum ratio for a day to qualify

    Returns:
        StreakResult (all zeros for an empty window)
    """
    events = list(events)
    if not events:
        _check_threshold(threshold)
        return EMPTY_RESULT

    return StreakResult(
        current_streak=current_streak_for(events, today, threshold),
        completion_rate=completion_rate(events),
        total_executions=len(events),
    )


def summarize_window(
    events: Iterable[CompletionEvent],
    today: date,
    threshold: float = DEFAULT_THRESHOLD,
    recent_limit: int = RECENT_EVENTS_LIMIT,
) -> Dict[str, Any]:
    """StreakResult plus the most recent events, ready for JSON output."""
    events = sorted(events, key=lambda e: e.day)
    result = calculate_streak(events, today, threshold)
    summary = result.to_dict()
    summary["threshold"] = threshold
    summary["recent"] = [e.to_dict() for e in events[-recent_limit:]] if recent_limit else []
    return summary

"""Mood Tracking - Daily mood, energy and focus check-ins

Philosophy:
    Moods are weather, not verdicts. A low day is information
    about how to plan the day, never a mark against the user.

Components:
    tracker.py: One check-in per user per day (re-submitting replaces it)

Scales:
    Each field is a closed 5-point ordinal scale. The enums below are the
    only accepted values; anything else is rejected at the boundary.

    mood:   very_low, low, neutral, good, excellent
    energy: very_low, low, medium, high, very_high
    focus:  very_low, low, medium, high, very_high
"""

from enum import Enum


class MoodLevel(str, Enum):
    VERY_LOW = "very_low"
    LOW = "low"
    NEUTRAL = "neutral"
    GOOD = "good"
    EXCELLENT = "excellent"


class EnergyLevel(str, Enum):
    VERY_LOW = "very_low"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very_high"


class FocusLevel(str, Enum):
    VERY_LOW = "very_low"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very_high"


# Numeric value of each mood, used for averages
MOOD_SCORES = {
    MoodLevel.VERY_LOW: 1,
    MoodLevel.LOW: 2,
    MoodLevel.NEUTRAL: 3,
    MoodLevel.GOOD: 4,
    MoodLevel.EXCELLENT: 5,
}

# Average reported when there are no entries to average
NEUTRAL_MOOD_SCORE = 3

if set(MOOD_SCORES) != set(MoodLevel):
    raise RuntimeError("MOOD_SCORES must cover every MoodLevel")

__all__ = [
    "MoodLevel",
    "EnergyLevel",
    "FocusLevel",
    "MOOD_SCORES",
    "NEUTRAL_MOOD_SCORE",
]

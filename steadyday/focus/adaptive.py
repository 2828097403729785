"""
Tool: Adaptive Duration Mapper
Purpose: Turn today's mood, energy and focus into a focus-session length

    minutes = round(base * mood_multiplier * energy_multiplier * focus_multiplier)
    clamped to [MIN_DURATION, MAX_DURATION]

Examples (base 25):
    excellent / very_high / very_high -> 63.7 -> 45 (ceiling)
    neutral / medium / medium         -> 25
    very_low / very_low / very_low    -> 6.3  -> 15 (floor)

All three fields are required. When the user has not checked in today the
caller skips this mapper and uses the base length (see session_length_for).
"""

import math
from dataclasses import dataclass
from typing import Optional, Union

from steadyday.mood import EnergyLevel, FocusLevel, MoodLevel

from . import BASE_DURATION, BREAK_RATIO, MAX_DURATION, MIN_BREAK, MIN_DURATION


MOOD_MULTIPLIERS = {
    MoodLevel.VERY_LOW: 0.6,
    MoodLevel.LOW: 0.8,
    MoodLevel.NEUTRAL: 1.0,
    MoodLevel.GOOD: 1.2,
    MoodLevel.EXCELLENT: 1.4,
}

ENERGY_MULTIPLIERS = {
    EnergyLevel.VERY_LOW: 0.7,
    EnergyLevel.LOW: 0.85,
    EnergyLevel.MEDIUM: 1.0,
    EnergyLevel.HIGH: 1.15,
    EnergyLevel.VERY_HIGH: 1.3,
}

FOCUS_MULTIPLIERS = {
    FocusLevel.VERY_LOW: 0.6,
    FocusLevel.LOW: 0.8,
    FocusLevel.MEDIUM: 1.0,
    FocusLevel.HIGH: 1.2,
    FocusLevel.VERY_HIGH: 1.4,
}


def _validate_tables() -> None:
    for enum_cls, table in (
        (MoodLevel, MOOD_MULTIPLIERS),
        (EnergyLevel, ENERGY_MULTIPLIERS),
        (FocusLevel, FOCUS_MULTIPLIERS),
    ):
        missing = set(enum_cls) - set(table)
        if missing:
            raise RuntimeError(
                f"{enum_cls.__name__} multiplier table missing: "
                f"{sorted(level.value for level in missing)}"
            )


_validate_tables()


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _parse_level(enum_cls, value, field_name: str):
    if value is None:
        raise ValueError(f"{field_name} is required")
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(level.value for level in enum_cls)
        raise ValueError(f"Invalid {field_name}: {value!r}. Must be one of: {allowed}") from None


@dataclass(frozen=True)
class MoodVector:
    """Today's mood / energy / focus triple."""

    mood: MoodLevel
    energy: EnergyLevel
    focus: FocusLevel

    def __post_init__(self):
        object.__setattr__(self, "mood", _parse_level(MoodLevel, self.mood, "mood"))
        object.__setattr__(self, "energy", _parse_level(EnergyLevel, self.energy, "energy"))
        object.__setattr__(self, "focus", _parse_level(FocusLevel, self.focus, "focus"))

    @classmethod
    def from_values(
        cls,
        mood: Union[MoodLevel, str],
        energy: Union[EnergyLevel, str],
        focus: Union[FocusLevel, str],
    ) -> "MoodVector":
        return cls(mood=mood, energy=energy, focus=focus)

    @property
    def multiplier(self) -> float:
        return (
            MOOD_MULTIPLIERS[self.mood]
            * ENERGY_MULTIPLIERS[self.energy]
            * FOCUS_MULTIPLIERS[self.focus]
        )


def _check_minutes(value, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be a positive finite number, got {value}")


def recommend_duration(
    vector: MoodVector,
    base: float = BASE_DURATION,
    min_minutes: int = MIN_DURATION,
    max_minutes: int = MAX_DURATION,
) -> int:
    """
    Recommended focus-session length in whole minutes.

    Args:
        vector: Today's mood / energy / focus
        base: Unadjusted session length
        min_minutes: Lower clamp (inclusive)
        max_minutes: Upper clamp (inclusive)

    Returns:
        Minutes within [min_minutes, max_minutes]
    """
    if not isinstance(vector, MoodVector):
        raise ValueError("A complete MoodVector is required")
    _check_minutes(base, "Base duration")
    if min_minutes > max_minutes:
        raise ValueError(f"Invalid clamp range [{min_minutes}, {max_minutes}]")

    # Multiply left to right; float results depend on the order
    raw = _round_half_up(
        base
        * MOOD_MULTIPLIERS[vector.mood]
        * ENERGY_MULTIPLIERS[vector.energy]
        * FOCUS_MULTIPLIERS[vector.focus]
    )
    return max(min_minutes, min(max_minutes, raw))


def break_duration(work_minutes: float) -> int:
    """Break that follows a work block: 20% of it, at least 5 minutes."""
    _check_minutes(work_minutes, "Work duration")
    return max(MIN_BREAK, _round_half_up(work_minutes * BREAK_RATIO))


def session_length_for(
    vector: Optional[MoodVector],
    base: float = BASE_DURATION,
    min_minutes: int = MIN_DURATION,
    max_minutes: int = MAX_DURATION,
) -> int:
    """Adaptive length when a check-in exists, otherwise the base length unchanged."""
    if vector is None:
        _check_minutes(base, "Base duration")
        return _round_half_up(base)
    return recommend_duration(vector, base, min_minutes, max_minutes)

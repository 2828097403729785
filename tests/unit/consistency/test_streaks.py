"""Tests for steadyday/consistency/streaks.py

Pure streak math over a snapshot of events:
- The streak is anchored to the reference day
- Any gap (or a non-qualifying day) ends the run
- Completion rate is the unweighted mean of every ratio in the window
"""

from datetime import date, timedelta

import pytest

from steadyday.consistency.events import CompletionEvent
from steadyday.consistency.streaks import (
    DuplicateDayError,
    StreakResult,
    calculate_streak,
    completion_rate,
    current_streak_for,
    summarize_window,
)


TODAY = date(2025, 3, 14)


def _events(*pairs, subject="r1"):
    """Build events from (days_ago, ratio) pairs."""
    return [
        CompletionEvent(
            subject_id=subject,
            owner_id="u1",
            day=TODAY - timedelta(days=days_ago),
            completion_ratio=ratio,
        )
        for days_ago, ratio in pairs
    ]


# ─────────────────────────────────────────────────────────────────────────────
# Current Streak Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestCurrentStreak:
    """Tests for the consecutive-day count."""

    def test_unbroken_run_counts_every_day(self):
        """Five qualifying days ending today is a streak of 5."""
        events = _events((0, 1.0), (1, 1.0), (2, 0.8), (3, 0.9), (4, 0.7))

        assert calculate_streak(events, TODAY, 0.7).current_streak == 5

    def test_zero_when_today_missing(self):
        """Yesterday and before qualifying does not count without today."""
        events = _events((1, 1.0), (2, 1.0), (3, 1.0))

        assert calculate_streak(events, TODAY, 0.7).current_streak == 0

    def test_gap_ends_the_run(self):
        """Only the run touching today counts."""
        events = _events((0, 1.0), (1, 1.0), (3, 1.0), (4, 1.0))

        assert current_streak_for(events, TODAY, 0.7) == 2

    def test_non_qualifying_day_ends_the_run(self):
        """A day below the threshold breaks the streak like a gap."""
        events = _events((0, 1.0), (1, 0.5), (2, 1.0))

        assert current_streak_for(events, TODAY, 0.7) == 1

    def test_threshold_is_inclusive(self):
        """A ratio exactly at the threshold qualifies."""
        assert current_streak_for(_events((0, 0.7)), TODAY, 0.7) == 1

    def test_habit_threshold_requires_full_completion(self):
        """At threshold 1.0 partial days don't qualify."""
        events = _events((0, 1.0), (1, 0.99))

        assert current_streak_for(events, TODAY, 1.0) == 1

    def test_order_of_events_does_not_matter(self):
        """Unsorted input gives the same streak."""
        events = _events((2, 1.0), (0, 1.0), (1, 1.0))

        assert current_streak_for(events, TODAY, 0.7) == 3

    def test_future_events_are_ignored(self):
        """An event dated tomorrow neither counts nor breaks the run."""
        events = _events((-1, 1.0), (0, 1.0), (1, 1.0))

        assert current_streak_for(events, TODAY, 0.7) == 2

    def test_duplicate_days_raise(self):
        """Two events on one day violate the log invariant."""
        events = _events((0, 1.0), (0, 0.5))

        with pytest.raises(DuplicateDayError):
            calculate_streak(events, TODAY, 0.7)

    @pytest.mark.parametrize("threshold", [0, -0.1, 1.1, float("nan")])
    def test_rejects_invalid_threshold(self, threshold):
        """Threshold must be within (0, 1]."""
        with pytest.raises(ValueError):
            calculate_streak([], TODAY, threshold)


# ─────────────────────────────────────────────────────────────────────────────
# Completion Rate Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestCompletionRate:
    """Tests for the window mean."""

    def test_unweighted_mean(self):
        """Ratios 1.0, 0.5 and 0.0 average to 50%."""
        result = calculate_streak(_events((0, 1.0), (1, 0.5), (2, 0.0)), TODAY, 0.7)

        assert result.completion_rate == pytest.approx(50.0)
        assert result.total_executions == 3

    def test_non_qualifying_days_still_count(self):
        """Every event contributes to the mean, not just qualifying ones."""
        assert completion_rate(_events((0, 1.0), (1, 0.2))) == pytest.approx(60.0)

    def test_empty_window_is_all_zero(self):
        """No events means no streak and no rate, not an error."""
        result = calculate_streak([], TODAY, 0.7)

        assert result == StreakResult(current_streak=0, completion_rate=0.0, total_executions=0)

    def test_display_rounds_half_up(self):
        """Display value rounds .5 up, like the UI always has."""
        assert StreakResult(0, 62.5, 2).completion_rate_display == 63
        assert StreakResult(0, 83.333, 3).completion_rate_display == 83
        assert StreakResult(0, 66.666, 3).completion_rate_display == 67


# ─────────────────────────────────────────────────────────────────────────────
# Summary Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestSummarizeWindow:
    """Tests for the JSON-ready summary."""

    def test_includes_recent_events_oldest_first(self):
        """Only the most recent events are listed, in day order."""
        events = _events(*[(days_ago, 1.0) for days_ago in range(10)])

        summary = summarize_window(events, TODAY, 0.7, recent_limit=7)

        assert summary["current_streak"] == 10
        assert summary["total_executions"] == 10
        assert summary["threshold"] == 0.7
        assert len(summary["recent"]) == 7
        assert summary["recent"][-1]["day"] == TODAY.isoformat()

    def test_rate_is_display_value_with_exact_alongside(self):
        """completion_rate is a whole number, the exact value is kept too."""
        summary = summarize_window(_events((0, 1.0), (1, 1.0), (2, 0.5)), TODAY, 0.7)

        assert summary["completion_rate"] == 83
        assert summary["completion_rate_exact"] == pytest.approx(83.3333, rel=1e-4)

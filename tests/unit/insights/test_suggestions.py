"""Tests for steadyday/insights/suggestions.py

Suggestions react to the user's data and the time of day; insights
summarize the last 7 days. Every test passes `now` explicitly.
"""

from datetime import datetime, timedelta, timezone

import pytest

from steadyday.focus.pomodoro import record_session
from steadyday.insights.suggestions import get_productivity_insights, get_smart_suggestions
from steadyday.mood.tracker import record_mood
from steadyday.personality.profiles import get_advice
from steadyday.personality.results import save_result
from steadyday.plans.manager import create_plan
from steadyday.tasks.manager import create_task, update_task_status


MORNING = datetime(2025, 3, 14, 8, 0, tzinfo=timezone.utc)
AFTERNOON = datetime(2025, 3, 14, 15, 30, tzinfo=timezone.utc)


def _actions(suggestions):
    return [s["action"] for s in suggestions]


# ─────────────────────────────────────────────────────────────────────────────
# Suggestion Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestSmartSuggestions:
    """Tests for rule-based suggestions."""

    def test_new_user_in_afternoon_gets_nothing(self, steadyday_db, mock_user_id):
        assert get_smart_suggestions(mock_user_id, now=AFTERNOON) == []

    def test_morning_routine_in_the_morning(self, steadyday_db, mock_user_id):
        assert _actions(get_smart_suggestions(mock_user_id, now=MORNING)) == ["morning_routine"]

    @pytest.mark.parametrize("hour,expected", [(5, False), (6, True), (10, True), (11, False)])
    def test_morning_window_edges(self, steadyday_db, mock_user_id, hour, expected):
        now = MORNING.replace(hour=hour, minute=59)

        assert ("morning_routine" in _actions(get_smart_suggestions(mock_user_id, now=now))) is expected

    def test_pomodoro_after_more_than_three_urgent_tasks(self, steadyday_db, mock_user_id):
        for i in range(3):
            create_task(mock_user_id, f"urgent {i}", priority="urgent")
        assert "pomodoro" not in _actions(get_smart_suggestions(mock_user_id, now=AFTERNOON))

        create_task(mock_user_id, "urgent 3", priority="urgent")
        assert "pomodoro" in _actions(get_smart_suggestions(mock_user_id, now=AFTERNOON))

    def test_completed_urgent_tasks_do_not_count(self, steadyday_db, mock_user_id):
        for i in range(4):
            task_id = create_task(mock_user_id, f"urgent {i}", priority="urgent")["data"]["task_id"]
        update_task_status(mock_user_id, task_id, "completed")

        assert "pomodoro" not in _actions(get_smart_suggestions(mock_user_id, now=AFTERNOON))

    def test_mood_boost_after_low_moods(self, steadyday_db, mock_user_id, reference_day):
        for offset, mood in enumerate(["very_low", "low", "neutral"]):
            record_mood(mock_user_id, mood, "low", "low", today=reference_day - timedelta(days=offset))

        # (1 + 2 + 3) / 3 = 2.0
        assert "mood_boost" in _actions(get_smart_suggestions(mock_user_id, now=AFTERNOON))

    def test_no_mood_boost_at_threshold(self, steadyday_db, mock_user_id, reference_day):
        for offset, mood in enumerate(["low", "neutral"]):
            record_mood(mock_user_id, mood, "low", "low", today=reference_day - timedelta(days=offset))

        # (2 + 3) / 2 = 2.5 is not below 2.5
        assert "mood_boost" not in _actions(get_smart_suggestions(mock_user_id, now=AFTERNOON))

    def test_enneagram_tip(self, steadyday_db, mock_user_id):
        save_result(mock_user_id, 7)

        suggestions = get_smart_suggestions(mock_user_id, now=AFTERNOON)

        assert suggestions[0]["title"] == "Tip for Type 7"
        assert suggestions[0]["description"] == get_advice(7)

    def test_everything_in_fixed_order(self, steadyday_db, mock_user_id, reference_day):
        for i in range(4):
            create_task(mock_user_id, f"urgent {i}", priority="urgent")
        record_mood(mock_user_id, "very_low", "low", "low", today=reference_day)
        save_result(mock_user_id, 2)
        create_plan(mock_user_id)

        actions = _actions(get_smart_suggestions(mock_user_id, now=MORNING))

        assert actions == [
            "pomodoro",
            "mood_boost",
            "enneagram_tip",
            "transformation_plan",
            "morning_routine",
        ]

    def test_naive_time_is_local(self, steadyday_db, mock_user_id):
        """The default reference timezone is UTC, so naive 08:00 is morning."""
        now = datetime(2025, 3, 14, 8, 0)

        assert "morning_routine" in _actions(get_smart_suggestions(mock_user_id, now=now))


# ─────────────────────────────────────────────────────────────────────────────
# Productivity Insight Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestProductivityInsights:
    """Tests for the 7-day summary."""

    def test_empty_history(self, steadyday_db, mock_user_id):
        insights = get_productivity_insights(mock_user_id, now=AFTERNOON)

        assert insights == {
            "completion_rate": 0,
            "avg_mood": 0.0,
            "total_focus_time": 0,
            "completed_tasks": 0,
            "trend": "down",
        }

    def test_summarizes_last_week(self, steadyday_db, mock_user_id, reference_day):
        recent = [
            create_task(mock_user_id, f"task {i}", now=AFTERNOON - timedelta(days=i))["data"]["task_id"]
            for i in range(3)
        ]
        create_task(mock_user_id, "old", now=AFTERNOON - timedelta(days=10))
        update_task_status(mock_user_id, recent[0], "completed")
        update_task_status(mock_user_id, recent[1], "completed")

        record_mood(mock_user_id, "good", "high", "high", today=reference_day)
        record_mood(mock_user_id, "neutral", "medium", "medium", today=reference_day - timedelta(days=1))
        record_mood(mock_user_id, "very_low", "low", "low", today=reference_day - timedelta(days=20))

        record_session(mock_user_id, 25, "work", now=AFTERNOON - timedelta(hours=3))
        record_session(mock_user_id, 5, "short_break", now=AFTERNOON - timedelta(hours=2))
        record_session(mock_user_id, 45, "work", now=AFTERNOON - timedelta(days=2))

        insights = get_productivity_insights(mock_user_id, now=AFTERNOON)

        # 2 of 3 recent tasks = 66.7%
        assert insights["completion_rate"] == 67
        assert insights["completed_tasks"] == 2
        assert insights["trend"] == "stable"
        assert insights["avg_mood"] == 3.5
        assert insights["total_focus_time"] == 70

    @pytest.mark.parametrize("completed,trend", [(4, "up"), (3, "stable"), (2, "down")])
    def test_trend(self, steadyday_db, mock_user_id, completed, trend):
        """Out of 5 tasks: 80% is up, 60% is stable, 40% is not above 40 so down."""
        ids = [create_task(mock_user_id, f"t{i}", now=AFTERNOON)["data"]["task_id"] for i in range(5)]
        for task_id in ids[:completed]:
            update_task_status(mock_user_id, task_id, "completed")

        assert get_productivity_insights(mock_user_id, now=AFTERNOON)["trend"] == trend

    def test_tasks_created_with_offset_clock_are_counted(self, steadyday_db, mock_user_id):
        """Tasks stamped with a non-UTC clock near the window edge still count."""
        eastern = timezone(timedelta(hours=-5))
        created = (AFTERNOON - timedelta(days=6, hours=23)).astimezone(eastern)
        task_id = create_task(mock_user_id, "edge", now=created)["data"]["task_id"]
        update_task_status(mock_user_id, task_id, "completed")

        insights = get_productivity_insights(mock_user_id, now=AFTERNOON)

        assert insights["completed_tasks"] == 1
        assert insights["completion_rate"] == 100

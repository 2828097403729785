"""Tests for steadyday/routines/manager.py

Routines are checklists run once a day:
- ratio = completed items / total items
- One execution per routine per day (later runs replace earlier ones)
- Stats use the 70% threshold for the streak
- Deleting a routine deletes its history
"""

from datetime import timedelta

import pytest

from steadyday.consistency.events import get_events
from steadyday.routines.manager import (
    create_routine,
    delete_routine,
    execute_routine,
    get_routine,
    get_routine_stats,
    list_routines,
    update_routine,
)


# ─────────────────────────────────────────────────────────────────────────────
# Setup
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def morning_routine(steadyday_db, mock_user_id, sample_routine_items):
    """A three-item morning routine."""
    result = create_routine(mock_user_id, "Wake up", "morning", tasks=sample_routine_items)
    return result["data"]["routine"]


def _item_ids(routine):
    return [item["id"] for item in routine["tasks"]]


# ─────────────────────────────────────────────────────────────────────────────
# CRUD Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestCreateRoutine:
    """Tests for routine creation."""

    def test_creates_with_defaults(self, morning_routine):
        assert morning_routine["is_active"] is True
        assert morning_routine["color"] == "#3B82F6"
        assert morning_routine["time_of_day"] == "morning"
        assert len(morning_routine["tasks"]) == 3

    def test_items_get_ids_and_keep_order(self, morning_routine):
        titles = [item["title"] for item in morning_routine["tasks"]]

        assert titles == ["Drink a glass of water", "Make the bed", "Write the top 3 tasks"]
        assert all(item["id"] for item in morning_routine["tasks"])
        assert len(set(_item_ids(morning_routine))) == 3

    def test_rejects_invalid_time_of_day(self, steadyday_db, mock_user_id):
        result = create_routine(mock_user_id, "Brunch", "midday")

        assert result["success"] is False
        assert "time_of_day" in result["error"]

    def test_rejects_blank_name(self, steadyday_db, mock_user_id):
        assert create_routine(mock_user_id, "  ", "evening")["success"] is False

    def test_rejects_untitled_item(self, steadyday_db, mock_user_id):
        result = create_routine(mock_user_id, "Night", "night", tasks=[{"title": "", "order": 0}])

        assert result["success"] is False


class TestListAndGet:
    """Tests for reading routines."""

    def test_filters_by_time_of_day(self, steadyday_db, mock_user_id):
        create_routine(mock_user_id, "Wake up", "morning")
        create_routine(mock_user_id, "Wind down", "night")

        result = list_routines(mock_user_id, time_of_day="night")

        assert result["data"]["total"] == 1
        assert result["data"]["routines"][0]["name"] == "Wind down"
        assert list_routines(mock_user_id)["data"]["total"] == 2

    def test_other_users_routine_is_not_found(self, morning_routine, other_user_id):
        result = get_routine(other_user_id, morning_routine["id"])

        assert result["success"] is False
        assert "not found" in result["error"]


class TestUpdateRoutine:
    """Tests for partial updates."""

    def test_updates_only_given_fields(self, morning_routine, mock_user_id):
        result = update_routine(mock_user_id, morning_routine["id"], name="Rise", is_active=False)

        routine = result["data"]
        assert routine["name"] == "Rise"
        assert routine["is_active"] is False
        assert routine["color"] == morning_routine["color"]
        assert len(routine["tasks"]) == 3

    def test_task_items_keep_existing_ids(self, morning_routine, mock_user_id):
        """Existing items keep their id, new items get a fresh one."""
        kept = morning_routine["tasks"][0]
        tasks = [
            {"id": kept["id"], "title": kept["title"], "order": 0},
            {"title": "Stretch", "order": 1},
        ]

        routine = update_routine(mock_user_id, morning_routine["id"], tasks=tasks)["data"]

        assert routine["tasks"][0]["id"] == kept["id"]
        assert routine["tasks"][1]["id"] not in _item_ids(morning_routine)

    def test_not_found(self, steadyday_db, mock_user_id):
        assert update_routine(mock_user_id, "missing", name="x")["success"] is False


# ─────────────────────────────────────────────────────────────────────────────
# Execution Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestExecuteRoutine:
    """Tests for daily runs."""

    def test_ratio_is_completed_over_total(self, morning_routine, mock_user_id, reference_day):
        ids = _item_ids(morning_routine)

        result = execute_routine(mock_user_id, morning_routine["id"], ids[:2], today=reference_day)

        assert result["success"] is True
        event = result["data"]["event"]
        assert event["completion_ratio"] == pytest.approx(2 / 3)
        assert event["subject_type"] == "routine"
        assert event["details"]["total_tasks"] == 3

    def test_unknown_and_repeated_ids_not_counted(self, morning_routine, mock_user_id, reference_day):
        first = _item_ids(morning_routine)[0]

        result = execute_routine(
            mock_user_id, morning_routine["id"], [first, first, "bogus"], today=reference_day
        )

        assert result["data"]["event"]["completion_ratio"] == pytest.approx(1 / 3)

    def test_empty_routine_ratio_is_zero(self, steadyday_db, mock_user_id, reference_day):
        routine = create_routine(mock_user_id, "Empty", "afternoon")["data"]["routine"]

        result = execute_routine(mock_user_id, routine["id"], [], today=reference_day)

        assert result["data"]["event"]["completion_ratio"] == 0.0

    def test_rerun_same_day_replaces(self, morning_routine, mock_user_id, reference_day):
        ids = _item_ids(morning_routine)
        execute_routine(mock_user_id, morning_routine["id"], ids[:1], today=reference_day)
        execute_routine(mock_user_id, morning_routine["id"], ids, today=reference_day)

        events = get_events(mock_user_id, morning_routine["id"], today=reference_day)

        assert len(events) == 1
        assert events[0].completion_ratio == 1.0

    def test_other_user_cannot_execute(self, morning_routine, other_user_id, reference_day):
        result = execute_routine(other_user_id, morning_routine["id"], [], today=reference_day)

        assert result["success"] is False


# ─────────────────────────────────────────────────────────────────────────────
# Stats Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestRoutineStats:
    """Tests for streak and average completion."""

    def test_streak_and_average(self, morning_routine, mock_user_id, reference_day):
        """Three full days ending today, then a partial day before them."""
        ids = _item_ids(morning_routine)
        for offset in range(3):
            execute_routine(mock_user_id, morning_routine["id"], ids,
                            today=reference_day - timedelta(days=offset))
        execute_routine(mock_user_id, morning_routine["id"], ids[:1],
                        today=reference_day - timedelta(days=3))

        stats = get_routine_stats(mock_user_id, morning_routine["id"], today=reference_day)["data"]

        assert stats["streak"] == 3
        assert stats["total_executions"] == 4
        # (1 + 1 + 1 + 1/3) / 4 = 83.33%
        assert stats["average_completion"] == 83
        assert stats["threshold"] == 0.7
        assert len(stats["recent_executions"]) == 4

    def test_partial_today_breaks_streak(self, morning_routine, mock_user_id, reference_day):
        """Today at 2/3 (< 70%) means no current streak."""
        ids = _item_ids(morning_routine)
        execute_routine(mock_user_id, morning_routine["id"], ids,
                        today=reference_day - timedelta(days=1))
        execute_routine(mock_user_id, morning_routine["id"], ids[:2], today=reference_day)

        stats = get_routine_stats(mock_user_id, morning_routine["id"], today=reference_day)["data"]

        assert stats["streak"] == 0

    def test_no_executions(self, morning_routine, mock_user_id, reference_day):
        stats = get_routine_stats(mock_user_id, morning_routine["id"], today=reference_day)["data"]

        assert stats["streak"] == 0
        assert stats["average_completion"] == 0
        assert stats["recent_executions"] == []


class TestDeleteRoutine:
    """Tests for deletion."""

    def test_deletes_history_too(self, morning_routine, mock_user_id, reference_day):
        execute_routine(mock_user_id, morning_routine["id"], _item_ids(morning_routine),
                        today=reference_day)

        result = delete_routine(mock_user_id, morning_routine["id"])

        assert result["success"] is True
        assert result["data"]["events_deleted"] == 1
        assert get_events(mock_user_id, morning_routine["id"], today=reference_day) == []
        assert get_routine(mock_user_id, morning_routine["id"])["success"] is False

    def test_other_user_cannot_delete(self, morning_routine, other_user_id, mock_user_id):
        assert delete_routine(other_user_id, morning_routine["id"])["success"] is False
        assert get_routine(mock_user_id, morning_routine["id"])["success"] is True

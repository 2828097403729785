"""Tests for steadyday/tasks/manager.py

The task manager provides CRUD operations for tasks with subtasks.
Key functionality:
- Create tasks with priority and optional details
- Track status progression; completing stamps completed_at
- Add and toggle embedded subtasks
- Keep every user's tasks private
"""

from datetime import datetime, timedelta, timezone

import pytest

from steadyday.tasks.manager import (
    add_subtask,
    create_task,
    delete_task,
    get_task,
    list_tasks,
    toggle_subtask,
    update_task_status,
)


NOW = datetime(2025, 3, 14, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def task(steadyday_db, sample_task):
    """A stored high priority task."""
    data = dict(sample_task)
    user_id = data.pop("user_id")
    return create_task(user_id, now=NOW, **data)["data"]["task"]


# ─────────────────────────────────────────────────────────────────────────────
# Task Creation Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestCreateTask:
    """Tests for task creation."""

    def test_creates_basic_task(self, steadyday_db, mock_user_id):
        """Should create a todo task with medium priority by default."""
        result = create_task(mock_user_id, "do taxes")

        assert result["success"] is True
        assert "task_id" in result["data"]
        task = result["data"]["task"]
        assert task["status"] == "todo"
        assert task["priority"] == "medium"
        assert task["subtasks"] == []
        assert task["completed_at"] is None

    def test_creates_task_with_all_fields(self, task, sample_task):
        """Should store every optional field."""
        assert task["title"] == sample_task["title"]
        assert task["description"] == sample_task["description"]
        assert task["estimated_minutes"] == 120
        assert task["category"] == "admin"

    def test_generates_unique_id(self, steadyday_db, mock_user_id):
        result1 = create_task(mock_user_id, "task 1")
        result2 = create_task(mock_user_id, "task 2")

        assert result1["data"]["task_id"] != result2["data"]["task_id"]

    def test_created_at_is_stored_in_utc(self, steadyday_db, mock_user_id):
        """Offset-aware creation times are normalized to UTC."""
        eastern = timezone(timedelta(hours=-5))

        task = create_task(mock_user_id, "call bank", now=NOW.astimezone(eastern))["data"]["task"]

        assert task["created_at"] == NOW.isoformat()

    def test_rejects_blank_title(self, steadyday_db, mock_user_id):
        assert create_task(mock_user_id, "   ")["success"] is False

    def test_rejects_invalid_priority(self, steadyday_db, mock_user_id):
        result = create_task(mock_user_id, "task", priority="critical")

        assert result["success"] is False
        assert "Invalid priority" in result["error"]


# ─────────────────────────────────────────────────────────────────────────────
# Query Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestListTasks:
    """Tests for listing a user's tasks."""

    def test_newest_first(self, steadyday_db, mock_user_id):
        create_task(mock_user_id, "older", now=NOW - timedelta(hours=1))
        create_task(mock_user_id, "newer", now=NOW)

        titles = [t["title"] for t in list_tasks(mock_user_id)["data"]["tasks"]]

        assert titles == ["newer", "older"]

    def test_filters_by_status(self, steadyday_db, mock_user_id):
        first = create_task(mock_user_id, "one")["data"]["task_id"]
        create_task(mock_user_id, "two")
        update_task_status(mock_user_id, first, "completed")

        result = list_tasks(mock_user_id, status="completed")

        assert result["data"]["total"] == 1
        assert result["data"]["tasks"][0]["id"] == first

    def test_rejects_invalid_status_filter(self, steadyday_db, mock_user_id):
        assert list_tasks(mock_user_id, status="done")["success"] is False

    def test_only_own_tasks(self, task, other_user_id):
        assert list_tasks(other_user_id)["data"]["total"] == 0


class TestGetTask:
    """Tests for fetching one task."""

    def test_gets_own_task(self, task, mock_user_id):
        assert get_task(mock_user_id, task["id"])["data"]["title"] == "File taxes"

    def test_other_users_task_is_not_found(self, task, other_user_id):
        result = get_task(other_user_id, task["id"])

        assert result["success"] is False
        assert "not found" in result["error"]


# ─────────────────────────────────────────────────────────────────────────────
# Status Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestUpdateTaskStatus:
    """Tests for status progression."""

    def test_in_progress_has_no_completion_time(self, task, mock_user_id):
        result = update_task_status(mock_user_id, task["id"], "in_progress")

        assert result["data"]["status"] == "in_progress"
        assert result["data"]["completed_at"] is None

    def test_completing_stamps_time_and_minutes(self, task, mock_user_id):
        done_at = NOW + timedelta(hours=2)

        result = update_task_status(mock_user_id, task["id"], "completed",
                                    actual_minutes=95, now=done_at)

        assert result["data"]["completed_at"] == done_at.isoformat()
        assert result["data"]["actual_minutes"] == 95

    def test_rejects_invalid_status(self, task, mock_user_id):
        assert update_task_status(mock_user_id, task["id"], "blocked")["success"] is False

    def test_other_user_cannot_update(self, task, other_user_id, mock_user_id):
        assert update_task_status(other_user_id, task["id"], "completed")["success"] is False
        assert get_task(mock_user_id, task["id"])["data"]["status"] == "todo"


# ─────────────────────────────────────────────────────────────────────────────
# Subtask Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestSubtasks:
    """Tests for embedded subtasks."""

    def test_add_subtask(self, task, mock_user_id):
        result = add_subtask(mock_user_id, task["id"], "Gather receipts")

        subtask = result["data"]
        assert subtask["title"] == "Gather receipts"
        assert subtask["completed"] is False
        assert get_task(mock_user_id, task["id"])["data"]["subtasks"] == [subtask]

    def test_toggle_twice_restores(self, task, mock_user_id):
        subtask_id = add_subtask(mock_user_id, task["id"], "Sign form")["data"]["id"]

        assert toggle_subtask(mock_user_id, task["id"], subtask_id)["data"]["completed"] is True
        assert toggle_subtask(mock_user_id, task["id"], subtask_id)["data"]["completed"] is False

    def test_toggle_only_touches_one(self, task, mock_user_id):
        first = add_subtask(mock_user_id, task["id"], "One")["data"]["id"]
        add_subtask(mock_user_id, task["id"], "Two")

        toggle_subtask(mock_user_id, task["id"], first)

        subtasks = get_task(mock_user_id, task["id"])["data"]["subtasks"]
        assert [s["completed"] for s in subtasks] == [True, False]

    def test_unknown_subtask(self, task, mock_user_id):
        result = toggle_subtask(mock_user_id, task["id"], "nope")

        assert "Subtask not found" in result["error"]

    def test_blank_subtask_title(self, task, mock_user_id):
        assert add_subtask(mock_user_id, task["id"], "")["success"] is False

    def test_other_user_cannot_add(self, task, other_user_id):
        assert add_subtask(other_user_id, task["id"], "Sneaky")["success"] is False


# ─────────────────────────────────────────────────────────────────────────────
# Deletion Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestDeleteTask:
    """Tests for deletion."""

    def test_deletes_task(self, task, mock_user_id):
        result = delete_task(mock_user_id, task["id"])

        assert result["success"] is True
        assert get_task(mock_user_id, task["id"])["success"] is False

    def test_missing_task(self, steadyday_db, mock_user_id):
        assert delete_task(mock_user_id, "missing")["success"] is False

    def test_other_user_cannot_delete(self, task, other_user_id, mock_user_id):
        assert delete_task(other_user_id, task["id"])["success"] is False
        assert get_task(mock_user_id, task["id"])["success"] is True

"""
Tool: Task Manager
Purpose: CRUD operations for tasks with embedded subtasks

Every operation is scoped to the owning user: a task that belongs to
someone else behaves exactly like a task that does not exist.

Usage:
    python -m steadyday.tasks.manager --action create --user alice --title "Pay rent" --priority high
    python -m steadyday.tasks.manager --action list --user alice --status todo
    python -m steadyday.tasks.manager --action status --user alice --task-id abc123 --status completed
    python -m steadyday.tasks.manager --action add-subtask --user alice --task-id abc123 --title "Find IBAN"
    python -m steadyday.tasks.manager --action toggle-subtask --user alice --task-id abc123 --subtask-id def456
    python -m steadyday.tasks.manager --action delete --user alice --task-id abc123

Dependencies:
    - sqlite3 (stdlib)
    - uuid (stdlib)

Output:
    JSON result with success status and data
"""

import argparse
import json
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from steadyday import database

from . import TASK_PRIORITIES, TASK_STATUSES


def _now_iso(now: Optional[datetime] = None) -> str:
    return (now or datetime.now(timezone.utc)).astimezone(timezone.utc).isoformat()


def _fetch_owned(cursor, user_id: str, task_id: str) -> Optional[Dict[str, Any]]:
    cursor.execute("SELECT * FROM tasks WHERE id = ? AND user_id = ?", (task_id, user_id))
    return database.row_to_dict(cursor.fetchone())


def create_task(
    user_id: str,
    title: str,
    priority: str = "medium",
    description: Optional[str] = None,
    estimated_minutes: Optional[int] = None,
    due_date: Optional[str] = None,
    category: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Create a new task in the 'todo' state.

    Args:
        user_id: User who owns the task
        title: What to do
        priority: low, medium, high or urgent
        description: Detailed description (optional)
        estimated_minutes: Estimated time to complete
        due_date: ISO date/datetime the task is due
        category: Free-form grouping label

    Returns:
        dict with success status and task data
    """
    if not title or not title.strip():
        return {"success": False, "error": "Task title is required"}

    if priority not in TASK_PRIORITIES:
        return {"success": False, "error": f"Invalid priority. Must be one of: {TASK_PRIORITIES}"}

    task_id = database.generate_id()

    conn = database.get_connection()
    cursor = conn.cursor()

    cursor.execute(
        """
        INSERT INTO tasks (id, user_id, title, description, priority, status,
                           estimated_minutes, due_date, category, subtasks, created_at)
        VALUES (?, ?, ?, ?, ?, 'todo', ?, ?, ?, '[]', ?)
        """,
        (
            task_id,
            user_id,
            title.strip(),
            description,
            priority,
            estimated_minutes,
            due_date,
            category,
            _now_iso(now),
        ),
    )

    conn.commit()

    # Fetch the created task
    cursor.execute("SELECT * FROM tasks WHERE id = ?", (task_id,))
    task = database.row_to_dict(cursor.fetchone())

    conn.close()

    return {
        "success": True,
        "data": {"task_id": task_id, "task": task},
        "message": f"Task created with ID {task_id}",
    }


def get_task(user_id: str, task_id: str) -> Dict[str, Any]:
    """Get one of the user's tasks by ID."""
    conn = database.get_connection()
    cursor = conn.cursor()
    task = _fetch_owned(cursor, user_id, task_id)
    conn.close()

    if not task:
        return {"success": False, "error": f"Task not found: {task_id}"}

    return {"success": True, "data": task}


def list_tasks(user_id: str, status: Optional[str] = None) -> Dict[str, Any]:
    """
    List a user's tasks, newest first.

    Args:
        user_id: User whose tasks to list
        status: Filter by status

    Returns:
        dict with task list and total
    """
    if status and status not in TASK_STATUSES:
        return {"success": False, "error": f"Invalid status. Must be one of: {TASK_STATUSES}"}

    conditions = ["user_id = ?"]
    params: List[Any] = [user_id]

    if status:
        conditions.append("status = ?")
        params.append(status)

    where_clause = " AND ".join(conditions)

    conn = database.get_connection()
    cursor = conn.cursor()
    cursor.execute(
        f"SELECT * FROM tasks WHERE {where_clause} ORDER BY created_at DESC, rowid DESC",
        params,
    )
    tasks = [database.row_to_dict(row) for row in cursor.fetchall()]
    conn.close()

    return {"success": True, "data": {"tasks": tasks, "total": len(tasks)}}


def update_task_status(
    user_id: str,
    task_id: str,
    status: str,
    actual_minutes: Optional[int] = None,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Move a task to a new status. Completing stamps completed_at.

    Args:
        user_id: Task owner
        task_id: Task to update
        status: todo, in_progress or completed
        actual_minutes: Time actually spent (optional)

    Returns:
        dict with updated task
    """
    if status not in TASK_STATUSES:
        return {"success": False, "error": f"Invalid status. Must be one of: {TASK_STATUSES}"}

    conn = database.get_connection()
    cursor = conn.cursor()

    if not _fetch_owned(cursor, user_id, task_id):
        conn.close()
        return {"success": False, "error": f"Task not found: {task_id}"}

    updates = ["status = ?"]
    params: List[Any] = [status]

    if status == "completed":
        updates.append("completed_at = ?")
        params.append(_now_iso(now))

    if actual_minutes is not None:
        updates.append("actual_minutes = ?")
        params.append(actual_minutes)

    params.append(task_id)
    cursor.execute(f"UPDATE tasks SET {', '.join(updates)} WHERE id = ?", params)
    conn.commit()

    task = _fetch_owned(cursor, user_id, task_id)
    conn.close()

    return {"success": True, "data": task, "message": f"Task {task_id} updated"}


def add_subtask(user_id: str, task_id: str, title: str) -> Dict[str, Any]:
    """Append an incomplete subtask."""
    if not title or not title.strip():
        return {"success": False, "error": "Subtask title is required"}

    conn = database.get_connection()
    cursor = conn.cursor()

    task = _fetch_owned(cursor, user_id, task_id)
    if not task:
        conn.close()
        return {"success": False, "error": f"Task not found: {task_id}"}

    subtask = {"id": uuid.uuid4().hex, "title": title.strip(), "completed": False}
    subtasks = (task.get("subtasks") or []) + [subtask]

    cursor.execute("UPDATE tasks SET subtasks = ? WHERE id = ?", (json.dumps(subtasks), task_id))
    conn.commit()
    conn.close()

    return {"success": True, "data": subtask, "message": f"Subtask added with ID {subtask['id']}"}


def toggle_subtask(user_id: str, task_id: str, subtask_id: str) -> Dict[str, Any]:
    """Flip a subtask between done and not done."""
    conn = database.get_connection()
    cursor = conn.cursor()

    task = _fetch_owned(cursor, user_id, task_id)
    if not task:
        conn.close()
        return {"success": False, "error": f"Task not found: {task_id}"}

    subtasks = task.get("subtasks") or []
    toggled = None
    for subtask in subtasks:
        if subtask["id"] == subtask_id:
            subtask["completed"] = not subtask["completed"]
            toggled = subtask

    if toggled is None:
        conn.close()
        return {"success": False, "error": f"Subtask not found: {subtask_id}"}

    cursor.execute("UPDATE tasks SET subtasks = ? WHERE id = ?", (json.dumps(subtasks), task_id))
    conn.commit()
    conn.close()

    return {"success": True, "data": toggled}


def delete_task(user_id: str, task_id: str) -> Dict[str, Any]:
    """
    Delete a task and its subtasks.

    Args:
        user_id: Task owner
        task_id: Task to delete

    Returns:
        dict with success status
    """
    conn = database.get_connection()
    cursor = conn.cursor()

    cursor.execute("DELETE FROM tasks WHERE id = ? AND user_id = ?", (task_id, user_id))
    if cursor.rowcount == 0:
        conn.close()
        return {"success": False, "error": f"Task not found: {task_id}"}

    conn.commit()
    conn.close()

    return {"success": True, "message": f"Task {task_id} deleted"}


def main():
    parser = argparse.ArgumentParser(description="Task Manager - tasks with subtasks")
    parser.add_argument(
        "--action",
        required=True,
        choices=["create", "list", "get", "status", "add-subtask", "toggle-subtask", "delete"],
        help="Action to perform",
    )

    parser.add_argument("--user", required=True, help="User ID")
    parser.add_argument("--task-id", help="Task ID for operations")
    parser.add_argument("--subtask-id", help="Subtask ID for toggle-subtask")

    # Task creation
    parser.add_argument("--title", help="Task or subtask title")
    parser.add_argument("--description", help="Task description")
    parser.add_argument("--priority", choices=TASK_PRIORITIES, default="medium", help="Task priority")
    parser.add_argument("--minutes", type=int, help="Estimated minutes")
    parser.add_argument("--due", help="Due date (ISO format)")
    parser.add_argument("--category", help="Task category")

    # Status changes and filters
    parser.add_argument("--status", choices=TASK_STATUSES, help="Task status")

    args = parser.parse_args()

    needs_task = {"get", "status", "add-subtask", "toggle-subtask", "delete"}
    if args.action in needs_task and not args.task_id:
        print(json.dumps({"success": False, "error": f"--task-id required for {args.action}"}))
        sys.exit(1)

    if args.action == "create":
        result = create_task(
            args.user,
            args.title or "",
            priority=args.priority,
            description=args.description,
            estimated_minutes=args.minutes,
            due_date=args.due,
            category=args.category,
        )
    elif args.action == "list":
        result = list_tasks(args.user, status=args.status)
    elif args.action == "get":
        result = get_task(args.user, args.task_id)
    elif args.action == "status":
        if not args.status:
            print(json.dumps({"success": False, "error": "--status required for status"}))
            sys.exit(1)
        result = update_task_status(args.user, args.task_id, args.status)
    elif args.action == "add-subtask":
        result = add_subtask(args.user, args.task_id, args.title or "")
    elif args.action == "toggle-subtask":
        result = toggle_subtask(args.user, args.task_id, args.subtask_id or "")
    else:
        result = delete_task(args.user, args.task_id)

    print(json.dumps(result, indent=2, default=str))
    if not result.get("success"):
        sys.exit(1)


if __name__ == "__main__":
    main()

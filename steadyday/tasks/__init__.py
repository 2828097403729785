"""Task Manager - Tasks with priorities and subtasks

Philosophy:
    A task list should lower anxiety, not raise it.
    Break big things into subtasks, finish one, tick it off.

Components:
    manager.py: Task CRUD operations
        - Create tasks with priority, estimate, due date and category
        - Move tasks through todo -> in_progress -> completed
        - Add and toggle subtasks

Usage:
    from steadyday.tasks.manager import create_task, update_task_status

    task = create_task(user_id="alice", title="Reply to landlord", priority="high")
    update_task_status("alice", task["data"]["task_id"], "completed")
"""

# Valid values
TASK_PRIORITIES = ("low", "medium", "high", "urgent")
TASK_STATUSES = ("todo", "in_progress", "completed")

__all__ = ["TASK_PRIORITIES", "TASK_STATUSES"]

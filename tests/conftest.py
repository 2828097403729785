"""Shared test fixtures for SteadyDay tests.

This module provides common fixtures used across all test modules:
- Database isolation with temporary files
- Standard test user data
- Fixed reference days and instants

Usage:
    def test_something(steadyday_db, mock_user_id):
        # every module writes to a throwaway database
        ...
"""

import os
import tempfile
from collections.abc import Generator
from datetime import date, datetime, timezone
from pathlib import Path
from unittest.mock import patch

import pytest


# ─────────────────────────────────────────────────────────────────────────────
# Path Constants
# ─────────────────────────────────────────────────────────────────────────────

PROJECT_ROOT = Path(__file__).parent.parent
ARGS_DIR = PROJECT_ROOT / "args"


# ─────────────────────────────────────────────────────────────────────────────
# Database Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def temp_db() -> Generator[Path, None, None]:
    """Create a temporary database file for testing.

    The database file is automatically deleted after the test completes.

    Yields:
        Path to the temporary database file
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    yield db_path

    # Cleanup
    if db_path.exists():
        os.unlink(db_path)


@pytest.fixture
def steadyday_db(temp_db: Path) -> Generator[Path, None, None]:
    """Point the shared database module at the temporary database.

    Every package opens connections through steadyday.database, so patching
    its DB_PATH isolates all of them at once.
    """
    with patch("steadyday.database.DB_PATH", temp_db):
        from steadyday import database

        # Force table creation
        conn = database.get_connection()
        conn.close()

        yield temp_db


# ─────────────────────────────────────────────────────────────────────────────
# User Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def mock_user_id() -> str:
    """Standard test user ID."""
    return "test_user_123"


@pytest.fixture
def other_user_id() -> str:
    """A second user, for ownership checks."""
    return "other_user_456"


# ─────────────────────────────────────────────────────────────────────────────
# Clock Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def reference_day() -> date:
    """Fixed 'today' for streak and window tests."""
    return date(2025, 3, 14)


@pytest.fixture
def reference_now() -> datetime:
    """Fixed instant (UTC) on the reference day."""
    return datetime(2025, 3, 14, 15, 30, tzinfo=timezone.utc)


# ─────────────────────────────────────────────────────────────────────────────
# Sample Data Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def sample_routine_items() -> list:
    """Three routine items in display order.

    Returns:
        list of item dicts as accepted by create_routine
    """
    return [
        {"title": "Drink a glass of water", "estimated_minutes": 1, "order": 0},
        {"title": "Make the bed", "estimated_minutes": 3, "order": 1},
        {"title": "Write the top 3 tasks", "estimated_minutes": 5, "order": 2},
    ]


@pytest.fixture
def sample_task(mock_user_id: str) -> dict:
    """Sample task data for testing.

    Returns:
        dict with task fields
    """
    return {
        "user_id": mock_user_id,
        "title": "File taxes",
        "description": "Complete tax filing for this year",
        "priority": "high",
        "estimated_minutes": 120,
        "category": "admin",
    }

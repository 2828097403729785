"""
Integration test fixtures for SteadyDay.

Provides fixtures specific to integration testing:
- FastAPI test client over an isolated database
- Request headers for an authenticated user
- An environment without LLM configuration, so chat answers come from templates
"""

import os
from collections.abc import Generator
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient


LLM_ENV_VARS = ("STEADYDAY_LLM_BASE_URL", "STEADYDAY_LLM_API_KEY")


# ─────────────────────────────────────────────────────────────────────────────
# API Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def offline_env() -> Generator[None, None, None]:
    """Remove LLM settings from the environment for the duration of a test."""
    env = {k: v for k, v in os.environ.items() if k not in LLM_ENV_VARS}
    with patch.dict(os.environ, env, clear=True):
        yield


@pytest.fixture
def client(temp_db, offline_env) -> Generator[TestClient, None, None]:
    """Test client for the API, backed by a throwaway database."""
    with patch("steadyday.database.DB_PATH", temp_db):
        from steadyday.api.main import app

        with TestClient(app) as test_client:
            yield test_client


@pytest.fixture
def auth_headers(mock_user_id) -> dict:
    """Headers identifying the standard test user."""
    return {"X-User-Id": mock_user_id}


@pytest.fixture
def other_headers(other_user_id) -> dict:
    """Headers identifying a second user."""
    return {"X-User-Id": other_user_id}

"""
Status Route - Health check
"""

import logging
import sqlite3

from fastapi import APIRouter

from steadyday import __version__, database
from steadyday.api.models import HealthCheck

logger = logging.getLogger(__name__)


router = APIRouter()


@router.get("/health", response_model=HealthCheck)
async def health():
    """Liveness plus a database round trip. Does not require a user."""
    try:
        conn = database.get_connection()
        conn.execute("SELECT 1")
        conn.close()
        db_status = "ok"
    except sqlite3.Error as e:
        logger.error(f"Health check database error: {e}")
        db_status = "error"

    return HealthCheck(
        status="healthy" if db_status == "ok" else "degraded",
        version=__version__,
        database=db_status,
    )

"""
Tool: Enneagram Results
Purpose: Store the latest quiz result per user

Retaking the quiz replaces the previous result. The profile text is
snapshotted alongside the type so the stored result reads the same even if
profile wording changes later.

Usage:
    from steadyday.personality.results import take_quiz, get_result

    take_quiz("alice", answers=[4, 2, 5, ...])   # 18 answers, 1-5
    get_result("alice")
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from steadyday import database

from . import EnneagramType
from .classifier import QUESTION_BANK, classify
from .profiles import get_profile

logger = logging.getLogger(__name__)


def save_result(
    user_id: str,
    type_number: int,
    wing: Optional[int] = None,
    answers: Optional[List[int]] = None,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Create or replace a user's result.

    Args:
        user_id: Quiz taker
        type_number: Dominant type (1-9)
        wing: Optional neighbouring wing type
        answers: Raw answers, kept for reference
        now: Completion instant

    Returns:
        dict with result_id, created flag and the stored result
    """
    try:
        etype = EnneagramType(type_number)
    except ValueError:
        return {"success": False, "error": f"Invalid Enneagram type: {type_number}. Must be 1-9"}
    if wing is not None and wing not in {t.value for t in EnneagramType}:
        return {"success": False, "error": f"Invalid wing: {wing}. Must be 1-9"}

    profile = get_profile(etype)
    completed_at = (now or datetime.now(timezone.utc)).isoformat()

    conn = database.get_connection()
    cursor = conn.cursor()

    cursor.execute("SELECT id FROM enneagram_results WHERE user_id = ?", (user_id,))
    existing = cursor.fetchone()
    result_id = existing["id"] if existing else database.generate_id()

    values = (
        int(etype),
        wing,
        profile.name,
        profile.description,
        json.dumps(profile.strengths),
        json.dumps(profile.challenges),
        json.dumps(profile.growth_tips),
        json.dumps(answers or []),
        completed_at,
    )

    if existing:
        cursor.execute(
            """
            UPDATE enneagram_results
            SET type = ?, wing = ?, name = ?, description = ?, strengths = ?,
                challenges = ?, growth_tips = ?, answers = ?, completed_at = ?
            WHERE id = ?
            """,
            (*values, result_id),
        )
    else:
        cursor.execute(
            """
            INSERT INTO enneagram_results
                (type, wing, name, description, strengths, challenges,
                 growth_tips, answers, completed_at, id, user_id)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (*values, result_id, user_id),
        )

    conn.commit()
    cursor.execute("SELECT * FROM enneagram_results WHERE id = ?", (result_id,))
    result = database.row_to_dict(cursor.fetchone())
    conn.close()

    logger.info(f"Saved Enneagram type {int(etype)} for {user_id}")

    return {
        "success": True,
        "data": {"result_id": result_id, "created": existing is None, "result": result},
    }


def get_result(user_id: str) -> Optional[Dict[str, Any]]:
    """The user's stored result, or None before the quiz is taken."""
    conn = database.get_connection()
    cursor = conn.cursor()
    cursor.execute("SELECT * FROM enneagram_results WHERE user_id = ?", (user_id,))
    result = database.row_to_dict(cursor.fetchone())
    conn.close()
    return result


def take_quiz(
    user_id: str,
    answers: List[int],
    wing: Optional[int] = None,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Classify answers against the built-in question bank and store the result."""
    if not answers:
        return {"success": False, "error": "No answers given"}
    try:
        classification = classify(QUESTION_BANK, answers)
    except ValueError as e:
        return {"success": False, "error": str(e)}

    saved = save_result(user_id, int(classification.dominant), wing=wing, answers=list(answers), now=now)
    if saved["success"]:
        saved["data"]["scores"] = classification.to_dict()["scores"]
    return saved


def list_questions() -> List[Dict[str, Any]]:
    """Question bank in display order."""
    return [{"id": q.id, "question": q.text, "type": int(q.category)} for q in QUESTION_BANK]

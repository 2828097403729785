"""
Tool: Chat Assistant
Purpose: Answer user messages with an LLM, grounded in the user's own data

Flow:
    1. build_user_context() summarizes tasks, routines, mood, Enneagram type
       and plan progress
    2. build_system_prompt() turns that summary into the system prompt
    3. generate_response() calls the completions endpoint; any failure
       (missing configuration, network error, HTTP error, malformed body)
       falls back to a static answer for the message type
    4. send_message() stores the exchange

Usage:
    from steadyday.chat.assistant import send_message, get_chat_history

    send_message("alice", "I can't start my report", message_type="task")
    get_chat_history("alice", limit=10)

Dependencies:
    - httpx (completions API)
    - yaml (PyYAML)
"""

import logging
import os
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import httpx
import yaml

from steadyday import database
from steadyday.mood.tracker import average_mood, get_recent_entries
from steadyday.personality.results import get_result
from steadyday.plans.manager import get_active_plan

from . import (
    CONFIG_PATH,
    CONTEXT_MOOD_ENTRIES,
    DEFAULT_HISTORY_LIMIT,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    DEFAULT_TIMEOUT,
    MESSAGE_TYPES,
)

logger = logging.getLogger(__name__)

NEUTRAL_MOOD_AVERAGE = 3.0

FALLBACK_RESPONSES = {
    "general": (
        "I understand. With ADHD it helps to break big tasks into small steps. "
        "How about we start by organizing one specific task?"
    ),
    "routine": (
        "Routines are a cornerstone for ADHD! Start with a simple morning routine: "
        "wake up, drink water, move for 5 minutes and plan the day."
    ),
    "task": (
        "To manage tasks with ADHD, use the 2-minute rule: if it takes less than 2 minutes, "
        "do it now. Split bigger tasks into subtasks of 15-25 minutes."
    ),
    "mood": (
        "Tracking your mood matters a lot. You are paying attention to your emotional "
        "patterns, and that is already a big step!"
    ),
    "enneagram": (
        "The Enneagram can help you understand your behaviour patterns and motivations. "
        "Each type has specific strategies that work best."
    ),
}

if set(FALLBACK_RESPONSES) != set(MESSAGE_TYPES):
    raise RuntimeError("FALLBACK_RESPONSES must cover every message type")


class LLMUnavailableError(Exception):
    """The completions endpoint could not produce an answer."""


def load_config() -> Dict[str, Any]:
    """Load chat configuration from YAML, with defaults."""
    config = {
        "model": DEFAULT_MODEL,
        "max_tokens": DEFAULT_MAX_TOKENS,
        "temperature": DEFAULT_TEMPERATURE,
        "timeout": DEFAULT_TIMEOUT,
        "history_limit": DEFAULT_HISTORY_LIMIT,
    }
    if CONFIG_PATH.exists():
        with open(CONFIG_PATH) as f:
            config.update((yaml.safe_load(f) or {}).get("chat", {}))
    return config


def build_user_context(user_id: str) -> Dict[str, Any]:
    """Snapshot of the user's data for the system prompt."""
    conn = database.get_connection()
    cursor = conn.cursor()
    cursor.execute(
        """
        SELECT COUNT(*) AS total,
               COALESCE(SUM(CASE WHEN status = 'completed' THEN 1 ELSE 0 END), 0) AS completed
        FROM tasks WHERE user_id = ?
        """,
        (user_id,),
    )
    task_counts = cursor.fetchone()
    cursor.execute("SELECT COUNT(*) FROM routines WHERE user_id = ?", (user_id,))
    routines_count = cursor.fetchone()[0]
    conn.close()

    recent_moods = get_recent_entries(user_id, limit=CONTEXT_MOOD_ENTRIES)
    enneagram = get_result(user_id)
    plan = get_active_plan(user_id)

    return {
        "tasks_count": task_counts["total"],
        "completed_tasks": task_counts["completed"],
        "routines_count": routines_count,
        "recent_mood_average": average_mood(recent_moods, default=NEUTRAL_MOOD_AVERAGE),
        "enneagram_type": enneagram["type"] if enneagram else None,
        "has_active_plan": plan is not None,
        "current_week": plan["current_week"] if plan else 0,
    }


def build_system_prompt(context: Dict[str, Any]) -> str:
    """System prompt describing the assistant's role and the user's situation."""
    enneagram = context.get("enneagram_type") or "Not defined"
    plan = f"Yes (week {context['current_week']})" if context.get("has_active_plan") else "No"
    mood = context.get("recent_mood_average", NEUTRAL_MOOD_AVERAGE)

    return f"""You are an assistant specialized in ADHD and personal productivity.

User context:
- Total tasks: {context.get("tasks_count", 0)}
- Completed tasks: {context.get("completed_tasks", 0)}
- Routines created: {context.get("routines_count", 0)}
- Recent average mood: {mood:.1f}/5
- Enneagram type: {enneagram}
- Active plan: {plan}

Guidelines:
- Be empathetic and understanding about ADHD challenges
- Offer practical, specific tips
- Use positive, motivating language
- Keep answers concise but useful
- Adapt suggestions to the Enneagram type when available
- Focus on small, achievable solutions"""


def fallback_response(message_type: str) -> str:
    """Static answer for a message type; unknown types get the general answer."""
    return FALLBACK_RESPONSES.get(message_type, FALLBACK_RESPONSES["general"])


def _call_llm(message: str, system_prompt: str, config: Dict[str, Any]) -> str:
    base_url = os.environ.get("STEADYDAY_LLM_BASE_URL")
    api_key = os.environ.get("STEADYDAY_LLM_API_KEY")
    if not base_url or not api_key:
        raise LLMUnavailableError("STEADYDAY_LLM_BASE_URL and STEADYDAY_LLM_API_KEY must be set")

    payload = {
        "model": config["model"],
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": message},
        ],
        "max_tokens": config["max_tokens"],
        "temperature": config["temperature"],
    }

    with httpx.Client(timeout=config["timeout"]) as client:
        response = client.post(
            f"{base_url.rstrip('/')}/chat/completions",
            json=payload,
            headers={"Authorization": f"Bearer {api_key}"},
        )
        response.raise_for_status()

    try:
        content = response.json()["choices"][0]["message"]["content"]
    except (ValueError, KeyError, IndexError, TypeError) as e:
        raise LLMUnavailableError(f"Malformed completions response: {e}") from e

    if not isinstance(content, str) or not content.strip():
        raise LLMUnavailableError("Empty completions response")
    return content.strip()


def generate_response(message: str, message_type: str, context: Dict[str, Any]) -> Dict[str, str]:
    """
    Answer a message, falling back to a static answer on any LLM failure.

    Args:
        message: The user's message
        message_type: One of MESSAGE_TYPES
        context: Output of build_user_context()

    Returns:
        dict with "response" text and "source" ("llm" or "template")
    """
    config = load_config()
    try:
        text = _call_llm(message, build_system_prompt(context), config)
        return {"response": text, "source": "llm"}
    except (LLMUnavailableError, httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning(f"LLM unavailable, using {message_type} template: {e}")
        return {"response": fallback_response(message_type), "source": "template"}


def send_message(
    user_id: str,
    message: str,
    message_type: str = "general",
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Answer a message and store the exchange.

    Returns:
        dict with the stored message, its response and where the response came from
    """
    if not message or not message.strip():
        return {"success": False, "error": "Message is required"}
    if message_type not in MESSAGE_TYPES:
        return {"success": False, "error": f"Invalid message type. Must be one of: {MESSAGE_TYPES}"}

    reply = generate_response(message, message_type, build_user_context(user_id))
    message_id = database.generate_id()
    timestamp = (now or datetime.now(timezone.utc)).isoformat()

    conn = database.get_connection()
    cursor = conn.cursor()
    cursor.execute(
        """
        INSERT INTO chat_messages (id, user_id, message, response, message_type, source, timestamp)
        VALUES (?, ?, ?, ?, ?, ?, ?)
        """,
        (message_id, user_id, message, reply["response"], message_type, reply["source"], timestamp),
    )
    conn.commit()
    cursor.execute("SELECT * FROM chat_messages WHERE id = ?", (message_id,))
    stored = database.row_to_dict(cursor.fetchone())
    conn.close()

    return {"success": True, "data": stored}


def get_chat_history(user_id: str, limit: Optional[int] = None) -> List[Dict[str, Any]]:
    """Most recent exchanges, newest first."""
    limit = limit or load_config()["history_limit"]

    conn = database.get_connection()
    cursor = conn.cursor()
    cursor.execute(
        "SELECT * FROM chat_messages WHERE user_id = ? ORDER BY timestamp DESC, rowid DESC LIMIT ?",
        (user_id, limit),
    )
    messages = [database.row_to_dict(row) for row in cursor.fetchall()]
    conn.close()
    return messages

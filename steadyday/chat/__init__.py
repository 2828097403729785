"""Chat Assistant - ADHD-aware conversational support

The assistant answers with an LLM through an OpenAI-compatible
/chat/completions endpoint. When the endpoint is not configured or the
call fails, a short static answer for the message type is used instead,
so sending a message always produces a reply.

Environment:
    STEADYDAY_LLM_BASE_URL: Base URL of the completions API
    STEADYDAY_LLM_API_KEY: Bearer token for that API

Components:
    assistant.py: User context, prompt, LLM call with fallback, history
"""

from steadyday import ARGS_DIR

CONFIG_PATH = ARGS_DIR / "chat.yaml"

MESSAGE_TYPES = ("general", "routine", "task", "mood", "enneagram")

DEFAULT_MODEL = "gpt-4.1-nano"
DEFAULT_MAX_TOKENS = 300
DEFAULT_TEMPERATURE = 0.7
DEFAULT_TIMEOUT = 20.0
DEFAULT_HISTORY_LIMIT = 20
CONTEXT_MOOD_ENTRIES = 7

__all__ = [
    "CONFIG_PATH",
    "MESSAGE_TYPES",
    "DEFAULT_MODEL",
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_TEMPERATURE",
    "DEFAULT_TIMEOUT",
    "DEFAULT_HISTORY_LIMIT",
    "CONTEXT_MOOD_ENTRIES",
]

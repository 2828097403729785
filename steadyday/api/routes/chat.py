"""
Chat Route - Assistant messages and history
"""

from fastapi import APIRouter, Depends, Query

from steadyday.api.dependencies import get_user_id, unwrap
from steadyday.api.models import ChatMessageCreate
from steadyday.chat import assistant


router = APIRouter()


@router.post("/messages", status_code=201)
async def send_message(body: ChatMessageCreate, user_id: str = Depends(get_user_id)):
    """Answer a message. Always returns a reply, falling back to a template."""
    return unwrap(assistant.send_message(user_id, body.message, message_type=body.type.value))


@router.get("/messages")
async def history(
    limit: int = Query(20, ge=1, le=200),
    user_id: str = Depends(get_user_id),
):
    messages = assistant.get_chat_history(user_id, limit=limit)
    return {"messages": messages, "total": len(messages)}

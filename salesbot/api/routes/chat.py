"""
Web chat endpoint - same conversation flow as the bots.
"""

from fastapi import APIRouter, Depends

from salesbot.api.deps import get_facade
from salesbot.api.schemas import ChatRequest
from salesbot.core.errors import ValidationError
from salesbot.core.facade import CommerceFacade

router = APIRouter(tags=["chat"])


@router.post("/chat")
async def chat(payload: ChatRequest, facade: CommerceFacade = Depends(get_facade)) -> dict:
    if not payload.session_id or not payload.session_id.strip():
        raise ValidationError("Falta sessionId")

    reply = await facade.handle_message(
        f"web:{payload.session_id.strip()}",
        payload.text,
        channel="webchat",
    )
    return {"ok": True, "reply": reply.to_dict()}

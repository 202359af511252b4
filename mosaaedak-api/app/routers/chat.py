from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.database import get_db
from app.logging_config import get_logger
from app.routers.deps import get_settings_provider
from app.schemas.chat import ChatRequest, ChatResponse
from app.services.completion_service import MSG_AI_ERROR, MSG_NOT_CONFIGURED
from app.services.conversation_service import run_turn
from app.services.settings_service import SettingsProvider

logger = get_logger("chat")

router = APIRouter(prefix="/api", tags=["chat"])

MSG_MISSING_FIELDS = "chatInput and sessionId are required"


async def _parse_chat_request(request: Request) -> ChatRequest | None:
    try:
        payload = await request.json()
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    try:
        parsed = ChatRequest.model_validate(payload)
    except ValidationError:
        return None
    if not parsed.chatInput or not parsed.sessionId:
        return None
    return parsed


@router.post("/chat", response_model=ChatResponse)
async def handle_chat(
    request: Request,
    db: Session = Depends(get_db),
    settings_provider: SettingsProvider = Depends(get_settings_provider),
):
    """Web widget turn: always answers with {"output": ...} unless the request is malformed."""
    parsed = await _parse_chat_request(request)
    if parsed is None:
        return JSONResponse(status_code=400, content={"error": MSG_MISSING_FIELDS})

    try:
        bot_settings = settings_provider.get()
        if not bot_settings.api_key:
            logger.warning("Chat request while API key is not configured")
            return ChatResponse(output=MSG_NOT_CONFIGURED)

        result = await run_turn(db, parsed.sessionId, parsed.chatInput, bot_settings)
        if not result.ok:
            return ChatResponse(output=MSG_AI_ERROR)
        return ChatResponse(output=result.value)
    except Exception as exc:
        logger.error(
            "Chat endpoint error",
            exc_info=True,
            extra={"context": {"session_id": parsed.sessionId, "error": str(exc)}},
        )
        return JSONResponse(status_code=500, content={"output": MSG_AI_ERROR})

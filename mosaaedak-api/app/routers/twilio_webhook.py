from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.logging_config import LoggerAdapter, get_logger
from app.routers.deps import get_settings_provider
from app.schemas.twilio import TwilioInbound
from app.services.completion_service import MSG_AI_ERROR
from app.services.conversation_service import run_turn
from app.services.reply_service import (
    MSG_HANDOFF_ACK,
    BotReply,
    classify_reply,
    format_outbound,
    format_support_notification,
    normalize_whatsapp_address,
    text_reply,
)
from app.services.settings_service import SettingsProvider, SettingsRecord
from app.services.twilio_service import TwilioService

logger = get_logger("twilio_webhook")

router = APIRouter(prefix="/api/twilio", tags=["twilio"])


async def _parse_inbound(request: Request) -> TwilioInbound | None:
    try:
        form = await request.form()
        inbound = TwilioInbound.model_validate({key: form.get(key) for key in ("From", "To", "Body", "MessageSid")})
    except (ValueError, ValidationError) as exc:
        logger.warning("Twilio payload could not be parsed", extra={"context": {"error": str(exc)}})
        return None
    if not inbound.is_valid:
        return None
    return inbound


def _missing_credentials(bot_settings: SettingsRecord) -> list[str]:
    missing = []
    if not bot_settings.api_key:
        missing.append("api_key")
    if not bot_settings.twilio_account_sid:
        missing.append("twilio_account_sid")
    if not bot_settings.twilio_auth_token:
        missing.append("twilio_auth_token")
    return missing


async def dispatch_reply(
    twilio: TwilioService,
    reply: BotReply,
    inbound: TwilioInbound,
    bot_settings: SettingsRecord,
) -> int:
    """Send the reply (or the escalation pair). Returns the number of successful sends."""
    from_number = normalize_whatsapp_address(bot_settings.twilio_phone_number or inbound.To or "")
    customer = normalize_whatsapp_address(inbound.From)
    log = LoggerAdapter(logger, {"customer": customer, "kind": reply.kind.value})

    if reply.is_escalation:
        support = normalize_whatsapp_address(
            bot_settings.support_agent_phone or settings.default_support_agent_phone
        )
        notify = await twilio.send_message(
            from_=from_number,
            to=support,
            body=format_support_notification(customer, inbound.Body),
        )
        ack = await twilio.send_message(from_=from_number, to=customer, body=MSG_HANDOFF_ACK)
        log.info("Escalated to human support", context={"support": support, "notified": notify.ok, "acked": ack.ok})
        return int(notify.ok) + int(ack.ok)

    outbound = format_outbound(reply.text)
    sent = await twilio.send_message(
        from_=from_number,
        to=customer,
        body=outbound.body,
        media_url=outbound.media_url,
    )
    if not sent.ok:
        log.warning("Auto-reply was not delivered", context={"error_code": sent.error_code})
    return int(sent.ok)


@router.post("/webhook")
async def handle_twilio_webhook(
    request: Request,
    db: Session = Depends(get_db),
    settings_provider: SettingsProvider = Depends(get_settings_provider),
):
    """Twilio WhatsApp turn. Acknowledges with 200 once dispatch was attempted."""
    inbound = await _parse_inbound(request)
    if inbound is None:
        return PlainTextResponse("Missing From or Body", status_code=400)

    try:
        bot_settings = settings_provider.get()
        missing = _missing_credentials(bot_settings)
        if missing:
            logger.error("Twilio webhook rejected: settings incomplete", extra={"context": {"missing": missing}})
            return PlainTextResponse("Server configuration error", status_code=500)

        result = await run_turn(db, inbound.From, inbound.Body, bot_settings)
        reply = classify_reply(result.value) if result.ok else text_reply(MSG_AI_ERROR)

        twilio = TwilioService(bot_settings.twilio_account_sid, bot_settings.twilio_auth_token)
        await dispatch_reply(twilio, reply, inbound, bot_settings)
    except Exception as exc:
        logger.error(
            "Twilio webhook error",
            exc_info=True,
            extra={"context": {"from": inbound.From, "error": str(exc)}},
        )
        return PlainTextResponse("Internal Server Error", status_code=500)

    return PlainTextResponse("OK")

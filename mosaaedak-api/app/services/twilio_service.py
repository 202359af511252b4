from typing import Optional

import httpx

from app.config import settings
from app.logging_config import get_logger
from app.services.result import Result

logger = get_logger("twilio_service")


class TwilioService:
    """Service for sending WhatsApp messages through the Twilio Messages API."""

    def __init__(self, account_sid: str, auth_token: str, base_url: Optional[str] = None):
        self.account_sid = account_sid
        self.auth_token = auth_token
        self.base_url = (base_url or settings.twilio_api_base).rstrip("/")

    @property
    def messages_url(self) -> str:
        return f"{self.base_url}/Accounts/{self.account_sid}/Messages.json"

    async def send_message(
        self,
        from_: str,
        to: str,
        body: str,
        media_url: Optional[str] = None,
    ) -> Result[dict]:
        """Send one message. Never raises; failures come back as Result.failure."""
        data = {"From": from_, "To": to, "Body": body}
        if media_url:
            data["MediaUrl"] = media_url

        try:
            async with httpx.AsyncClient(
                timeout=settings.carrier_timeout_seconds,
                auth=(self.account_sid, self.auth_token),
            ) as client:
                response = await client.post(self.messages_url, data=data)
        except httpx.HTTPError as e:
            logger.error(f"Twilio API error: {e}", extra={"context": {"to": to}})
            return Result.failure(str(e), "transport_error")

        if not response.is_success:
            logger.error(
                "Twilio send failed",
                extra={"context": {"to": to, "status_code": response.status_code, "body": response.text[:500]}},
            )
            return Result.failure(response.text, "send_failed", status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}
        logger.info("Twilio message sent", extra={"context": {"to": to, "sid": payload.get("sid")}})
        return Result.success(payload)

from typing import Optional

from pydantic import BaseModel


class TwilioInbound(BaseModel):
    """Fields of a Twilio WhatsApp webhook we act on."""

    From: Optional[str] = None
    To: Optional[str] = None
    Body: Optional[str] = None
    MessageSid: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return bool(self.From and self.Body)

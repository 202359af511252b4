from app.schemas.admin import SettingsUpdate, SettingsView, StatsResponse
from app.schemas.chat import ChatRequest, ChatResponse
from app.schemas.twilio import TwilioInbound

__all__ = ["ChatRequest", "ChatResponse", "TwilioInbound", "SettingsUpdate", "SettingsView", "StatsResponse"]

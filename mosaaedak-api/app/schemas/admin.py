from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class SettingsUpdate(BaseModel):
    api_key: Optional[str] = None
    system_prompt: Optional[str] = None
    model_name: Optional[str] = None
    twilio_account_sid: Optional[str] = None
    twilio_auth_token: Optional[str] = None
    twilio_phone_number: Optional[str] = None
    support_agent_phone: Optional[str] = None


class SettingsView(BaseModel):
    api_key_masked: str
    has_api_key: bool
    system_prompt: str
    model_name: str
    twilio_account_sid: str
    twilio_auth_token_masked: str
    has_twilio_auth_token: bool
    twilio_phone_number: str
    support_agent_phone: str
    updated_at: Optional[datetime] = None


class StatsResponse(BaseModel):
    active_sessions: int
    model: str
    has_api_key: bool
    has_twilio: bool

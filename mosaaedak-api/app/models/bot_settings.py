from sqlalchemy import CheckConstraint, Column, DateTime, Integer, Text

from app.database import Base

DEFAULT_MODEL_NAME = "openai/gpt-oss-120b"


class BotSettings(Base):
    __tablename__ = "settings"
    __table_args__ = (CheckConstraint("id = 1", name="settings_single_row"),)

    id = Column(Integer, primary_key=True, default=1)
    api_key = Column(Text, default="")
    system_prompt = Column(Text, default="")
    model_name = Column(Text, default=DEFAULT_MODEL_NAME)
    twilio_account_sid = Column(Text, default="")
    twilio_auth_token = Column(Text, default="")
    twilio_phone_number = Column(Text, default="")
    support_agent_phone = Column(Text, default="")
    updated_at = Column(DateTime(timezone=True))

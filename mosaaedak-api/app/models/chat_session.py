from sqlalchemy import JSON, Column, DateTime, Text

from app.database import Base


class ChatSession(Base):
    __tablename__ = "chat_sessions"

    session_id = Column(Text, primary_key=True)  # web: browser uuid, twilio: whatsapp:+<number>
    messages = Column(JSON, nullable=False, default=list)  # [{"role": ..., "content": ...}], oldest first
    last_access = Column(DateTime(timezone=True), nullable=False, index=True)

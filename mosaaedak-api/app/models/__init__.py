from app.models.bot_settings import BotSettings
from app.models.chat_session import ChatSession

__all__ = [
    "BotSettings",
    "ChatSession",
]

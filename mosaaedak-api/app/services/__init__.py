from app.services.conversation_service import run_turn
from app.services.history_service import append_and_trim, build_message
from app.services.reply_service import (
    BotReply,
    ReplyKind,
    classify_reply,
    format_outbound,
    normalize_whatsapp_address,
)
from app.services.result import Result
from app.services.settings_service import SettingsProvider, SettingsRecord

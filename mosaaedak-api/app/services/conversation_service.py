from sqlalchemy.orm import Session

from app.logging_config import get_logger
from app.services.completion_service import complete
from app.services.history_service import MAX_HISTORY_MESSAGES, append_and_trim, build_message
from app.services.result import Result
from app.services.session_locks import session_locks
from app.services.session_service import get_session_messages, save_session
from app.services.settings_service import SettingsRecord

logger = get_logger("conversation_service")


async def run_turn(
    db: Session,
    session_id: str,
    user_message: str,
    bot_settings: SettingsRecord,
    window_size: int = MAX_HISTORY_MESSAGES,
) -> Result[str]:
    """
    One conversation turn: load history, append the user message, ask the model,
    append the reply and persist.

    On completion failure only the user message is persisted.
    """
    async with session_locks.acquire(session_id):
        history = get_session_messages(db, session_id)
        history = append_and_trim(history, build_message("user", user_message), window_size)

        result = await complete(
            bot_settings.system_prompt,
            history,
            bot_settings.api_key,
            bot_settings.model_name,
        )

        if result.ok:
            history = append_and_trim(history, build_message("assistant", result.value), window_size)
        else:
            logger.warning(
                "Turn completed without assistant reply",
                extra={"context": {"session_id": session_id, "error_code": result.error_code}},
            )

        save_session(db, session_id, history)

    return result

from typing import Sequence

from app.config import settings

MAX_HISTORY_MESSAGES = settings.max_history_messages


def build_message(role: str, content: str) -> dict:
    return {"role": role, "content": content}


def append_and_trim(
    history: Sequence[dict],
    new_message: dict,
    window_size: int = MAX_HISTORY_MESSAGES,
) -> list[dict]:
    """Append a message and keep only the last `window_size` entries (oldest dropped first)."""
    messages = list(history)
    messages.append(new_message)
    if len(messages) > window_size:
        messages = messages[-window_size:]
    return messages

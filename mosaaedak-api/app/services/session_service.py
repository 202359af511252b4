from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import Session

from app.logging_config import get_logger
from app.models import ChatSession

logger = get_logger("session_service")


def get_session_messages(db: Session, session_id: str) -> list[dict]:
    """Load stored history for a session, or an empty list for a new one."""
    session = db.query(ChatSession).filter(ChatSession.session_id == session_id).first()
    if not session or not session.messages:
        return []
    return [{"role": m["role"], "content": m["content"]} for m in session.messages]


def save_session(db: Session, session_id: str, messages: list[dict]) -> ChatSession:
    """Insert or overwrite the session history and touch last_access."""
    now = datetime.now(timezone.utc)
    session = db.query(ChatSession).filter(ChatSession.session_id == session_id).first()
    if session:
        session.messages = list(messages)
        session.last_access = now
    else:
        session = ChatSession(session_id=session_id, messages=list(messages), last_access=now)
        db.add(session)
    db.commit()
    return session


def clean_old_sessions(db: Session, max_age_hours: int = 1) -> int:
    """Delete sessions not accessed within `max_age_hours`. Returns deleted count."""
    cutoff = datetime.now(timezone.utc) - timedelta(hours=max_age_hours)
    deleted = (
        db.query(ChatSession)
        .filter(ChatSession.last_access < cutoff)
        .delete(synchronize_session=False)
    )
    db.commit()
    if deleted:
        logger.info("Expired sessions removed", extra={"context": {"deleted": deleted, "max_age_hours": max_age_hours}})
    return deleted


def count_sessions(db: Session) -> int:
    return db.query(ChatSession).count()

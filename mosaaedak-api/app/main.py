import asyncio
import os

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

from app.config import settings
from app.database import SessionLocal, get_db, init_db
from app.logging_config import get_logger, setup_logging
from app.models import ChatSession
from app.routers import admin, chat, twilio_webhook
from app.services.session_service import clean_old_sessions

setup_logging(settings.log_level)

app = FastAPI(
    title="Mosaaedak API",
    description="Web chat and WhatsApp relay for the Mosaaedak assistant",
    version="0.1.0",
)

cors_origins = [origin.strip() for origin in settings.cors_allow_origins.split(",") if origin.strip()]
if not cors_origins:
    cors_origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chat.router)
app.include_router(twilio_webhook.router)
app.include_router(admin.router)

sweep_logger = get_logger("session_sweep")
_session_sweep_task: asyncio.Task | None = None


def _is_session_sweep_enabled() -> bool:
    if os.environ.get("PYTEST_CURRENT_TEST"):
        return False
    return settings.session_sweep_enabled


def sweep_expired_sessions() -> int:
    db = SessionLocal()
    try:
        return clean_old_sessions(db, settings.session_retention_hours)
    finally:
        db.close()


async def _session_sweep_loop() -> None:
    interval_seconds = max(settings.session_sweep_interval_seconds, 1.0)
    while True:
        try:
            await asyncio.sleep(interval_seconds)
            deleted = sweep_expired_sessions()
            sweep_logger.debug("Session sweep finished", extra={"context": {"deleted": deleted}})
        except asyncio.CancelledError:
            break
        except Exception as exc:
            sweep_logger.error(
                "Session sweep failed",
                extra={"context": {"error": str(exc)}},
            )


@app.on_event("startup")
async def startup() -> None:
    global _session_sweep_task
    init_db()
    if not _is_session_sweep_enabled():
        return
    if _session_sweep_task is None or _session_sweep_task.done():
        _session_sweep_task = asyncio.create_task(_session_sweep_loop())
        sweep_logger.info("Session sweep started")


@app.on_event("shutdown")
async def stop_session_sweep() -> None:
    global _session_sweep_task
    if _session_sweep_task is None:
        return
    _session_sweep_task.cancel()
    try:
        await _session_sweep_task
    except asyncio.CancelledError:
        pass
    _session_sweep_task = None


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/db-check")
def db_check(db: Session = Depends(get_db)):
    sessions_count = db.query(ChatSession).count()
    return {
        "status": "ok",
        "chat_sessions": sessions_count,
    }

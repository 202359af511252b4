from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from app.logging_config import get_logger
from app.models import BotSettings
from app.models.bot_settings import DEFAULT_MODEL_NAME
from app.services.default_prompt import DEFAULT_SYSTEM_PROMPT

logger = get_logger("settings_service")

SETTINGS_ROW_ID = 1
MASKED_SECRET_MARKER = "••••••••"
SECRET_FIELDS = ("api_key", "twilio_auth_token")
UPDATABLE_FIELDS = (
    "api_key",
    "system_prompt",
    "model_name",
    "twilio_account_sid",
    "twilio_auth_token",
    "twilio_phone_number",
    "support_agent_phone",
)


@dataclass(frozen=True)
class SettingsRecord:
    """Detached snapshot of the settings row, read once per turn."""

    api_key: str = ""
    system_prompt: str = ""
    model_name: str = DEFAULT_MODEL_NAME
    twilio_account_sid: str = ""
    twilio_auth_token: str = ""
    twilio_phone_number: str = ""
    support_agent_phone: str = ""
    updated_at: Optional[datetime] = None

    @property
    def has_twilio_credentials(self) -> bool:
        return bool(self.twilio_account_sid and self.twilio_auth_token)


def mask_secret(value: Optional[str]) -> str:
    """Mask a secret for display: first 8 and last 4 characters survive."""
    if not value:
        return ""
    if len(value) <= 12:
        return MASKED_SECRET_MARKER
    return f"{value[:8]}{MASKED_SECRET_MARKER}{value[-4:]}"


def is_masked_value(value: Optional[str]) -> bool:
    return bool(value) and MASKED_SECRET_MARKER in value


def ensure_settings(db: Session) -> BotSettings:
    """Return the settings row, creating it with defaults on first boot."""
    row = db.query(BotSettings).filter(BotSettings.id == SETTINGS_ROW_ID).first()
    if row is None:
        row = BotSettings(
            id=SETTINGS_ROW_ID,
            api_key="",
            system_prompt=DEFAULT_SYSTEM_PROMPT,
            model_name=DEFAULT_MODEL_NAME,
            twilio_account_sid="",
            twilio_auth_token="",
            twilio_phone_number="",
            support_agent_phone="",
            updated_at=datetime.now(timezone.utc),
        )
        db.add(row)
        db.flush()
        logger.info("Default settings created")
    return row


def get_settings(db: Session) -> SettingsRecord:
    row = ensure_settings(db)
    return SettingsRecord(
        api_key=row.api_key or "",
        system_prompt=row.system_prompt or "",
        model_name=row.model_name or DEFAULT_MODEL_NAME,
        twilio_account_sid=row.twilio_account_sid or "",
        twilio_auth_token=row.twilio_auth_token or "",
        twilio_phone_number=row.twilio_phone_number or "",
        support_agent_phone=row.support_agent_phone or "",
        updated_at=row.updated_at,
    )


def update_settings(db: Session, updates: dict) -> list[str]:
    """
    Overwrite settings in place.

    Fields that are missing or None stay unchanged; masked secrets echoed back
    by the dashboard are ignored. Returns the names of the fields written.
    """
    row = ensure_settings(db)
    changed: list[str] = []
    for field in UPDATABLE_FIELDS:
        value = updates.get(field)
        if value is None:
            continue
        if field in SECRET_FIELDS and is_masked_value(value):
            continue
        setattr(row, field, value)
        changed.append(field)

    if changed:
        row.updated_at = datetime.now(timezone.utc)
    db.commit()
    logger.info("Settings updated", extra={"context": {"fields": changed}})
    return changed


class SettingsProvider:
    """Read/update access to the single settings record."""

    def __init__(self, db: Session):
        self.db = db

    def get(self) -> SettingsRecord:
        return get_settings(self.db)

    def update(self, updates: dict) -> list[str]:
        return update_settings(self.db, updates)


def settings_report(record: SettingsRecord) -> dict:
    """Configuration status safe to print: secrets are reduced to booleans."""
    return {
        "model_name": record.model_name,
        "system_prompt_chars": len(record.system_prompt or ""),
        "api_key": bool(record.api_key),
        "twilio_account_sid": bool(record.twilio_account_sid),
        "twilio_auth_token": bool(record.twilio_auth_token),
        "twilio_phone_number": record.twilio_phone_number or None,
        "support_agent_phone": record.support_agent_phone or None,
    }

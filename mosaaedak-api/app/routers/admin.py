"""Admin API endpoints for managing bot configuration."""

from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.routers.deps import get_settings_provider
from app.schemas.admin import SettingsUpdate, SettingsView, StatsResponse
from app.services.session_service import clean_old_sessions, count_sessions
from app.services.settings_service import SettingsProvider, mask_secret

router = APIRouter(prefix="/admin", tags=["admin"])

MSG_SETTINGS_SAVED = "تم حفظ الإعدادات بنجاح"


def _require_admin_token(provided: Optional[str]) -> None:
    expected = settings.admin_token
    if not expected:
        raise HTTPException(status_code=500, detail="ADMIN_TOKEN not configured")
    if not provided or provided != expected:
        raise HTTPException(status_code=401, detail="Invalid admin token")


def require_admin(x_admin_token: Optional[str] = Header(default=None)) -> None:
    _require_admin_token(x_admin_token)


@router.get("/settings", response_model=SettingsView, dependencies=[Depends(require_admin)])
def read_settings(settings_provider: SettingsProvider = Depends(get_settings_provider)):
    current = settings_provider.get()
    return SettingsView(
        api_key_masked=mask_secret(current.api_key),
        has_api_key=bool(current.api_key),
        system_prompt=current.system_prompt,
        model_name=current.model_name,
        twilio_account_sid=current.twilio_account_sid,
        twilio_auth_token_masked=mask_secret(current.twilio_auth_token),
        has_twilio_auth_token=bool(current.twilio_auth_token),
        twilio_phone_number=current.twilio_phone_number,
        support_agent_phone=current.support_agent_phone,
        updated_at=current.updated_at,
    )


@router.put("/settings", dependencies=[Depends(require_admin)])
def write_settings(
    payload: SettingsUpdate,
    settings_provider: SettingsProvider = Depends(get_settings_provider),
):
    changed = settings_provider.update(payload.model_dump(exclude_none=True))
    return {"message": MSG_SETTINGS_SAVED, "updated_fields": changed}


@router.get("/stats", response_model=StatsResponse, dependencies=[Depends(require_admin)])
def read_stats(
    db: Session = Depends(get_db),
    settings_provider: SettingsProvider = Depends(get_settings_provider),
):
    current = settings_provider.get()
    return StatsResponse(
        active_sessions=count_sessions(db),
        model=current.model_name,
        has_api_key=bool(current.api_key),
        has_twilio=current.has_twilio_credentials,
    )


@router.delete("/sessions/expired", dependencies=[Depends(require_admin)])
def purge_expired_sessions(db: Session = Depends(get_db)):
    deleted = clean_old_sessions(db, settings.session_retention_hours)
    return {"deleted": deleted}

from fastapi import Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.services.settings_service import SettingsProvider


def get_settings_provider(db: Session = Depends(get_db)) -> SettingsProvider:
    return SettingsProvider(db)

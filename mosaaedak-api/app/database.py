from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from app.config import settings

_connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}

engine = create_engine(settings.database_url, connect_args=_connect_args, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create tables and seed the settings row."""
    import app.models  # noqa: F401
    from app.services.settings_service import ensure_settings

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        ensure_settings(db)
        db.commit()
    finally:
        db.close()

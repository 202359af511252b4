import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SESSION_SWEEP_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.database import Base, get_db
from app.main import app
from app.services.settings_service import ensure_settings, update_settings


@pytest.fixture
def db_engine():
    """In-memory SQLite shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    """Real database session with the settings row seeded."""
    TestingSession = sessionmaker(bind=db_engine, autocommit=False, autoflush=False)
    db = TestingSession()
    ensure_settings(db)
    db.commit()
    yield db
    db.close()


@pytest.fixture
def configure(db_session):
    """Write bot settings the way the admin dashboard would."""

    def _configure(**values):
        update_settings(db_session, values)

    return _configure


@pytest.fixture
def client(db_session):
    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


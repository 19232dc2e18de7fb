"""
Shared fixtures: an in-memory database with a bootstrapped owner, a manual
clock, and an API client wired to both.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.clock import ManualClock, get_clock
from app.core.database import Base, get_db
from app.main import create_app
from app.models import authorization, event, hook_settings, risk_record, session  # noqa: F401
from app.services.access_control import bootstrap_owner
from tests.constants import OWNER


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSession()
    bootstrap_owner(db, OWNER)
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock(start=1_700_000_000)


@pytest.fixture
def client(db, clock):
    app = create_app()
    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_clock] = lambda: clock
    return TestClient(app)

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from app.core.config import settings

connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    # TestClient and uvicorn workers may touch the connection from other threads
    connect_args = {"check_same_thread": False}

engine = create_engine(settings.DATABASE_URL, future=True, connect_args=connect_args)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    # Import models so they register on Base.metadata
    from app.models import authorization, event, hook_settings, risk_record, session  # noqa: F401

    Base.metadata.create_all(bind=engine)

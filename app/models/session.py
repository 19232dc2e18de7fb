from sqlalchemy import Column, String, Integer, JSON, ForeignKey
from app.core.database import Base
from app.utils.enums import SessionStatus
from app.utils.identifiers import ZERO_HASH


class GaslessSession(Base):
    __tablename__ = "gasless_sessions"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, index=True, nullable=False)
    status = Column(String, default=SessionStatus.ACTIVE.value)  # ACTIVE | SETTLED | ENDED

    start_time = Column(Integer, nullable=False)
    last_activity = Column(Integer, nullable=False)
    ended_at = Column(Integer, nullable=True)

    action_count = Column(Integer, nullable=False, default=0)
    final_state_hash = Column(String, nullable=False, default=ZERO_HASH)


class UserActiveSession(Base):
    __tablename__ = "user_active_sessions"

    user_id = Column(String, primary_key=True)
    session_id = Column(String, ForeignKey("gasless_sessions.id"), nullable=False)


class SessionAction(Base):
    __tablename__ = "session_actions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    session_id = Column(String, ForeignKey("gasless_sessions.id"), index=True, nullable=False)
    sequence = Column(Integer, nullable=False)

    action_type = Column(String, nullable=False)
    token_id = Column(String, nullable=True)
    timestamp = Column(Integer, nullable=False)
    payload = Column(JSON, nullable=True)

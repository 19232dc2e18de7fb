from sqlalchemy import Column, String, Integer, JSON
from app.core.database import Base


class LedgerEvent(Base):
    __tablename__ = "ledger_events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, index=True, nullable=False)
    subject = Column(String, index=True, nullable=True)  # token or session id

    data = Column(JSON, nullable=False, default=dict)
    timestamp = Column(Integer, nullable=False)

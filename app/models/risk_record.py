from sqlalchemy import Column, String, Integer
from app.core.database import Base


class RiskRecord(Base):
    __tablename__ = "risk_records"

    token_id = Column(String, primary_key=True, index=True)

    holder_concentration = Column(Integer, nullable=False, default=0)
    liquidity_ownership = Column(Integer, nullable=False, default=0)
    governance_capture = Column(Integer, nullable=False, default=0)

    last_updated = Column(Integer, nullable=False, default=0)  # 0 = never written
    updater = Column(String, nullable=True)

from sqlalchemy import Column, String, Integer
from app.core.database import Base


class HookSettings(Base):
    __tablename__ = "hook_settings"

    # Singleton row
    id = Column(Integer, primary_key=True, default=1)
    policy = Column(String, nullable=False)

from sqlalchemy import Column, String, Integer, Boolean
from app.core.database import Base


class RegistryOwner(Base):
    __tablename__ = "registry_owner"

    # Singleton row
    id = Column(Integer, primary_key=True, default=1)
    owner = Column(String, nullable=False)


class AuthorizedUpdater(Base):
    __tablename__ = "authorized_updaters"

    identity = Column(String, primary_key=True, index=True)
    authorized = Column(Boolean, nullable=False, default=False)

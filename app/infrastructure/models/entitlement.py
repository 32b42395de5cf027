"""SQLAlchemy model for plan entitlements."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func

from app.infrastructure.database import Base


class EntitlementModel(Base):
    """Plan granted to a user and its billing status."""

    __tablename__ = "entitlements"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    plan = Column(String(30), nullable=False)
    status = Column(String(30), nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


__all__ = ["EntitlementModel"]

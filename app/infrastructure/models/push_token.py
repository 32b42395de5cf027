"""SQLAlchemy model for registered device push tokens."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func

from app.infrastructure.database import Base


class PushTokenModel(Base):
    """Device push registration; a user may own several."""

    __tablename__ = "push_tokens"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    token = Column(String(255), nullable=True)
    platform = Column(String(20), nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


__all__ = ["PushTokenModel"]

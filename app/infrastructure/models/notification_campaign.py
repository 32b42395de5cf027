"""SQLAlchemy model for broadcast notification campaigns."""

from sqlalchemy import Column, DateTime, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_timezone


class NotificationCampaignModel(Base):
    """Audit row describing an admin broadcast and its delivery counts."""

    __tablename__ = "notification_campaigns"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    body = Column(Text, nullable=False)
    deep_link = Column(String(500), nullable=True)
    audience = Column(String(20), nullable=False)
    status = Column(String(20), nullable=False)
    scheduled_for = Column(DateTime(timezone=True), nullable=True)
    sent_at = Column(DateTime(timezone=True), nullable=True)
    created_by = Column(String(36), nullable=True)
    sent_count = Column(Integer, nullable=True)
    failed_count = Column(Integer, nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        DateTime(timezone=True), nullable=True, onupdate=now_in_app_timezone
    )


__all__ = ["NotificationCampaignModel"]

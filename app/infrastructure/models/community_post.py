"""SQLAlchemy model for community posts."""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, func

from app.infrastructure.database import Base


class CommunityPostModel(Base):
    """Database representation of a community post."""

    __tablename__ = "community_posts"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    content = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


__all__ = ["CommunityPostModel"]

"""SQLAlchemy model for the profiles table."""

from sqlalchemy import JSON, Column, DateTime, String, func

from app.infrastructure.database import Base


class ProfileModel(Base):
    """Database representation of a member profile."""

    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True)
    email = Column(String(255), nullable=True, index=True)
    full_name = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    ghl_contact_id = Column(String(64), nullable=True, index=True)
    city = Column(String(120), nullable=True)
    state = Column(String(120), nullable=True)
    country = Column(String(120), nullable=True)
    salon_name = Column(String(255), nullable=True)
    years_experience = Column(String(50), nullable=True)
    role = Column(String(50), nullable=True)
    skills_assessment = Column(JSON, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())


__all__ = ["ProfileModel"]

"""Persistence layer for member profiles."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Profile
from app.infrastructure.models import ProfileModel


class ProfileRepository:
    """Read profiles and cache the CRM contact identifier on them."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: str) -> Profile | None:
        model = self.session.get(ProfileModel, user_id)
        return self._to_entity(model) if model else None

    def get_full_name(self, user_id: str) -> str | None:
        full_name = (
            self.session.query(ProfileModel.full_name)
            .filter(ProfileModel.id == user_id)
            .scalar()
        )
        return full_name or None

    def list_for_crm_sync(
        self, *, missing_contact_only: bool = False, limit: int | None = None
    ) -> Sequence[Profile]:
        query = self.session.query(ProfileModel).filter(ProfileModel.email.isnot(None))
        if missing_contact_only:
            query = query.filter(ProfileModel.ghl_contact_id.is_(None))
        query = query.order_by(ProfileModel.created_at.asc(), ProfileModel.id.asc())
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def update_contact_id(self, user_id: str, contact_id: str) -> bool:
        """Store ``contact_id`` on the profile; return ``False`` if it is missing."""

        model = self.session.get(ProfileModel, user_id)
        if model is None:
            return False
        model.ghl_contact_id = contact_id
        self.session.add(model)
        self.session.commit()
        return True

    @staticmethod
    def _to_entity(model: ProfileModel) -> Profile:
        assessment = model.skills_assessment if isinstance(model.skills_assessment, dict) else {}
        return Profile(
            id=model.id,
            email=model.email,
            full_name=model.full_name,
            phone=model.phone,
            external_contact_id=model.ghl_contact_id,
            city=model.city,
            state=model.state,
            country=model.country,
            salon_name=model.salon_name,
            years_experience=model.years_experience,
            role=model.role,
            skills_assessment={str(key): str(value) for key, value in assessment.items() if value},
        )


__all__ = ["ProfileRepository"]

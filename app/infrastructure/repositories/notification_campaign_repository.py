"""Persistence helpers for broadcast campaigns."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import NotificationCampaign
from app.infrastructure.models import NotificationCampaignModel
from app.utils import ensure_app_timezone, now_in_app_timezone


class NotificationCampaignRepository:
    """Provide create and delivery-count updates for campaigns."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, campaign_id: int) -> NotificationCampaign | None:
        model = self.session.get(NotificationCampaignModel, campaign_id)
        return self._to_entity(model) if model else None

    def create(self, campaign: NotificationCampaign) -> NotificationCampaign:
        model = NotificationCampaignModel(
            title=campaign.title,
            body=campaign.body,
            deep_link=campaign.deep_link,
            audience=campaign.audience,
            status=campaign.status,
            scheduled_for=campaign.scheduled_for,
            sent_at=campaign.sent_at,
            created_by=campaign.created_by,
            created_at=campaign.created_at or now_in_app_timezone(),
            updated_at=now_in_app_timezone(),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def record_delivery(
        self, campaign_id: int, *, sent_count: int, failed_count: int
    ) -> NotificationCampaign:
        model = self.session.get(NotificationCampaignModel, campaign_id)
        if model is None:
            msg = f"Notification campaign with id {campaign_id} not found"
            raise ValueError(msg)
        model.sent_count = sent_count
        model.failed_count = failed_count
        model.updated_at = now_in_app_timezone()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: NotificationCampaignModel) -> NotificationCampaign:
        return NotificationCampaign(
            id=model.id,
            title=model.title,
            body=model.body,
            deep_link=model.deep_link,
            audience=model.audience,
            status=model.status,
            scheduled_for=ensure_app_timezone(model.scheduled_for),
            sent_at=ensure_app_timezone(model.sent_at),
            created_by=model.created_by,
            sent_count=model.sent_count,
            failed_count=model.failed_count,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["NotificationCampaignRepository"]

"""Admin broadcast campaigns delivered through the push fan-out."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import (
    AUDIENCE_ALL,
    AUDIENCE_FREE,
    AUDIENCE_SUBSCRIBERS,
    CAMPAIGN_STATUS_SCHEDULED,
    CAMPAIGN_STATUS_SENT,
    NotificationCampaign,
    PushToken,
    normalize_audience,
)
from app.domain.exceptions import ValidationError
from app.infrastructure.expo_push import ExpoPushClient
from app.infrastructure.repositories import (
    EntitlementRepository,
    NotificationCampaignRepository,
    PushTokenRepository,
)
from app.utils import now_in_app_timezone, parse_datetime

from .dispatch import build_push_data, dispatch_to_tokens

logger = logging.getLogger(__name__)


@dataclass
class CampaignBroadcast:
    """Stored campaign plus what happened when it was sent."""

    campaign: NotificationCampaign
    scheduled: bool = False
    sent: int = 0
    failed: int = 0
    total: int = 0


def audience_user_ids(session: Session, audience: str) -> set[str] | None:
    """Return the user ids targeted by ``audience``; ``None`` means everyone."""

    if audience == AUDIENCE_ALL:
        return None
    entitlements = EntitlementRepository(session).list()
    if audience == AUDIENCE_SUBSCRIBERS:
        return {item.user_id for item in entitlements if item.is_active_subscriber()}
    if audience == AUDIENCE_FREE:
        return {item.user_id for item in entitlements if item.is_free()}
    return None


def broadcast_campaign(
    session: Session,
    push_client: ExpoPushClient,
    *,
    title: str,
    body: str,
    deep_link: str | None = None,
    audience: str | None = None,
    schedule_for: str | datetime | None = None,
    created_by: str | None = None,
) -> CampaignBroadcast:
    """Record a campaign and, unless it is scheduled for later, send it now."""

    title = (title or "").strip()
    body = (body or "").strip()
    deep_link = (deep_link or "").strip() or None
    if not title:
        raise ValidationError("Title is required")
    if not body:
        raise ValidationError("Body is required")

    audience = normalize_audience(audience)
    now = now_in_app_timezone()
    scheduled_for = parse_datetime(schedule_for)
    scheduled = scheduled_for is not None and scheduled_for > now

    repository = NotificationCampaignRepository(session)
    campaign = repository.create(
        NotificationCampaign(
            id=None,
            title=title,
            body=body,
            deep_link=deep_link,
            audience=audience,
            status=CAMPAIGN_STATUS_SCHEDULED if scheduled else CAMPAIGN_STATUS_SENT,
            scheduled_for=scheduled_for if scheduled else None,
            sent_at=None if scheduled else now,
            created_by=created_by,
            created_at=now,
        )
    )

    if scheduled:
        logger.info("Campaign %s scheduled for %s", campaign.id, scheduled_for.isoformat())
        return CampaignBroadcast(campaign=campaign, scheduled=True)

    user_ids = audience_user_ids(session, audience)
    tokens: list[PushToken]
    if user_ids is None:
        tokens = list(PushTokenRepository(session).list_all())
    elif user_ids:
        tokens = list(PushTokenRepository(session).list_for_users(user_ids))
    else:
        tokens = []

    if not tokens:
        logger.info("Campaign %s has no reachable devices for audience %s", campaign.id, audience)
        campaign = repository.record_delivery(campaign.id, sent_count=0, failed_count=0)
        return CampaignBroadcast(campaign=campaign)

    result = dispatch_to_tokens(
        push_client, tokens, title=title, body=body, data=build_push_data(deep_link)
    )
    campaign = repository.record_delivery(
        campaign.id, sent_count=result.sent, failed_count=result.failed
    )
    return CampaignBroadcast(
        campaign=campaign, sent=result.sent, failed=result.failed, total=len(tokens)
    )


__all__ = ["CampaignBroadcast", "audience_user_ids", "broadcast_campaign"]

"""Domain entity for admin broadcast push campaigns."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

AUDIENCE_ALL = "all"
AUDIENCE_SUBSCRIBERS = "subscribers"
AUDIENCE_FREE = "free"
AUDIENCES = (AUDIENCE_ALL, AUDIENCE_SUBSCRIBERS, AUDIENCE_FREE)

CAMPAIGN_STATUS_SCHEDULED = "scheduled"
CAMPAIGN_STATUS_SENT = "sent"


def normalize_audience(value: str | None) -> str:
    """Return ``value`` when it is a known audience, otherwise ``all``."""

    if value in (AUDIENCE_SUBSCRIBERS, AUDIENCE_FREE):
        return value
    return AUDIENCE_ALL


@dataclass
class NotificationCampaign:
    """A broadcast notification sent, or scheduled, by an administrator."""

    id: int | None
    title: str
    body: str
    deep_link: str | None
    audience: str
    status: str
    scheduled_for: datetime | None = None
    sent_at: datetime | None = None
    created_by: str | None = None
    sent_count: int | None = None
    failed_count: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_scheduled(self) -> bool:
        return self.status == CAMPAIGN_STATUS_SCHEDULED


__all__ = [
    "AUDIENCE_ALL",
    "AUDIENCE_SUBSCRIBERS",
    "AUDIENCE_FREE",
    "AUDIENCES",
    "CAMPAIGN_STATUS_SCHEDULED",
    "CAMPAIGN_STATUS_SENT",
    "NotificationCampaign",
    "normalize_audience",
]

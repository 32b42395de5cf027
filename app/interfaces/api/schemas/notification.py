"""Pydantic models describing notification requests and results."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.domain.entities import NotificationEvent


class NotificationEventRequest(BaseModel):
    """Event payload posted by route handlers elsewhere in the platform.

    Accepts both the snake_case names and the camelCase names used by the
    mobile app and the team-event flow.
    """

    model_config = ConfigDict(extra="ignore")

    kind: str | None = Field(default=None, validation_alias=AliasChoices("kind", "type"))
    subject_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("subject_id", "subjectId", "post_id", "eventId"),
    )
    actor_id: str | None = Field(default=None, validation_alias=AliasChoices("actor_id", "actorId"))
    explicit_targets: list[str] | None = Field(
        default=None,
        validation_alias=AliasChoices("explicit_targets", "explicitTargets", "userIds"),
    )
    target_user_id: str | None = Field(
        default=None, description="Single explicit recipient, shorthand for explicit_targets"
    )
    comment_id: str | None = None
    reaction_type: str | None = None
    event_title: str | None = Field(
        default=None, validation_alias=AliasChoices("event_title", "eventTitle")
    )
    event_date: str | None = Field(
        default=None, validation_alias=AliasChoices("event_date", "eventDate")
    )
    registered_by: str | None = Field(
        default=None, validation_alias=AliasChoices("registered_by", "registeredBy")
    )
    attributes: dict[str, Any] = Field(default_factory=dict)

    def to_event(self) -> NotificationEvent:
        """Return the domain event described by this payload."""

        targets = self.explicit_targets
        if targets is None and self.target_user_id:
            targets = [self.target_user_id]

        attributes = dict(self.attributes)
        for name in ("comment_id", "reaction_type", "event_title", "event_date", "registered_by"):
            value = getattr(self, name)
            if value is not None:
                attributes[name] = value

        return NotificationEvent(
            kind=(self.kind or "").strip(),
            subject_id=(self.subject_id or "").strip(),
            actor_id=(self.actor_id or "").strip(),
            explicit_targets=targets,
            attributes=attributes,
        )


class DispatchResultRead(BaseModel):
    """Delivery counts for one notification request."""

    model_config = ConfigDict(from_attributes=True)

    sent: int
    failed: int
    unconfirmed: int = Field(
        default=0,
        description="Part of ``sent`` assumed delivered because the provider returned no per-message results",
    )


class CampaignCreate(BaseModel):
    """Payload used by administrators to broadcast a push campaign."""

    title: str = ""
    body: str = ""
    deep_link: str | None = None
    audience: str | None = None
    schedule_for: str | None = None
    created_by: str | None = None


class CampaignRead(BaseModel):
    """Representation of a stored campaign."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    body: str
    deep_link: str | None = None
    audience: str
    status: str
    scheduled_for: datetime | None = None
    sent_at: datetime | None = None
    created_by: str | None = None
    sent_count: int | None = None
    failed_count: int | None = None
    created_at: datetime | None = None


class CampaignBroadcastRead(BaseModel):
    """Campaign plus the delivery counts of its immediate broadcast."""

    model_config = ConfigDict(from_attributes=True)

    campaign: CampaignRead
    scheduled: bool = False
    sent: int = 0
    failed: int = 0
    total: int = 0


__all__ = [
    "CampaignBroadcastRead",
    "CampaignCreate",
    "CampaignRead",
    "DispatchResultRead",
    "NotificationEventRequest",
]

"""Build the user-facing text of event notifications."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from app.domain.entities import (
    NOTIFICATION_KIND_COMMENT,
    NOTIFICATION_KIND_FEEDBACK_REQUEST,
    NOTIFICATION_KIND_REACTION,
    NOTIFICATION_KIND_TEAM_EVENT_REGISTRATION,
    NotificationEvent,
)
from app.domain.exceptions import ValidationError
from app.utils import format_short_date

DEFAULT_ACTOR_NAME = "Someone"

_REACTION_EMOJI = {
    "fire": "🔥",
    "haircut": "💇",
    "helpful": "💡",
    "like": "❤️",
}
_DEFAULT_REACTION_EMOJI = "❤️"


@dataclass
class EventMessage:
    """Title, body and routing data shared by every device of every recipient."""

    title: str
    body: str
    deep_link: str
    data: dict[str, Any] = field(default_factory=dict)


def reaction_emoji(reaction_type: str | None) -> str:
    """Return the emoji shown for ``reaction_type``; unknown types read as a like."""

    return _REACTION_EMOJI.get(reaction_type or "", _DEFAULT_REACTION_EMOJI)


def post_deep_link(post_id: str, comment_id: str | None = None) -> str:
    if comment_id:
        return f"/community/{post_id}?comment={comment_id}"
    return f"/community/{post_id}"


def event_deep_link(event_id: str) -> str:
    return f"/(tabs)/events/{event_id}"


def build_event_message(event: NotificationEvent, actor_name: str | None) -> EventMessage:
    """Return the notification content for ``event`` performed by ``actor_name``."""

    name = (actor_name or "").strip() or DEFAULT_ACTOR_NAME

    if event.kind == NOTIFICATION_KIND_COMMENT:
        deep_link = post_deep_link(event.subject_id, event.attribute("comment_id"))
        return EventMessage(
            title="New Comment",
            body=f"{name} commented on your post",
            deep_link=deep_link,
            data={"deep_link": deep_link},
        )

    if event.kind == NOTIFICATION_KIND_REACTION:
        deep_link = post_deep_link(event.subject_id)
        emoji = reaction_emoji(event.attribute("reaction_type"))
        return EventMessage(
            title="New Reaction",
            body=f"{name} reacted {emoji} to your post",
            deep_link=deep_link,
            data={"deep_link": deep_link},
        )

    if event.kind == NOTIFICATION_KIND_FEEDBACK_REQUEST:
        deep_link = post_deep_link(event.subject_id)
        return EventMessage(
            title="Feedback Requested",
            body=f"{name} is asking for feedback on their haircut",
            deep_link=deep_link,
            data={"deep_link": deep_link},
        )

    if event.kind == NOTIFICATION_KIND_TEAM_EVENT_REGISTRATION:
        registered_by = (event.attribute("registered_by") or "").strip() or name
        event_title = event.attribute("event_title") or ""
        event_date = format_short_date(event.attribute("event_date"))
        deep_link = event_deep_link(event.subject_id)
        return EventMessage(
            title="Event Registration Confirmed",
            body=f'{registered_by} registered you for "{event_title}" on {event_date}',
            deep_link=deep_link,
            data={
                "deep_link": deep_link,
                "eventId": event.subject_id,
                "type": NOTIFICATION_KIND_TEAM_EVENT_REGISTRATION,
            },
        )

    raise ValidationError(f"Unknown notification type: {event.kind}")


__all__ = [
    "DEFAULT_ACTOR_NAME",
    "EventMessage",
    "build_event_message",
    "event_deep_link",
    "post_deep_link",
    "reaction_emoji",
]

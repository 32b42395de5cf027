"""Domain entities describing a notification-triggering occurrence."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

NOTIFICATION_KIND_COMMENT = "comment"
NOTIFICATION_KIND_REACTION = "reaction"
NOTIFICATION_KIND_FEEDBACK_REQUEST = "feedback_request"
NOTIFICATION_KIND_TEAM_EVENT_REGISTRATION = "team_event_registration"

POST_NOTIFICATION_KINDS = frozenset(
    {
        NOTIFICATION_KIND_COMMENT,
        NOTIFICATION_KIND_REACTION,
        NOTIFICATION_KIND_FEEDBACK_REQUEST,
    }
)
NOTIFICATION_KINDS = POST_NOTIFICATION_KINDS | {NOTIFICATION_KIND_TEAM_EVENT_REGISTRATION}


@dataclass
class NotificationEvent:
    """One triggering occurrence, built per request and never persisted.

    ``subject_id`` is the community post for post kinds and the event for
    ``team_event_registration``. ``attributes`` carries kind-specific extras
    such as ``comment_id``, ``reaction_type``, ``event_title``, ``event_date``
    and ``registered_by``.
    """

    kind: str
    subject_id: str
    actor_id: str
    explicit_targets: list[str] | None = None
    attributes: dict[str, Any] = field(default_factory=dict)

    def attribute(self, name: str) -> Any:
        """Return the ``name`` attribute or ``None`` when it is absent."""

        return self.attributes.get(name)


@dataclass
class ResolvedRecipients:
    """Users that should receive a notification for an event."""

    recipients: set[str] = field(default_factory=set)
    content_snippet: str | None = None


__all__ = [
    "NOTIFICATION_KIND_COMMENT",
    "NOTIFICATION_KIND_REACTION",
    "NOTIFICATION_KIND_FEEDBACK_REQUEST",
    "NOTIFICATION_KIND_TEAM_EVENT_REGISTRATION",
    "NOTIFICATION_KINDS",
    "POST_NOTIFICATION_KINDS",
    "NotificationEvent",
    "ResolvedRecipients",
]

"""Entry point combining recipient resolution and push fan-out."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.domain.entities import (
    NOTIFICATION_KIND_TEAM_EVENT_REGISTRATION,
    NOTIFICATION_KINDS,
    DispatchResult,
    NotificationEvent,
)
from app.domain.exceptions import NotFoundError, ValidationError
from app.infrastructure.expo_push import ExpoPushClient
from app.infrastructure.repositories import ProfileRepository

from .dispatch import dispatch_push
from .messages import build_event_message
from .recipients import resolve_recipients

logger = logging.getLogger(__name__)


def validate_event(event: NotificationEvent) -> None:
    """Raise :class:`ValidationError` when ``event`` lacks required fields."""

    if not event.kind:
        raise ValidationError("Missing required field: kind")
    if event.kind not in NOTIFICATION_KINDS:
        raise ValidationError(f"Unknown notification type: {event.kind}")
    if not event.subject_id or not event.actor_id:
        raise ValidationError("Missing required fields: subject_id, actor_id")
    if event.kind == NOTIFICATION_KIND_TEAM_EVENT_REGISTRATION and not event.explicit_targets:
        raise ValidationError("Missing required fields: subject_id, explicit_targets")


def notify_event(
    session: Session, push_client: ExpoPushClient, event: NotificationEvent
) -> DispatchResult:
    """Notify everyone concerned by ``event`` and return the delivery counts.

    A missing subject post is a no-op rather than an error.
    """

    validate_event(event)

    try:
        resolved = resolve_recipients(session, event)
    except NotFoundError as exc:
        logger.info("Skipping %s notification for %s: %s", event.kind, event.subject_id, exc)
        return DispatchResult()

    if not resolved.recipients:
        logger.debug("No recipients for %s notification on %s", event.kind, event.subject_id)
        return DispatchResult()

    actor_name = ProfileRepository(session).get_full_name(event.actor_id)
    message = build_event_message(event, actor_name)
    return dispatch_push(
        session,
        push_client,
        resolved.recipients,
        title=message.title,
        body=message.body,
        deep_link=message.deep_link,
        data=message.data,
    )


__all__ = ["notify_event", "validate_event"]

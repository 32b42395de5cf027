"""Determine which users should be notified about an event."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import (
    NOTIFICATION_KIND_TEAM_EVENT_REGISTRATION,
    NotificationEvent,
    ResolvedRecipients,
)
from app.domain.exceptions import NotFoundError, ValidationError
from app.infrastructure.repositories import CommunityPostRepository

_SNIPPET_LENGTH = 100


def resolve_recipients(session: Session, event: NotificationEvent) -> ResolvedRecipients:
    """Return the recipients of ``event`` without ever including its actor.

    A non-empty list of explicit targets is used verbatim. Otherwise the
    owner of the subject post is the only candidate. Raises
    :class:`NotFoundError` when the post does not exist.
    """

    if event.explicit_targets:
        recipients = {
            user_id for user_id in event.explicit_targets if user_id and user_id != event.actor_id
        }
        return ResolvedRecipients(recipients=recipients)

    if event.kind == NOTIFICATION_KIND_TEAM_EVENT_REGISTRATION:
        raise ValidationError("Team event notifications require explicit target user ids")

    post = CommunityPostRepository(session).get(event.subject_id)
    if post is None:
        raise NotFoundError("Post not found")

    snippet = _snippet(post.content)
    if post.owner_user_id == event.actor_id:
        return ResolvedRecipients(recipients=set(), content_snippet=snippet)
    return ResolvedRecipients(recipients={post.owner_user_id}, content_snippet=snippet)


def _snippet(content: str | None) -> str | None:
    if not content:
        return None
    text = " ".join(content.split())
    if len(text) <= _SNIPPET_LENGTH:
        return text
    return text[: _SNIPPET_LENGTH - 1].rstrip() + "…"


__all__ = ["resolve_recipients"]

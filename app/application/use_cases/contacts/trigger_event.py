"""Forward member lifecycle events to the CRM workflow webhook."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import CRM_EVENT_TYPES, CrmEventResult, split_full_name
from app.domain.exceptions import ValidationError
from app.infrastructure.gohighlevel import GoHighLevelClient
from app.infrastructure.repositories import ProfileRepository
from app.utils import now_in_app_timezone

from .reconcile_tags import SKIPPED_REASON

logger = logging.getLogger(__name__)


def trigger_crm_event(
    session: Session,
    crm_client: GoHighLevelClient | None,
    *,
    event: str,
    email: str,
    user_id: str | None = None,
    contact: Mapping[str, Any] | None = None,
    data: Mapping[str, Any] | None = None,
) -> CrmEventResult:
    """Post ``event`` for ``email`` to the workflow webhook.

    Missing contact details are filled from the user's profile. Webhook
    failures are logged by the client and reported as ``webhook_sent=False``.
    """

    if crm_client is None:
        logger.info("CRM integration disabled; skipping %s event", event)
        return CrmEventResult(skipped=True, reason=SKIPPED_REASON)

    if not event or not email:
        raise ValidationError("Missing required fields: event, email")
    if event not in CRM_EVENT_TYPES:
        raise ValidationError(f"Unknown CRM event: {event}")

    contact = contact or {}
    first_name = contact.get("firstName") or ""
    last_name = contact.get("lastName") or ""
    phone = contact.get("phone")
    contact_id: str | None = None

    if user_id:
        profile = ProfileRepository(session).get(user_id)
        if profile is not None:
            if not first_name and profile.full_name:
                first_name, last_name = split_full_name(profile.full_name)
            if not phone and profile.phone:
                phone = profile.phone
            contact_id = profile.external_contact_id

    contact_payload: dict[str, Any] = {
        "email": email,
        "firstName": first_name,
        "lastName": last_name,
    }
    if phone:
        contact_payload["phone"] = phone

    payload = {
        "event": event,
        "timestamp": now_in_app_timezone().isoformat(),
        "contact": contact_payload,
        "data": dict(data or {}),
    }

    webhook_sent = False
    if crm_client.webhook_url:
        webhook_sent = crm_client.post_workflow_event(event, payload)
    else:
        logger.debug("No CRM webhook configured; %s event not forwarded", event)

    if contact_id:
        logger.info("CRM contact %s triggered event %s", contact_id, event)

    return CrmEventResult(event=event, contact_id=contact_id, webhook_sent=webhook_sent)


__all__ = ["trigger_crm_event"]

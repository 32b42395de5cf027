"""Create or update the CRM contact that mirrors a member profile."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from app.domain.entities import (
    CONTACT_SYNC_CREATED,
    CONTACT_SYNC_UPDATED,
    ContactSyncResult,
    CrmContact,
    Profile,
    split_full_name,
)
from app.domain.exceptions import UpstreamError, ValidationError
from app.infrastructure.gohighlevel import GoHighLevelClient
from app.infrastructure.repositories import ProfileRepository

from .reconcile_tags import SKIPPED_REASON, unique_tags

logger = logging.getLogger(__name__)

SYNC_ACTION_INSERT = "INSERT"
SYNC_ACTION_UPDATE = "UPDATE"

BASE_CONTACT_TAG = "app_user"
NEW_SIGNUP_TAG = "new_signup"

# Assessment answers copied into CRM custom fields, keyed by answer name.
_ASSESSMENT_FIELDS = (
    ("role", "app_role"),
    ("goal", "app_goal"),
    ("challenge", "app_challenge"),
    ("experience", "app_experience"),
)


@dataclass
class ContactSyncRequest:
    """Profile fields forwarded to the CRM."""

    email: str
    user_id: str | None = None
    full_name: str | None = None
    phone: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    salon_name: str | None = None
    years_experience: str | None = None
    role: str | None = None
    skills_assessment: dict[str, str] = field(default_factory=dict)
    action: str = SYNC_ACTION_UPDATE
    tags: list[str] = field(default_factory=list)

    @classmethod
    def from_profile(cls, profile: Profile, *, action: str = SYNC_ACTION_UPDATE) -> "ContactSyncRequest":
        return cls(
            email=profile.email or "",
            user_id=profile.id,
            full_name=profile.full_name,
            phone=profile.phone,
            city=profile.city,
            state=profile.state,
            country=profile.country,
            salon_name=profile.salon_name,
            years_experience=profile.years_experience,
            role=profile.role,
            skills_assessment=dict(profile.skills_assessment),
            action=action,
        )


def build_crm_contact(request: ContactSyncRequest) -> CrmContact:
    """Translate ``request`` into the contact payload, tags and custom fields."""

    first_name, last_name = split_full_name(request.full_name)
    address = {
        key: value
        for key, value in (
            ("city", request.city),
            ("state", request.state),
            ("country", request.country),
        )
        if value
    }

    assessment = request.skills_assessment or {}
    tags = [BASE_CONTACT_TAG]
    if request.action == SYNC_ACTION_INSERT:
        tags.append(NEW_SIGNUP_TAG)
    if request.role:
        tags.append(f"role_{request.role}")
    if assessment.get("role"):
        tags.append(f"assessment_{assessment['role']}")
    tags.extend(request.tags)

    custom_fields: list[dict[str, str]] = []
    if request.years_experience:
        custom_fields.append({"key": "years_experience", "field_value": request.years_experience})
    for answer, key in _ASSESSMENT_FIELDS:
        if assessment.get(answer):
            custom_fields.append({"key": key, "field_value": assessment[answer]})

    return CrmContact(
        email=request.email,
        first_name=first_name,
        last_name=last_name,
        phone=request.phone or None,
        company_name=request.salon_name or None,
        address=address,
        tags=unique_tags(tags),
        custom_fields=custom_fields,
    )


def sync_contact(
    session: Session,
    crm_client: GoHighLevelClient | None,
    request: ContactSyncRequest,
) -> ContactSyncResult:
    """Upsert the CRM contact for ``request`` and cache its id on the profile."""

    if crm_client is None:
        logger.info("CRM integration disabled; skipping contact sync")
        return ContactSyncResult(skipped=True, reason=SKIPPED_REASON)

    email = (request.email or "").strip()
    if not email:
        raise ValidationError("Email is required")
    request.email = email

    contact = build_crm_contact(request)
    existing_id = crm_client.search_contact_id_by_email(email)
    if existing_id:
        contact_id: str | None = crm_client.update_contact(existing_id, contact)
        action = CONTACT_SYNC_UPDATED
    else:
        contact_id = crm_client.create_contact(contact)
        action = CONTACT_SYNC_CREATED

    if contact_id and request.user_id:
        ProfileRepository(session).update_contact_id(request.user_id, contact_id)

    logger.info("CRM contact %s %s for %s", contact_id, action, email)
    return ContactSyncResult(contact_id=contact_id, action=action)


@dataclass
class BulkSyncSummary:
    """Counts reported by a bulk profile sync."""

    synced: int = 0
    failed: int = 0
    skipped: int = 0
    errors: list[str] = field(default_factory=list)


def sync_profiles(
    session: Session,
    crm_client: GoHighLevelClient,
    *,
    missing_contact_only: bool = False,
    limit: int | None = None,
) -> BulkSyncSummary:
    """Sync stored profiles one by one; a failing profile does not stop the run."""

    summary = BulkSyncSummary()
    profiles = ProfileRepository(session).list_for_crm_sync(
        missing_contact_only=missing_contact_only, limit=limit
    )
    for profile in profiles:
        try:
            result = sync_contact(session, crm_client, ContactSyncRequest.from_profile(profile))
        except (ValidationError, UpstreamError) as exc:
            logger.warning("Could not sync profile %s: %s", profile.id, exc)
            summary.failed += 1
            summary.errors.append(f"{profile.id}: {exc}")
            continue
        if result.skipped:
            summary.skipped += 1
        else:
            summary.synced += 1
    return summary


__all__ = [
    "BASE_CONTACT_TAG",
    "BulkSyncSummary",
    "NEW_SIGNUP_TAG",
    "SYNC_ACTION_INSERT",
    "SYNC_ACTION_UPDATE",
    "ContactSyncRequest",
    "build_crm_contact",
    "sync_contact",
    "sync_profiles",
]

"""Merge requested tag changes into a CRM contact."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy.orm import Session

from app.domain.entities import ContactIdentity, TagReconciliation
from app.domain.exceptions import ContactNotFoundError, ValidationError
from app.infrastructure.gohighlevel import GoHighLevelClient
from app.infrastructure.repositories import ProfileRepository

logger = logging.getLogger(__name__)

SKIPPED_REASON = "GHL not configured"


def unique_tags(tags: Iterable[str] | None) -> list[str]:
    """Return ``tags`` without blanks or duplicates, keeping their order."""

    ordered: list[str] = []
    seen: set[str] = set()
    for tag in tags or ():
        if not tag or tag in seen:
            continue
        seen.add(tag)
        ordered.append(tag)
    return ordered


def merge_tags(current: Iterable[str], add: Iterable[str], remove: Iterable[str]) -> list[str]:
    """Return ``(current ∪ add) − remove``.

    Additions are applied before removals, so a tag listed in both ends up
    absent. Comparison is exact and case-sensitive. The current tags are kept
    as the CRM returned them, including duplicates, and only new additions
    are appended.
    """

    removed = set(remove)
    merged = list(current)
    present = set(merged)
    for tag in add:
        if tag and tag not in present:
            present.add(tag)
            merged.append(tag)
    return [tag for tag in merged if tag not in removed]


def resolve_contact_id(
    session: Session, crm_client: GoHighLevelClient, identity: ContactIdentity
) -> str:
    """Return the CRM contact id for ``identity``.

    Tries the explicit contact id, then the id cached on the user's profile,
    then an email search. A contact found by email is cached on the profile
    when a user id was supplied.
    """

    if identity.contact_id:
        return identity.contact_id

    email = identity.email
    profiles = ProfileRepository(session)
    if identity.user_id:
        profile = profiles.get(identity.user_id)
        if profile is not None:
            if profile.external_contact_id:
                return profile.external_contact_id
            email = email or profile.email

    if email:
        contact_id = crm_client.search_contact_id_by_email(email)
        if contact_id:
            if identity.user_id and profiles.update_contact_id(identity.user_id, contact_id):
                logger.info("Cached CRM contact %s on profile %s", contact_id, identity.user_id)
            return contact_id

    raise ContactNotFoundError("Could not find GHL contact")


def reconcile_tags(
    session: Session,
    crm_client: GoHighLevelClient | None,
    identity: ContactIdentity,
    add: Iterable[str] | None = None,
    remove: Iterable[str] | None = None,
) -> TagReconciliation:
    """Apply ``add``/``remove`` to the contact identified by ``identity``.

    Returns a skipped result without any network call when the CRM is not
    configured. Provider failures propagate as :class:`UpstreamError`.
    """

    if crm_client is None:
        logger.info("CRM integration disabled; skipping tag update")
        return TagReconciliation(skipped=True, reason=SKIPPED_REASON)

    add_tags = unique_tags(add)
    remove_tags = unique_tags(remove)
    if not add_tags and not remove_tags:
        raise ValidationError("Must provide add_tags or remove_tags")
    if identity.is_empty():
        raise ValidationError("Must provide ghl_contact_id, user_id, or email")

    contact_id = resolve_contact_id(session, crm_client, identity)
    state = crm_client.get_contact(contact_id)
    final_tags = merge_tags(state.tags, add_tags, remove_tags)
    crm_client.update_contact_tags(contact_id, final_tags)

    logger.info(
        "Updated tags for CRM contact %s: +%s -%s", contact_id, add_tags, remove_tags
    )
    return TagReconciliation(
        contact_id=contact_id,
        final_tags=final_tags,
        added=add_tags,
        removed=remove_tags,
    )


__all__ = ["merge_tags", "reconcile_tags", "resolve_contact_id", "unique_tags"]

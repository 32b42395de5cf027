"""Endpoints that keep CRM contacts aligned with member activity."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.contacts import (
    ContactSyncRequest,
    reconcile_tags,
    sync_contact,
    trigger_crm_event,
)
from app.domain.exceptions import NotFoundError, UpstreamError, ValidationError
from app.infrastructure.database import get_db
from app.infrastructure.gohighlevel import GoHighLevelClient
from app.interfaces.api.dependencies import get_crm_client
from app.interfaces.api.schemas import (
    ContactSyncBody,
    ContactSyncRead,
    CrmEventRead,
    CrmEventRequest,
    TagUpdateRead,
    TagUpdateRequest,
)

router = APIRouter(prefix="/contacts", tags=["contacts"])

logger = logging.getLogger(__name__)


def _to_http_error(exc: Exception) -> HTTPException:
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    logger.error("CRM request failed: %s", exc)
    detail = getattr(exc, "detail", None) or str(exc)
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=detail)


@router.post("/tags", response_model=TagUpdateRead)
def update_contact_tags(
    payload: TagUpdateRequest,
    db: Session = Depends(get_db),
    crm_client: GoHighLevelClient | None = Depends(get_crm_client),
) -> TagUpdateRead:
    """Add and remove tags on a CRM contact located by id, user or email."""

    try:
        result = reconcile_tags(
            db, crm_client, payload.identity(), payload.add_tags, payload.remove_tags
        )
    except (ValidationError, NotFoundError, UpstreamError) as exc:
        raise _to_http_error(exc) from exc

    return TagUpdateRead(
        skipped=result.skipped,
        reason=result.reason,
        contact_id=result.contact_id,
        tags=result.final_tags,
        added=result.added,
        removed=result.removed,
    )


@router.post("/sync", response_model=ContactSyncRead)
def sync_profile_contact(
    payload: ContactSyncBody,
    db: Session = Depends(get_db),
    crm_client: GoHighLevelClient | None = Depends(get_crm_client),
) -> ContactSyncRead:
    """Create or update the CRM contact mirroring a member profile."""

    request = ContactSyncRequest(
        email=payload.email,
        user_id=payload.user_id,
        full_name=payload.full_name,
        phone=payload.phone,
        city=payload.city,
        state=payload.state,
        country=payload.country,
        salon_name=payload.salon_name,
        years_experience=payload.years_experience,
        role=payload.role,
        skills_assessment=dict(payload.skills_assessment or {}),
        action=payload.action,
        tags=list(payload.tags),
    )
    try:
        result = sync_contact(db, crm_client, request)
    except (ValidationError, UpstreamError) as exc:
        raise _to_http_error(exc) from exc

    return ContactSyncRead.model_validate(result)


@router.post("/events", response_model=CrmEventRead)
def trigger_contact_event(
    payload: CrmEventRequest,
    db: Session = Depends(get_db),
    crm_client: GoHighLevelClient | None = Depends(get_crm_client),
) -> CrmEventRead:
    """Forward a member lifecycle event to the CRM workflow webhook."""

    try:
        result = trigger_crm_event(
            db,
            crm_client,
            event=payload.event.strip(),
            email=payload.email.strip(),
            user_id=payload.user_id,
            contact=payload.contact.model_dump(exclude_none=True) if payload.contact else None,
            data=payload.data,
        )
    except ValidationError as exc:
        raise _to_http_error(exc) from exc

    return CrmEventRead.model_validate(result)

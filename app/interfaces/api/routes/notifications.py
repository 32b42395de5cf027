"""Endpoints that fan out push notifications to members."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import broadcast_campaign, notify_event
from app.domain.exceptions import ValidationError
from app.infrastructure.database import get_db
from app.infrastructure.expo_push import ExpoPushClient
from app.interfaces.api.dependencies import get_push_client
from app.interfaces.api.schemas import (
    CampaignBroadcastRead,
    CampaignCreate,
    CampaignRead,
    DispatchResultRead,
    NotificationEventRequest,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.post("/events", response_model=DispatchResultRead)
def post_notification_event(
    payload: NotificationEventRequest,
    db: Session = Depends(get_db),
    push_client: ExpoPushClient = Depends(get_push_client),
) -> DispatchResultRead:
    """Notify the members concerned by a community or team event.

    Delivery failures are reported in the counts, never as an error status.
    """

    try:
        result = notify_event(db, push_client, payload.to_event())
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return DispatchResultRead(
        sent=result.sent, failed=result.failed, unconfirmed=result.unconfirmed
    )


@router.post("/campaigns", response_model=CampaignBroadcastRead)
def post_campaign(
    payload: CampaignCreate,
    db: Session = Depends(get_db),
    push_client: ExpoPushClient = Depends(get_push_client),
) -> CampaignBroadcastRead:
    """Record an admin campaign and broadcast it unless it is scheduled."""

    try:
        broadcast = broadcast_campaign(
            db,
            push_client,
            title=payload.title,
            body=payload.body,
            deep_link=payload.deep_link,
            audience=payload.audience,
            schedule_for=payload.schedule_for,
            created_by=payload.created_by,
        )
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return CampaignBroadcastRead(
        campaign=CampaignRead.model_validate(broadcast.campaign),
        scheduled=broadcast.scheduled,
        sent=broadcast.sent,
        failed=broadcast.failed,
        total=broadcast.total,
    )

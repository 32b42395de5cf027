"""Domain entities exposed by the application."""

from .campaign import (
    AUDIENCE_ALL,
    AUDIENCE_FREE,
    AUDIENCE_SUBSCRIBERS,
    AUDIENCES,
    CAMPAIGN_STATUS_SCHEDULED,
    CAMPAIGN_STATUS_SENT,
    NotificationCampaign,
    normalize_audience,
)
from .community_post import CommunityPost
from .contact import (
    CONTACT_SYNC_CREATED,
    CONTACT_SYNC_UPDATED,
    CRM_EVENT_TYPES,
    ContactIdentity,
    ContactSyncResult,
    ContactTagState,
    CrmContact,
    CrmEventResult,
    TagReconciliation,
)
from .entitlement import Entitlement
from .notification_event import (
    NOTIFICATION_KIND_COMMENT,
    NOTIFICATION_KIND_FEEDBACK_REQUEST,
    NOTIFICATION_KIND_REACTION,
    NOTIFICATION_KIND_TEAM_EVENT_REGISTRATION,
    NOTIFICATION_KINDS,
    POST_NOTIFICATION_KINDS,
    NotificationEvent,
    ResolvedRecipients,
)
from .profile import Profile, split_full_name
from .push import (
    DELIVERY_STATUS_FAILED,
    DELIVERY_STATUS_OK,
    PUSH_BATCH_LIMIT,
    DeliveryOutcome,
    DispatchResult,
    PushMessage,
    PushToken,
)

__all__ = [
    "AUDIENCE_ALL",
    "AUDIENCE_FREE",
    "AUDIENCE_SUBSCRIBERS",
    "AUDIENCES",
    "CAMPAIGN_STATUS_SCHEDULED",
    "CAMPAIGN_STATUS_SENT",
    "NotificationCampaign",
    "normalize_audience",
    "CommunityPost",
    "CONTACT_SYNC_CREATED",
    "CONTACT_SYNC_UPDATED",
    "CRM_EVENT_TYPES",
    "ContactIdentity",
    "ContactSyncResult",
    "ContactTagState",
    "CrmContact",
    "CrmEventResult",
    "TagReconciliation",
    "Entitlement",
    "NOTIFICATION_KIND_COMMENT",
    "NOTIFICATION_KIND_FEEDBACK_REQUEST",
    "NOTIFICATION_KIND_REACTION",
    "NOTIFICATION_KIND_TEAM_EVENT_REGISTRATION",
    "NOTIFICATION_KINDS",
    "POST_NOTIFICATION_KINDS",
    "NotificationEvent",
    "ResolvedRecipients",
    "Profile",
    "split_full_name",
    "DELIVERY_STATUS_FAILED",
    "DELIVERY_STATUS_OK",
    "PUSH_BATCH_LIMIT",
    "DeliveryOutcome",
    "DispatchResult",
    "PushMessage",
    "PushToken",
]

from .contact import (
    ContactSyncBody,
    ContactSyncRead,
    CrmEventContact,
    CrmEventRead,
    CrmEventRequest,
    TagUpdateRead,
    TagUpdateRequest,
)
from .notification import (
    CampaignBroadcastRead,
    CampaignCreate,
    CampaignRead,
    DispatchResultRead,
    NotificationEventRequest,
)

__all__ = [
    "ContactSyncBody",
    "ContactSyncRead",
    "CrmEventContact",
    "CrmEventRead",
    "CrmEventRequest",
    "TagUpdateRead",
    "TagUpdateRequest",
    "CampaignBroadcastRead",
    "CampaignCreate",
    "CampaignRead",
    "DispatchResultRead",
    "NotificationEventRequest",
]

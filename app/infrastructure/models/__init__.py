"""ORM models used by the application infrastructure."""

from .community_post import CommunityPostModel
from .entitlement import EntitlementModel
from .notification_campaign import NotificationCampaignModel
from .profile import ProfileModel
from .push_token import PushTokenModel

__all__ = [
    "CommunityPostModel",
    "EntitlementModel",
    "NotificationCampaignModel",
    "ProfileModel",
    "PushTokenModel",
]

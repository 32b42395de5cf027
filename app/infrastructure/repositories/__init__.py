"""Repository implementations for infrastructure layer."""

from .community_post_repository import CommunityPostRepository
from .entitlement_repository import EntitlementRepository
from .notification_campaign_repository import NotificationCampaignRepository
from .profile_repository import ProfileRepository
from .push_token_repository import PushTokenRepository

__all__ = [
    "CommunityPostRepository",
    "EntitlementRepository",
    "NotificationCampaignRepository",
    "ProfileRepository",
    "PushTokenRepository",
]

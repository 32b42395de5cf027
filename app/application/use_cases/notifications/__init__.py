"""Public helpers for notifying members about community and team events."""

from .campaigns import CampaignBroadcast, broadcast_campaign
from .dispatch import dispatch_push, dispatch_to_tokens
from .messages import EventMessage, build_event_message
from .notify_event import notify_event, validate_event
from .recipients import resolve_recipients

__all__ = [
    "CampaignBroadcast",
    "broadcast_campaign",
    "dispatch_push",
    "dispatch_to_tokens",
    "EventMessage",
    "build_event_message",
    "notify_event",
    "validate_event",
    "resolve_recipients",
]

"""Aggregate application use cases."""

from .contacts import reconcile_tags, sync_contact, trigger_crm_event
from .notifications import broadcast_campaign, dispatch_push, notify_event

__all__ = [
    "reconcile_tags",
    "sync_contact",
    "trigger_crm_event",
    "broadcast_campaign",
    "dispatch_push",
    "notify_event",
]

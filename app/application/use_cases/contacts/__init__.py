"""Use cases that keep CRM contacts in sync with member activity."""

from .reconcile_tags import merge_tags, reconcile_tags, resolve_contact_id
from .sync_contact import (
    BulkSyncSummary,
    ContactSyncRequest,
    build_crm_contact,
    sync_contact,
    sync_profiles,
)
from .trigger_event import trigger_crm_event

__all__ = [
    "merge_tags",
    "reconcile_tags",
    "resolve_contact_id",
    "ContactSyncRequest",
    "build_crm_contact",
    "BulkSyncSummary",
    "sync_contact",
    "sync_profiles",
    "trigger_crm_event",
]

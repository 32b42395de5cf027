"""Domain entities for the CRM contact integration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

CRM_EVENT_TYPES = (
    "user.signup",
    "subscription.created",
    "subscription.canceled",
    "subscription.renewed",
    "payment.success",
    "payment.failed",
    "payment.recovered",
    "module.completed",
    "certification.purchased",
    "certification.submitted",
    "certification.approved",
    "certification.rejected",
    "event.ticket_purchased",
    "event.reminder_24h",
    "user.inactive_14d",
    "user.inactive_30d",
)

CONTACT_SYNC_CREATED = "created"
CONTACT_SYNC_UPDATED = "updated"


@dataclass(frozen=True)
class ContactIdentity:
    """Fields that can locate a CRM contact, tried in declaration order."""

    contact_id: str | None = None
    user_id: str | None = None
    email: str | None = None

    def is_empty(self) -> bool:
        return not (self.contact_id or self.user_id or self.email)


@dataclass
class ContactTagState:
    """Tags currently attached to a CRM contact."""

    contact_id: str
    tags: list[str] = field(default_factory=list)


@dataclass
class TagReconciliation:
    """Outcome of merging requested tag changes into a contact."""

    contact_id: str | None = None
    final_tags: list[str] = field(default_factory=list)
    added: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    skipped: bool = False
    reason: str | None = None


@dataclass
class CrmContact:
    """Contact fields written to the CRM during a profile sync."""

    email: str
    first_name: str = ""
    last_name: str = ""
    phone: str | None = None
    company_name: str | None = None
    address: dict[str, str] = field(default_factory=dict)
    tags: list[str] = field(default_factory=list)
    custom_fields: list[dict[str, str]] = field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "email": self.email,
            "firstName": self.first_name,
            "lastName": self.last_name,
        }
        if self.phone:
            payload["phone"] = self.phone
        if self.company_name:
            payload["companyName"] = self.company_name
        if self.address:
            payload["address"] = dict(self.address)
        payload["tags"] = list(self.tags)
        if self.custom_fields:
            payload["customFields"] = [dict(item) for item in self.custom_fields]
        return payload


@dataclass
class ContactSyncResult:
    """Result of creating or updating a CRM contact from a profile."""

    contact_id: str | None = None
    action: str | None = None
    skipped: bool = False
    reason: str | None = None


@dataclass
class CrmEventResult:
    """Result of forwarding a lifecycle event to the CRM workflows."""

    event: str | None = None
    contact_id: str | None = None
    webhook_sent: bool = False
    skipped: bool = False
    reason: str | None = None


__all__ = [
    "CRM_EVENT_TYPES",
    "CONTACT_SYNC_CREATED",
    "CONTACT_SYNC_UPDATED",
    "ContactIdentity",
    "ContactTagState",
    "TagReconciliation",
    "CrmContact",
    "ContactSyncResult",
    "CrmEventResult",
]

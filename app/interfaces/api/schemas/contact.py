"""Pydantic models for the CRM contact endpoints."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.domain.entities import ContactIdentity


class TagUpdateRequest(BaseModel):
    """Tags to add to and remove from a contact located by any identity field."""

    model_config = ConfigDict(extra="ignore")

    ghl_contact_id: str | None = Field(
        default=None, validation_alias=AliasChoices("ghl_contact_id", "contact_id", "contactId")
    )
    user_id: str | None = Field(default=None, validation_alias=AliasChoices("user_id", "userId"))
    email: str | None = None
    add_tags: list[str] = Field(default_factory=list, validation_alias=AliasChoices("add_tags", "add"))
    remove_tags: list[str] = Field(
        default_factory=list, validation_alias=AliasChoices("remove_tags", "remove")
    )

    def identity(self) -> ContactIdentity:
        return ContactIdentity(
            contact_id=(self.ghl_contact_id or "").strip() or None,
            user_id=(self.user_id or "").strip() or None,
            email=(self.email or "").strip() or None,
        )


class TagUpdateRead(BaseModel):
    """Final tag set written to the contact, or a skipped marker."""

    model_config = ConfigDict(from_attributes=True)

    success: bool = True
    skipped: bool = False
    reason: str | None = None
    contact_id: str | None = None
    tags: list[str] = Field(default_factory=list)
    added: list[str] = Field(default_factory=list)
    removed: list[str] = Field(default_factory=list)


class ContactSyncBody(BaseModel):
    """Profile snapshot sent when a member signs up or edits their profile."""

    model_config = ConfigDict(extra="ignore")

    email: str = ""
    user_id: str | None = None
    full_name: str | None = None
    phone: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    salon_name: str | None = None
    years_experience: str | None = None
    role: str | None = None
    skills_assessment: dict[str, str] | None = None
    action: Literal["INSERT", "UPDATE"] = "UPDATE"
    tags: list[str] = Field(default_factory=list)


class ContactSyncRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    success: bool = True
    skipped: bool = False
    reason: str | None = None
    contact_id: str | None = None
    action: str | None = None


class CrmEventContact(BaseModel):
    firstName: str | None = None
    lastName: str | None = None
    phone: str | None = None


class CrmEventRequest(BaseModel):
    """Lifecycle event forwarded to CRM workflows."""

    model_config = ConfigDict(extra="ignore")

    event: str = ""
    email: str = ""
    user_id: str | None = None
    contact: CrmEventContact | None = None
    data: dict[str, Any] = Field(default_factory=dict)


class CrmEventRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    success: bool = True
    skipped: bool = False
    reason: str | None = None
    event: str | None = None
    contact_id: str | None = None
    webhook_sent: bool = False


__all__ = [
    "ContactSyncBody",
    "ContactSyncRead",
    "CrmEventContact",
    "CrmEventRequest",
    "CrmEventRead",
    "TagUpdateRead",
    "TagUpdateRequest",
]

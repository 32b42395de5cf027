"""Domain entity representing a member profile."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Profile:
    """Profile fields read by the notification and CRM integrations."""

    id: str
    email: str | None
    full_name: str | None = None
    phone: str | None = None
    external_contact_id: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    salon_name: str | None = None
    years_experience: str | None = None
    role: str | None = None
    skills_assessment: dict[str, str] = field(default_factory=dict)

    def split_name(self) -> tuple[str, str]:
        """Return ``(first_name, last_name)`` derived from ``full_name``."""

        return split_full_name(self.full_name)


def split_full_name(full_name: str | None) -> tuple[str, str]:
    """Split ``full_name`` on whitespace into a first name and the remainder."""

    if not full_name:
        return "", ""
    parts = full_name.strip().split(" ")
    first_name = parts[0] if parts else ""
    last_name = " ".join(parts[1:])
    return first_name, last_name


__all__ = ["Profile", "split_full_name"]

"""Domain entity representing a community post."""

from dataclasses import dataclass


@dataclass
class CommunityPost:
    """A post members can comment on or react to."""

    id: str
    owner_user_id: str
    content: str | None = None

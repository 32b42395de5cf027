"""Read access to community posts."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import CommunityPost
from app.infrastructure.models import CommunityPostModel


class CommunityPostRepository:
    """Look up posts that notifications refer to."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, post_id: str) -> CommunityPost | None:
        model = self.session.get(CommunityPostModel, post_id)
        if model is None:
            return None
        return CommunityPost(id=model.id, owner_user_id=model.user_id, content=model.content)


__all__ = ["CommunityPostRepository"]

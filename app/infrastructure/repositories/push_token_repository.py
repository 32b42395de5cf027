"""Read access to device push registrations."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from app.domain.entities import PushToken
from app.infrastructure.models import PushTokenModel


class PushTokenRepository:
    """Resolve users to their registered device tokens."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_users(self, user_ids: Iterable[str]) -> Sequence[PushToken]:
        """Return every non-empty token owned by ``user_ids`` in one query."""

        unique_ids = {user_id for user_id in user_ids if user_id}
        if not unique_ids:
            return []
        query = (
            self.session.query(PushTokenModel.user_id, PushTokenModel.token)
            .filter(PushTokenModel.user_id.in_(unique_ids))
            .order_by(PushTokenModel.id.asc())
        )
        return [PushToken(user_id=user_id, token=token) for user_id, token in query.all() if token]

    def list_all(self) -> Sequence[PushToken]:
        query = self.session.query(PushTokenModel.user_id, PushTokenModel.token).order_by(
            PushTokenModel.id.asc()
        )
        return [PushToken(user_id=user_id, token=token) for user_id, token in query.all() if token]


__all__ = ["PushTokenRepository"]

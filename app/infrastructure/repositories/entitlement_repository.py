"""Read access to plan entitlements."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Entitlement
from app.infrastructure.models import EntitlementModel


class EntitlementRepository:
    """List entitlements used to select broadcast audiences."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Entitlement]:
        query = self.session.query(EntitlementModel).order_by(EntitlementModel.id.asc())
        return [
            Entitlement(user_id=model.user_id, plan=model.plan, status=model.status)
            for model in query.all()
        ]


__all__ = ["EntitlementRepository"]

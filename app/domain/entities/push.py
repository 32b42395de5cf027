"""Domain entities used while fanning push notifications out to devices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Expo rejects requests carrying more than 100 messages.
PUSH_BATCH_LIMIT = 100

DELIVERY_STATUS_OK = "ok"
DELIVERY_STATUS_FAILED = "failed"


@dataclass(frozen=True)
class PushToken:
    """A device registration owned by the account subsystem."""

    user_id: str
    token: str


@dataclass
class PushMessage:
    """Provider message addressed to a single device token."""

    to: str
    title: str
    body: str
    data: dict[str, Any] | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"to": self.to, "title": self.title, "body": self.body}
        if self.data is not None:
            payload["data"] = self.data
        return payload


@dataclass(frozen=True)
class DeliveryOutcome:
    """Per-token delivery result reported by the provider."""

    token: str
    status: str

    @property
    def ok(self) -> bool:
        return self.status == DELIVERY_STATUS_OK


@dataclass
class DispatchResult:
    """Aggregated delivery counts for one dispatch call.

    ``unconfirmed`` is the part of ``sent`` that was assumed delivered because
    the provider answered without per-message results.
    """

    sent: int = 0
    failed: int = 0
    unconfirmed: int = 0

    @property
    def total(self) -> int:
        return self.sent + self.failed

    def record(self, outcome: DeliveryOutcome) -> None:
        if outcome.ok:
            self.sent += 1
        else:
            self.failed += 1


__all__ = [
    "PUSH_BATCH_LIMIT",
    "DELIVERY_STATUS_OK",
    "DELIVERY_STATUS_FAILED",
    "PushToken",
    "PushMessage",
    "DeliveryOutcome",
    "DispatchResult",
]

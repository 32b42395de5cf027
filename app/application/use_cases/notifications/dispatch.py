"""Fan push notifications out to every registered device of the recipients."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import (
    PUSH_BATCH_LIMIT,
    DeliveryOutcome,
    DispatchResult,
    PushMessage,
    PushToken,
)
from app.domain.exceptions import UpstreamError
from app.infrastructure.expo_push import ExpoPushClient
from app.infrastructure.repositories import PushTokenRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


def chunk(items: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    """Yield consecutive slices of ``items`` holding at most ``size`` entries."""

    for start in range(0, len(items), size):
        yield items[start : start + size]


def build_push_data(deep_link: str | None, extra: dict[str, Any] | None = None) -> dict[str, Any] | None:
    """Return the ``data`` payload carried by each message, or ``None`` if empty."""

    data: dict[str, Any] = {}
    if deep_link:
        data["deep_link"] = deep_link
    if extra:
        data.update(extra)
    return data or None


def dispatch_push(
    session: Session,
    push_client: ExpoPushClient,
    recipients: Iterable[str],
    *,
    title: str,
    body: str,
    deep_link: str | None = None,
    data: dict[str, Any] | None = None,
) -> DispatchResult:
    """Send ``title``/``body`` to every device owned by ``recipients``.

    Tokens for all recipients are read in one query. This function never
    raises: lookup and delivery failures are logged and reflected in the
    returned counts.
    """

    user_ids = {user_id for user_id in recipients if user_id}
    if not user_ids:
        return DispatchResult()

    try:
        tokens = PushTokenRepository(session).list_for_users(user_ids)
    except SQLAlchemyError:
        logger.exception("Could not load push tokens for %d recipients", len(user_ids))
        return DispatchResult()

    return dispatch_to_tokens(
        push_client, tokens, title=title, body=body, data=build_push_data(deep_link, data)
    )


def dispatch_to_tokens(
    push_client: ExpoPushClient,
    tokens: Sequence[PushToken],
    *,
    title: str,
    body: str,
    data: dict[str, Any] | None = None,
) -> DispatchResult:
    """Deliver one message per token in sequential batches of ``PUSH_BATCH_LIMIT``.

    Each batch is isolated: a transport failure marks that batch failed and
    the next batch is still attempted. When the provider answers without
    per-message results the whole batch is counted as sent; this is a
    best-effort assumption recorded in ``DispatchResult.unconfirmed``.
    """

    result = DispatchResult()
    if not tokens:
        return result

    messages = [
        PushMessage(to=token.token, title=title, body=body, data=dict(data) if data else None)
        for token in tokens
    ]

    for batch_number, batch in enumerate(chunk(messages, PUSH_BATCH_LIMIT), start=1):
        try:
            outcomes = push_client.send(batch)
        except UpstreamError as exc:
            logger.warning(
                "Push batch %d (%d messages) failed: %s", batch_number, len(batch), exc
            )
            result.failed += len(batch)
            continue

        if outcomes is None:
            logger.info(
                "Push batch %d returned no per-message results; assuming %d delivered",
                batch_number,
                len(batch),
            )
            result.sent += len(batch)
            result.unconfirmed += len(batch)
            continue

        _record_outcomes(result, outcomes)

    logger.info(
        "Push dispatch finished: sent=%d failed=%d unconfirmed=%d",
        result.sent,
        result.failed,
        result.unconfirmed,
    )
    return result


def _record_outcomes(result: DispatchResult, outcomes: Iterable[DeliveryOutcome]) -> None:
    for outcome in outcomes:
        result.record(outcome)


__all__ = ["build_push_data", "chunk", "dispatch_push", "dispatch_to_tokens"]

"""Client for the Expo push notification delivery API."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import httpx

from app.config import Settings
from app.domain.entities import (
    DELIVERY_STATUS_FAILED,
    DELIVERY_STATUS_OK,
    DeliveryOutcome,
    PushMessage,
)
from app.domain.exceptions import UpstreamError

from .provider_errors import log_unsuccessful_response

logger = logging.getLogger(__name__)

PROVIDER_NAME = "Expo push"


class ExpoPushClient:
    """Send batches of push messages and report per-message outcomes."""

    def __init__(
        self,
        http_client: httpx.Client,
        *,
        push_url: str,
        access_token: str | None = None,
    ) -> None:
        self._http = http_client
        self._push_url = push_url
        self._access_token = access_token

    @classmethod
    def from_settings(
        cls, settings: Settings, *, transport: httpx.BaseTransport | None = None
    ) -> "ExpoPushClient":
        http_client = httpx.Client(timeout=settings.http_timeout_seconds, transport=transport)
        return cls(
            http_client,
            push_url=settings.expo_push_url,
            access_token=settings.expo_access_token,
        )

    def __enter__(self) -> "ExpoPushClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def send(self, messages: Sequence[PushMessage]) -> list[DeliveryOutcome] | None:
        """Deliver ``messages`` in a single request.

        Returns one outcome per result entry the provider reported, or ``None``
        when the provider answered successfully without per-message results.
        Raises :class:`UpstreamError` for non-success statuses, network errors
        and timeouts.
        """

        if not messages:
            return []

        headers = {"Accept": "application/json", "Content-Type": "application/json"}
        if self._access_token:
            headers["Authorization"] = f"Bearer {self._access_token}"

        try:
            response = self._http.post(
                self._push_url,
                json=[message.to_payload() for message in messages],
                headers=headers,
            )
        except httpx.HTTPError as exc:
            logger.error("%s request failed: %s", PROVIDER_NAME, exc)
            raise UpstreamError(f"{PROVIDER_NAME} request failed: {exc}") from exc

        if not response.is_success:
            details = log_unsuccessful_response(PROVIDER_NAME, response)
            raise UpstreamError(
                f"{PROVIDER_NAME} responded with status {response.status_code}",
                status_code=response.status_code,
                detail=details,
            )

        results = _extract_results(response)
        if not results:
            return None

        if len(results) != len(messages):
            logger.warning(
                "%s returned %d results for %d messages", PROVIDER_NAME, len(results), len(messages)
            )

        # One outcome per message; messages without a result entry count as failed.
        outcomes: list[DeliveryOutcome] = []
        for index, message in enumerate(messages):
            item = results[index] if index < len(results) else None
            status = item.get("status") if isinstance(item, dict) else None
            if status != DELIVERY_STATUS_OK:
                _log_ticket_error(message.to, item)
            outcomes.append(
                DeliveryOutcome(
                    token=message.to,
                    status=DELIVERY_STATUS_OK if status == DELIVERY_STATUS_OK else DELIVERY_STATUS_FAILED,
                )
            )
        return outcomes


def _extract_results(response: httpx.Response) -> list[Any]:
    try:
        body = response.json()
    except ValueError:
        logger.warning("%s returned a non-JSON body; per-message results unavailable", PROVIDER_NAME)
        return []
    if isinstance(body, dict) and isinstance(body.get("data"), list):
        return body["data"]
    if isinstance(body, list):
        return body
    return []


def _log_ticket_error(token: str, item: Any) -> None:
    if item is None:
        logger.warning("%s returned no ticket for token %s", PROVIDER_NAME, token[:18])
        return
    if not isinstance(item, dict):
        logger.warning("%s returned an unreadable ticket for token %s", PROVIDER_NAME, token[:18])
        return
    details = item.get("details") if isinstance(item.get("details"), dict) else {}
    logger.warning(
        "%s ticket error for token %s: %s (%s)",
        PROVIDER_NAME,
        token[:18],
        item.get("message") or "unknown error",
        details.get("error") or item.get("status"),
    )


def build_push_client(settings: Settings) -> ExpoPushClient:
    """Return a push client configured from ``settings``."""

    return ExpoPushClient.from_settings(settings)


__all__ = ["ExpoPushClient", "build_push_client"]

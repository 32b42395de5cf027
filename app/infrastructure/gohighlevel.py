"""Client for the GoHighLevel (LeadConnector) contacts API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from app.config import Settings
from app.domain.entities import ContactTagState, CrmContact
from app.domain.exceptions import NotConfiguredError, UpstreamError

from .provider_errors import log_unsuccessful_response

logger = logging.getLogger(__name__)

PROVIDER_NAME = "GoHighLevel"


class GoHighLevelClient:
    """Read and write CRM contacts scoped to one location."""

    def __init__(
        self,
        http_client: httpx.Client,
        *,
        api_key: str,
        location_id: str,
        api_version: str,
        webhook_url: str | None = None,
    ) -> None:
        self._http = http_client
        self._api_key = api_key
        self._location_id = location_id
        self._api_version = api_version
        self.webhook_url = webhook_url

    @classmethod
    def from_settings(
        cls, settings: Settings, *, transport: httpx.BaseTransport | None = None
    ) -> "GoHighLevelClient":
        """Build a client, raising :class:`NotConfiguredError` without credentials."""

        if not settings.crm_configured:
            raise NotConfiguredError("GoHighLevel credentials are not configured")
        http_client = httpx.Client(
            base_url=settings.gohighlevel_api_base,
            timeout=settings.http_timeout_seconds,
            transport=transport,
        )
        return cls(
            http_client,
            api_key=settings.gohighlevel_api_key or "",
            location_id=settings.gohighlevel_location_id or "",
            api_version=settings.gohighlevel_api_version,
            webhook_url=settings.gohighlevel_webhook_url,
        )

    def __enter__(self) -> "GoHighLevelClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def _headers(self, *, json_body: bool = False) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Version": self._api_version,
            "Accept": "application/json",
        }
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            return self._http.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("%s %s %s failed: %s", PROVIDER_NAME, method, url, exc)
            raise UpstreamError(f"{PROVIDER_NAME} request failed: {exc}") from exc

    @staticmethod
    def _raise_for_status(response: httpx.Response, action: str) -> None:
        if response.is_success:
            return
        details = log_unsuccessful_response(PROVIDER_NAME, response)
        raise UpstreamError(
            f"Failed to {action}: {response.status_code}",
            status_code=response.status_code,
            detail=details,
        )

    def search_contact_id_by_email(self, email: str) -> str | None:
        """Return the id of the contact registered with ``email``, if any.

        A non-success search is logged and treated as "no match".
        """

        response = self._request(
            "GET",
            "/contacts/search/duplicate",
            params={"locationId": self._location_id, "email": email},
            headers=self._headers(),
        )
        if not response.is_success:
            log_unsuccessful_response(PROVIDER_NAME, response)
            return None
        return _contact_id_from(response)

    def get_contact(self, contact_id: str) -> ContactTagState:
        response = self._request("GET", f"/contacts/{contact_id}", headers=self._headers())
        self._raise_for_status(response, "fetch contact")
        contact = _json_body(response).get("contact") or {}
        tags = contact.get("tags") if isinstance(contact, dict) else None
        return ContactTagState(
            contact_id=contact_id,
            tags=[tag for tag in tags if isinstance(tag, str)] if isinstance(tags, list) else [],
        )

    def update_contact_tags(self, contact_id: str, tags: list[str]) -> None:
        """Replace the full tag list of ``contact_id``."""

        response = self._request(
            "PUT",
            f"/contacts/{contact_id}",
            json={"tags": list(tags)},
            headers=self._headers(json_body=True),
        )
        self._raise_for_status(response, "update contact tags")

    def create_contact(self, contact: CrmContact) -> str | None:
        response = self._request(
            "POST",
            "/contacts/",
            params={"locationId": self._location_id},
            json=contact.to_payload(),
            headers=self._headers(json_body=True),
        )
        self._raise_for_status(response, "create contact")
        return _contact_id_from(response)

    def update_contact(self, contact_id: str, contact: CrmContact) -> str:
        response = self._request(
            "PUT",
            f"/contacts/{contact_id}",
            json=contact.to_payload(),
            headers=self._headers(json_body=True),
        )
        self._raise_for_status(response, "update contact")
        return _contact_id_from(response) or contact_id

    def post_workflow_event(self, event: str, payload: dict[str, Any]) -> bool:
        """POST ``payload`` to the inbound workflow webhook.

        Returns ``False`` when no webhook is configured or delivery failed;
        failures are logged and never raised.
        """

        if not self.webhook_url:
            return False
        try:
            response = self._http.post(
                self.webhook_url,
                params={"event": event},
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as exc:
            logger.error("%s webhook for %s failed: %s", PROVIDER_NAME, event, exc)
            return False
        if not response.is_success:
            log_unsuccessful_response(f"{PROVIDER_NAME} webhook", response)
            return False
        return True


def _json_body(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _contact_id_from(response: httpx.Response) -> str | None:
    contact = _json_body(response).get("contact")
    if isinstance(contact, dict) and contact.get("id"):
        return str(contact["id"])
    return None


def build_crm_client(settings: Settings) -> GoHighLevelClient | None:
    """Return a CRM client, or ``None`` when the integration is disabled."""

    try:
        return GoHighLevelClient.from_settings(settings)
    except NotConfiguredError:
        logger.info("GoHighLevel configuration incomplete; CRM sync disabled")
        return None


__all__ = ["GoHighLevelClient", "build_crm_client"]

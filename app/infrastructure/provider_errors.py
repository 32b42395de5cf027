"""Helpers to turn provider error payloads into readable log details."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


def extract_error_detail(body: Any) -> str | None:
    """Return a human readable description for a provider error payload.

    Understands the Expo ``{"errors": [{"code", "message"}]}`` shape and the
    LeadConnector ``{"message": ...}`` shape, falling back to the raw text.
    """

    if body in (None, ""):
        return None

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError:
            return body
    else:
        parsed = body

    if isinstance(parsed, dict):
        errors = parsed.get("errors")
        if isinstance(errors, list):
            messages: list[str] = []
            for item in errors:
                if not isinstance(item, dict):
                    continue
                message = item.get("message")
                code = item.get("code")
                if message and code:
                    messages.append(f"{message} (code: {code})")
                elif message:
                    messages.append(str(message))
            if messages:
                return "; ".join(messages)
        message = parsed.get("message")
        if isinstance(message, list):
            return "; ".join(str(item) for item in message)
        if message:
            return str(message)
        # Fall back to a JSON string for unrecognised payloads
        try:
            return json.dumps(parsed)
        except (TypeError, ValueError):
            return None

    if isinstance(parsed, list):
        try:
            return "; ".join(str(item) for item in parsed)
        except TypeError:
            return None

    return None


def response_error_detail(response: httpx.Response) -> str | None:
    """Return :func:`extract_error_detail` applied to ``response``'s body."""

    try:
        return extract_error_detail(response.content)
    except httpx.ResponseNotRead:  # pragma: no cover - streaming responses are not used
        return None


def log_unsuccessful_response(provider: str, response: httpx.Response) -> str | None:
    """Log details from an unsuccessful provider response and return them."""

    details = response_error_detail(response)
    if details:
        logger.error(
            "%s API responded with status %s: %s", provider, response.status_code, details
        )
    else:
        logger.error("%s API responded with status %s", provider, response.status_code)
    return details


__all__ = ["extract_error_detail", "log_unsuccessful_response", "response_error_detail"]

"""Error taxonomy shared by the notification and CRM use cases."""

from __future__ import annotations


class ValidationError(ValueError):
    """The caller omitted or malformed a required field."""


class NotFoundError(ValueError):
    """A referenced domain object does not exist."""


class ContactNotFoundError(NotFoundError):
    """No CRM contact could be resolved from the supplied identity."""


class UpstreamError(RuntimeError):
    """A push or CRM provider answered with a failure or was unreachable."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class NotConfiguredError(RuntimeError):
    """Integration credentials are absent; callers treat this as a no-op."""


__all__ = [
    "ValidationError",
    "NotFoundError",
    "ContactNotFoundError",
    "UpstreamError",
    "NotConfiguredError",
]

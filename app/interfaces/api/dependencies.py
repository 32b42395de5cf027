"""FastAPI dependency utilities."""

from collections.abc import Generator

from fastapi import Depends

from app.config import Settings, get_settings
from app.infrastructure.database import get_db
from app.infrastructure.expo_push import ExpoPushClient, build_push_client
from app.infrastructure.gohighlevel import GoHighLevelClient, build_crm_client


def get_push_client(
    settings: Settings = Depends(get_settings),
) -> Generator[ExpoPushClient, None, None]:
    """Yield a push client for the duration of one request."""

    client = build_push_client(settings)
    try:
        yield client
    finally:
        client.close()


def get_crm_client(
    settings: Settings = Depends(get_settings),
) -> Generator[GoHighLevelClient | None, None, None]:
    """Yield a CRM client, or ``None`` when the integration is disabled."""

    client = build_crm_client(settings)
    try:
        yield client
    finally:
        if client is not None:
            client.close()


__all__ = ["get_crm_client", "get_db", "get_push_client"]

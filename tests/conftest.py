"""Shared fixtures: a fresh SQLite schema per test and fake provider transports."""

from __future__ import annotations

import json
import os
import shutil
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

# Set before any app import: the engine is bound to DATABASE_URL at import time.
TEST_DB_PATH = Path(tempfile.mkdtemp(prefix="engagement-api-tests-")) / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
for _name in (
    "GOHIGHLEVEL_API_KEY",
    "GOHIGHLEVEL_LOCATION_ID",
    "GOHIGHLEVEL_WEBHOOK_URL",
    "EXPO_ACCESS_TOKEN",
):
    os.environ.pop(_name, None)

from app.infrastructure import database  # noqa: E402
from app.infrastructure import models  # noqa: E402,F401
from app.infrastructure.expo_push import ExpoPushClient  # noqa: E402
from app.infrastructure.gohighlevel import GoHighLevelClient  # noqa: E402
from app.infrastructure.models import (  # noqa: E402
    CommunityPostModel,
    EntitlementModel,
    ProfileModel,
    PushTokenModel,
)

PUSH_URL = "https://push.test/--/api/v2/push/send"
CRM_BASE_URL = "https://crm.test"
CRM_WEBHOOK_URL = "https://hooks.test/workflow"


@pytest.fixture(scope="session", autouse=True)
def database_directory():
    """Remove the temporary database directory once the run finishes."""

    yield TEST_DB_PATH.parent
    database.engine.dispose()
    shutil.rmtree(TEST_DB_PATH.parent, ignore_errors=True)


@pytest.fixture(autouse=True)
def setup_database():
    """Recreate every table so each test starts from an empty database."""

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.Base.metadata.create_all(bind=database.engine)
    yield
    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)


@pytest.fixture()
def session():
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def make_profile(session) -> Callable[..., ProfileModel]:
    def _make(user_id: str, **fields: Any) -> ProfileModel:
        model = ProfileModel(id=user_id, **fields)
        session.add(model)
        session.commit()
        return model

    return _make


@pytest.fixture()
def make_post(session) -> Callable[..., CommunityPostModel]:
    def _make(post_id: str, owner_id: str, content: str | None = None) -> CommunityPostModel:
        model = CommunityPostModel(id=post_id, user_id=owner_id, content=content)
        session.add(model)
        session.commit()
        return model

    return _make


@pytest.fixture()
def make_push_token(session) -> Callable[..., PushTokenModel]:
    def _make(user_id: str, token: str | None) -> PushTokenModel:
        model = PushTokenModel(user_id=user_id, token=token, platform="ios")
        session.add(model)
        session.commit()
        return model

    return _make


@pytest.fixture()
def make_entitlement(session) -> Callable[..., EntitlementModel]:
    def _make(user_id: str, plan: str, status: str = "active") -> EntitlementModel:
        model = EntitlementModel(user_id=user_id, plan=plan, status=status)
        session.add(model)
        session.commit()
        return model

    return _make


class FakeExpo:
    """Expo push endpoint double that records every batch it receives.

    ``responder`` receives the request number (starting at 1) and the decoded
    messages and returns an ``httpx.Response``; the default acknowledges every
    message with ``status: ok``.
    """

    def __init__(self) -> None:
        self.batches: list[list[dict[str, Any]]] = []
        self.requests: list[httpx.Request] = []
        self.responder: Callable[[int, list[dict[str, Any]]], httpx.Response] = self.all_ok

    @staticmethod
    def all_ok(_number: int, messages: list[dict[str, Any]]) -> httpx.Response:
        return httpx.Response(200, json={"data": [{"status": "ok", "id": "t"} for _ in messages]})

    def handle(self, request: httpx.Request) -> httpx.Response:
        messages = json.loads(request.content)
        self.requests.append(request)
        self.batches.append(messages)
        return self.responder(len(self.batches), messages)

    @property
    def messages(self) -> list[dict[str, Any]]:
        return [message for batch in self.batches for message in batch]


@pytest.fixture()
def fake_expo() -> FakeExpo:
    return FakeExpo()


@pytest.fixture()
def push_client(fake_expo: FakeExpo):
    client = ExpoPushClient(
        httpx.Client(transport=httpx.MockTransport(fake_expo.handle)), push_url=PUSH_URL
    )
    yield client
    client.close()


class FakeCrm:
    """In-memory LeadConnector contacts API plus the workflow webhook."""

    def __init__(self) -> None:
        self.contacts: dict[str, dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []
        self.webhook_events: list[dict[str, Any]] = []
        self.fail_status: dict[tuple[str, str], int] = {}
        self.webhook_status = 200
        self._next_id = 1

    def add_contact(self, contact_id: str, *, email: str | None = None, tags: list[str] | None = None) -> None:
        self.contacts[contact_id] = {"id": contact_id, "email": email, "tags": list(tags or [])}

    def fail(self, method: str, path: str, status_code: int) -> None:
        self.fail_status[(method, path)] = status_code

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        method, path = request.method, request.url.path

        if request.url.host == httpx.URL(CRM_WEBHOOK_URL).host:
            self.webhook_events.append(json.loads(request.content))
            return httpx.Response(self.webhook_status, json={"status": "received"})

        if (method, path) in self.fail_status:
            return httpx.Response(self.fail_status[(method, path)], json={"message": "Simulated failure"})

        body = json.loads(request.content) if request.content else {}

        if method == "GET" and path == "/contacts/search/duplicate":
            email = request.url.params.get("email")
            match = next(
                (contact for contact in self.contacts.values() if contact.get("email") == email),
                None,
            )
            return httpx.Response(200, json={"contact": {"id": match["id"]} if match else None})

        if method == "POST" and path == "/contacts/":
            contact_id = f"created-{self._next_id}"
            self._next_id += 1
            self.contacts[contact_id] = {"id": contact_id, **body}
            return httpx.Response(201, json={"contact": {"id": contact_id}})

        if path.startswith("/contacts/"):
            contact_id = path.rsplit("/", 1)[-1]
            contact = self.contacts.get(contact_id)
            if contact is None:
                return httpx.Response(404, json={"message": "Contact not found"})
            if method == "GET":
                return httpx.Response(200, json={"contact": contact})
            if method == "PUT":
                contact.update(body)
                return httpx.Response(200, json={"contact": contact})

        return httpx.Response(404, json={"message": f"Unhandled {method} {path}"})

    def requests_for(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]


@pytest.fixture()
def fake_crm() -> FakeCrm:
    return FakeCrm()


def _crm_client(fake_crm: FakeCrm, *, webhook_url: str | None = None) -> GoHighLevelClient:
    return GoHighLevelClient(
        httpx.Client(base_url=CRM_BASE_URL, transport=httpx.MockTransport(fake_crm.handle)),
        api_key="test-key",
        location_id="loc-1",
        api_version="2021-07-28",
        webhook_url=webhook_url,
    )


@pytest.fixture()
def crm_client(fake_crm: FakeCrm):
    client = _crm_client(fake_crm, webhook_url=CRM_WEBHOOK_URL)
    yield client
    client.close()


@pytest.fixture()
def crm_client_without_webhook(fake_crm: FakeCrm):
    client = _crm_client(fake_crm)
    yield client
    client.close()


@pytest.fixture()
def app():
    from main import create_app

    return create_app()


@pytest.fixture()
def client(app, push_client, crm_client):
    """Test client whose provider clients talk to the in-memory fakes."""

    from fastapi.testclient import TestClient

    from app.interfaces.api.dependencies import get_crm_client, get_push_client

    app.dependency_overrides[get_push_client] = lambda: push_client
    app.dependency_overrides[get_crm_client] = lambda: crm_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

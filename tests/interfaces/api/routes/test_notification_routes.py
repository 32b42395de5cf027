"""Integration tests for the notification endpoints."""

from __future__ import annotations

import httpx
import pytest


@pytest.fixture()
def community(make_profile, make_post, make_push_token):
    make_profile("owner", full_name="Olivia Owner")
    make_profile("actor", full_name="Alex Actor")
    make_post("post1", "owner", content="Look at this fade")
    make_push_token("owner", "ExponentPushToken[a]")
    make_push_token("owner", "ExponentPushToken[b]")


def test_reaction_event_notifies_owner_devices(client, fake_expo, community) -> None:
    response = client.post(
        "/notifications/events",
        json={"kind": "reaction", "subjectId": "post1", "actorId": "actor", "reaction_type": "fire"},
    )

    assert response.status_code == 200
    assert response.json() == {"sent": 2, "failed": 0, "unconfirmed": 0}
    assert len(fake_expo.messages) == 2
    assert all("🔥" in message["body"] for message in fake_expo.messages)
    assert all(message["data"]["deep_link"] == "/community/post1" for message in fake_expo.messages)


def test_comment_event_for_missing_post_succeeds_quietly(client, fake_expo) -> None:
    response = client.post(
        "/notifications/events",
        json={"kind": "comment", "subject_id": "missing", "actor_id": "actor"},
    )

    assert response.status_code == 200
    assert response.json()["sent"] == 0
    assert fake_expo.requests == []


def test_provider_outage_is_reported_in_counts(client, fake_expo, community) -> None:
    fake_expo.responder = lambda _n, _messages: httpx.Response(503, text="unavailable")

    response = client.post(
        "/notifications/events",
        json={"kind": "comment", "subject_id": "post1", "actor_id": "actor", "comment_id": "c1"},
    )

    assert response.status_code == 200
    assert response.json() == {"sent": 0, "failed": 2, "unconfirmed": 0}


def test_team_event_accepts_user_id_list(client, fake_expo, make_push_token) -> None:
    make_push_token("s1", "ExponentPushToken[s1]")

    response = client.post(
        "/notifications/events",
        json={
            "type": "team_event_registration",
            "eventId": "ev1",
            "actorId": "manager",
            "userIds": ["s1"],
            "eventTitle": "Cut Night",
            "eventDate": "2025-03-01T18:00:00",
            "registeredBy": "Maria",
        },
    )

    assert response.status_code == 200
    assert response.json()["sent"] == 1
    assert fake_expo.messages[0]["body"] == 'Maria registered you for "Cut Night" on Sat, Mar 1'


@pytest.mark.parametrize(
    "payload",
    [
        {"subject_id": "post1", "actor_id": "actor"},
        {"kind": "mention", "subject_id": "post1", "actor_id": "actor"},
        {"kind": "team_event_registration", "subject_id": "ev1", "actor_id": "actor"},
        {"kind": "comment", "subject_id": "post1", "actor_id": "actor", "explicit_targets": "u1"},
    ],
)
def test_invalid_events_return_400(client, fake_expo, payload) -> None:
    response = client.post("/notifications/events", json=payload)

    assert response.status_code == 400
    assert fake_expo.requests == []


def test_campaign_broadcast(client, fake_expo, make_profile, make_push_token, make_entitlement) -> None:
    make_profile("paid")
    make_entitlement("paid", "salon")
    make_push_token("paid", "ExponentPushToken[paid]")
    make_push_token("other", "ExponentPushToken[other]")

    response = client.post(
        "/notifications/campaigns",
        json={"title": "Live class", "body": "Starts now", "deep_link": "/live", "audience": "subscribers"},
    )

    assert response.status_code == 200
    body = response.json()
    assert (body["sent"], body["failed"], body["total"], body["scheduled"]) == (1, 0, 1, False)
    assert body["campaign"]["status"] == "sent"
    assert body["campaign"]["sent_count"] == 1
    assert [message["to"] for message in fake_expo.messages] == ["ExponentPushToken[paid]"]


def test_campaign_requires_title(client) -> None:
    response = client.post("/notifications/campaigns", json={"title": " ", "body": "B"})

    assert response.status_code == 400

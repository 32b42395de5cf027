"""Tests for admin broadcast campaigns."""

from __future__ import annotations

from datetime import timedelta

import pytest

from app.application.use_cases.notifications import broadcast_campaign
from app.domain.exceptions import ValidationError
from app.infrastructure.repositories import NotificationCampaignRepository
from app.utils import now_in_app_timezone


@pytest.fixture()
def audience(make_profile, make_push_token, make_entitlement):
    for user_id in ("paid", "salon", "lapsed", "free"):
        make_profile(user_id)
    make_entitlement("paid", "individual")
    make_entitlement("salon", "salon")
    make_entitlement("lapsed", "individual", status="canceled")
    make_entitlement("free", "free")
    make_push_token("paid", "ExponentPushToken[paid]")
    make_push_token("salon", "ExponentPushToken[salon]")
    make_push_token("lapsed", "ExponentPushToken[lapsed]")
    make_push_token("free", "ExponentPushToken[free]")


def _sent_to(fake_expo) -> set[str]:
    return {message["to"] for message in fake_expo.messages}


def test_broadcast_to_everyone(session, push_client, fake_expo, audience) -> None:
    broadcast = broadcast_campaign(
        session, push_client, title=" Sale ", body=" 20% off ", deep_link="/shop", audience="all"
    )

    assert broadcast.scheduled is False
    assert (broadcast.sent, broadcast.failed, broadcast.total) == (4, 0, 4)
    assert fake_expo.messages[0]["title"] == "Sale"
    assert fake_expo.messages[0]["data"] == {"deep_link": "/shop"}

    stored = NotificationCampaignRepository(session).get(broadcast.campaign.id)
    assert stored is not None
    assert stored.status == "sent"
    assert (stored.sent_count, stored.failed_count) == (4, 0)


def test_subscribers_are_active_paid_plans(session, push_client, fake_expo, audience) -> None:
    broadcast_campaign(session, push_client, title="T", body="B", audience="subscribers")

    assert _sent_to(fake_expo) == {"ExponentPushToken[paid]", "ExponentPushToken[salon]"}


def test_free_audience(session, push_client, fake_expo, audience) -> None:
    broadcast_campaign(session, push_client, title="T", body="B", audience="free")

    assert _sent_to(fake_expo) == {"ExponentPushToken[free]"}


def test_unknown_audience_falls_back_to_everyone(session, push_client, fake_expo, audience) -> None:
    broadcast = broadcast_campaign(session, push_client, title="T", body="B", audience="vip")

    assert broadcast.campaign.audience == "all"
    assert len(fake_expo.messages) == 4


def test_messages_without_deep_link_omit_data(session, push_client, fake_expo, audience) -> None:
    broadcast_campaign(session, push_client, title="T", body="B")

    assert all("data" not in message for message in fake_expo.messages)


def test_future_campaign_is_only_scheduled(session, push_client, fake_expo, audience) -> None:
    when = (now_in_app_timezone() + timedelta(days=1)).isoformat()

    broadcast = broadcast_campaign(session, push_client, title="T", body="B", schedule_for=when)

    assert broadcast.scheduled is True
    assert broadcast.campaign.status == "scheduled"
    assert broadcast.campaign.scheduled_for is not None
    assert fake_expo.requests == []


def test_empty_audience_records_zero_counts(session, push_client, fake_expo) -> None:
    broadcast = broadcast_campaign(session, push_client, title="T", body="B", audience="subscribers")

    assert (broadcast.sent, broadcast.failed, broadcast.total) == (0, 0, 0)
    assert broadcast.campaign.sent_count == 0
    assert fake_expo.requests == []


@pytest.mark.parametrize(("title", "body"), [("", "B"), ("  ", "B"), ("T", "")])
def test_title_and_body_are_required(session, push_client, title, body) -> None:
    with pytest.raises(ValidationError):
        broadcast_campaign(session, push_client, title=title, body=body)

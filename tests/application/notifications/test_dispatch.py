"""Tests for the push fan-out."""

from __future__ import annotations

import logging

import httpx

from app.application.use_cases.notifications import dispatch_push, dispatch_to_tokens
from app.application.use_cases.notifications.dispatch import build_push_data, chunk
from app.domain.entities import PushToken


def _tokens(count: int) -> list[PushToken]:
    return [PushToken(user_id=f"u{index % 7}", token=f"ExponentPushToken[{index}]") for index in range(count)]


def test_chunk_splits_into_limit_sized_slices() -> None:
    assert [len(part) for part in chunk(list(range(250)), 100)] == [100, 100, 50]
    assert list(chunk([], 100)) == []


def test_build_push_data() -> None:
    assert build_push_data(None) is None
    assert build_push_data("/community/p") == {"deep_link": "/community/p"}
    assert build_push_data("/x", {"eventId": "e"}) == {"deep_link": "/x", "eventId": "e"}


def test_250_tokens_are_sent_in_three_batches(push_client, fake_expo) -> None:
    result = dispatch_to_tokens(push_client, _tokens(250), title="T", body="B")

    assert [len(batch) for batch in fake_expo.batches] == [100, 100, 50]
    assert (result.sent, result.failed, result.unconfirmed) == (250, 0, 0)
    assert result.sent + result.failed == 250


def test_no_tokens_makes_no_provider_call(push_client, fake_expo) -> None:
    result = dispatch_to_tokens(push_client, [], title="T", body="B")

    assert (result.sent, result.failed) == (0, 0)
    assert fake_expo.requests == []


def test_failed_batch_does_not_stop_later_batches(push_client, fake_expo, caplog) -> None:
    def responder(number, messages):
        if number == 2:
            return httpx.Response(500, json={"errors": [{"code": "INTERNAL", "message": "boom"}]})
        return fake_expo.all_ok(number, messages)

    fake_expo.responder = responder

    with caplog.at_level(logging.WARNING):
        result = dispatch_to_tokens(push_client, _tokens(250), title="T", body="B")

    assert len(fake_expo.batches) == 3
    assert (result.sent, result.failed) == (150, 100)
    assert "boom (code: INTERNAL)" in caplog.text


def test_per_message_errors_are_counted(push_client, fake_expo) -> None:
    fake_expo.responder = lambda _n, messages: httpx.Response(
        200,
        json={
            "data": [
                {"status": "ok"},
                {"status": "error", "message": "not registered", "details": {"error": "DeviceNotRegistered"}},
                {"status": "ok"},
            ]
        },
    )

    result = dispatch_to_tokens(push_client, _tokens(3), title="T", body="B")

    assert (result.sent, result.failed, result.unconfirmed) == (2, 1, 0)


def test_success_without_results_is_counted_as_unconfirmed(push_client, fake_expo) -> None:
    fake_expo.responder = lambda _n, _messages: httpx.Response(200, json={"data": []})

    result = dispatch_to_tokens(push_client, _tokens(5), title="T", body="B")

    assert (result.sent, result.failed, result.unconfirmed) == (5, 0, 5)


def test_non_json_success_is_counted_as_unconfirmed(push_client, fake_expo) -> None:
    fake_expo.responder = lambda _n, _messages: httpx.Response(200, text="accepted")

    result = dispatch_to_tokens(push_client, _tokens(2), title="T", body="B")

    assert (result.sent, result.unconfirmed) == (2, 2)


def test_dispatch_push_sends_one_message_per_device(
    session, push_client, fake_expo, make_profile, make_push_token
) -> None:
    make_profile("u1")
    make_profile("u2")
    make_push_token("u1", "ExponentPushToken[phone]")
    make_push_token("u1", "ExponentPushToken[tablet]")
    make_push_token("u2", "")
    make_push_token("u3", "ExponentPushToken[other]")

    result = dispatch_push(
        session, push_client, {"u1", "u2"}, title="Hi", body="There", deep_link="/community/p1"
    )

    assert result.sent == 2
    assert sorted(message["to"] for message in fake_expo.messages) == [
        "ExponentPushToken[phone]",
        "ExponentPushToken[tablet]",
    ]
    assert all(message["data"] == {"deep_link": "/community/p1"} for message in fake_expo.messages)


def test_dispatch_push_without_recipients(session, push_client, fake_expo) -> None:
    result = dispatch_push(session, push_client, set(), title="Hi", body="There")

    assert (result.sent, result.failed) == (0, 0)
    assert fake_expo.requests == []


def test_short_result_list_counts_missing_messages_as_failed(push_client, fake_expo) -> None:
    fake_expo.responder = lambda _n, _messages: httpx.Response(200, json={"data": [{"status": "ok"}]})

    result = dispatch_to_tokens(push_client, _tokens(3), title="T", body="B")

    assert (result.sent, result.failed, result.unconfirmed) == (1, 2, 0)


def test_results_longer_than_batch_do_not_inflate_sent(push_client, fake_expo) -> None:
    fake_expo.responder = lambda _n, _messages: httpx.Response(200, json={"data": [{"status": "ok"}] * 5})

    result = dispatch_to_tokens(push_client, _tokens(2), title="T", body="B")

    assert (result.sent, result.failed, result.unconfirmed) == (2, 0, 0)

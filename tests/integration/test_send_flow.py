"""End-to-end flows through the real httpx transport against a mock server."""

from __future__ import annotations

from decimal import Decimal
from urllib.parse import parse_qs

import httpx

from nexmo_sms.account import Account
from nexmo_sms.messaging.message import Message
from nexmo_sms.messaging.overview import format_overview
from nexmo_sms.messaging.receipt import parse_receipt
from nexmo_sms.models import ReceiptStatus
from nexmo_sms.rest.builder import RequestBuilder
from nexmo_sms.rest.transport import HttpxTransport


class FakeGateway:
    """Minimal stand-in for the REST endpoints used below."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.startswith("/account/get-balance/"):
            return httpx.Response(200, json={"value": 4.25})
        if path.startswith("/account/get-pricing/outbound/"):
            return httpx.Response(200, json={"country": "GB", "prefix": "44", "mt": "0.0333"})
        if path == "/sms/json":
            form = parse_qs(request.content.decode())
            parts = 2 if len(form["text"][0]) > 160 else 1
            return httpx.Response(200, json={
                "message-count": str(parts),
                "messages": [
                    {
                        "to": form["to"][0],
                        "message-id": f"MSG{i}",
                        "status": "0",
                        "remaining-balance": "4.00",
                        "message-price": "0.0333",
                        "network": "23410",
                    }
                    for i in range(parts)
                ],
            })
        return httpx.Response(404)


def _transport(gateway: FakeGateway) -> HttpxTransport:
    return HttpxTransport(client=httpx.Client(transport=httpx.MockTransport(gateway)))


def test_account_lookups_hit_gateway_once() -> None:
    gateway = FakeGateway()
    with Account("key", "secret", transport=_transport(gateway)) as account:
        assert account.balance() == Decimal("4.25")
        assert account.balance() == Decimal("4.25")
        assert account.sms_pricing("gb") == Decimal("0.0333")
        assert account.dialing_code("GB") == "44"
    assert len(gateway.requests) == 2


def test_multi_part_send_and_overview() -> None:
    gateway = FakeGateway()
    sms = Message("key", "secret", transport=_transport(gateway))
    result = sms.send_text("447700900000", "MyApp", "x" * 200)

    assert result.message_count == 2
    assert result.total_cost == Decimal("0.0666")
    assert format_overview(result).startswith("Your message was sent in 2 parts:")
    sent = gateway.requests[0]
    assert sent.headers["content-type"] == "application/x-www-form-urlencoded"
    assert sent.headers["accept"] == "application/json"


def test_inbound_reply_and_receipt() -> None:
    gateway = FakeGateway()
    sms = Message("key", "secret", transport=_transport(gateway))
    assert sms.inbound_text({
        "to": "447700900000",
        "msisdn": "447700900111",
        "text": "STOP",
        "messageId": "abc",
    })
    reply = sms.reply("You are unsubscribed")

    form = parse_qs(gateway.requests[0].content.decode())
    assert form["to"] == ["447700900111"]
    assert form["from"] == ["447700900000"]
    assert reply.messages[0].to == "447700900111"

    receipt = parse_receipt({
        "msisdn": "447700900111",
        "to": "447700900000",
        "network-code": "23410",
        "messageId": reply.messages[0].message_id,
        "status": "delivered",
        "scts": "2610191200",
    })
    assert receipt.found
    assert receipt.message_id == "MSG0"
    assert receipt.status == ReceiptStatus.DELIVERED


def test_custom_base_url() -> None:
    gateway = FakeGateway()
    builder = RequestBuilder(base_url="https://rest.example.test")
    with Account("key", "secret", transport=_transport(gateway), builder=builder) as account:
        account.balance()
    assert gateway.requests[0].url.host == "rest.example.test"


def test_settings_from_env(monkeypatch) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setenv("NEXMO_API_KEY", "key")
    monkeypatch.setenv("NEXMO_API_SECRET", "secret")
    monkeypatch.setenv("NEXMO_BASE_URL", "https://rest.example.test")
    account = Account.from_env()
    try:
        assert account._credentials.key == "key"
        assert account._builder.build("getBalance", account._credentials).url.startswith(
            "https://rest.example.test/",
        )
    finally:
        account.close()

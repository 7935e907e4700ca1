"""Shared test fixtures for nexmo-sms."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock
from urllib.parse import parse_qs

import pytest

from nexmo_sms.models import PreparedRequest, RawResponse
from nexmo_sms.rest.transport import HttpxTransport

ResponseFactory = Callable[..., RawResponse]


def _make_response(payload: Any = None, status_code: int = 200) -> RawResponse:
    if payload is None:
        body = b""
    elif isinstance(payload, bytes):
        body = payload
    else:
        body = json.dumps(payload).encode()
    return RawResponse(status_code=status_code, body=body)


@pytest.fixture
def make_response() -> ResponseFactory:
    """Factory for RawResponse; dicts and lists are JSON encoded."""
    return _make_response


@pytest.fixture
def mock_transport() -> MagicMock:
    transport = MagicMock(spec=HttpxTransport)
    transport.send.return_value = _make_response({})
    return transport


@pytest.fixture
def sent_request(mock_transport: MagicMock) -> Callable[[], PreparedRequest]:
    """Return the request passed to the most recent transport.send call."""

    def _last() -> PreparedRequest:
        return mock_transport.send.call_args[0][0]

    return _last


@pytest.fixture
def sent_form(sent_request: Callable[[], PreparedRequest]) -> Callable[[], dict[str, str]]:
    """Decode the form body of the most recent request."""

    def _form() -> dict[str, str]:
        body = sent_request().body or b""
        return {k: v[0] for k, v in parse_qs(body.decode(), keep_blank_values=True).items()}

    return _form


# SMS send response as returned by /sms/json, before key normalization
SEND_RESPONSE_ONE_PART: dict[str, Any] = {
    "message-count": "1",
    "messages": [
        {
            "to": "447700900000",
            "message-id": "0A0000000123ABCD1",
            "status": "0",
            "remaining-balance": "3.14159265",
            "message-price": "0.03330000",
            "network": "23410",
        },
    ],
}


@pytest.fixture
def send_response_one_part() -> dict[str, Any]:
    return json.loads(json.dumps(SEND_RESPONSE_ONE_PART))

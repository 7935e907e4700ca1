"""Outbound SMS and inbound text handling.

Outbound sends go through originator clean-up and, for text messages,
unicode detection before the request is built. Inbound webhook text can be
stored on the facade so that :meth:`Message.reply` answers the sender.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from nexmo_sms.client import GatewayClient
from nexmo_sms.errors import MalformedResponseError, PreconditionFailedError
from nexmo_sms.messaging.cost import aggregate_cost, to_decimal
from nexmo_sms.messaging.encoding import ensure_text, hex_encode, requires_unicode
from nexmo_sms.messaging.originator import validate_originator
from nexmo_sms.models import InboundMessage, MessagePart, MessageType, SendResult
from nexmo_sms.rest.commands import SEND_SMS

logger = logging.getLogger(__name__)

DEFAULT_WAP_VALIDITY_MS = 172_800_000  # 48 hours

_INBOUND_FIELDS = ("text", "msisdn", "to")


def _parse_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise MalformedResponseError(f"'{field}' is not an integer: {value!r}")
    try:
        return int(str(value).strip())
    except ValueError:
        raise MalformedResponseError(f"'{field}' is not an integer: {value!r}") from None


def parse_message_part(entry: Mapping[str, Any]) -> MessagePart:
    if "status" not in entry:
        raise MalformedResponseError("Message part carries no 'status' field")
    status_code = _parse_int(entry["status"], "status")
    error_text = str(entry.get("errortext") or "")
    price = entry.get("messageprice")
    balance = entry.get("remainingbalance")
    return MessagePart(
        status_code=status_code,
        status_text="OK" if status_code == 0 else error_text,
        error_text=error_text,
        message_id=str(entry.get("messageid") or ""),
        to=str(entry.get("to") or ""),
        network=str(entry.get("network") or ""),
        remaining_balance=None if balance is None else to_decimal(balance, "remainingbalance"),
        price=Decimal("0") if price is None else to_decimal(price, "messageprice"),
    )


def parse_send_response(tree: Any) -> SendResult:
    """Build a SendResult from a normalized ``/sms/json`` response."""
    if not isinstance(tree, dict):
        raise MalformedResponseError("Send response is not a JSON object")

    raw_messages = tree.get("messages")
    if not isinstance(raw_messages, list):
        raw_messages = []
    entries = [m for m in raw_messages if isinstance(m, dict)]
    parts = [parse_message_part(m) for m in entries]

    count = tree.get("messagecount")
    message_count = len(parts) if count is None else _parse_int(count, "messagecount")

    return SendResult(
        message_count=message_count,
        messages=parts,
        total_cost=aggregate_cost(entries, key="messageprice"),
        response=tree,
    )


class Message(GatewayClient):
    """Sends SMS messages and tracks the current inbound message.

    Usage::

        sms = Message(api_key, api_secret)
        sms.send_text("447700900000", "MyApp", "Hello")
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.last_response: dict[str, Any] | None = None
        self._inbound: InboundMessage | None = None

    @property
    def inbound(self) -> InboundMessage | None:
        return self._inbound

    @property
    def inbound_pending(self) -> bool:
        return self._inbound is not None

    # --- outbound ---

    def send_text(
        self,
        to: str,
        from_: str | bytes,
        message: str | bytes,
        unicode: bool | None = None,
    ) -> SendResult:
        """Send a text message.

        Unless ``unicode`` is given, the message type is detected from the
        content.
        """
        from_text = ensure_text(from_, "from")
        message_text = ensure_text(message, "message")
        msg_type = (
            MessageType.UNICODE
            if requires_unicode(message_text, unicode)
            else MessageType.TEXT
        )
        return self._send({
            "from": validate_originator(from_text),
            "to": to,
            "text": message_text,
            "type": msg_type.value,
        })

    def send_binary(
        self, to: str, from_: str, body: bytes | str, udh: bytes | str,
    ) -> SendResult:
        """Send a binary message. ``body`` and ``udh`` are hex encoded."""
        return self._send({
            "from": validate_originator(from_),
            "to": to,
            "type": MessageType.BINARY.value,
            "body": hex_encode(body),
            "udh": hex_encode(udh),
        })

    def push_wap(
        self,
        to: str,
        from_: str,
        title: str | bytes,
        url: str | bytes,
        validity: int = DEFAULT_WAP_VALIDITY_MS,
    ) -> SendResult:
        """Send a WAP push. ``validity`` is in milliseconds."""
        title_text = ensure_text(title, "title")
        url_text = ensure_text(url, "url")
        return self._send({
            "from": validate_originator(from_),
            "to": to,
            "type": MessageType.WAPPUSH.value,
            "url": url_text,
            "title": title_text,
            "validity": validity,
        })

    def _send(self, params: dict[str, Any]) -> SendResult:
        try:
            tree = self._fetch(SEND_SMS, params)
            if tree is None:
                raise MalformedResponseError("Send response body is empty")
            result = parse_send_response(tree)
        except MalformedResponseError:
            self.last_response = None
            logger.warning("Malformed response to %s message", params["type"])
            raise

        self.last_response = result.response
        logger.info(
            "Sent %s message in %d part(s), cost %s",
            params["type"], result.message_count, result.total_cost,
        )
        return result

    # --- inbound ---

    def inbound_text(self, payload: Mapping[str, str]) -> bool:
        """Store an inbound message from webhook parameters.

        Returns False, leaving state untouched, unless text, msisdn and to
        are all present. A field whose value is None counts as absent.
        """
        if any(payload.get(name) is None for name in _INBOUND_FIELDS):
            return False

        self._inbound = InboundMessage(
            to=str(payload["to"]),
            from_=str(payload["msisdn"]),
            text=str(payload["text"]),
            network_code=str(payload.get("network-code") or ""),
            message_id=str(payload.get("messageId") or ""),
        )
        return True

    def reply(self, message: str | bytes) -> SendResult:
        """Answer the pending inbound message, from the number it was sent to."""
        if self._inbound is None:
            raise PreconditionFailedError("No inbound message to reply to")
        return self.send_text(self._inbound.from_, self._inbound.to, message)

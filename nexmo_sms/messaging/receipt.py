"""Delivery receipt webhook parsing."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime

from nexmo_sms.models import Receipt, ReceiptStatus

_REQUIRED_FIELDS = ("msisdn", "network-code", "messageId")
_SCTS_FORMAT = "%y%m%d%H%M"


def parse_scts(value: str | None) -> datetime | None:
    """Parse a ``yyMMddHHmm`` service-centre timestamp as UTC."""
    if not value:
        return None
    try:
        return datetime.strptime(value.strip(), _SCTS_FORMAT).replace(tzinfo=UTC)
    except ValueError:
        return None


def parse_status(value: str) -> ReceiptStatus:
    try:
        return ReceiptStatus(value.upper())
    except ValueError:
        return ReceiptStatus.OTHER


def parse_receipt(payload: Mapping[str, str]) -> Receipt:
    """Build a Receipt from webhook parameters.

    A payload lacking any of msisdn, network-code or messageId carries no
    receipt; the result then has ``found=False`` and default fields. A
    field whose value is None counts as absent.
    """
    if any(payload.get(name) is None for name in _REQUIRED_FIELDS):
        return Receipt()

    raw_status = str(payload.get("status") or "").upper()
    scts = payload.get("scts")
    # The receipt reports on a message we sent: msisdn is its recipient.
    return Receipt(
        found=True,
        to=str(payload["msisdn"]),
        from_=str(payload.get("to") or ""),
        network_code=str(payload["network-code"]),
        message_id=str(payload["messageId"]),
        status=parse_status(raw_status) if raw_status else None,
        raw_status=raw_status,
        received_time=parse_scts(scts if isinstance(scts, str) else None),
    )
